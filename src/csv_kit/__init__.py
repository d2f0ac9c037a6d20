# API
from .api import parse, parse_line, read, resolve_config

# Dialects
from .dialects import BUILTIN_DIALECTS, Dialect, DialectLibrary

# Errors
from .errors import CsvKitError, EncodingError

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    CsvParser,
    Document,
    DocumentParser,
    Field,
    ParseConfig,
    Record,
)

__all__ = [
    # API
    "parse",
    "parse_line",
    "read",
    "resolve_config",
    # Dialects
    "BUILTIN_DIALECTS",
    "Dialect",
    "DialectLibrary",
    # Errors
    "CsvKitError",
    "EncodingError",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "CsvParser",
    "Document",
    "DocumentParser",
    "Field",
    "ParseConfig",
    "Record",
]
