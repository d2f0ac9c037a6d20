# src/csv_kit/api.py

from collections.abc import Mapping
from pathlib import Path
from typing import TypeAlias

from csv_kit.dialects.dialect import Dialect
from csv_kit.observability.base import MetricsHook, NoOpMetricsHook
from csv_kit.parsers.config import ParseConfig
from csv_kit.parsers.csv_parser import CsvParser
from csv_kit.parsers.models import Document, Record

Options: TypeAlias = ParseConfig | Dialect | Mapping[str, str] | None

_OPTION_KEYS = frozenset({"col_sep", "row_sep"})


def resolve_config(options: Options = None) -> ParseConfig:
    """Turn any accepted ``options`` value into a ParseConfig.

    Raises:
        ValueError: If a mapping carries keys other than col_sep/row_sep,
            or the separators are invalid.
    """
    if options is None:
        return ParseConfig()
    if isinstance(options, ParseConfig):
        return options
    if isinstance(options, Dialect):
        return options.to_config()

    unknown = set(options) - _OPTION_KEYS
    if unknown:
        raise ValueError(f"Unknown parse options: {', '.join(sorted(unknown))}")
    return ParseConfig(**options)


def parse(
    text: str | bytes,
    options: Options = None,
    *,
    encoding: str = "utf-8",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    """Parse a complete buffer into a Document.

    Example:
        >>> parse("foo;;baz\\n", {"col_sep": ";"}).records
        [['foo', None, 'baz']]
    """
    parser = CsvParser(resolve_config(options), metrics_hook=metrics_hook)
    return parser.parse(text, encoding=encoding)


def parse_line(
    text: str | bytes,
    options: Options = None,
    *,
    encoding: str = "utf-8",
) -> Record | None:
    return CsvParser(resolve_config(options)).parse_line(text, encoding=encoding)


def read(
    path: str | Path,
    options: Options = None,
    *,
    encoding: str = "utf-8",
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Document:
    parser = CsvParser(resolve_config(options), metrics_hook=metrics_hook)
    return parser.read(path, encoding=encoding)
