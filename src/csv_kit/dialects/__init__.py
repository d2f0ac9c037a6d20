from .dialect import BUILTIN_DIALECTS, Dialect
from .dialect_library import DialectLibrary

__all__ = [
    "BUILTIN_DIALECTS",
    "Dialect",
    "DialectLibrary",
]
