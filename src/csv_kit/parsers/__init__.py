from .base import DocumentParser
from .config import ParseConfig
from .csv_parser import CsvParser
from .models import Document, Field, Record

__all__ = [
    "CsvParser",
    "Document",
    "DocumentParser",
    "Field",
    "ParseConfig",
    "Record",
]
