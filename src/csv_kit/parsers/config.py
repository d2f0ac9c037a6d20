# src/csv_kit/parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ParseConfig:
    """Separators for a single parse call.

    Immutable. Validated on construction.
    """

    col_sep: str = ","
    row_sep: str = "\n"

    def __post_init__(self) -> None:
        if len(self.col_sep) != 1:
            raise ValueError("col_sep must be a single character")
        if not self.row_sep:
            raise ValueError("row_sep must not be empty")
        if self.col_sep in self.row_sep:
            raise ValueError("col_sep must not appear in row_sep")
