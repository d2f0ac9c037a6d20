# src/csv_kit/errors.py


class CsvKitError(Exception):
    """Base class for errors raised by csv-kit."""


class EncodingError(CsvKitError, ValueError):
    """The input buffer could not be decoded as text.

    Raised for undecodable bytes and for unknown encoding names.
    ``position`` is the byte offset of the first bad byte, when known.
    """

    def __init__(
        self, message: str, *, encoding: str, position: int | None = None
    ) -> None:
        super().__init__(message)
        self.encoding = encoding
        self.position = position
