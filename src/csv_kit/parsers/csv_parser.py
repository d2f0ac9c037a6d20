# parsers/csv_parser.py

import logging
from pathlib import Path
from time import monotonic

from csv_kit.errors import EncodingError
from csv_kit.observability import names
from csv_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .config import ParseConfig
from .models import Document, Record

logger = logging.getLogger(__name__)


class CsvParser(DocumentParser):
    """
    Minimal separator-splitting CSV parser.
    - One record per line, a single trailing terminator adds nothing
    - Empty fields become None, everything else is kept verbatim
    - No quoting, escaping or trimming
    """

    def __init__(
        self,
        config: ParseConfig = ParseConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook

    def parse(self, source: str | bytes, *, encoding: str = "utf-8") -> Document:
        start = monotonic()
        labels = {"col_sep": self.config.col_sep}
        self.metrics_hook.increment(names.CSV_PARSE_REQUESTS_TOTAL, labels=labels)

        try:
            text = self._decode(source, encoding)
        except EncodingError:
            self.metrics_hook.increment(names.CSV_PARSE_ERRORS_TOTAL, labels=labels)
            raise

        records = [self._split_fields(line) for line in self._split_lines(text)]
        document = Document(records=records)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CSV_PARSE_DURATION, elapsed_ms, labels)
        self.metrics_hook.record_gauge(names.CSV_INPUT_SIZE, len(text), labels)
        self.metrics_hook.increment(names.CSV_RECORDS_PARSED, len(records), labels)
        self.metrics_hook.increment(
            names.CSV_FIELDS_PARSED, document.field_count, labels
        )
        logger.debug(
            "Parsed %d records from %d characters", len(records), len(text)
        )
        return document

    def parse_line(
        self, source: str | bytes, *, encoding: str = "utf-8"
    ) -> Record | None:
        """Return the first record of the input, or None when it has none."""
        text = self._decode(source, encoding)
        if not text:
            return None
        first_line = text.split(self.config.row_sep, 1)[0]
        return self._split_fields(first_line)

    def read(self, path: str | Path, *, encoding: str = "utf-8") -> Document:
        """Read a whole file and parse it.

        OS errors from opening or reading the file propagate unchanged.
        """
        logger.debug("Reading CSV file: %s", path)
        return self.parse(Path(path).read_bytes(), encoding=encoding)

    def _decode(self, source: str | bytes, encoding: str) -> str:
        if isinstance(source, str):
            return source

        try:
            return bytes(source).decode(encoding)
        except UnicodeDecodeError as e:
            logger.error(
                "Cannot decode input as %s at byte %d: %s", encoding, e.start, e.reason
            )
            raise EncodingError(
                f"Input is not valid {encoding} at byte {e.start}: {e.reason}",
                encoding=encoding,
                position=e.start,
            ) from e
        except LookupError as e:
            logger.error("Unknown encoding: %s", encoding)
            raise EncodingError(
                f"Unknown encoding '{encoding}'", encoding=encoding
            ) from e

    def _split_lines(self, text: str) -> list[str]:
        if not text:
            return []

        lines = text.split(self.config.row_sep)
        # a terminator at the very end closes the last line
        if text.endswith(self.config.row_sep):
            lines.pop()
        return lines

    def _split_fields(self, line: str) -> Record:
        # an empty line has no fields at all, not one null field
        if not line:
            return []
        return [raw or None for raw in line.split(self.config.col_sep)]
