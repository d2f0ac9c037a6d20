import logging
from pathlib import Path
from time import monotonic

import yaml

from csv_kit.observability import names
from csv_kit.observability.base import MetricsHook, NoOpMetricsHook

from .dialect import BUILTIN_DIALECTS, Dialect

logger = logging.getLogger(__name__)


class DialectLibrary:
    """Named parse configurations.

    Built-in dialects are always registered. When ``directory`` is given,
    every ``*.yaml`` file in it is loaded as one more dialect. Names are
    unique across built-ins and files.
    """

    def __init__(
        self,
        directory: str | Path | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._dialects: dict[str, Dialect] = {}
        for dialect in BUILTIN_DIALECTS:
            self.register(dialect)

        if directory is not None:
            start = monotonic()
            logger.info("Initializing DialectLibrary from directory: %s", directory)
            self._load_all(Path(directory))
            elapsed_ms = 1000 * (monotonic() - start)
            logger.info(
                "Loaded %d dialects in %.1f ms", len(self._dialects), elapsed_ms
            )

        metrics_hook.record_gauge(names.DIALECTS_LOADED, len(self._dialects))

    def register(self, dialect: Dialect) -> None:
        if dialect.name in self._dialects:
            raise ValueError(f"Dialect '{dialect.name}' already registered")

        # fail at registration, not at first parse
        dialect.to_config()
        self._dialects[dialect.name] = dialect
        logger.debug("Registered dialect: %s", dialect.name)

    def get(self, name: str) -> Dialect:
        try:
            return self._dialects[name]
        except KeyError:
            logger.error("Dialect not found: %s", name)
            raise KeyError(f"Dialect '{name}' not found")

    def list(self) -> list[str]:
        return list(self._dialects.keys())

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            self.register(self._load_dialect(file_path))
            logger.debug("Loaded dialect from %s", file_path)

    def _load_dialect(self, file_path: Path) -> Dialect:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return Dialect(**data)
