# parsers/base.py

from abc import ABC, abstractmethod

from .models import Document


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: str | bytes, *, encoding: str = "utf-8") -> Document:
        """
        Parse a complete in-memory buffer and return its records.

        Requirements:
        - Deterministic output for same input
        - No state kept between calls
        - Never returns a partial document
        """
        raise NotImplementedError
