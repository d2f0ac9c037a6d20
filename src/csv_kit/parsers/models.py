# parsers/models.py

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

# None marks a zero-length position between separators; it is never "".
Field: TypeAlias = str | None
Record: TypeAlias = list[Field]


@dataclass(frozen=True)
class Document:
    records: list[Record] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    @property
    def field_count(self) -> int:
        return sum(len(record) for record in self.records)
