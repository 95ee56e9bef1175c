"""Value types for lang_core."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

# key -> raw value text, as captured by the parser
RawTable = dict[str, str]

# resource id (file stem) -> RawTable
AggregatedTable = dict[str, RawTable]


@dataclass(frozen=True)
class VScalar:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VArray:
    items: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(self.items) + "]"

    def __len__(self) -> int:
        return len(self.items)


Value = Union[VScalar, VArray]


def copy_table(table: AggregatedTable) -> AggregatedTable:
    """Return a copy that shares no mutable mapping with *table*."""
    return {name: dict(entries) for name, entries in table.items()}
