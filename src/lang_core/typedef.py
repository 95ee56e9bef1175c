"""FieldDescriptor and FieldShape for generated declarations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class FieldShape(Enum):
    SCALAR = auto()
    ARRAY = auto()
    TEMPLATE = auto()  # scalar rendered as (args: {...}) => string


@dataclass
class FieldDescriptor:
    key: str
    shape: FieldShape
    doc_lines: list[str] = field(default_factory=list)
    placeholders: list[str] = field(default_factory=list)  # first-occurrence order
