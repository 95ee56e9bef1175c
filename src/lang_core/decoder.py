"""Value decoding: raw table text -> VScalar / VArray."""

from __future__ import annotations

import re

from .values import AggregatedTable, RawTable, Value, VArray, VScalar

_QUOTED = r'"(?:[^"\\]|\\.)*"'
# One or more quoted strings separated by commas: "a", "b"
_QUOTED_RUN_RE = re.compile(rf"^{_QUOTED}(?:\s*,\s*{_QUOTED})*$")
_QUOTED_ITEM_RE = re.compile(_QUOTED)


def _array_items(inner: str) -> list[str]:
    """Quoted strings of an array body, one per line.

    A body without line breaks (``["a", "b"]``) may hold several
    comma-separated strings on its single line.
    """
    single_line = "\n" not in inner
    items: list[str] = []
    for line in inner.split("\n"):
        line = line.strip().rstrip(",").rstrip()
        if not line:
            continue
        if single_line and _QUOTED_RUN_RE.match(line):
            items.extend(m[1:-1] for m in _QUOTED_ITEM_RE.findall(line))
        elif len(line) >= 2 and line.startswith('"') and line.endswith('"'):
            items.append(line[1:-1])
    return items


def unescape(text: str) -> str:
    return text.replace("\\n", "\n").replace('\\"', '"')


def decode(raw: str) -> Value:
    """Decode one raw value.

    - ``[ ... ]`` → VArray of the quoted strings inside, in source order;
      anything else inside the brackets is dropped
    - ``"..."``   → VScalar with the quotes removed and ``\\n`` / ``\\"`` unescaped
    - otherwise  → VScalar(raw) unchanged
    """
    trimmed = raw.strip()
    if len(trimmed) >= 2 and trimmed.startswith("[") and trimmed.endswith("]"):
        return VArray(_array_items(trimmed[1:-1]))
    if len(trimmed) >= 2 and trimmed.startswith('"') and trimmed.endswith('"'):
        return VScalar(unescape(trimmed[1:-1]))
    return VScalar(raw)


def decode_table(table: RawTable) -> dict[str, Value]:
    return {key: decode(raw) for key, raw in table.items()}


def decode_all(table: AggregatedTable) -> dict[str, dict[str, Value]]:
    return {name: decode_table(entries) for name, entries in table.items()}


def to_python(value: Value) -> str | list[str]:
    """Plain ``str`` / ``list[str]`` form of a decoded value."""
    if isinstance(value, VArray):
        return list(value.items)
    return value.value
