"""Reader layer: turns .lang text into a flat RawTable.

The reader is total. Malformed lines are skipped and an unterminated
continuation is flushed at end of input, so every input yields a table.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .values import RawTable


@dataclass
class ParseStats:
    """Optional diagnostics filled in by parse()."""

    entries: int = 0
    skipped_lines: int = 0
    unterminated: int = 0


# ---------------------------------------------------------------------------
# Parser states
# ---------------------------------------------------------------------------

@dataclass
class Normal:
    pass


@dataclass
class AwaitingValue:
    """``key =`` with nothing after it; the value starts on a later line."""

    key: str


@dataclass
class InString:
    key: str
    buf: str


@dataclass
class InArray:
    key: str
    buf: str


State = Union[Normal, AwaitingValue, InString, InArray]

_NORMAL = Normal()


# ---------------------------------------------------------------------------
# Line predicates
# ---------------------------------------------------------------------------

def is_comment(line: str) -> bool:
    return line.lstrip().startswith("#")


def closes_string(line: str) -> bool:
    """True if *line* ends with a quote that is not escaped as ``\\"``."""
    line = line.strip()
    return line.endswith('"') and not line.endswith('\\"')


def closes_array(line: str) -> bool:
    return line.strip().endswith("]")


def split_entry(line: str) -> tuple[str, str] | None:
    """Split ``key = value`` at the first ``=``; None without one."""
    pos = line.find("=")
    if pos < 0:
        return None
    return line[:pos].strip(), line[pos + 1:].strip()


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------

class _Reader:
    def __init__(self, stats: ParseStats | None) -> None:
        self.table: RawTable = {}
        self.state: State = _NORMAL
        self.stats = stats if stats is not None else ParseStats()

    def store(self, key: str, value: str) -> None:
        self.table[key] = value
        self.stats.entries += 1
        self.state = _NORMAL

    def start_value(self, key: str, value: str) -> None:
        """Dispatch the first text of a value (same line as ``=`` or later)."""
        if not value:
            self.state = AwaitingValue(key)
        elif value.startswith("["):
            if value.endswith("]"):
                self.store(key, value)
            else:
                self.state = InArray(key, value + "\n")
        elif value.startswith('"'):
            if len(value) == 1 or not closes_string(value):
                self.state = InString(key, value + "\n")
            else:
                self.store(key, value[1:-1])
        else:
            self.store(key, value)

    def feed(self, line: str) -> None:
        state = self.state

        if isinstance(state, (InString, InArray)):
            state.buf += line + "\n"
            done = closes_array(line) if isinstance(state, InArray) else closes_string(line)
            if done:
                self.store(state.key, state.buf.strip())
            return

        if isinstance(state, AwaitingValue):
            if line.strip():
                self.start_value(state.key, line.strip())
            return

        if not line.strip() or is_comment(line):
            return

        entry = split_entry(line)
        if entry is None or not entry[0]:
            self.stats.skipped_lines += 1
            return
        self.start_value(*entry)

    def finish(self) -> RawTable:
        state = self.state
        if isinstance(state, (InString, InArray)):
            self.stats.unterminated += 1
            self.store(state.key, state.buf.strip())
        elif isinstance(state, AwaitingValue):
            self.store(state.key, "")
        return self.table


def parse(text: str, stats: ParseStats | None = None) -> RawTable:
    """Parse .lang *text* into a key -> raw value mapping.

    Multi-line strings and arrays keep their quote and bracket markers and
    are joined with newlines; single-line quoted values lose their outer
    quotes. Use ``decoder.decode`` to get the logical value.
    """
    reader = _Reader(stats)
    for line in text.split("\n"):
        reader.feed(line.rstrip())
    return reader.finish()


def parse_file(path: str | Path, encoding: str = "utf-8",
               stats: ParseStats | None = None) -> RawTable:
    """Read *path* and parse it. I/O errors propagate unchanged."""
    return parse(Path(path).read_text(encoding=encoding), stats)
