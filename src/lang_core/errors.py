"""Exception types raised by lang_core."""

from __future__ import annotations

from pathlib import Path


class LangCoreError(Exception):
    """Base class for every error lang_core raises."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class NotAFileError(LangCoreError):
    """A single-file load target is missing or not a regular file."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Path '{path}' is not a file", path)


class NotADirError(LangCoreError):
    """An aggregation target is not a directory."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Path '{path}' is not a directory", path)


class LangIOError(LangCoreError):
    """Reading, listing or writing failed; wraps the underlying cause."""
