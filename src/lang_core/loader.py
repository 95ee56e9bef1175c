"""Loading .lang files from disk.

``aggregate`` fans the files of one directory out to a thread pool, parses
each into its own table, and merges the results once every worker is done.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from .errors import LangIOError, NotADirError, NotAFileError
from .reader import ParseStats, parse_file
from .settings import LangSettings
from .values import AggregatedTable, RawTable

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """What an aggregate() run loaded and what it skipped."""

    loaded: list[str] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)
    stats: ParseStats = field(default_factory=ParseStats)


def load_file(path: str | Path, *, settings: LangSettings | None = None) -> RawTable:
    """Parse a single resource file."""
    settings = settings or LangSettings()
    path = Path(path)
    if not path.is_file():
        raise NotAFileError(path)
    try:
        return parse_file(path, settings.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise LangIOError(f"Cannot read file '{path}': {exc}", path) from exc


def list_resource_files(directory: str | Path, extension: str = ".lang") -> list[Path]:
    """Files in *directory* whose suffix is *extension*, sorted by name."""
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirError(directory)
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise LangIOError(f"Cannot list directory '{directory}': {exc}", directory) from exc
    return sorted(
        (p for p in entries if p.suffix == extension and p.is_file()),
        key=lambda p: p.name,
    )


def _read_one(path: Path, encoding: str) -> tuple[str, RawTable, ParseStats] | None:
    stats = ParseStats()
    try:
        table = parse_file(path, encoding, stats)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Skipping unreadable resource file %s: %s", path, exc)
        return None
    logger.debug("Parsed %s: %d entries, %d skipped lines",
                 path.name, stats.entries, stats.skipped_lines)
    return path.stem, table, stats


def aggregate(
    directory: str | Path,
    *,
    settings: LangSettings | None = None,
    report: LoadReport | None = None,
) -> AggregatedTable:
    """Load every resource file of *directory* into ``{resource id: table}``.

    Raises NotADirError / LangIOError for the directory itself; files that
    cannot be read are left out of the result.
    """
    settings = settings or LangSettings()
    files = list_resource_files(directory, settings.extension)
    logger.debug("Aggregating %d %s files from %s", len(files), settings.extension, directory)

    with ThreadPoolExecutor(max_workers=settings.max_workers) as pool:
        results = list(pool.map(lambda p: _read_one(p, settings.encoding), files))

    merged: AggregatedTable = {}
    for path, result in zip(files, results):
        if result is None:
            if report is not None:
                report.skipped_files.append(path)
            continue
        name, table, stats = result
        merged[name] = table
        if report is not None:
            report.loaded.append(name)
            report.stats.entries += stats.entries
            report.stats.skipped_lines += stats.skipped_lines
            report.stats.unterminated += stats.unterminated
    return merged
