"""Resident cache for aggregated tables.

A ``LangCache`` is owned by the caller and holds at most one aggregated
table. It does not remember which directory produced that table: using one
cache for several directories returns whichever was loaded first until
``invalidate()`` is called.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .loader import aggregate
from .settings import LangSettings
from .values import AggregatedTable, copy_table

logger = logging.getLogger(__name__)


class RWLock:
    """Reader/writer lock; waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class LangCache:
    """Holds one aggregated table between loads.

    Usage::

        cache = LangCache()
        langs = cache.load_or_build_cached("lang/")   # reads disk
        langs = cache.load_or_build_cached("lang/")   # served from memory
        cache.invalidate()                            # next load re-reads
    """

    def __init__(self, settings: LangSettings | None = None) -> None:
        self.settings = settings or LangSettings()
        self._lock = RWLock()
        self._table: AggregatedTable | None = None

    @property
    def is_populated(self) -> bool:
        with self._lock.read():
            return self._table is not None

    def load_or_build_cached(self, directory: str | Path) -> AggregatedTable:
        """Return a copy of the cached table, aggregating *directory* on a miss."""
        with self._lock.read():
            if self._table is not None:
                return copy_table(self._table)

        with self._lock.write():
            # another writer may have filled the slot while we waited
            if self._table is None:
                self._table = aggregate(directory, settings=self.settings)
                logger.info("Cached %d resources from %s", len(self._table), directory)
            return copy_table(self._table)

    def load_uncached(self, directory: str | Path) -> AggregatedTable:
        """Aggregate *directory* without reading or touching the cache."""
        return aggregate(directory, settings=self.settings)

    def invalidate(self) -> None:
        with self._lock.write():
            if self._table is not None:
                logger.info("Lang cache invalidated")
            self._table = None
