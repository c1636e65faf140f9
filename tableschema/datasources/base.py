"""
Abstract base class for all row sources.

Every concrete source must implement this interface.  Consumers work
exclusively against ``AbstractDataSource`` so they don't care where the rows
come from.

Calling convention: check ``is_exhausted()`` before each ``next_row()``.
Reading past the end raises ``OutOfRangeError``.

Usage:
    with NativeDataSource(rows) as source:
        while not source.is_exhausted():
            process(source.next_row())
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator

from tableschema.configs.config import DataSourceConfig


class AbstractDataSource(ABC):
    """
    Interface for all row sources.

    Subclasses must implement ``next_row`` and ``is_exhausted``.  ``open`` and
    ``close`` are no-ops here; override them when the source holds a resource.
    Context manager support delegates to ``open`` / ``close``.

    Args:
        config: Source configuration.  A default ``DataSourceConfig`` (which
                reads the environment) is built when omitted.
    """

    def __init__(self, config: DataSourceConfig | None = None) -> None:
        self.config = config if config is not None else DataSourceConfig()

    def open(self) -> None:
        """Prepare the source for reading."""

    @abstractmethod
    def next_row(self) -> list[Any]:
        """
        Return the next row and advance past it.

        Raises:
            OutOfRangeError: If the source is already exhausted.
        """

    @abstractmethod
    def is_exhausted(self) -> bool:
        """Return True once no rows remain.  Safe to call any number of times."""

    def close(self) -> None:
        """Release any resources held by the source."""

    # ── iteration ────────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[list[Any]]:
        """Yield the remaining rows, consuming the source."""
        while not self.is_exhausted():
            yield self.next_row()

    # ── context manager ──────────────────────────────────────────────────

    def __enter__(self) -> "AbstractDataSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
        return None
