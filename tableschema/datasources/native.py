"""
In-memory row source implementing ``AbstractDataSource``.

Wraps a finite collection of rows supplied wholesale by the caller and hands
them back one at a time, in order, exactly once.

Handles:
- Empty collections (exhausted from the start).
- Ragged rows, unless ``validate_row_shape`` is switched on.
- Any finite iterable of rows; it is materialized into a tuple up front.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from tableschema.configs.config import DataSourceConfig
from tableschema.configs.exceptions import OutOfRangeError
from tableschema.datasources.base import AbstractDataSource
from tableschema.utils.validation import validate_rows_consistent

logger = logging.getLogger(__name__)


class NativeDataSource(AbstractDataSource):
    """
    Forward-only, single-pass reader over an in-memory list of rows.

    The cursor is the index of the next row to return.  It only moves on a
    successful ``next_row`` and never passes ``row_count``.

    Args:
        rows:   Ordered collection of rows, each an ordered collection of
                field values.  Not mutated by the source.
        config: Source configuration.

    Raises:
        AlignmentError: If ``config.validate_row_shape`` is set and the rows
                        don't all share the first row's field count.
    """

    def __init__(
        self,
        rows: Iterable[Sequence[Any]],
        config: DataSourceConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._rows: tuple[Sequence[Any], ...] = tuple(rows)
        self._cursor = 0
        self._logged_exhaustion = False

        if self.config.validate_row_shape:
            validate_rows_consistent(self._rows, source=type(self).__name__)

        logger.debug("%s created with %d row(s)", type(self).__name__, len(self._rows))

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def row_number(self) -> int:
        """1-based number of the last row returned; 0 before the first read."""
        return self._cursor

    # ── AbstractDataSource interface ─────────────────────────────────────

    def next_row(self) -> Sequence[Any]:
        """
        Return the row at the cursor and advance the cursor by one.

        Returns a new list when ``config.copy_rows`` is set, otherwise the
        stored row object.

        Raises:
            OutOfRangeError: If the source is exhausted.  The cursor is left
                             where it was.
        """
        if self._cursor >= len(self._rows):
            raise OutOfRangeError(
                f"No row {self._cursor + 1}: source holds {len(self._rows)} row(s).",
                source=type(self).__name__,
                row_number=self._cursor + 1,
                row_count=len(self._rows),
            )

        row = self._rows[self._cursor]
        self._cursor += 1

        if self._cursor == len(self._rows) and not self._logged_exhaustion:
            self._logged_exhaustion = True
            logger.debug("%s exhausted after %d row(s)", type(self).__name__, self._cursor)

        if self.config.copy_rows:
            return list(row)
        return row

    def is_exhausted(self) -> bool:
        return self._cursor >= len(self._rows)

    def close(self) -> None:
        """Nothing to release; logs the read position for tracing."""
        logger.debug(
            "%s closed at row %d of %d",
            type(self).__name__, self._cursor, len(self._rows),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(row_number={self._cursor}, row_count={len(self._rows)})"
