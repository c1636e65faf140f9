"""
Validation helpers for row shape integrity.

Used by sources that opt in to shape checking (``validate_row_shape``) and by
the row generator when mapping rows onto headers.

All functions raise ``AlignmentError`` on failure rather than returning a
boolean; callers let the exception propagate.
"""

from __future__ import annotations

from typing import Sequence

from tableschema.configs.exceptions import AlignmentError


def validate_row_alignment(
    row: Sequence,
    expected_field_count: int,
    row_number: int,
    source: str | None = None,
) -> None:
    """
    Assert that a row has exactly the expected number of fields.

    Args:
        row:                  The row as a sequence of field values.
        expected_field_count: Number of fields every row should have.
        row_number:           1-based row number for error reporting.
        source:               Label of the source being checked.

    Raises:
        AlignmentError: If ``len(row) != expected_field_count``.
    """
    actual = len(row)
    if actual != expected_field_count:
        raise AlignmentError(
            f"Row {row_number} has {actual} fields, expected {expected_field_count}.",
            source=source,
            row_number=row_number,
            expected=expected_field_count,
            got=actual,
        )


def validate_rows_consistent(
    rows: Sequence[Sequence],
    source: str | None = None,
) -> None:
    """
    Assert that every row has the same field count as the first one.

    An empty collection is consistent.

    Raises:
        AlignmentError: On the first row whose length differs from row 1.
    """
    if not rows:
        return
    expected = len(rows[0])
    for row_number, row in enumerate(rows, start=1):
        validate_row_alignment(row, expected, row_number, source)
