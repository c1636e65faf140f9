"""
Row generator: drives an ``AbstractDataSource`` to exhaustion.

Follows the source calling convention (``is_exhausted()`` before every
``next_row()``) so ``OutOfRangeError`` is never triggered by a well-behaved
consumer.

Key properties:
  - **Lazy** — one row is pulled from the source per iteration.
  - **Single pass** — sources don't rewind; a second call on the same
    source yields nothing.
  - **Header-keyed output** — ``generate_row_dicts`` pairs each row with a
    header list.

Usage::

    for row in generate_rows(source):
        process(row)

    for record in generate_row_dicts(source, ["id", "name"]):
        # record == {"id": 1, "name": "a"}
        pass
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from tableschema.configs.exceptions import AlignmentError
from tableschema.datasources.base import AbstractDataSource


def generate_rows(source: AbstractDataSource) -> Iterator[Sequence[Any]]:
    """Yield every remaining row of ``source`` in order."""
    while not source.is_exhausted():
        yield source.next_row()


def generate_row_dicts(
    source: AbstractDataSource,
    headers: Sequence[str],
) -> Iterator[dict[str, Any]]:
    """
    Yield every remaining row of ``source`` as a ``dict`` keyed by ``headers``.

    Args:
        source:  Any row source.  Consumed by this generator.
        headers: Field names, in row order.

    Yields:
        One ``dict`` per row.  Headers beyond the end of a short row map to
        ``None``.

    Raises:
        AlignmentError: If a row has more fields than there are headers.
    """
    label = type(source).__name__
    for row_number, row in enumerate(generate_rows(source), start=1):
        if len(row) > len(headers):
            raise AlignmentError(
                f"Row {row_number} has {len(row)} fields but only {len(headers)} headers.",
                source=label,
                row_number=row_number,
                expected=len(headers),
                got=len(row),
            )
        record = dict.fromkeys(headers)
        record.update(zip(headers, row))
        yield record
