"""
Custom exceptions for the tableschema data-source layer.

Hierarchy:
    TableSchemaError
    └── DataSourceError         A row source failed; carries an optional source label.
        ├── OutOfRangeError     A row was requested after the source was exhausted.
        └── AlignmentError      A row's field count doesn't match the expected count.

All of these are recoverable: sources raise them straight to the caller and
never retry or log them as failures internally.
"""


class TableSchemaError(Exception):
    """Base class for all tableschema errors."""


class DataSourceError(TableSchemaError):
    """
    Raised when a data source cannot deliver a row.

    Args:
        message: Human-readable description of the failure.
        source: Label of the source that raised (usually its class name).
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        base = super().__str__()
        if self.source:
            return f"{base} | source={self.source}"
        return base


class OutOfRangeError(DataSourceError):
    """
    Raised when ``next_row()`` is called on an exhausted source.

    Args:
        message: Human-readable description.
        source: Label of the source.
        row_number: 1-based number of the row that was requested.
        row_count: Number of rows the source holds.
    """

    def __init__(
        self,
        message: str,
        source: str | None = None,
        row_number: int | None = None,
        row_count: int | None = None,
    ) -> None:
        super().__init__(message, source)
        self.row_number = row_number
        self.row_count = row_count

    def __str__(self) -> str:
        base = super().__str__()
        parts = []
        if self.row_number is not None:
            parts.append(f"row={self.row_number}")
        if self.row_count is not None:
            parts.append(f"row_count={self.row_count}")
        if parts:
            return f"{base} | {' '.join(parts)}"
        return base


class AlignmentError(DataSourceError):
    """
    Raised when a row has a different number of fields than expected.

    Args:
        message: Human-readable description.
        source: Label of the source.
        row_number: 1-based row number where the misalignment was detected.
        expected: Number of fields expected.
        got: Number of fields actually found in the row.
    """

    def __init__(
        self,
        message: str,
        source: str | None = None,
        row_number: int | None = None,
        expected: int | None = None,
        got: int | None = None,
    ) -> None:
        super().__init__(message, source)
        self.row_number = row_number
        self.expected = expected
        self.got = got

    def __str__(self) -> str:
        base = super().__str__()
        parts = []
        if self.row_number is not None:
            parts.append(f"row={self.row_number}")
        if self.expected is not None:
            parts.append(f"expected={self.expected}")
        if self.got is not None:
            parts.append(f"got={self.got}")
        if parts:
            return f"{base} | {' '.join(parts)}"
        return base
