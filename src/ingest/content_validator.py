"""Schema checks for raw radar tables.

Validation runs before any row is sanitized so a failing table never
produces partial entries. All checks are pure.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import REQUIRED_COLUMNS
from core.errors import MalformedDataError
from core.types import RawRows
from ingest.row_sanitizer import iter_keyed_rows

MISSING_CONTENT_MESSAGE = "Document is missing content."


def validate_table(column_names: Sequence[str], raw_rows: RawRows) -> None:
    """Run every table check in order.

    Args:
        column_names: Header names reported by the source.
        raw_rows: Data rows in either shape.

    Raises:
        MalformedDataError: On the first failing check.
    """
    verify_columns_present(column_names)
    verify_headers(column_names)
    verify_content(raw_rows)


def verify_columns_present(column_names: Sequence[str]) -> None:
    """Fail when the source reports no columns at all."""
    if not column_names:
        raise MalformedDataError(MISSING_CONTENT_MESSAGE)


def verify_headers(column_names: Iterable[str]) -> None:
    """Check that every required column is present.

    Raises:
        MalformedDataError: Naming every missing column.
    """
    present = {str(column).strip() for column in column_names}
    missing = [column for column in REQUIRED_COLUMNS if column not in present]
    if missing:
        missing_text = ", ".join(f'"{column}"' for column in missing)
        required_text = ", ".join(f'"{column}"' for column in REQUIRED_COLUMNS)
        raise MalformedDataError(
            f"Document is missing required column(s): {missing_text}. "
            f"Check that your document contains headers for {required_text}."
        )


def verify_content(raw_rows: RawRows) -> None:
    """Check that every required cell holds a non-blank value.

    Raises:
        MalformedDataError: Naming the first empty column and its
            1-based data row number.
    """
    for row_number, raw_row in enumerate(iter_keyed_rows(raw_rows), 1):
        for column in REQUIRED_COLUMNS:
            value = raw_row.get(column)
            if value is None or not str(value).strip():
                raise MalformedDataError(
                    f'Row {row_number} has no value in column "{column}". '
                    "Fill in the cell and try again."
                )
