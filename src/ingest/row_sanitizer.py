"""Row normalization for radar ingest.

Both source row shapes (keyed mappings and header plus positional
values) normalize into the same SanitizedRow record.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterator, Sequence

from core.constants import NEW_ENTRY_TOKEN
from core.types import HeaderRows, KeyedRows, RawRow, RawRows, SanitizedRow


def sanitize_row(raw_row: RawRow) -> SanitizedRow:
    """Normalize one keyed row.

    Args:
        raw_row: Column name to raw cell value mapping.

    Returns:
        Trimmed row with a parsed novelty flag.
    """
    return SanitizedRow(
        name=_cell(raw_row, "name"),
        ring=_cell(raw_row, "ring"),
        quadrant=_cell(raw_row, "quadrant"),
        is_new=_cell(raw_row, "isNew").lower() == NEW_ENTRY_TOKEN,
        topic=_cell(raw_row, "topic"),
        description=_cell(raw_row, "description"),
    )


def sanitize_positional_row(values: Sequence[str], header: Sequence[str]) -> SanitizedRow:
    """Normalize one header+array row by zipping values onto the header.

    Args:
        values: Cell values in header order.
        header: Column names.

    Returns:
        Same record ``sanitize_row`` yields for the keyed equivalent.
    """
    return sanitize_row(zip_header(header, values))


def sanitize_rows(raw_rows: RawRows) -> list[SanitizedRow]:
    """Normalize every row in input order."""
    if isinstance(raw_rows, HeaderRows):
        return [sanitize_positional_row(values, raw_rows.header) for values in raw_rows.rows]
    return [sanitize_row(trim_keys(raw_row)) for raw_row in raw_rows.rows]


def iter_keyed_rows(raw_rows: RawRows) -> Iterator[RawRow]:
    """Yield a keyed view of rows in either shape."""
    if isinstance(raw_rows, KeyedRows):
        for raw_row in raw_rows.rows:
            yield trim_keys(raw_row)
        return
    for values in raw_rows.rows:
        yield zip_header(raw_rows.header, values)


def zip_header(header: Sequence[str], values: Sequence[str]) -> dict[str, str]:
    """Map values onto header names by position.

    Short rows are padded with empty strings and extra values are dropped.
    """
    return {
        str(column).strip(): value
        for column, value in zip_longest(header, values[: len(header)], fillvalue="")
    }


def trim_keys(raw_row: RawRow) -> dict[str, str]:
    """Return the row with surrounding whitespace removed from column names."""
    return {str(column).strip(): value for column, value in raw_row.items()}


def _cell(raw_row: RawRow, column: str) -> str:
    value = raw_row.get(column)
    if value is None:
        return ""
    return str(value).strip()
