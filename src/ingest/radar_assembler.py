"""Radar aggregate assembly.

Sanitized rows become entries grouped by quadrant. Ring order is the
first-seen position of each ring name in the input sequence.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import MAX_QUADRANTS, MAX_RINGS
from core.errors import MalformedDataError
from core.radar_types import Entry, Quadrant, Radar, Ring
from core.types import SanitizedRow

TOO_MANY_RINGS_MESSAGE = f"More than {MAX_RINGS} rings."
TOO_MANY_QUADRANTS_MESSAGE = f"More than {MAX_QUADRANTS} quadrants."


def assemble_radar(
    rows: Sequence[SanitizedRow],
    current_sheet_name: str,
    alternative_sheet_names: Sequence[str],
) -> Radar:
    """Build a Radar from sanitized rows.

    Args:
        rows: Rows in source order.
        current_sheet_name: Sheet the rows came from.
        alternative_sheet_names: Other sheets in the same document.

    Returns:
        Finished radar aggregate.

    Raises:
        MalformedDataError: If rows name more than four rings or quadrants.
    """
    ring_map = build_rings(rows)
    quadrant_entries: dict[str, list[Entry]] = {}
    for row in rows:
        entries = quadrant_entries.setdefault(row.quadrant, [])
        entries.append(
            Entry(
                name=row.name,
                ring=ring_map[row.ring],
                is_new=row.is_new,
                topic=row.topic,
                description=row.description,
            )
        )
    if len(quadrant_entries) > MAX_QUADRANTS:
        raise MalformedDataError(TOO_MANY_QUADRANTS_MESSAGE)
    quadrants = tuple(
        Quadrant(name=capitalize_first(name), entries=tuple(entries))
        for name, entries in quadrant_entries.items()
    )
    return Radar(
        quadrants=quadrants,
        current_sheet_name=current_sheet_name,
        alternative_sheet_names=tuple(alternative_sheet_names),
    )


def build_rings(rows: Sequence[SanitizedRow]) -> dict[str, Ring]:
    """Create rings keyed by name in first-seen order.

    Raises:
        MalformedDataError: On the fifth distinct ring name.
    """
    ring_map: dict[str, Ring] = {}
    for row in rows:
        if row.ring in ring_map:
            continue
        if len(ring_map) == MAX_RINGS:
            raise MalformedDataError(TOO_MANY_RINGS_MESSAGE)
        ring_map[row.ring] = Ring(name=row.ring, order=len(ring_map))
    return ring_map


def capitalize_first(value: str) -> str:
    """Upper-case the first character and keep the rest unchanged."""
    return value[:1].upper() + value[1:]
