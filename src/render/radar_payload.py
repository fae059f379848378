"""JSON serialization for finished radars.

Quadrants are written in renderer slot order, padded to four slots.
"""

from __future__ import annotations

from core.radar_types import Entry, Quadrant, Radar


def radar_to_payload(radar: Radar, canvas_size: int) -> dict[str, object]:
    """Serialize a Radar into a JSON-safe payload.

    Args:
        radar: Finished radar.
        canvas_size: Renderer size hint.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "canvas_size": canvas_size,
        "current_sheet_name": radar.current_sheet_name,
        "alternative_sheet_names": list(radar.alternative_sheet_names),
        "rings": [{"name": ring.name, "order": ring.order} for ring in radar.rings()],
        "quadrants": [_quadrant_payload(quadrant) for quadrant in radar.quadrant_slots()],
    }


def _quadrant_payload(quadrant: Quadrant | None) -> dict[str, object] | None:
    if quadrant is None:
        return None
    return {
        "name": quadrant.name,
        "entries": [_entry_payload(entry) for entry in quadrant.entries],
    }


def _entry_payload(entry: Entry) -> dict[str, object]:
    return {
        "name": entry.name,
        "ring": entry.ring.name,
        "is_new": entry.is_new,
        "topic": entry.topic,
        "description": entry.description,
    }
