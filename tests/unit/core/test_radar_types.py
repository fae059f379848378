"""Unit tests for radar aggregate helpers."""

from __future__ import annotations

import dataclasses

import pytest

from core.radar_types import Entry, Quadrant, Radar, Ring

ADOPT = Ring(name="Adopt", order=0)
TRIAL = Ring(name="Trial", order=1)


def _entry(name: str, ring: Ring) -> Entry:
    return Entry(name=name, ring=ring, is_new=False, topic="", description="")


def _radar() -> Radar:
    return Radar(
        quadrants=(
            Quadrant(name="Tools", entries=(_entry("B", TRIAL), _entry("A", ADOPT))),
            Quadrant(name="Platforms", entries=(_entry("C", ADOPT),)),
        ),
        current_sheet_name="2024",
        alternative_sheet_names=(),
    )


def test_rings_are_sorted_by_order() -> None:
    """Rings should be listed by order regardless of entry order."""
    assert _radar().rings() == (ADOPT, TRIAL)


def test_quadrant_slots_are_padded_to_four() -> None:
    """Renderer slots should always have four positions."""
    slots = _radar().quadrant_slots()

    assert (len(slots), slots[2], slots[3]) == (4, None, None)


def test_entry_count_spans_quadrants() -> None:
    """Entry count should include every quadrant."""
    assert _radar().entry_count == 3


def test_radar_is_immutable() -> None:
    """Finished radars should reject mutation."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        _radar().current_sheet_name = "other"  # type: ignore[misc]
