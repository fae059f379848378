"""Radar domain aggregate models.

Rings, entries, and quadrants are immutable once the assembler
finishes. The renderer consumes a finished Radar and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import MAX_QUADRANTS


@dataclass(frozen=True)
class Ring:
    """Concentric adoption-stage category.

    Attributes:
        name: Ring label such as ``Adopt``.
        order: Zero-based first-seen position among distinct rings.
    """

    name: str
    order: int


@dataclass(frozen=True)
class Entry:
    """One technology placed on the radar.

    Attributes:
        name: Technology name.
        ring: Ring the entry sits in.
        is_new: Whether the entry is flagged as new.
        topic: Optional topic label.
        description: Free-text description, may be empty.
    """

    name: str
    ring: Ring
    is_new: bool
    topic: str
    description: str


@dataclass(frozen=True)
class Quadrant:
    """Named grouping of entries in input order."""

    name: str
    entries: tuple[Entry, ...]


@dataclass(frozen=True)
class Radar:
    """Root aggregate handed to the renderer.

    Attributes:
        quadrants: Quadrants in first-encounter order.
        current_sheet_name: Sheet the radar was built from.
        alternative_sheet_names: Other sheets in the same document.
    """

    quadrants: tuple[Quadrant, ...]
    current_sheet_name: str
    alternative_sheet_names: tuple[str, ...]

    @property
    def entry_count(self) -> int:
        """Count entries across all quadrants."""
        return sum(len(quadrant.entries) for quadrant in self.quadrants)

    def rings(self) -> tuple[Ring, ...]:
        """Return distinct rings sorted by order."""
        seen: dict[str, Ring] = {}
        for quadrant in self.quadrants:
            for entry in quadrant.entries:
                seen.setdefault(entry.ring.name, entry.ring)
        return tuple(sorted(seen.values(), key=lambda ring: ring.order))

    def quadrant_slots(self) -> tuple[Quadrant | None, ...]:
        """Return the fixed renderer slots, padded with ``None``."""
        padding = (None,) * (MAX_QUADRANTS - len(self.quadrants))
        return self.quadrants + padding
