"""Radar exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Source and pipeline errors carry a ``kind`` tag so the error classifier
can match them exhaustively without instance checks.
"""

from __future__ import annotations

from typing import Literal

SourceErrorKind = Literal["malformed", "not_found", "unauthorized", "transport"]


class RadarError(Exception):
    """Base exception for all radar ingest failures."""


class RadarConfigError(RadarError):
    """Raised for invalid runtime configuration."""


class RadarDependencyError(RadarError):
    """Raised when an optional runtime dependency is missing."""


class RadarSourceError(RadarError):
    """Base for failures surfaced to the presentation layer."""

    kind: SourceErrorKind = "transport"


class MalformedDataError(RadarSourceError):
    """Raised when sheet headers, cells, or ring/quadrant counts are invalid."""

    kind: SourceErrorKind = "malformed"


class SheetNotFoundError(RadarSourceError):
    """Raised when a document or sheet tab does not exist."""

    kind: SourceErrorKind = "not_found"


class AuthorizationError(RadarSourceError):
    """Raised when the source denies access to the current account."""

    kind: SourceErrorKind = "unauthorized"

    def __init__(self, status: int, account: str | None = None) -> None:
        self.status = status
        self.account = account
        who = account or "anonymous"
        super().__init__(f"Access denied with status {status} for account {who}.")


class TransportError(RadarSourceError):
    """Raised for network and unexpected upstream failures."""

    kind: SourceErrorKind = "transport"
