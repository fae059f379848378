"""Public SDK surface for radar builds.

This module provides a stable import path for embedding applications.
It re-exports the client, source descriptors, and outcome models.
"""

from __future__ import annotations

from core.config import RadarConfig
from core.errors import (
    AuthorizationError,
    MalformedDataError,
    RadarError,
    SheetNotFoundError,
    TransportError,
)
from core.radar_types import Entry, Quadrant, Radar, Ring
from core.types import (
    BuildContext,
    CsvFileSource,
    ProtectedSheetSource,
    PublicSheetSource,
    QueryParams,
    RadarBuildResult,
)
from ingest.error_classifier import (
    MalformedFailure,
    NotFoundFailure,
    UnauthorizedFailure,
    UnknownFailure,
)
from ingest.radar_client import RadarClient
from render.json_renderer import JsonRadarRenderer

__all__ = [
    "AuthorizationError",
    "BuildContext",
    "CsvFileSource",
    "Entry",
    "JsonRadarRenderer",
    "MalformedDataError",
    "MalformedFailure",
    "NotFoundFailure",
    "ProtectedSheetSource",
    "PublicSheetSource",
    "Quadrant",
    "QueryParams",
    "Radar",
    "RadarBuildResult",
    "RadarClient",
    "RadarConfig",
    "RadarError",
    "Ring",
    "SheetNotFoundError",
    "TransportError",
    "UnauthorizedFailure",
    "UnknownFailure",
]
