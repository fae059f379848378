"""Radar build orchestration.

This module runs one build attempt: fetch, validate, sanitize,
assemble, render. The renderer only ever sees a finished radar, and
any failure ends the attempt in a classified BuildFailure.
"""

from __future__ import annotations

from typing import Union

from core.constants import CANVAS_VERTICAL_MARGIN, MIN_CANVAS_SIZE
from core.errors import AuthorizationError
from core.logging_config import get_logger
from core.radar_types import Radar
from core.types import (
    BuildContext,
    ProtectedSheetSource,
    RadarBuildResult,
    SourceDescriptor,
    SourceFetchResult,
)
from ingest.content_validator import validate_table
from ingest.error_classifier import BuildFailure, classify_failure
from ingest.radar_assembler import assemble_radar
from ingest.row_sanitizer import sanitize_rows
from sources.source_factory import SourceTransports, fetch_source
from sources.source_title import strip_csv_suffix

_LOGGER = get_logger(__name__)

BuildOutcome = Union[RadarBuildResult, BuildFailure]


class RadarBuildRunner:
    """One build attempt against one source."""

    def __init__(
        self,
        source: SourceDescriptor,
        transports: SourceTransports,
        context: BuildContext,
    ) -> None:
        self._source = source
        self._transports = transports
        self._context = context

    def run(self) -> RadarBuildResult:
        """Build and render the radar.

        Raises:
            RadarSourceError: From any stage, unchanged.
        """
        _LOGGER.info("radar_build_started", source_kind=self._source.kind)
        fetched = self._fetch()
        radar = build_radar_from_fetch(fetched)
        title = display_title(fetched)
        canvas_size = canvas_size_hint(self._context.viewport_height)
        self._context.renderer.render(canvas_size, radar)
        _LOGGER.info(
            "radar_build_completed",
            source_kind=fetched.descriptor.kind,
            title=title,
            quadrant_count=len(radar.quadrants),
            ring_count=len(radar.rings()),
            entry_count=radar.entry_count,
        )
        return RadarBuildResult(
            title=title,
            radar=radar,
            canvas_size=canvas_size,
            source=fetched.descriptor,
        )

    def _fetch(self) -> SourceFetchResult:
        try:
            return fetch_source(self._source, self._transports)
        except AuthorizationError:
            if self._source.kind != "public_sheet" or self._transports.auth is None:
                raise
        _LOGGER.info("protected_sheet_fallback", sheet_id=self._source.sheet_id)
        protected = ProtectedSheetSource(
            sheet_id=self._source.sheet_id,
            sheet_name=self._source.sheet_name,
        )
        return fetch_source(protected, self._transports)


def build_radar_from_fetch(fetched: SourceFetchResult) -> Radar:
    """Validate, sanitize, and assemble fetched rows.

    Raises:
        MalformedDataError: If validation or assembly fails.
    """
    validate_table(fetched.column_names, fetched.raw_rows)
    rows = sanitize_rows(fetched.raw_rows)
    return assemble_radar(
        rows,
        current_sheet_name=fetched.resolved_sheet_name,
        alternative_sheet_names=fetched.alternative_sheet_names,
    )


def build_radar(
    source: SourceDescriptor,
    transports: SourceTransports,
    context: BuildContext,
) -> RadarBuildResult:
    """Run one build and return its result.

    Args:
        source: Where to read rows from.
        transports: External collaborators for fetching.
        context: Injected viewport and renderer.

    Returns:
        Successful build result.

    Raises:
        MalformedDataError: For invalid content or too many rings.
        SheetNotFoundError: For missing documents, tabs, or files.
        AuthorizationError: For denied access.
        TransportError: For network failures.
    """
    return RadarBuildRunner(source, transports, context).run()


def run_radar_build(
    source: SourceDescriptor,
    transports: SourceTransports,
    context: BuildContext,
) -> BuildOutcome:
    """Run one build and classify any failure into a terminal state."""
    try:
        return build_radar(source, transports, context)
    except Exception as error:
        failure = classify_failure(error, source)
        _LOGGER.warning(
            "radar_build_failed",
            source_kind=source.kind,
            failure_kind=failure.kind,
        )
        return failure


def display_title(fetched: SourceFetchResult) -> str:
    """Return the title shown for a fetched source."""
    if fetched.descriptor.kind == "csv_file":
        return strip_csv_suffix(fetched.title)
    return fetched.title


def canvas_size_hint(viewport_height: int) -> int:
    """Return the renderer size for a viewport height."""
    return max(MIN_CANVAS_SIZE, viewport_height - CANVAS_VERTICAL_MARGIN)
