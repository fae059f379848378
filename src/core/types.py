"""Shared typed models.

This module defines immutable models used by source adapters,
the ingest pipeline, and the SDK to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Mapping, Protocol, Union

from core.radar_types import Radar

SourceKind = Literal["public_sheet", "protected_sheet", "csv_file"]
RawRow = Mapping[str, str]


@dataclass(frozen=True)
class QueryParams:
    """Request parameters parsed by the caller.

    Attributes:
        sheet_id: Sheet URL, sheet id, or CSV location.
        sheet_name: Optional sheet tab name.
    """

    sheet_id: str
    sheet_name: str | None = None


@dataclass(frozen=True)
class PublicSheetSource:
    """Publicly readable spreadsheet document."""

    sheet_id: str
    sheet_name: str | None = None
    kind: SourceKind = field(default="public_sheet", init=False)


@dataclass(frozen=True)
class ProtectedSheetSource:
    """Access-controlled spreadsheet that needs an authorized account.

    Attributes:
        sheet_id: Spreadsheet document id.
        sheet_name: Optional sheet tab name.
        force_account_chooser: Ask the auth provider for a fresh account.
    """

    sheet_id: str
    sheet_name: str | None = None
    force_account_chooser: bool = False
    kind: SourceKind = field(default="protected_sheet", init=False)


@dataclass(frozen=True)
class CsvFileSource:
    """Delimited text file reachable by URL, S3 URI, or local path."""

    url: str
    kind: SourceKind = field(default="csv_file", init=False)


SourceDescriptor = Union[PublicSheetSource, ProtectedSheetSource, CsvFileSource]


@dataclass(frozen=True)
class KeyedRows:
    """Rows already keyed by column name."""

    rows: tuple[RawRow, ...]


@dataclass(frozen=True)
class HeaderRows:
    """Header row plus positional value rows."""

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


RawRows = Union[KeyedRows, HeaderRows]


@dataclass(frozen=True)
class SanitizedRow:
    """Normalized row ready for radar assembly.

    Attributes:
        name: Trimmed entry name.
        ring: Trimmed ring name.
        quadrant: Trimmed quadrant value.
        is_new: Novelty flag parsed from the raw cell.
        topic: Trimmed topic, empty when absent.
        description: Trimmed description, empty when absent.
    """

    name: str
    ring: str
    quadrant: str
    is_new: bool
    topic: str
    description: str


@dataclass(frozen=True)
class SourceFetchResult:
    """Raw tabular data and sheet metadata from one source.

    Attributes:
        descriptor: Source the data was fetched from.
        title: Display title for the radar.
        raw_rows: Data rows in keyed or header+array shape.
        column_names: Header names present in the source.
        resolved_sheet_name: Sheet the rows were read from.
        alternative_sheet_names: All sheet names in the same document.
    """

    descriptor: SourceDescriptor
    title: str
    raw_rows: RawRows
    column_names: tuple[str, ...]
    resolved_sheet_name: str
    alternative_sheet_names: tuple[str, ...] = ()


@dataclass(frozen=True)
class AccessGrant:
    """Authorization handshake result for protected sheets."""

    access_token: str
    account: str | None


class Renderer(Protocol):
    """Consumer of finished radars."""

    def render(self, canvas_size_hint: int, radar: Radar) -> None:
        """Draw or export the finished radar."""


@dataclass(frozen=True)
class BuildContext:
    """Page context injected into one build.

    Attributes:
        viewport_height: Height of the display area in pixels.
        renderer: Renderer that receives the finished radar.
    """

    viewport_height: int
    renderer: Renderer


@dataclass(frozen=True)
class RadarBuildResult:
    """Successful build output.

    Attributes:
        title: Display title derived from the source.
        radar: Finished radar aggregate.
        canvas_size: Size hint passed to the renderer.
        source: Source the radar was built from.
    """

    title: str
    radar: Radar
    canvas_size: int
    source: SourceDescriptor
    kind: Literal["built"] = field(default="built", init=False)
