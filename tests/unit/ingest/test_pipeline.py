"""Unit tests for radar build orchestration."""

from __future__ import annotations

import pytest

from core.errors import MalformedDataError
from core.types import (
    AccessGrant,
    BuildContext,
    CsvFileSource,
    ProtectedSheetSource,
    PublicSheetSource,
)
from ingest.pipeline import build_radar, canvas_size_hint, run_radar_build
from sources.transport_types import SheetDocument
from tests.fake_transports import (
    FakeAuthProvider,
    FakeCsvReader,
    FakeSheetsTransport,
    RecordingRenderer,
    keyed_rows,
    make_transports,
)

VALID_CSV = (
    "name,ring,quadrant,isNew,topic,description\n"
    "Tech A,Adopt,Tools,TRUE,,d\n"
    "Tech B,Trial,Tools,false,,d2\n"
)
HEADER = ["name", "ring", "quadrant", "isNew", "description"]


def _public_transport() -> FakeSheetsTransport:
    return FakeSheetsTransport(
        documents={"doc": SheetDocument(title="Radar", sheet_names=("2023", "2024"))},
        public_rows={
            ("doc", "2023"): keyed_rows(VALID_CSV),
            ("doc", "2024"): keyed_rows(VALID_CSV),
        },
    )


def test_canvas_size_hint_has_lower_bound() -> None:
    """Small viewports should still get the minimum canvas size."""
    assert (canvas_size_hint(500), canvas_size_hint(1000)) == (620, 867)


def test_build_radar_renders_csv_with_stripped_title() -> None:
    """CSV builds should drop the .csv suffix from the displayed title."""
    url = "https://example.com/radars/2024-radar.csv"
    renderer = RecordingRenderer()
    transports = make_transports(csv_reader=FakeCsvReader({url: VALID_CSV}))

    result = build_radar(CsvFileSource(url=url), transports, BuildContext(900, renderer))

    assert (result.title, result.radar.current_sheet_name, renderer.calls[0][0]) == (
        "2024-radar",
        "CSV File",
        767,
    )


def test_build_radar_defaults_to_first_public_tab() -> None:
    """Public builds without a sheet name should read the first tab."""
    transports = make_transports(sheets=_public_transport())

    result = build_radar(
        PublicSheetSource(sheet_id="doc"),
        transports,
        BuildContext(900, RecordingRenderer()),
    )

    assert (result.title, result.radar.alternative_sheet_names) == (
        "Radar - 2023",
        ("2023", "2024"),
    )


def test_build_radar_does_not_render_invalid_data() -> None:
    """A failing validation should never reach the renderer."""
    url = "https://example.com/bad.csv"
    renderer = RecordingRenderer()
    bad_csv = "name,ring,quadrant,isNew,description\nA,,tools,true,d\n"
    transports = make_transports(csv_reader=FakeCsvReader({url: bad_csv}))

    with pytest.raises(MalformedDataError):
        build_radar(CsvFileSource(url=url), transports, BuildContext(900, renderer))

    assert renderer.calls == []


def test_run_radar_build_classifies_missing_tab() -> None:
    """Requesting an unknown tab should end in the not-found state."""
    renderer = RecordingRenderer()
    transports = make_transports(sheets=_public_transport())

    outcome = run_radar_build(
        PublicSheetSource(sheet_id="doc", sheet_name="1999"),
        transports,
        BuildContext(900, renderer),
    )

    assert outcome.kind == "not_found" and renderer.calls == []


def test_run_radar_build_classifies_protected_denial() -> None:
    """A 403 from a protected sheet should report the denied account."""
    sheets = _public_transport()
    sheets.denied_accounts.add("a@x.com")
    auth = FakeAuthProvider(grants=[AccessGrant(access_token="t", account="a@x.com")])

    outcome = run_radar_build(
        ProtectedSheetSource(sheet_id="doc"),
        make_transports(sheets=sheets, auth=auth),
        BuildContext(900, RecordingRenderer()),
    )

    assert (outcome.kind, outcome.account) == ("unauthorized", "a@x.com")


def test_build_radar_falls_back_to_protected_sheet() -> None:
    """Private documents should be retried through the protected path."""
    sheets = _public_transport()
    sheets.private_ids.add("doc")
    sheets.protected_values[("doc", "2024")] = [HEADER, ["A", "Adopt", "tools", "TRUE", "d"]]
    auth = FakeAuthProvider(grants=[AccessGrant(access_token="t", account="b@x.com")])

    result = build_radar(
        PublicSheetSource(sheet_id="doc", sheet_name="2024"),
        make_transports(sheets=sheets, auth=auth),
        BuildContext(900, RecordingRenderer()),
    )

    assert (result.source.kind, auth.force_flags) == ("protected_sheet", [False])


def test_run_radar_build_reports_private_sheet_without_auth() -> None:
    """Private documents without an auth provider should be unauthorized."""
    sheets = _public_transport()
    sheets.private_ids.add("doc")

    outcome = run_radar_build(
        PublicSheetSource(sheet_id="doc"),
        make_transports(sheets=sheets),
        BuildContext(900, RecordingRenderer()),
    )

    assert outcome.kind == "unauthorized"
