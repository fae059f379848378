"""Unit tests for the radar SDK client."""

from __future__ import annotations

import pytest

from core.config import RadarConfig
from core.errors import RadarError
from core.types import (
    AccessGrant,
    BuildContext,
    CsvFileSource,
    ProtectedSheetSource,
    QueryParams,
)
from ingest.error_classifier import UnauthorizedFailure
from ingest.radar_client import RadarClient
from sources.transport_types import SheetDocument
from tests.fake_transports import (
    FakeAuthProvider,
    FakeCsvReader,
    FakeSheetsTransport,
    RecordingRenderer,
    make_transports,
)

URL = "https://example.com/team+radar.csv"
VALID_CSV = "name,ring,quadrant,isNew,description\nA,Adopt,tools,true,d\n"


def _config() -> RadarConfig:
    return RadarConfig(
        google_api_key=None,
        google_access_token=None,
        google_account=None,
        http_timeout_seconds=5.0,
        viewport_height=900,
        s3_region=None,
        s3_profile=None,
    )


def _client(
    csv_bodies: dict[str, str],
    sheets: FakeSheetsTransport | None = None,
    auth: FakeAuthProvider | None = None,
) -> RadarClient:
    transports = make_transports(sheets=sheets, auth=auth, csv_reader=FakeCsvReader(csv_bodies))
    return RadarClient(_config(), transports)


def test_build_displays_successful_result() -> None:
    """A successful build should become the current radar."""
    client = _client({URL: VALID_CSV})

    outcome = client.build(CsvFileSource(url=URL), BuildContext(900, RecordingRenderer()))

    assert client.current is outcome and outcome.title == "team radar"


def test_failed_build_clears_displayed_radar() -> None:
    """A failed build should replace the displayed radar with its error."""
    client = _client({URL: VALID_CSV})
    context = BuildContext(900, RecordingRenderer())
    client.build(CsvFileSource(url=URL), context)

    outcome = client.build(CsvFileSource(url="https://example.com/missing.csv"), context)

    assert outcome.kind == "not_found" and client.current is None


def test_superseded_outcome_is_discarded() -> None:
    """A late result from an older build should not replace a newer one."""
    client = _client({URL: VALID_CSV})
    context = BuildContext(900, RecordingRenderer())
    stale_generation = client.start_build()
    latest = client.build(CsvFileSource(url=URL), context)

    applied = client.apply_outcome(stale_generation, latest)

    assert applied is False and client.current is latest


def test_build_from_query_returns_none_without_source() -> None:
    """Unsupported parameters should leave the input form to the caller."""
    client = _client({})

    context = BuildContext(900, RecordingRenderer())

    outcome = client.build_from_query(QueryParams("not a url"), context)

    assert outcome is None


def test_switch_account_forces_account_chooser() -> None:
    """Re-authorization should restart the protected path with a forced chooser."""
    sheets = FakeSheetsTransport(
        documents={"doc": SheetDocument(title="Radar", sheet_names=("2024",))},
        protected_values={
            ("doc", "2024"): [
                ["name", "ring", "quadrant", "isNew", "description"],
                ["A", "Adopt", "tools", "true", "d"],
            ]
        },
        denied_accounts={"a@x.com"},
    )
    auth = FakeAuthProvider(
        grants=[
            AccessGrant(access_token="t1", account="a@x.com"),
            AccessGrant(access_token="t2", account="b@x.com"),
        ]
    )
    client = _client({}, sheets=sheets, auth=auth)
    context = BuildContext(900, RecordingRenderer())
    failure = client.build(ProtectedSheetSource(sheet_id="doc"), context)

    outcome = client.switch_account(failure, context)

    assert (failure.account, outcome.kind, auth.force_flags) == (
        "a@x.com",
        "built",
        [False, True],
    )


def test_switch_account_requires_sheet_source() -> None:
    """CSV failures cannot be re-authorized."""
    client = _client({})

    with pytest.raises(RadarError):
        client.switch_account(
            UnauthorizedFailure(account=None, retry_source=None),
            BuildContext(900, RecordingRenderer()),
        )


def test_load_radar_skips_rendering() -> None:
    """Loading should assemble the radar without touching a renderer."""
    client = _client({URL: VALID_CSV})

    radar = client.load_radar(CsvFileSource(url=URL))

    assert radar.entry_count == 1 and client.current is None
