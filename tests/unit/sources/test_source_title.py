"""Unit tests for source title and location helpers."""

from __future__ import annotations

from sources.source_title import (
    domain_name,
    extract_sheet_id,
    file_name,
    sheet_title,
    strip_csv_suffix,
)


def test_file_name_decodes_last_segment() -> None:
    """File names should be plus- and percent-decoded."""
    assert file_name("https://example.com/a/My+Team%20Radar.csv") == "My Team Radar.csv"


def test_file_name_returns_url_when_it_ends_with_separator() -> None:
    """URLs without a final segment should be returned unchanged."""
    assert file_name("https://example.com/radars/") == "https://example.com/radars/"


def test_strip_csv_suffix_is_case_sensitive() -> None:
    """Only a lowercase .csv suffix should be removed."""
    assert (strip_csv_suffix("2024-radar.csv"), strip_csv_suffix("2024-radar.CSV")) == (
        "2024-radar",
        "2024-radar.CSV",
    )


def test_domain_name_extracts_host() -> None:
    """Domain should be the host portion after the scheme."""
    assert domain_name("https://docs.google.com/spreadsheets/d/abc") == "docs.google.com"


def test_domain_name_is_none_without_scheme() -> None:
    """Bare ids and paths have no domain."""
    assert domain_name("abc123") is None


def test_extract_sheet_id_reads_google_urls() -> None:
    """Sheet ids should be extracted from edit URLs."""
    url = "https://docs.google.com/spreadsheets/d/1AbC_def/edit#gid=0"

    assert extract_sheet_id(url) == "1AbC_def"


def test_extract_sheet_id_keeps_bare_ids() -> None:
    """Non-URL references should be returned as-is."""
    assert extract_sheet_id("1AbC_def") == "1AbC_def"


def test_sheet_title_joins_document_and_tab() -> None:
    """Sheet titles should combine document and tab names."""
    assert sheet_title("Tech Radar", "2024") == "Tech Radar - 2024"
