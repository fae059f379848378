"""Title and location helpers for source references."""

from __future__ import annotations

import re
from urllib.parse import unquote_plus

from core.constants import CSV_SUFFIX, GOOGLE_DOCS_ROOT

_DOMAIN_PATTERN = re.compile(r".+://([^\\/]+)")
_FILE_NAME_PATTERN = re.compile(r"([^\\/]+)$")
_SHEET_URL_PATTERN = re.compile(re.escape(GOOGLE_DOCS_ROOT) + r"/(.*?)($|/$|/.*|\?.*)")


def domain_name(url: str) -> str | None:
    """Return the host portion of a decoded URL, or None without a scheme."""
    match = _DOMAIN_PATTERN.match(unquote_plus(url))
    return match.group(1) if match else None


def file_name(url: str) -> str:
    """Return the decoded final path segment of a URL.

    Falls back to the raw URL when it ends with a separator.
    """
    match = _FILE_NAME_PATTERN.search(unquote_plus(url))
    return match.group(1) if match else url


def strip_csv_suffix(title: str) -> str:
    """Drop one trailing ``.csv`` (case-sensitive)."""
    return title.removesuffix(CSV_SUFFIX)


def sheet_title(document_title: str, sheet_name: str) -> str:
    """Combine document and tab names into a display title."""
    return f"{document_title} - {sheet_name}"


def extract_sheet_id(sheet_reference: str) -> str:
    """Extract the document id from a sheet URL, or return the reference as-is."""
    match = _SHEET_URL_PATTERN.search(sheet_reference)
    return match.group(1) if match else sheet_reference
