"""Google Sheets transport over HTTP.

Document metadata and protected values come from the Sheets v4 API.
Public rows come from the CSV export so they arrive keyed by header.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import requests

from core.config import RadarConfig
from core.constants import GOOGLE_DOCS_ROOT, GOOGLE_SHEETS_API_ROOT
from core.errors import (
    AuthorizationError,
    RadarConfigError,
    SheetNotFoundError,
    TransportError,
)
from core.logging_config import get_logger
from core.types import AccessGrant
from sources.csv_file import parse_csv_text
from sources.transport_types import PublicSheetRows, SheetDocument

_LOGGER = get_logger(__name__)
_METADATA_FIELDS = "properties.title,sheets.properties.title"


class GoogleSheetsTransport:
    """Spreadsheet provider backed by a shared ``requests`` session."""

    def __init__(self, config: RadarConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    def fetch_public_document(self, sheet_id: str) -> SheetDocument:
        """Return title and tab names of a public document.

        Raises:
            RadarConfigError: If no API key is configured.
        """
        if not self._config.google_api_key:
            raise RadarConfigError(
                "Reading public sheets requires RADAR_GOOGLE_API_KEY. "
                "Set it to a Google API key with Sheets API access."
            )
        payload = self._get_json(
            f"{GOOGLE_SHEETS_API_ROOT}/{sheet_id}",
            params={"fields": _METADATA_FIELDS, "key": self._config.google_api_key},
            account=None,
        )
        return _document_from_payload(payload)

    def fetch_public_rows(self, sheet_id: str, sheet_name: str) -> PublicSheetRows:
        """Return keyed rows from the CSV export of one tab."""
        response = self._get(
            f"{GOOGLE_DOCS_ROOT}/{sheet_id}/gviz/tq",
            params={"tqx": "out:csv", "sheet": sheet_name},
            headers=None,
            account=None,
        )
        column_names, rows = parse_csv_text(response.text)
        return PublicSheetRows(column_names=column_names, rows=rows)

    def fetch_protected_document(self, sheet_id: str, grant: AccessGrant) -> SheetDocument:
        """Return title and tab names readable with the grant."""
        payload = self._get_json(
            f"{GOOGLE_SHEETS_API_ROOT}/{sheet_id}",
            params={"fields": _METADATA_FIELDS},
            account=grant.account,
            headers=_bearer_headers(grant),
        )
        return _document_from_payload(payload)

    def fetch_protected_values(
        self,
        sheet_id: str,
        sheet_name: str,
        grant: AccessGrant,
    ) -> list[list[str]]:
        """Return header plus value rows of one tab readable with the grant."""
        payload = self._get_json(
            f"{GOOGLE_SHEETS_API_ROOT}/{sheet_id}/values/{quote(sheet_range(sheet_name), safe='')}",
            params=None,
            account=grant.account,
            headers=_bearer_headers(grant),
        )
        values = payload.get("values", [])
        return [[str(cell) for cell in row] for row in values]

    def _get_json(
        self,
        url: str,
        params: dict[str, str] | None,
        account: str | None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        response = self._get(url, params=params, headers=headers, account=account)
        try:
            payload = response.json()
        except ValueError as error:
            raise TransportError(f"Invalid JSON response from {url}.") from error
        if not isinstance(payload, dict):
            raise TransportError(f"Unexpected response shape from {url}.")
        return payload

    def _get(
        self,
        url: str,
        params: dict[str, str] | None,
        headers: dict[str, str] | None,
        account: str | None,
    ) -> requests.Response:
        try:
            response = self._session.get(
                url,
                params=params,
                headers=headers,
                timeout=self._config.http_timeout_seconds,
            )
        except requests.RequestException as error:
            raise TransportError(f"Request to {url} failed: {error}") from error
        _raise_for_status(response, url, account)
        return response


def _raise_for_status(response: requests.Response, url: str, account: str | None) -> None:
    """Map provider HTTP statuses into source errors."""
    status = response.status_code
    if status < 400:
        return
    _LOGGER.warning("sheets_request_failed", url=url, status=status)
    if status == 404:
        raise SheetNotFoundError(f"Spreadsheet at {url} was not found.")
    if status in (401, 403):
        raise AuthorizationError(status, account)
    if status == 400 and "Unable to parse range" in response.text:
        raise SheetNotFoundError(f"Sheet requested from {url} does not exist.")
    raise TransportError(f"Request to {url} failed with HTTP {status}.")


def sheet_range(sheet_name: str) -> str:
    """Return an A1 range covering a whole tab.

    The name is always single-quoted so tabs named like cells (``Q1``)
    or holding ``!`` are read as sheet names.
    """
    escaped = sheet_name.replace("'", "''")
    return f"'{escaped}'"


def _document_from_payload(payload: dict[str, Any]) -> SheetDocument:
    properties = payload.get("properties", {})
    sheet_names = tuple(
        str(sheet.get("properties", {}).get("title", ""))
        for sheet in payload.get("sheets", [])
    )
    return SheetDocument(title=str(properties.get("title", "")), sheet_names=sheet_names)


def _bearer_headers(grant: AccessGrant) -> dict[str, str]:
    return {"Authorization": f"Bearer {grant.access_token}"}
