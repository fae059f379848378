"""Source resolution and fetch dispatch.

Query parameters resolve to one source descriptor, and every
descriptor kind is fetched through ``fetch_source``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import requests

from core.config import RadarConfig
from core.constants import GOOGLE_DOMAIN_SUFFIX
from core.errors import AuthorizationError
from core.logging_config import get_logger
from core.types import (
    CsvFileSource,
    ProtectedSheetSource,
    PublicSheetSource,
    QueryParams,
    SourceDescriptor,
    SourceFetchResult,
)
from sources.auth_provider import StaticAuthProvider
from sources.csv_file import LocationCsvReader, fetch_csv_file
from sources.protected_sheet import fetch_protected_sheet
from sources.public_sheet import fetch_public_sheet
from sources.sheets_transport import GoogleSheetsTransport
from sources.source_title import domain_name, extract_sheet_id
from sources.transport_types import AuthProvider, CsvReader, SheetsTransport

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class SourceTransports:
    """External collaborators used by source adapters.

    Attributes:
        sheets: Spreadsheet provider.
        auth: Authorization handshake for protected sheets, if any.
        csv_reader: Loader for CSV file bodies.
    """

    sheets: SheetsTransport
    auth: AuthProvider | None
    csv_reader: CsvReader

    @classmethod
    def from_config(cls, config: RadarConfig) -> "SourceTransports":
        """Build HTTP-backed transports that share one session."""
        session = requests.Session()
        auth_provider = StaticAuthProvider.from_config(config)
        return cls(
            sheets=GoogleSheetsTransport(config, session),
            auth=auth_provider if auth_provider.is_configured else None,
            csv_reader=LocationCsvReader(config, session),
        )


def resolve_source_descriptor(params: QueryParams) -> SourceDescriptor | None:
    """Pick the source kind for parsed request parameters.

    Args:
        params: Parsed ``sheetId``/``sheetName`` parameters.

    Returns:
        CSV source for CSV locations, public sheet for Google URLs,
        or None when the caller should show its input form.
    """
    sheet_id = params.sheet_id.strip()
    if not sheet_id:
        return None
    domain = domain_name(sheet_id)
    if sheet_id.endswith("csv") and (domain or Path(sheet_id).expanduser().is_file()):
        return CsvFileSource(url=sheet_id)
    if domain and domain.endswith(GOOGLE_DOMAIN_SUFFIX):
        return PublicSheetSource(sheet_id=extract_sheet_id(sheet_id), sheet_name=params.sheet_name)
    return None


def fetch_source(source: SourceDescriptor, transports: SourceTransports) -> SourceFetchResult:
    """Fetch raw rows for any source kind.

    Raises:
        SheetNotFoundError: If the document, tab, or file does not exist.
        AuthorizationError: If access is denied or no auth provider exists.
        TransportError: On network failures.
    """
    if source.kind == "csv_file":
        result = fetch_csv_file(source, transports.csv_reader)
    elif source.kind == "public_sheet":
        result = fetch_public_sheet(source, transports.sheets)
    else:
        result = _fetch_protected(source, transports)
    _LOGGER.info(
        "source_fetched",
        source_kind=source.kind,
        title=result.title,
        sheet_name=result.resolved_sheet_name,
        column_count=len(result.column_names),
        row_count=len(result.raw_rows.rows),
    )
    return result


def _fetch_protected(
    source: ProtectedSheetSource,
    transports: SourceTransports,
) -> SourceFetchResult:
    if transports.auth is None:
        raise AuthorizationError(401, None)
    return fetch_protected_sheet(source, transports.sheets, transports.auth)
