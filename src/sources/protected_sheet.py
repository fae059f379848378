"""Access-controlled spreadsheet source adapter.

Rows arrive as a header row followed by positional value rows.
"""

from __future__ import annotations

from core.errors import MalformedDataError
from core.types import HeaderRows, ProtectedSheetSource, SourceFetchResult
from sources.public_sheet import resolve_sheet_name
from sources.source_title import sheet_title
from sources.transport_types import AuthProvider, SheetsTransport


def fetch_protected_sheet(
    source: ProtectedSheetSource,
    transport: SheetsTransport,
    auth_provider: AuthProvider,
) -> SourceFetchResult:
    """Authorize, then fetch header+rows values from a protected sheet.

    Args:
        source: Protected sheet reference.
        transport: Spreadsheet provider.
        auth_provider: Authorization handshake.

    Returns:
        Fetch result in header+rows shape.

    Raises:
        AuthorizationError: If the handshake fails or the account is denied.
        SheetNotFoundError: If the document or requested tab does not exist.
        MalformedDataError: If the tab is empty.
        TransportError: On network failures.
    """
    grant = auth_provider.authorize(force_account_chooser=source.force_account_chooser)
    document = transport.fetch_protected_document(source.sheet_id, grant)
    sheet_name = resolve_sheet_name(document, source.sheet_name)
    values = transport.fetch_protected_values(source.sheet_id, sheet_name, grant)
    if not values:
        raise MalformedDataError(f"Sheet '{sheet_name}' is empty.")
    header = tuple(str(column).strip() for column in values[0])
    rows = tuple(tuple(str(value) for value in row) for row in values[1:])
    return SourceFetchResult(
        descriptor=source,
        title=sheet_title(document.title, sheet_name),
        raw_rows=HeaderRows(header=header, rows=rows),
        column_names=header,
        resolved_sheet_name=sheet_name,
        alternative_sheet_names=document.sheet_names,
    )
