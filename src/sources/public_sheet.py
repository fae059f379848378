"""Public spreadsheet source adapter."""

from __future__ import annotations

from core.errors import SheetNotFoundError
from core.types import KeyedRows, PublicSheetSource, SourceFetchResult
from sources.source_title import sheet_title
from sources.transport_types import SheetDocument, SheetsTransport


def fetch_public_sheet(source: PublicSheetSource, transport: SheetsTransport) -> SourceFetchResult:
    """Fetch keyed rows from a publicly readable sheet.

    Args:
        source: Public sheet reference.
        transport: Spreadsheet provider.

    Returns:
        Fetch result with every tab listed as an alternative.

    Raises:
        SheetNotFoundError: If the document or requested tab does not exist.
        AuthorizationError: If the document is not public.
        TransportError: On network failures.
    """
    document = transport.fetch_public_document(source.sheet_id)
    sheet_name = resolve_sheet_name(document, source.sheet_name)
    table = transport.fetch_public_rows(source.sheet_id, sheet_name)
    return SourceFetchResult(
        descriptor=source,
        title=sheet_title(document.title, sheet_name),
        raw_rows=KeyedRows(rows=table.rows),
        column_names=table.column_names,
        resolved_sheet_name=sheet_name,
        alternative_sheet_names=document.sheet_names,
    )


def resolve_sheet_name(document: SheetDocument, requested: str | None) -> str:
    """Pick the requested tab, or the first tab when none was requested.

    Raises:
        SheetNotFoundError: If the tab is missing or the document has none.
    """
    if not document.sheet_names:
        raise SheetNotFoundError(f"Document '{document.title}' has no sheets.")
    if not requested:
        return document.sheet_names[0]
    if requested not in document.sheet_names:
        raise SheetNotFoundError(
            f"Sheet '{requested}' was not found in '{document.title}'. "
            f"Available sheets: {', '.join(document.sheet_names)}."
        )
    return requested
