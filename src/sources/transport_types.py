"""Interfaces of external sheet transports and auth providers.

Source adapters depend only on these protocols. Concrete HTTP and
credential handling lives in ``sheets_transport`` and ``auth_provider``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from core.types import AccessGrant, RawRow


@dataclass(frozen=True)
class SheetDocument:
    """Spreadsheet document metadata.

    Attributes:
        title: Document title.
        sheet_names: Tab names in document order.
    """

    title: str
    sheet_names: tuple[str, ...]


@dataclass(frozen=True)
class PublicSheetRows:
    """Keyed rows from one public tab."""

    column_names: tuple[str, ...]
    rows: tuple[RawRow, ...]


class SheetsTransport(Protocol):
    """Spreadsheet provider reachable over the network."""

    def fetch_public_document(self, sheet_id: str) -> SheetDocument:
        """Return metadata of a publicly readable document."""

    def fetch_public_rows(self, sheet_id: str, sheet_name: str) -> PublicSheetRows:
        """Return keyed rows of one public tab."""

    def fetch_protected_document(self, sheet_id: str, grant: AccessGrant) -> SheetDocument:
        """Return metadata of a document readable by the grant's account."""

    def fetch_protected_values(
        self,
        sheet_id: str,
        sheet_name: str,
        grant: AccessGrant,
    ) -> list[list[str]]:
        """Return header plus value rows of one protected tab."""


class AuthProvider(Protocol):
    """External authorization handshake."""

    def authorize(self, force_account_chooser: bool = False) -> AccessGrant:
        """Return an access grant or raise AuthorizationError."""


class CsvReader(Protocol):
    """Loader of delimited text by location."""

    def read_text(self, url: str) -> str:
        """Return the decoded file body."""
