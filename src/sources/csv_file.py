"""CSV file source adapter and readers.

CSV text is loaded over HTTP with requests, from S3 with boto3, or
from the local file system, then parsed into keyed rows.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Any

import requests

from core.config import RadarConfig
from core.constants import CSV_SHEET_NAME
from core.errors import RadarDependencyError, SheetNotFoundError, TransportError
from core.s3_uri import parse_s3_uri
from core.types import CsvFileSource, KeyedRows, SourceFetchResult
from sources.source_title import file_name
from sources.transport_types import CsvReader


def fetch_csv_file(source: CsvFileSource, reader: CsvReader) -> SourceFetchResult:
    """Fetch and parse a CSV file into keyed rows.

    Args:
        source: CSV location.
        reader: Loader for the file body.

    Returns:
        Fetch result with no alternative sheets.

    Raises:
        SheetNotFoundError: If the file does not exist.
        TransportError: If the file cannot be read.
    """
    column_names, rows = parse_csv_text(reader.read_text(source.url))
    return SourceFetchResult(
        descriptor=source,
        title=file_name(source.url),
        raw_rows=KeyedRows(rows=rows),
        column_names=column_names,
        resolved_sheet_name=CSV_SHEET_NAME,
        alternative_sheet_names=(),
    )


def parse_csv_text(text: str) -> tuple[tuple[str, ...], tuple[dict[str, str], ...]]:
    """Parse CSV text into header names and keyed rows.

    Blank lines are skipped. Missing trailing cells become empty strings.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")), restval="")
    column_names = tuple(name.strip() for name in reader.fieldnames or ())
    rows: list[dict[str, str]] = []
    for record in reader:
        rows.append(
            {
                column.strip(): value or ""
                for column, value in record.items()
                if column is not None
            }
        )
    return column_names, tuple(rows)


class LocationCsvReader:
    """Read CSV text from ``http(s)://``, ``s3://``, or local paths."""

    def __init__(self, config: RadarConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    def read_text(self, url: str) -> str:
        """Return the body at ``url`` decoded as UTF-8."""
        if url.startswith(("http://", "https://")):
            return self._read_http(url)
        if url.startswith("s3://"):
            return self._read_s3(url)
        return _read_local(Path(url).expanduser())

    def _read_http(self, url: str) -> str:
        try:
            response = self._session.get(url, timeout=self._config.http_timeout_seconds)
        except requests.RequestException as error:
            raise TransportError(f"Failed to download CSV from {url}: {error}") from error
        if response.status_code == 404:
            raise SheetNotFoundError(f"CSV file {url} was not found.")
        if response.status_code >= 400:
            raise TransportError(
                f"Failed to download CSV from {url}: HTTP {response.status_code}."
            )
        return decode_csv_bytes(response.content, url)

    def _read_s3(self, url: str) -> str:
        location = parse_s3_uri(url)
        s3_client = _create_s3_client(self._config)
        try:
            body = s3_client.get_object(Bucket=location.bucket, Key=location.key)["Body"].read()
        except Exception as error:
            if _is_missing_s3_key(error):
                raise SheetNotFoundError(f"CSV object {url} was not found.") from error
            raise TransportError(f"Failed to read CSV from {url}: {error}") from error
        return decode_csv_bytes(body, url)


def _read_local(path: Path) -> str:
    if not path.is_file():
        raise SheetNotFoundError(f"CSV file {path} does not exist.")
    try:
        body = path.read_bytes()
    except OSError as error:
        raise TransportError(f"Failed to read CSV file {path}: {error}") from error
    return decode_csv_bytes(body, str(path))


def decode_csv_bytes(body: bytes, location: str) -> str:
    """Decode a CSV body as UTF-8, dropping a leading byte-order mark.

    HTTP charset defaults are ignored; CSV sources are read as UTF-8.

    Raises:
        TransportError: If the body is not valid UTF-8.
    """
    try:
        return body.decode("utf-8-sig")
    except UnicodeDecodeError as error:
        raise TransportError(f"CSV at {location} is not valid UTF-8: {error}") from error


def _create_s3_client(config: RadarConfig) -> Any:
    """Create a boto3 S3 client.

    Raises:
        RadarDependencyError: If boto3 is missing.
    """
    try:
        import boto3
    except ImportError as error:
        raise RadarDependencyError(
            "S3 support requires boto3, but it is not installed. "
            "Install boto3 to read CSV files from s3:// sources."
        ) from error
    session_kwargs: dict[str, str] = {}
    if config.s3_profile:
        session_kwargs["profile_name"] = config.s3_profile
    if config.s3_region:
        session_kwargs["region_name"] = config.s3_region
    session = boto3.session.Session(**session_kwargs)
    return session.client("s3")


def _is_missing_s3_key(error: Exception) -> bool:
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return False
    code = str(response.get("Error", {}).get("Code", ""))
    return code in {"NoSuchKey", "404", "NoSuchBucket"}
