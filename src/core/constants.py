"""Core constants used across radar modules.

This module centralizes schema names, limits, and defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

REQUIRED_COLUMNS = ("name", "ring", "quadrant", "isNew", "description")
OPTIONAL_COLUMNS = ("topic",)
NEW_ENTRY_TOKEN = "true"
MAX_RINGS = 4
MAX_QUADRANTS = 4
MIN_CANVAS_SIZE = 620
CANVAS_VERTICAL_MARGIN = 133
DEFAULT_VIEWPORT_HEIGHT = 753
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
CSV_SHEET_NAME = "CSV File"
CSV_SUFFIX = ".csv"
GOOGLE_DOMAIN_SUFFIX = "google.com"
GOOGLE_SHEETS_API_ROOT = "https://sheets.googleapis.com/v4/spreadsheets"
GOOGLE_DOCS_ROOT = "https://docs.google.com/spreadsheets/d"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
