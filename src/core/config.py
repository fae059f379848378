"""Runtime configuration model for radar builds.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_VIEWPORT_HEIGHT, LOG_LEVELS
from core.errors import RadarConfigError


@dataclass(frozen=True)
class RadarConfig:
    """Validated runtime configuration.

    Attributes:
        google_api_key: Optional API key for public sheet metadata.
        google_access_token: Optional bearer token for protected sheets.
        google_account: Account identity that owns the access token.
        http_timeout_seconds: Timeout applied to every HTTP request.
        viewport_height: Viewport height used to size the radar canvas.
        s3_region: Optional default AWS region for S3 CSV sources.
        s3_profile: Optional AWS profile for boto3 session initialization.
        log_level: Logging level name applied by the CLI.
    """

    google_api_key: str | None
    google_access_token: str | None
    google_account: str | None
    http_timeout_seconds: float
    viewport_height: int
    s3_region: str | None
    s3_profile: str | None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "RadarConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RadarConfigError: If environment values are invalid.
        """
        timeout_value = os.getenv("RADAR_HTTP_TIMEOUT_SECONDS", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        viewport_value = os.getenv("RADAR_VIEWPORT_HEIGHT", str(DEFAULT_VIEWPORT_HEIGHT))
        return cls(
            google_api_key=os.getenv("RADAR_GOOGLE_API_KEY") or None,
            google_access_token=os.getenv("RADAR_GOOGLE_ACCESS_TOKEN") or None,
            google_account=os.getenv("RADAR_GOOGLE_ACCOUNT") or None,
            http_timeout_seconds=_parse_timeout(timeout_value),
            viewport_height=_parse_viewport_height(viewport_value),
            s3_region=os.getenv("RADAR_S3_REGION") or None,
            s3_profile=os.getenv("RADAR_S3_PROFILE") or None,
            log_level=_parse_log_level(os.getenv("RADAR_LOG_LEVEL", "INFO")),
        )


def _parse_timeout(raw_value: str) -> float:
    """Parse the HTTP timeout environment value.

    Raises:
        RadarConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise RadarConfigError(
            "Invalid RADAR_HTTP_TIMEOUT_SECONDS value: "
            f"expected number, got '{raw_value}'. "
            "Set RADAR_HTTP_TIMEOUT_SECONDS to a positive number of seconds."
        ) from error
    if timeout <= 0:
        raise RadarConfigError(
            f"Invalid RADAR_HTTP_TIMEOUT_SECONDS value: {raw_value} must be positive."
        )
    return timeout


def _parse_viewport_height(raw_value: str) -> int:
    """Parse the viewport height environment value.

    Raises:
        RadarConfigError: If value is not a positive integer.
    """
    try:
        height = int(raw_value)
    except ValueError as error:
        raise RadarConfigError(
            "Invalid RADAR_VIEWPORT_HEIGHT value: "
            f"expected integer, got '{raw_value}'. "
            "Set RADAR_VIEWPORT_HEIGHT to a pixel height."
        ) from error
    if height <= 0:
        raise RadarConfigError(
            f"Invalid RADAR_VIEWPORT_HEIGHT value: {raw_value} must be positive."
        )
    return height


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Raises:
        RadarConfigError: If value is not a standard level name.
    """
    level = raw_value.strip().upper()
    if level not in LOG_LEVELS:
        raise RadarConfigError(
            f"Invalid RADAR_LOG_LEVEL value: '{raw_value}'. "
            f"Use one of {', '.join(LOG_LEVELS)}."
        )
    return level
