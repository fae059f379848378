"""Failure classification for radar builds.

Every failed build ends in exactly one terminal BuildFailure. Source
errors are matched on their ``kind`` tag; anything else is logged and
reported without internal detail.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal, Union

from core.errors import AuthorizationError, RadarSourceError, SourceErrorKind
from core.logging_config import get_logger
from core.types import ProtectedSheetSource, SourceDescriptor

_LOGGER = get_logger(__name__)

FailureKind = Literal["not_found", "malformed", "unauthorized", "unknown"]

GENERIC_PROBLEM_MESSAGE = "Oops! There was a problem loading your data. "
SHEET_NOT_FOUND_MESSAGE = (
    "Oops! We can't find the sheet you've entered. Can you check the URL or sheet name?"
)
FAQ_GUIDANCE = "Please check the FAQs for possible solutions."
UNAUTHORIZED_GUIDANCE = "Switch to an account with access, or go back to try a different sheet."


@dataclass(frozen=True)
class NotFoundFailure:
    """The document or sheet tab does not exist."""

    message: str = SHEET_NOT_FOUND_MESSAGE
    guidance: str = FAQ_GUIDANCE
    kind: FailureKind = field(default="not_found", init=False)


@dataclass(frozen=True)
class MalformedFailure:
    """The data failed schema or limit validation."""

    detail: str
    guidance: str = FAQ_GUIDANCE
    kind: FailureKind = field(default="malformed", init=False)

    @property
    def message(self) -> str:
        """User-facing message including the validation detail."""
        return GENERIC_PROBLEM_MESSAGE + self.detail


@dataclass(frozen=True)
class UnauthorizedFailure:
    """The signed-in account may not read the sheet.

    Attributes:
        account: Identity of the denied account, when known.
        retry_source: Source that restarts the protected path with a
            forced account chooser, when the failed source is a sheet.
    """

    account: str | None
    retry_source: ProtectedSheetSource | None
    guidance: str = UNAUTHORIZED_GUIDANCE
    kind: FailureKind = field(default="unauthorized", init=False)

    @property
    def message(self) -> str:
        """User-facing message naming the denied account."""
        who = self.account or "an unknown account"
        return (
            f"Looks like you are accessing this sheet using {who}, "
            "which does not have permission. Try switching to another account."
        )


@dataclass(frozen=True)
class UnknownFailure:
    """Unexpected failure; details are logged, never shown."""

    message: str = GENERIC_PROBLEM_MESSAGE.strip()
    guidance: str = FAQ_GUIDANCE
    kind: FailureKind = field(default="unknown", init=False)


BuildFailure = Union[NotFoundFailure, MalformedFailure, UnauthorizedFailure, UnknownFailure]


def classify_failure(error: Exception, source: SourceDescriptor | None = None) -> BuildFailure:
    """Map a build error into its terminal failure state.

    Args:
        error: Error raised by a source adapter or pipeline stage.
        source: Source of the failed build, used for re-authorization.

    Returns:
        Terminal failure for the presentation layer.
    """
    if isinstance(error, RadarSourceError):
        handler = _HANDLERS[error.kind]
        return handler(error, source)
    return _classify_unknown(error, source)


def _classify_not_found(error: RadarSourceError, source: SourceDescriptor | None) -> BuildFailure:
    return NotFoundFailure()


def _classify_malformed(error: RadarSourceError, source: SourceDescriptor | None) -> BuildFailure:
    return MalformedFailure(detail=str(error))


def _classify_unauthorized(
    error: RadarSourceError,
    source: SourceDescriptor | None,
) -> BuildFailure:
    account = error.account if isinstance(error, AuthorizationError) else None
    return UnauthorizedFailure(account=account, retry_source=reauthorization_source(source))


def _classify_unknown(error: Exception, source: SourceDescriptor | None) -> BuildFailure:
    _LOGGER.error(
        "radar_build_unexpected_error",
        error_type=type(error).__name__,
        error=str(error),
        source_kind=source.kind if source is not None else None,
    )
    return UnknownFailure()


def reauthorization_source(source: SourceDescriptor | None) -> ProtectedSheetSource | None:
    """Build the protected source used by the switch-account action."""
    if source is None or source.kind == "csv_file":
        return None
    return ProtectedSheetSource(
        sheet_id=source.sheet_id,
        sheet_name=source.sheet_name,
        force_account_chooser=True,
    )


_HANDLERS: dict[
    SourceErrorKind,
    Callable[[RadarSourceError, SourceDescriptor | None], BuildFailure],
] = {
    "not_found": _classify_not_found,
    "malformed": _classify_malformed,
    "unauthorized": _classify_unauthorized,
    "transport": _classify_unknown,
}
