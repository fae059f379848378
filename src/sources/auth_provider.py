"""Access grant providers for protected sheets.

The OAuth consent flow runs outside this package. Providers here hand
out grants that were obtained elsewhere.
"""

from __future__ import annotations

from core.config import RadarConfig
from core.errors import AuthorizationError
from core.types import AccessGrant


class StaticAuthProvider:
    """Return a fixed access grant.

    A forced account chooser cannot pick a different account here, so
    it returns the same grant and lets the provider deny it again.
    """

    def __init__(self, grant: AccessGrant | None) -> None:
        self._grant = grant

    @classmethod
    def from_config(cls, config: RadarConfig) -> "StaticAuthProvider":
        """Build a provider from the configured token and account."""
        if not config.google_access_token:
            return cls(None)
        return cls(
            AccessGrant(
                access_token=config.google_access_token,
                account=config.google_account,
            )
        )

    @property
    def is_configured(self) -> bool:
        """Whether a grant is available."""
        return self._grant is not None

    def authorize(self, force_account_chooser: bool = False) -> AccessGrant:
        """Return the configured grant.

        Raises:
            AuthorizationError: With status 401 when no grant is configured.
        """
        if self._grant is None:
            raise AuthorizationError(401, None)
        return self._grant
