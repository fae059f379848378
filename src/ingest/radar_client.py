"""Python SDK for radar builds.

This module exposes the high-level client used by the CLI and by
embedding applications. It owns the currently displayed result.
"""

from __future__ import annotations

from core.config import RadarConfig
from core.errors import RadarError
from core.logging_config import get_logger
from core.radar_types import Radar
from core.types import BuildContext, QueryParams, RadarBuildResult, SourceDescriptor
from ingest.error_classifier import UnauthorizedFailure
from ingest.pipeline import BuildOutcome, build_radar_from_fetch, run_radar_build
from sources.source_factory import SourceTransports, fetch_source, resolve_source_descriptor

_LOGGER = get_logger(__name__)


class RadarClient:
    """Primary SDK entry point for radar builds."""

    def __init__(
        self,
        config: RadarConfig | None = None,
        transports: SourceTransports | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            transports: Optional transports, HTTP-backed by default.
        """
        self._config = config or RadarConfig.from_env()
        self._transports = transports or SourceTransports.from_config(self._config)
        self._generation = 0
        self._current: RadarBuildResult | None = None

    @property
    def config(self) -> RadarConfig:
        """Runtime configuration used by this client."""
        return self._config

    @property
    def current(self) -> RadarBuildResult | None:
        """The radar currently displayed, if any build succeeded."""
        return self._current

    def build(self, source: SourceDescriptor, context: BuildContext) -> BuildOutcome:
        """Run a build and display its result when it succeeds.

        Args:
            source: Source to build from.
            context: Injected viewport and renderer.

        Returns:
            Build result or classified failure.
        """
        generation = self.start_build()
        outcome = run_radar_build(source, self._transports, context)
        self.apply_outcome(generation, outcome)
        return outcome

    def build_from_query(self, params: QueryParams, context: BuildContext) -> BuildOutcome | None:
        """Resolve parsed query parameters and build.

        Returns:
            None when the parameters name no supported source.
        """
        source = resolve_source_descriptor(params)
        if source is None:
            return None
        return self.build(source, context)

    def switch_account(self, failure: UnauthorizedFailure, context: BuildContext) -> BuildOutcome:
        """Restart the protected path with a forced account chooser.

        Raises:
            RadarError: If the failure carries no re-authorization source.
        """
        if failure.retry_source is None:
            raise RadarError("Switching accounts is only possible for spreadsheet sources.")
        return self.build(failure.retry_source, context)

    def load_radar(self, source: SourceDescriptor) -> Radar:
        """Fetch and assemble a radar without rendering or displaying it.

        Raises:
            RadarSourceError: From any fetch or validation stage.
        """
        return build_radar_from_fetch(fetch_source(source, self._transports))

    def start_build(self) -> int:
        """Begin a build and return its generation token."""
        self._generation += 1
        return self._generation

    def apply_outcome(self, generation: int, outcome: BuildOutcome) -> bool:
        """Display an outcome unless a newer build superseded it.

        A failure clears the displayed radar; its error replaces it.

        Returns:
            Whether a new radar is now displayed.
        """
        if generation != self._generation:
            _LOGGER.info("radar_build_superseded", generation=generation, latest=self._generation)
            return False
        if not isinstance(outcome, RadarBuildResult):
            self._current = None
            return False
        self._current = outcome
        return True
