"""Renderer that writes finished radars as JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TextIO

from core.radar_types import Radar
from render.radar_payload import radar_to_payload


class JsonRadarRenderer:
    """Write each rendered radar to a file or text stream.

    Attributes:
        last_payload: Payload of the most recent render call.
    """

    def __init__(self, output_path: Path | None = None, stream: TextIO | None = None) -> None:
        self._output_path = output_path
        self._stream = stream
        self.last_payload: dict[str, object] | None = None

    def render(self, canvas_size_hint: int, radar: Radar) -> None:
        """Serialize the radar and write it to the configured target."""
        payload = radar_to_payload(radar, canvas_size_hint)
        self.last_payload = payload
        serialized = json.dumps(payload, indent=2, ensure_ascii=False)
        if self._output_path is not None:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(serialized + "\n", encoding="utf-8")
        if self._stream is not None:
            self._stream.write(serialized + "\n")
