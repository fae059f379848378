"""Minimal stand-ins for ``requests`` sessions and responses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests


@dataclass
class FakeResponse:
    """Response with a status code and text body."""

    status_code: int = 200
    text: str = ""
    encoding: str | None = "utf-8"

    @property
    def content(self) -> bytes:
        return self.text.encode(self.encoding or "utf-8")

    def json(self) -> Any:
        return json.loads(self.text)


@dataclass
class FakeSession:
    """Session returning canned responses by URL prefix, in registration order."""

    responses: dict[str, FakeResponse] = field(default_factory=dict)
    error: requests.RequestException | None = None
    requests_made: list[dict[str, Any]] = field(default_factory=list)

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.requests_made.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        for prefix, response in self.responses.items():
            if url.startswith(prefix):
                return response
        return FakeResponse(status_code=404, text="not found")
