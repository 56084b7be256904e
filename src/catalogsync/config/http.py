"""Configuration types for catalog HTTP clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True, frozen=True)
class HttpSourceConfig:
    """One catalog endpoint. No retries: a failed fetch aborts the run."""

    name: str
    url: str
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    bearer_token: str | None = None
    default_headers: Mapping[str, str] | None = None

    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.default_headers:
            headers.update(self.default_headers)
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
        return headers
