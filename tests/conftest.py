from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def run_date() -> date:
    return date(2025, 2, 1)


@pytest.fixture(scope="session")
def load_payload() -> Callable[[str], object]:
    def _load(name: str) -> object:
        return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))

    return _load


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CATALOGSYNC_PROVIDERS_ROOT",
        "VENICE_API_KEY",
        "CLOUDFLARE_API_TOKEN",
        "CLOUDFLARE_ACCOUNT_ID",
        "CLOUDFLARE_GATEWAY_ID",
    ):
        monkeypatch.delenv(name, raising=False)
