"""Catalog storage configuration helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

PROVIDERS_ROOT_ENV: Final[str] = "CATALOGSYNC_PROVIDERS_ROOT"
DEFAULT_PROVIDERS_DIRNAME: Final[str] = "providers"
MODELS_DIRNAME: Final[str] = "models"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    providers_root: Path

    def resolve_root(self) -> Path:
        return self.providers_root.expanduser().resolve()

    def provider_dir(self, provider_id: str) -> Path:
        return self.resolve_root() / provider_id

    def models_dir(self, provider_id: str) -> Path:
        return self.provider_dir(provider_id) / MODELS_DIRNAME


def get_storage_config(providers_root: Path | None = None) -> StorageConfig:
    """Explicit root wins, then ``CATALOGSYNC_PROVIDERS_ROOT``, then ``./providers``."""

    if providers_root is not None:
        return StorageConfig(providers_root=providers_root)
    env_root = os.getenv(PROVIDERS_ROOT_ENV)
    if env_root and env_root.strip():
        return StorageConfig(providers_root=Path(env_root.strip()))
    return StorageConfig(providers_root=Path.cwd() / DEFAULT_PROVIDERS_DIRNAME)
