from __future__ import annotations

from pathlib import Path

import pytest  # noqa: TC002

from catalogsync.config import storage


def test_explicit_root_wins(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(storage.PROVIDERS_ROOT_ENV, str(tmp_path / "from-env"))

    config = storage.get_storage_config(tmp_path / "explicit")

    assert config.resolve_root() == (tmp_path / "explicit").resolve()


def test_env_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(storage.PROVIDERS_ROOT_ENV, f" {tmp_path / 'from-env'} ")

    config = storage.get_storage_config()

    assert config.models_dir("venice") == (tmp_path / "from-env" / "venice" / "models").resolve()


def test_default_root_is_under_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)

    config = storage.get_storage_config()

    assert config.provider_dir("helicone") == (tmp_path / "providers" / "helicone").resolve()
    assert Path.cwd().resolve() == tmp_path.resolve()
