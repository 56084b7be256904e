"""Filesystem store: one TOML file per model under a provider's models directory."""

from __future__ import annotations

import tomllib
from logging import getLogger
from typing import TYPE_CHECKING, Final

import pydantic

from catalogsync.domain.ports.persistence import PersistedRecordParseError

from .schema import StoredModelDocument
from .serializer import serialize_record
from .translator import to_existing_record

if TYPE_CHECKING:
    from pathlib import Path

    from catalogsync.domain.model import CatalogRecord, ExistingRecord, ModelId

log = getLogger(__name__)

MODEL_FILE_SUFFIX: Final[str] = ".toml"


class TomlCatalogStore:
    """Records live at ``<models_dir>/<id segments>.toml``.

    ``openai/gpt-4o`` maps to ``<models_dir>/openai/gpt-4o.toml``. Suffixes inside
    ids (``gpt-5.1``) are part of the file stem, never replaced.
    """

    def __init__(self, models_dir: Path, *, provider_id: str) -> None:
        self.models_dir = models_dir
        self._provider_id = provider_id

    @property
    def provider_id(self) -> str:
        return self._provider_id

    def path_for(self, model_id: ModelId) -> Path:
        segments = model_id.split("/")
        if any(segment in ("", ".", "..") for segment in segments):
            raise ValueError(f"Invalid model id: {model_id!r}")
        *parents, stem = segments
        return self.models_dir.joinpath(*parents, f"{stem}{MODEL_FILE_SUFFIX}")

    def list_ids(self) -> set[ModelId]:
        if not self.models_dir.is_dir():
            return set()
        ids: set[ModelId] = set()
        for path in self.models_dir.rglob(f"*{MODEL_FILE_SUFFIX}"):
            if not path.is_file():
                continue
            relative = path.relative_to(self.models_dir).as_posix()
            ids.add(relative.removesuffix(MODEL_FILE_SUFFIX))
        return ids

    def load(self, model_id: ModelId) -> ExistingRecord | None:
        path = self.path_for(model_id)
        if not path.is_file():
            return None
        try:
            raw = tomllib.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            raise PersistedRecordParseError(
                f"Cannot read {path}: {exc}", model_id=model_id, path=path
            ) from exc
        try:
            document = StoredModelDocument.model_validate(raw)
        except pydantic.ValidationError as exc:
            raise PersistedRecordParseError(
                f"Invalid record in {path}: {exc}", model_id=model_id, path=path
            ) from exc
        return to_existing_record(document, model_id)

    def save(self, record: CatalogRecord) -> None:
        path = self.path_for(record.model_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize_record(record), encoding="utf-8")
        log.debug("Wrote %s", path)

    def delete(self, model_id: ModelId) -> None:
        path = self.path_for(model_id)
        if not path.is_file():
            return
        path.unlink()
        log.debug("Deleted %s", path)
        self._prune_empty_dirs(path.parent)

    def _prune_empty_dirs(self, directory: Path) -> None:
        while directory != self.models_dir and directory.is_relative_to(self.models_dir):
            if any(directory.iterdir()):
                return
            directory.rmdir()
            directory = directory.parent
