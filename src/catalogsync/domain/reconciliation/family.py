"""Infer a coarse family tag from a model id and display name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalogsync.domain.model import KNOWN_FAMILIES

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


def is_subsequence(target: str, candidate: str) -> bool:
    """Return True when every character of ``candidate`` appears in ``target`` in order."""

    remaining = iter(target.lower())
    return all(char in remaining for char in candidate.lower())


def _contains(target: str, candidate: str) -> bool:
    return candidate.lower() in target.lower()


class FamilyInferencer:
    """Pick the most specific known family for a model.

    Candidates are tried longest first, so ``claude-opus`` wins over ``claude``.
    Matching runs in tiers: substring of the id, substring of the display name,
    subsequence of the id, subsequence of the display name. Every candidate is
    tried at one tier before moving to the next.
    """

    def __init__(self, candidates: Iterable[str] = KNOWN_FAMILIES) -> None:
        unique = dict.fromkeys(candidate for candidate in candidates if candidate)
        self.candidates: tuple[str, ...] = tuple(sorted(unique, key=len, reverse=True))

    def infer(self, model_id: str, display_name: str | None = None) -> str | None:
        tiers: tuple[tuple[Callable[[str, str], bool], str | None], ...] = (
            (_contains, model_id),
            (_contains, display_name),
            (is_subsequence, model_id),
            (is_subsequence, display_name),
        )
        for matcher, target in tiers:
            if not target:
                continue
            for candidate in self.candidates:
                if matcher(target, candidate):
                    return candidate
        return None
