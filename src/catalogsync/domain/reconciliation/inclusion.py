"""Decide whether a provider's model id belongs in the catalog at all.

Rules are evaluated in a fixed order and the first match wins:

1) skip substrings
2) skip namespaces
3) skip patterns
4) include-all providers (optionally requiring a second path segment)
5) allow patterns
6) fallback (excluded unless the rule set includes everything)

Skip rules come first so a broad allow pattern can never re-admit a model that
is unwanted everywhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from catalogsync.domain.model import ModelId


class InclusionStatus(StrEnum):
    INCLUDED = "included"
    EXCLUDED = "excluded"


class InclusionReason(StrEnum):
    SKIP_SUBSTRING = "skip_substring"
    SKIP_NAMESPACE = "skip_namespace"
    SKIP_PATTERN = "skip_pattern"
    INCLUDE_ALL = "include_all"
    MISSING_REQUIRED_SEGMENT = "missing_required_segment"
    ALLOW_PATTERN = "allow_pattern"
    INCLUDE_EVERYTHING = "include_everything"
    NO_MATCH = "no_match"


@dataclass(frozen=True, slots=True, kw_only=True)
class Included:
    reason: InclusionReason
    rule: str | None = None
    status: Literal[InclusionStatus.INCLUDED] = InclusionStatus.INCLUDED


@dataclass(frozen=True, slots=True, kw_only=True)
class Excluded:
    reason: InclusionReason
    rule: str | None = None
    status: Literal[InclusionStatus.EXCLUDED] = InclusionStatus.EXCLUDED


type InclusionDecision = Included | Excluded


@dataclass(frozen=True, slots=True)
class IncludeAllRule:
    """Admit every id under ``provider``, e.g. ``workers-ai/@cf/...``."""

    provider: str
    required_segment: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class InclusionRules:
    skip_substrings: tuple[str, ...] = ()
    skip_namespaces: tuple[str, ...] = ()
    skip_patterns: tuple[str, ...] = ()
    include_all: tuple[IncludeAllRule, ...] = ()
    allow_patterns: tuple[str, ...] = ()
    include_everything: bool = False


def matches_pattern(model_id: str, pattern: str) -> bool:
    """Match an id against one allow or skip pattern (both already lower-cased).

    ``x/*`` matches ids whose first segment is exactly ``x``; ``x*`` is a prefix
    match on the whole id or on its final segment; anything else must equal the
    whole id or its final segment.
    """

    final_segment = model_id.rsplit("/", 1)[-1]
    if pattern.endswith("/*"):
        return model_id.startswith(pattern[:-1])
    if pattern.endswith("*"):
        prefix = pattern[:-1]
        return model_id.startswith(prefix) or final_segment.startswith(prefix)
    return pattern in (model_id, final_segment)


class InclusionFilter:
    """Classify model ids against an immutable :class:`InclusionRules` set."""

    def __init__(self, rules: InclusionRules) -> None:
        self.rules = rules
        self._skip_substrings = tuple(value.lower() for value in rules.skip_substrings)
        self._skip_namespaces = tuple(value.lower().rstrip("/") for value in rules.skip_namespaces)
        self._skip_patterns = tuple(value.lower() for value in rules.skip_patterns)
        self._include_all = {rule.provider.lower(): rule for rule in rules.include_all}
        self._allow_patterns = tuple(value.lower() for value in rules.allow_patterns)

    def classify(self, model_id: ModelId) -> InclusionDecision:
        lowered = model_id.lower()

        for substring in self._skip_substrings:
            if substring in lowered:
                return Excluded(reason=InclusionReason.SKIP_SUBSTRING, rule=substring)

        for namespace in self._skip_namespaces:
            if lowered == namespace or lowered.startswith(f"{namespace}/"):
                return Excluded(reason=InclusionReason.SKIP_NAMESPACE, rule=namespace)

        for pattern in self._skip_patterns:
            if matches_pattern(lowered, pattern):
                return Excluded(reason=InclusionReason.SKIP_PATTERN, rule=pattern)

        leading = lowered.split("/", 1)[0]
        include_all = self._include_all.get(leading)
        if include_all is not None:
            required = include_all.required_segment
            if required is None:
                return Included(reason=InclusionReason.INCLUDE_ALL, rule=leading)
            required_prefix = f"{leading}/{required.lower()}/"
            if lowered.startswith(required_prefix):
                return Included(reason=InclusionReason.INCLUDE_ALL, rule=required_prefix)
            return Excluded(reason=InclusionReason.MISSING_REQUIRED_SEGMENT, rule=required_prefix)

        for pattern in self._allow_patterns:
            if matches_pattern(lowered, pattern):
                return Included(reason=InclusionReason.ALLOW_PATTERN, rule=pattern)

        if self.rules.include_everything:
            return Included(reason=InclusionReason.INCLUDE_EVERYTHING)
        return Excluded(reason=InclusionReason.NO_MATCH)

    def is_included(self, model_id: ModelId) -> bool:
        return isinstance(self.classify(model_id), Included)
