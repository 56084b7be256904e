"""Reconciliation core: decide, merge and diff catalog records.

Flow per provider run:
1) filter source ids (:mod:`.inclusion`)
2) reuse cross-referenced canonical records where configured (:mod:`.cross_reference`)
3) merge source and existing records under provenance rules (:mod:`.merge`)
4) diff for reporting (:mod:`.changes`)
5) report records the source no longer lists (:mod:`.orphans`)
"""

from __future__ import annotations

from .changes import Change, diff, same_content
from .cross_reference import CanonicalLookup, CrossReferenceRules, resolve_cross_reference
from .family import FamilyInferencer
from .inclusion import (
    Excluded,
    IncludeAllRule,
    Included,
    InclusionDecision,
    InclusionFilter,
    InclusionReason,
    InclusionRules,
)
from .merge import Reconciler
from .orphans import find_orphans
from .provenance import DEFAULT_PROVENANCE, FieldProvenance, ReconcilePolicy

__all__ = [
    "DEFAULT_PROVENANCE",
    "CanonicalLookup",
    "Change",
    "CrossReferenceRules",
    "Excluded",
    "FamilyInferencer",
    "FieldProvenance",
    "IncludeAllRule",
    "Included",
    "InclusionDecision",
    "InclusionFilter",
    "InclusionReason",
    "InclusionRules",
    "ReconcilePolicy",
    "Reconciler",
    "diff",
    "find_orphans",
    "resolve_cross_reference",
    "same_content",
]
