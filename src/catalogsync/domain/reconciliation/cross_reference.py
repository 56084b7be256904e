"""Reuse another provider's curated record for re-hosted models.

Gateways such as Cloudflare expose ``openai/gpt-4o`` alongside their own models.
For those ids the canonical record already maintained under the ``openai``
provider is copied verbatim instead of being reconstructed from the gateway's
sparse metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from catalogsync.domain.model import CatalogRecord, ModelId, ProviderId

log = getLogger(__name__)

type CanonicalLookup = Callable[[ProviderId, ModelId], CatalogRecord | None]
"""Return the complete canonical record for ``(provider, model id)`` or ``None``."""


@dataclass(frozen=True, slots=True, kw_only=True)
class CrossReferenceRules:
    providers: frozenset[ProviderId] = frozenset()
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def lookups_for(self, model_id: ModelId) -> tuple[tuple[ProviderId, ModelId], ...]:
        """Candidate canonical locations, most specific first; empty when not eligible."""

        provider, separator, model_name = model_id.partition("/")
        provider = provider.lower()
        if not separator or not model_name or provider not in self.providers:
            return ()
        normalized = model_name.replace(".", "-")
        mapped = self.aliases.get(normalized, normalized)
        lookups = [(provider, mapped)]
        if model_name != mapped:
            lookups.append((provider, model_name))
        return tuple(lookups)


def resolve_cross_reference(
    model_id: ModelId,
    *,
    rules: CrossReferenceRules,
    lookup: CanonicalLookup,
) -> CatalogRecord | None:
    """Return the canonical record re-keyed under ``model_id``, or ``None`` to fall back."""

    for provider, canonical_id in rules.lookups_for(model_id):
        record = lookup(provider, canonical_id)
        if record is None:
            continue
        log.debug("Cross-referenced %s to %s/%s", model_id, provider, canonical_id)
        return replace(record, model_id=model_id)
    return None
