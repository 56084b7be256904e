"""Merge a freshly fetched source model with the previously persisted record.

The reconciler is pure: given the same source, existing record and run date it
always produces the same :class:`CatalogRecord`. Which input wins is decided per
field by :class:`ReconcilePolicy`; see :mod:`.provenance`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from catalogsync.domain.model import (
    CatalogRecord,
    ExistingRecord,
    Limit,
    Modalities,
    Modality,
    format_date,
)

from .family import FamilyInferencer
from .provenance import ReconcilePolicy, resolve_value

if TYPE_CHECKING:
    from datetime import date

    from catalogsync.domain.model import Cost, ModalityList, SourceModel

_DEFAULT_MODALITIES: ModalityList = (Modality.TEXT,)


def _first_positive(*values: int | None) -> int | None:
    for value in values:
        if value is not None and value > 0:
            return value
    return None


def _without_reasoning_price(cost: Cost) -> Cost:
    extended = cost.context_over_200k
    if extended is not None and extended.reasoning is not None:
        extended = replace(extended, reasoning=None)
    return replace(cost, reasoning=None, context_over_200k=extended)


@dataclass(frozen=True, slots=True)
class Reconciler:
    policy: ReconcilePolicy = field(default_factory=ReconcilePolicy)
    family_inferencer: FamilyInferencer = field(default_factory=FamilyInferencer)

    def reconcile(
        self,
        source: SourceModel,
        existing: ExistingRecord | None,
        run_date: date,
    ) -> CatalogRecord:
        prior = existing or ExistingRecord(model_id=source.model_id)
        today = format_date(run_date)

        name = self._resolve("name", source.name, prior.name, source.model_id)
        reasoning = self._resolve_flag(
            "reasoning", source.reasoning, prior.reasoning, default=False
        )
        structured_output = self._resolve_flag(
            "structured_output", source.structured_output, prior.structured_output, default=False
        )
        cost = self._resolve("cost", source.pricing, prior.cost, None)
        if cost is not None and not reasoning:
            cost = _without_reasoning_price(cost)

        return CatalogRecord(
            model_id=source.model_id,
            name=name or source.model_id,
            family=self._resolve_family(source, prior, name),
            attachment=self._resolve_flag(
                "attachment", source.attachment, prior.attachment, default=False
            ),
            reasoning=reasoning,
            tool_call=self._resolve_flag(
                "tool_call", source.tool_call, prior.tool_call, default=False
            ),
            structured_output=True if structured_output else None,
            temperature=self._resolve_flag(
                "temperature", source.temperature, prior.temperature, default=True
            ),
            knowledge=self._resolve("knowledge", None, prior.knowledge, None),
            release_date=self._resolve(
                "release_date", source.release_date, prior.release_date, today
            )
            or today,
            last_updated=self._resolve("last_updated", None, prior.last_updated, today) or today,
            open_weights=self._resolve_flag(
                "open_weights", source.open_weights, prior.open_weights, default=False
            ),
            interleaved=self._resolve("interleaved", None, prior.interleaved, None),
            status=self._resolve("status", None, prior.status, None),
            cost=cost,
            limit=self._merge_limit(source, prior),
            modalities=self._merge_modalities(source, prior),
        )

    def _resolve[T](
        self,
        field_name: str,
        source: T | None,
        existing: T | None,
        default: T | None,
    ) -> T | None:
        return resolve_value(
            self.policy.rule_for(field_name),
            source=source,
            existing=existing,
            default=default,
        )

    def _resolve_flag(
        self,
        field_name: str,
        source: bool | None,
        existing: bool | None,
        *,
        default: bool,
    ) -> bool:
        value = self._resolve(field_name, source, existing, default)
        return default if value is None else value

    def _resolve_family(
        self, source: SourceModel, prior: ExistingRecord, name: str | None
    ) -> str | None:
        inferred = self.family_inferencer.infer(source.model_id, name)
        return self._resolve("family", inferred, prior.family, None)

    def _merge_limit(self, source: SourceModel, prior: ExistingRecord) -> Limit:
        context = _first_positive(source.context_limit, prior.limit.context)
        output = _first_positive(source.output_limit, prior.limit.output)
        if output is None:
            output = self.policy.default_output_limit

        # A smaller hand-set output cap survives a larger upstream proposal.
        existing_output = prior.limit.output
        if existing_output is not None and 0 < existing_output < output:
            output = existing_output

        return Limit(
            context=self.policy.default_context_limit if context is None else context,
            input=_first_positive(source.input_limit, prior.limit.input),
            output=output,
        )

    def _merge_modalities(self, source: SourceModel, prior: ExistingRecord) -> Modalities:
        input_modalities = self._resolve(
            "modalities", source.input_modalities, prior.modalities.input, _DEFAULT_MODALITIES
        )
        output_modalities = self._resolve(
            "modalities", source.output_modalities, prior.modalities.output, _DEFAULT_MODALITIES
        )
        merged_input = list(input_modalities or _DEFAULT_MODALITIES)
        for modality in prior.modalities.input or ():
            if modality in self.policy.sticky_input_modalities and modality not in merged_input:
                merged_input.append(modality)
        return Modalities(
            input=tuple(merged_input),
            output=tuple(output_modalities or _DEFAULT_MODALITIES),
        )
