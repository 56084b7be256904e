"""Pydantic models describing the Cloudflare AI Gateway compat model list."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class CloudflareBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CloudflareModel(CloudflareBaseModel):
    """Costs are USD per token; ``created_at`` is a unix timestamp."""

    id: str
    cost_in: float = 0.0
    cost_out: float = 0.0
    created_at: int | None = None

    @field_validator("cost_in", "cost_out", mode="before")
    @classmethod
    def _null_cost(cls, value: object) -> object:
        return 0.0 if value is None else value


class CloudflareResponse(CloudflareBaseModel):
    data: list[CloudflareModel]
