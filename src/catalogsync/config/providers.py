"""Provider profiles: endpoint, credentials and reconciliation rules per provider."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from catalogsync.domain.data_integration import ProviderRules
from catalogsync.domain.model import Modality, OrphanPolicy
from catalogsync.domain.reconciliation import (
    CrossReferenceRules,
    FieldProvenance,
    IncludeAllRule,
    InclusionRules,
    ReconcilePolicy,
)

from .env import optional_env_var, require_env_vars
from .errors import UnknownProviderError
from .http import DEFAULT_TIMEOUT_SECONDS, HttpSourceConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

VERCEL_MODELS_URL: Final[str] = "https://ai-gateway.vercel.sh/v1/models"
VENICE_MODELS_URL: Final[str] = "https://api.venice.ai/api/v1/models?type=text"
FRIENDLI_MODELS_URL: Final[str] = "https://api.friendli.ai/serverless/v1/models"
HELICONE_MODELS_URL: Final[str] = "https://jawn.helicone.ai/v1/public/model-registry/models"
CLOUDFLARE_MODELS_URL: Final[str] = (
    "https://gateway.ai.cloudflare.com/v1/{CLOUDFLARE_ACCOUNT_ID}/{CLOUDFLARE_GATEWAY_ID}"
    "/compat/models"
)
JIEKOU_MODELS_URL: Final[str] = "https://api.jiekou.ai/openai/models"


@dataclass(frozen=True, slots=True, kw_only=True)
class ProviderProfile:
    """Static description of one provider catalog.

    ``url`` may reference environment variables listed in ``url_env`` as
    ``{NAME}`` placeholders. ``token_env`` names the bearer token variable.
    """

    rules: ProviderRules
    display_name: str
    url: str
    url_env: tuple[str, ...] = ()
    token_env: str | None = None
    token_required: bool = False
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def provider_id(self) -> str:
        return self.rules.provider_id

    def http_config(self) -> HttpSourceConfig:
        required = list(self.url_env)
        if self.token_env and self.token_required:
            required.append(self.token_env)
        values = require_env_vars(required)
        token = optional_env_var(self.token_env) if self.token_env else None
        url = self.url.format(**{name: values[name] for name in self.url_env})
        return HttpSourceConfig(
            name=self.provider_id,
            url=url,
            timeout_seconds=self.timeout_seconds,
            bearer_token=token,
        )


# Capability flags curated by hand; the upstream payload is not authoritative.
_VERCEL_POLICY = ReconcilePolicy().with_rules(
    name=FieldProvenance.PRESERVE_IF_PRESENT,
    attachment=FieldProvenance.PRESERVE_IF_PRESENT,
    reasoning=FieldProvenance.PRESERVE_IF_PRESENT,
    tool_call=FieldProvenance.PRESERVE_IF_PRESENT,
    structured_output=FieldProvenance.PRESERVE_IF_PRESENT,
    open_weights=FieldProvenance.PRESERVE_IF_PRESENT,
)

_CLOUDFLARE_WELL_KNOWN_MODELS: Final[tuple[str, ...]] = (
    "openai/gpt-5.2",
    "openai/gpt-5-2",
    "openai/gpt-5.1",
    "openai/gpt-5-1",
    "openai/gpt-5.1-codex",
    "openai/gpt-5-1-codex",
    "openai/gpt-4o",
    "openai/gpt-4o-mini",
    "openai/gpt-4-turbo",
    "openai/gpt-4",
    "openai/gpt-3.5-turbo",
    "openai/gpt-3-5-turbo",
    "openai/o1",
    "openai/o3",
    "openai/o3-mini",
    "openai/o3-pro",
    "openai/o4-mini",
    "anthropic/claude-sonnet-4-5",
    "anthropic/claude-opus-4-6",
    "anthropic/claude-opus-4-5",
    "anthropic/claude-haiku-4-5",
    "anthropic/claude-opus-4-1",
    "anthropic/claude-sonnet-4",
    "anthropic/claude-opus-4",
    "anthropic/claude-3.5-sonnet",
    "anthropic/claude-3-5-sonnet",
    "anthropic/claude-3.5-haiku",
    "anthropic/claude-3-5-haiku",
    "anthropic/claude-3-opus",
    "anthropic/claude-3-sonnet",
    "anthropic/claude-3-haiku",
)

# Gateway names (dots already normalized to hyphens) -> file names in the source provider.
_CLOUDFLARE_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "claude-sonnet-4": "claude-sonnet-4-0",
        "claude-opus-4": "claude-opus-4-0",
        "claude-3-5-sonnet": "claude-3-5-sonnet-20241022",
        "claude-3-5-haiku": "claude-3-5-haiku-latest",
        "claude-3-opus": "claude-3-opus-20240229",
        "claude-3-sonnet": "claude-3-sonnet-20240229",
        "claude-3-haiku": "claude-3-haiku-20240307",
        "gpt-5-1": "gpt-5.1",
        "gpt-5-2": "gpt-5.2",
        "gpt-5-1-codex": "gpt-5.1-codex",
        "gpt-3-5-turbo": "gpt-3.5-turbo",
    }
)

# Retired or duplicate listings that should never get a record.
_JIEKOU_SKIP_PATTERNS: Final[tuple[str, ...]] = (
    "google/gemma-*",
    "meta-llama/*",
    "mistralai/*",
    "openai/gpt-oss-*",
    "qwen/qwen-2.5-*",
    "qwen/qwen2.5-*",
    "qwen/qwen-mt-plus",
    "sao10k/*",
    "claude-3-*",
    "deepseek/deepseek-ocr-*",
    "doubao-*",
    "gemini-2.0*",
    "gpt-4*",
    "gpt-5.1-chat-latest",
    "gpt-5.2-chat-latest",
    "gpt-5",
    "grok-3-mini",
    "grok-3",
    "gryphe/*",
    "nova-2-lite",
    "o1-mini",
    "o1",
    "zai-org/glm-ocr",
)

PROVIDER_PROFILES: Final[Mapping[str, ProviderProfile]] = MappingProxyType(
    {
        "vercel": ProviderProfile(
            display_name="Vercel AI Gateway",
            url=VERCEL_MODELS_URL,
            rules=ProviderRules(provider_id="vercel", reconcile=_VERCEL_POLICY),
        ),
        "venice": ProviderProfile(
            display_name="Venice AI",
            url=VENICE_MODELS_URL,
            token_env="VENICE_API_KEY",
            rules=ProviderRules(
                provider_id="venice",
                reconcile=ReconcilePolicy(sticky_input_modalities=frozenset({Modality.PDF})),
            ),
        ),
        "friendli": ProviderProfile(
            display_name="FriendliAI",
            url=FRIENDLI_MODELS_URL,
            rules=ProviderRules(provider_id="friendli"),
        ),
        "helicone": ProviderProfile(
            display_name="Helicone",
            url=HELICONE_MODELS_URL,
            rules=ProviderRules(
                provider_id="helicone",
                reconcile=ReconcilePolicy(default_output_limit=4096),
                orphan_policy=OrphanPolicy.DELETE_IMMEDIATELY,
            ),
        ),
        "cloudflare-ai-gateway": ProviderProfile(
            display_name="Cloudflare AI Gateway",
            url=CLOUDFLARE_MODELS_URL,
            url_env=("CLOUDFLARE_ACCOUNT_ID", "CLOUDFLARE_GATEWAY_ID"),
            token_env="CLOUDFLARE_API_TOKEN",
            token_required=True,
            rules=ProviderRules(
                provider_id="cloudflare-ai-gateway",
                inclusion=InclusionRules(
                    skip_substrings=("aura-1", "whisper"),
                    skip_namespaces=("replicate/replicate-internal",),
                    include_all=(IncludeAllRule("workers-ai", required_segment="@cf"),),
                    allow_patterns=_CLOUDFLARE_WELL_KNOWN_MODELS,
                ),
                reconcile=ReconcilePolicy(
                    default_context_limit=128_000,
                    default_output_limit=16_384,
                ).with_rules(
                    attachment=FieldProvenance.PRESERVE_IF_PRESENT,
                    reasoning=FieldProvenance.PRESERVE_IF_PRESENT,
                    tool_call=FieldProvenance.PRESERVE_IF_PRESENT,
                    structured_output=FieldProvenance.PRESERVE_IF_PRESENT,
                ),
                orphan_policy=OrphanPolicy.DELETE_IMMEDIATELY,
                cross_reference=CrossReferenceRules(
                    providers=frozenset({"openai", "anthropic"}),
                    aliases=_CLOUDFLARE_ALIASES,
                ),
            ),
        ),
        "jiekou": ProviderProfile(
            display_name="Jiekou.AI",
            url=JIEKOU_MODELS_URL,
            rules=ProviderRules(
                provider_id="jiekou",
                inclusion=InclusionRules(
                    skip_patterns=_JIEKOU_SKIP_PATTERNS,
                    include_everything=True,
                ),
                create_only=True,
            ),
        ),
    }
)


def get_provider_profile(provider_id: str) -> ProviderProfile:
    profile = PROVIDER_PROFILES.get(provider_id)
    if profile is None:
        raise UnknownProviderError(provider_id, known=tuple(sorted(PROVIDER_PROFILES)))
    return profile
