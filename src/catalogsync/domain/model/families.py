"""Vocabulary of coarse model family tags used by the catalog."""

from __future__ import annotations

from typing import Final

KNOWN_FAMILIES: Final[tuple[str, ...]] = (
    "trinity",
    "trinity-mini",
    "gpt",
    "gpt-codex",
    "gpt-codex-spark",
    "gpt-codex-mini",
    "gpt-pro",
    "gpt-mini",
    "gpt-nano",
    "gpt-oss",
    "o",
    "o-mini",
    "o-pro",
    "claude",
    "claude-haiku",
    "claude-sonnet",
    "claude-opus",
    "gemini",
    "gemini-pro",
    "gemini-flash",
    "gemini-flash-lite",
    "gemini-embedding",
    "glm",
    "glmv",
    "glm-air",
    "glm-flash",
    "glm-free",
    "glm-z",
    "llama",
    "qwen",
    "deepseek",
    "deepseek-thinking",
    "phi",
    "kimi",
    "kimi-free",
    "kimi-thinking",
    "mistral",
    "mistral-large",
    "mistral-medium",
    "mistral-small",
    "mistral-nemo",
    "ministral",
    "codestral",
    "devstral",
    "pixtral",
    "mixtral",
    "grok",
    "grok-vision",
    "grok-beta",
    "gemma",
    "nova",
    "nova-pro",
    "nova-lite",
    "nova-micro",
    "command",
    "command-r",
    "command-a",
    "command-light",
    "jamba",
    "nemotron",
    "titan",
    "titan-embed",
    "minimax",
    "minimax-free",
    "hunyuan",
    "yi",
    "granite",
    "reka",
    "sonar",
    "sonar-pro",
    "sonar-reasoning",
    "sonar-deep-research",
    "solar",
    "solar-mini",
    "solar-pro",
    "exaone",
    "step",
    "text-embedding",
    "cohere-embed",
    "voyage",
    "mistral-embed",
    "bge",
    "plamo",
    "codestral-embed",
    "dall-e",
    "flux",
    "imagen",
    "recraft",
    "stable-diffusion",
    "ideogram",
    "dreamshaper",
    "sora",
    "veo",
    "runway",
    "dream-machine",
    "whisper",
    "elevenlabs",
    "lyria",
    "melotts",
    "ernie",
    "hermes",
    "zephyr",
    "openchat",
    "starling",
    "qvq",
    "sherlock",
    "pony",
    "mercury",
    "cogito",
    "mimo",
    "longcat",
    "magistral",
    "magistral-small",
    "magistral-medium",
    "phoenix",
    "lucid",
    "intellect",
    "aura",
    "jais",
    "sarvam",
    "falcon",
    "baichuan",
    "skywork",
    "bart",
    "distilbert",
    "resnet",
    "m2m",
    "indictrans",
    "llava",
    "seed",
    "ray",
    "tstars",
    "rnj",
    "ling",
    "ring",
    "kat-coder",
    "sqlcoder",
    "discolm",
    "osmosis",
    "parakeet",
    "nemoretriever",
    "nano-banana",
    "una-cybertron",
    "morph",
    "voxtral",
    "venice",
    "auto",
    "model-router",
    "v0",
    "tako",
    "mai",
    "rednote",
    "smart-turn",
    "qwerky",
    "big-pickle",
    "chutesai",
    "opengvlab",
    "tngtech",
    "topazlabs",
    "unsloth",
    "nousresearch",
    "alpha",
    "oswe",
    "neural-chat",
    "pangu",
    "liquid",
    "sourceful",
    "allenai",
    "palmyra",
)
