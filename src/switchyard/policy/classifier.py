"""Provider classification.

Maps raw ``(model_api, provider, model_id)`` identifiers to a ``ProviderTraits``
record. Everything here is pure: absent values are treated as empty strings
and simply fail to match.

The hint and prefix tables are plain ordered data so new relays or model
families can be added without touching the predicates.
"""

from __future__ import annotations

from switchyard.policy.types import AntigravityDetector, ProviderTraits

OPENAI_MODEL_APIS: frozenset[str] = frozenset(
    {
        "openai",
        "openai-completions",
        "openai-responses",
        "openai-codex-responses",
    }
)
OPENAI_PROVIDERS: frozenset[str] = frozenset({"openai", "openai-codex"})

ANTHROPIC_MODEL_API = "anthropic-messages"
ANTHROPIC_PROVIDER = "anthropic"

GOOGLE_MODEL_APIS: frozenset[str] = frozenset(
    {
        "google-generative-ai",
        "google-gemini-cli",
        "google-antigravity",
    }
)
ANTIGRAVITY_ID = "google-antigravity"

MISTRAL_PROVIDER = "mistral"
MISTRAL_MODEL_HINTS: tuple[str, ...] = (
    "mistral",
    "mixtral",
    "codestral",
    "pixtral",
    "devstral",
    "ministral",
    "mistralai",
)

# Claude and Gemini reached through OpenAI-compatible relays.
CLAUDE_MODEL_HINTS: tuple[str, ...] = ("claude", "anthropic", "opus", "sonnet", "haiku")
GEMINI_MODEL_HINTS: tuple[str, ...] = ("gemini",)

# Relays and local front-ends that forward to several model families.
# Matched by prefix: variants such as "wisdom-gate-claude" extend the base id.
PROXY_PROVIDER_PREFIXES: tuple[str, ...] = (
    "wisdom-gate",
    "openrouter",
    "opencode",
    "lmstudio",
    "ollama",
)

OPENROUTER_GEMINI_PROVIDERS: frozenset[str] = frozenset({"openrouter", "opencode"})

PROVIDER_ALIASES: dict[str, str] = {
    "z.ai": "zai",
    "z-ai": "zai",
    "opencode-zen": "opencode",
    "qwen": "qwen-portal",
}


def normalize_provider_id(provider: str | None) -> str:
    normalized = (provider or "").strip().lower()
    return PROVIDER_ALIASES.get(normalized, normalized)


def _contains_hint(model_id: str, hints: tuple[str, ...]) -> bool:
    if not model_id:
        return False
    lowered = model_id.lower()
    return any(hint in lowered for hint in hints)


def is_openai_api(model_api: str | None) -> bool:
    return bool(model_api) and model_api in OPENAI_MODEL_APIS


def is_openai_provider(provider: str | None) -> bool:
    return normalize_provider_id(provider) in OPENAI_PROVIDERS


def is_google_model_api(model_api: str | None) -> bool:
    return bool(model_api) and model_api in GOOGLE_MODEL_APIS


def is_anthropic_api(model_api: str | None, provider: str | None) -> bool:
    """Native Anthropic by transport name first, then by provider id.

    A provider-only match marks nativity without implying the transport.
    """
    if model_api == ANTHROPIC_MODEL_API:
        return True
    return normalize_provider_id(provider) == ANTHROPIC_PROVIDER


def is_proxy_provider(provider: str | None) -> bool:
    normalized = normalize_provider_id(provider)
    if not normalized:
        return False
    return any(normalized.startswith(prefix) for prefix in PROXY_PROVIDER_PREFIXES)


def is_mistral_model(provider: str | None, model_id: str | None) -> bool:
    if normalize_provider_id(provider) == MISTRAL_PROVIDER:
        return True
    return _contains_hint(model_id or "", MISTRAL_MODEL_HINTS)


def is_proxied_claude_model(provider: str | None, model_id: str | None) -> bool:
    if not is_proxy_provider(provider):
        return False
    return _contains_hint(model_id or "", CLAUDE_MODEL_HINTS)


def is_proxied_gemini_model(provider: str | None, model_id: str | None) -> bool:
    if not is_proxy_provider(provider):
        return False
    return _contains_hint(model_id or "", GEMINI_MODEL_HINTS)


def is_openrouter_gemini_model(provider: str | None, model_id: str | None) -> bool:
    if normalize_provider_id(provider) not in OPENROUTER_GEMINI_PROVIDERS:
        return False
    return "gemini" in (model_id or "").lower()


def is_antigravity_claude(model_api: str, provider: str, model_id: str) -> bool:
    """Default detector for Claude served through the Antigravity channel."""
    if model_api != ANTIGRAVITY_ID and provider != ANTIGRAVITY_ID:
        return False
    return "claude" in model_id.lower()


def classify(
    model_api: str | None,
    provider: str | None,
    model_id: str | None,
    *,
    antigravity_detector: AntigravityDetector | None = None,
) -> ProviderTraits:
    """Classify one request's identifiers. Total over its input domain."""
    api = (model_api or "").strip()
    normalized_provider = normalize_provider_id(provider)
    model = (model_id or "").strip()
    detector = antigravity_detector or is_antigravity_claude

    is_openai = normalized_provider in OPENAI_PROVIDERS or (not normalized_provider and is_openai_api(api))
    return ProviderTraits(
        is_google=is_google_model_api(api),
        is_anthropic=is_anthropic_api(api, normalized_provider),
        is_openai=is_openai,
        is_mistral=is_mistral_model(normalized_provider, model),
        is_proxied_claude=is_proxied_claude_model(normalized_provider, model),
        is_proxied_gemini=is_proxied_gemini_model(normalized_provider, model),
        is_openrouter_gemini=is_openrouter_gemini_model(normalized_provider, model),
        is_antigravity_claude=bool(detector(api, normalized_provider, model)),
        is_openai_transport=is_openai or is_openai_api(api),
        is_proxy_routed=is_proxy_provider(normalized_provider),
    )
