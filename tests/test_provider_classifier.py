import pytest

from switchyard.policy import NativeFamily, ProxiedFamily, classify, normalize_provider_id
from switchyard.policy.classifier import (
    CLAUDE_MODEL_HINTS,
    MISTRAL_MODEL_HINTS,
    PROXY_PROVIDER_PREFIXES,
    is_antigravity_claude,
    is_proxy_provider,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("  OpenAI ", "openai"),
        ("Z.AI", "zai"),
        ("z-ai", "zai"),
        ("opencode-zen", "opencode"),
        ("qwen", "qwen-portal"),
        (None, ""),
        ("", ""),
    ],
)
def test_normalize_provider_id(raw, expected: str) -> None:
    assert normalize_provider_id(raw) == expected


@pytest.mark.parametrize("prefix", PROXY_PROVIDER_PREFIXES)
def test_proxy_detection_uses_prefix_match(prefix: str) -> None:
    assert is_proxy_provider(prefix)
    assert is_proxy_provider(f"{prefix}-eu")
    assert not is_proxy_provider(f"my-{prefix}")


@pytest.mark.parametrize("hint", MISTRAL_MODEL_HINTS)
def test_every_mistral_hint_matches_case_insensitively(hint: str) -> None:
    traits = classify("openai-completions", "together", f"{hint.upper()}-large")
    assert traits.is_mistral is True


@pytest.mark.parametrize("hint", CLAUDE_MODEL_HINTS)
def test_every_claude_hint_needs_a_proxy(hint: str) -> None:
    proxied = classify("openai-completions", "ollama", f"local-{hint}")
    direct = classify("openai-completions", "groq", f"local-{hint}")

    assert proxied.is_proxied_claude is True
    assert direct.is_proxied_claude is False


def test_proxied_flags_ignore_transport() -> None:
    traits = classify("anthropic-messages", "openrouter", "google/gemini-2.5-pro")

    assert traits.is_proxied_gemini is True
    assert traits.is_openrouter_gemini is True
    assert traits.is_anthropic is True


def test_openrouter_gemini_is_limited_to_two_relays() -> None:
    assert classify(None, "opencode", "gemini-2.5-pro").is_openrouter_gemini is True
    assert classify(None, "opencode-zen", "gemini-2.5-pro").is_openrouter_gemini is True
    assert classify(None, "wisdom-gate", "gemini-2.5-pro").is_openrouter_gemini is False
    assert classify(None, "wisdom-gate", "gemini-2.5-pro").is_proxied_gemini is True


def test_openai_provider_and_api_rules() -> None:
    assert classify("anthropic-messages", "openai-codex", "x").is_openai is True
    assert classify("openai-codex-responses", None, "x").is_openai is True
    assert classify("openai-completions", "groq", "llama").is_openai is False
    assert classify("openai-completions", "groq", "llama").is_openai_transport is True


def test_google_requires_native_transport_name() -> None:
    assert classify("google-gemini-cli", "google-gemini-cli", "gemini-2.5-pro").is_google is True
    assert classify("openai-completions", "google", "gemini-2.5-pro").is_google is False


def test_default_antigravity_detector() -> None:
    assert is_antigravity_claude("google-antigravity", "", "claude-opus-4-5-thinking") is True
    assert is_antigravity_claude("", "google-antigravity", "Claude-Sonnet-4-5") is True
    assert is_antigravity_claude("google-antigravity", "google-antigravity", "gemini-3-pro") is False
    assert is_antigravity_claude("anthropic-messages", "anthropic", "claude-opus-4-5") is False


@pytest.mark.parametrize(
    ("model_api", "provider", "model_id", "expected"),
    [
        ("anthropic-messages", "anthropic", "claude-opus-4-5", NativeFamily("anthropic")),
        ("google-generative-ai", "google", "gemini-2.5-flash", NativeFamily("google")),
        ("openai-completions", "openai", "gpt-4", NativeFamily("openai")),
        ("openai-completions", "groq", "llama-3", NativeFamily("other")),
        ("openai-completions", "wisdom-gate", "claude-opus-4-5", ProxiedFamily("claude")),
        ("openai-completions", "lmstudio", "gemini-2.5-flash", ProxiedFamily("gemini")),
        ("openai-completions", "ollama", "qwen3", ProxiedFamily("other")),
    ],
)
def test_family_variant(model_api: str, provider: str, model_id: str, expected) -> None:
    assert classify(model_api, provider, model_id).family == expected
