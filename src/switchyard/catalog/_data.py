"""Builtin vendor model table.

Definition order is flagship first per provider; the aggregator re-sorts.
"""

from __future__ import annotations

from switchyard.catalog.types import ModelCatalogEntry

_TEXT = ("text",)
_TEXT_IMAGE = ("text", "image")

BUILTIN_MODELS: tuple[ModelCatalogEntry, ...] = (
    # Anthropic
    ModelCatalogEntry("claude-opus-4-5", "Claude Opus 4.5", "anthropic", 200_000, True, _TEXT_IMAGE),
    ModelCatalogEntry("claude-sonnet-4-5", "Claude Sonnet 4.5", "anthropic", 200_000, True, _TEXT_IMAGE),
    ModelCatalogEntry("claude-haiku-4-5", "Claude Haiku 4.5", "anthropic", 200_000, True, _TEXT_IMAGE),
    # OpenAI
    ModelCatalogEntry("gpt-5", "GPT-5", "openai", 400_000, True, _TEXT_IMAGE),
    ModelCatalogEntry("gpt-5-mini", "GPT-5 Mini", "openai", 400_000, True, _TEXT_IMAGE),
    ModelCatalogEntry("gpt-4.1", "GPT-4.1", "openai", 1_047_576, False, _TEXT_IMAGE),
    ModelCatalogEntry("gpt-4o", "GPT-4o", "openai", 128_000, False, _TEXT_IMAGE),
    ModelCatalogEntry("gpt-5-codex", "GPT-5 Codex", "openai-codex", 400_000, True, _TEXT_IMAGE),
    # Google
    ModelCatalogEntry("gemini-2.5-pro", "Gemini 2.5 Pro", "google", 1_048_576, True, _TEXT_IMAGE),
    ModelCatalogEntry("gemini-2.5-flash", "Gemini 2.5 Flash", "google", 1_048_576, True, _TEXT_IMAGE),
    ModelCatalogEntry("gemini-3-pro-preview", "Gemini 3 Pro Preview", "google", 1_048_576, True, _TEXT_IMAGE),
    ModelCatalogEntry(
        "claude-sonnet-4-5", "Claude Sonnet 4.5 (Antigravity)", "google-antigravity", 200_000, True, _TEXT_IMAGE
    ),
    # Mistral
    ModelCatalogEntry("mistral-large-latest", "Mistral Large", "mistral", 128_000, False, _TEXT),
    ModelCatalogEntry("codestral-latest", "Codestral", "mistral", 256_000, False, _TEXT),
    ModelCatalogEntry("pixtral-large-latest", "Pixtral Large", "mistral", 128_000, False, _TEXT_IMAGE),
    # OpenRouter
    ModelCatalogEntry(
        "anthropic/claude-sonnet-4.5", "Anthropic: Claude Sonnet 4.5", "openrouter", 1_000_000, True, _TEXT_IMAGE
    ),
    ModelCatalogEntry(
        "google/gemini-2.5-flash", "Google: Gemini 2.5 Flash", "openrouter", 1_048_576, True, _TEXT_IMAGE
    ),
    ModelCatalogEntry("openai/gpt-4o", "OpenAI: GPT-4o", "openrouter", 128_000, False, _TEXT_IMAGE),
    # xAI
    ModelCatalogEntry("grok-4", "Grok 4", "xai", 256_000, True, _TEXT_IMAGE),
)
