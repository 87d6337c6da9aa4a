"""Compose a ``TranscriptPolicy`` from classification traits."""

from __future__ import annotations

from dataclasses import replace

from switchyard.policy.types import ProviderTraits, ThoughtSignaturePolicy, ToolCallIdMode, TranscriptPolicy

PROXY_THOUGHT_SIGNATURES = ThoughtSignaturePolicy(allow_base64_only=True, include_camel_case=True)


def is_native_openai(traits: ProviderTraits) -> bool:
    return traits.is_openai and not traits.is_proxied_claude and not traits.is_proxied_gemini


def compose(traits: ProviderTraits) -> TranscriptPolicy:
    """Apply the precedence rules to one trait set.

    Family-driven repairs follow the effective family (native or proxied),
    native turn-shape validation needs both the native family and a
    non-OpenAI transport, and native OpenAI zeroes everything at the end.
    """
    effective_anthropic = traits.is_anthropic or traits.is_proxied_claude
    effective_google = traits.is_google or traits.is_proxied_gemini
    native_transport = not traits.is_openai_transport

    sanitize_tool_call_ids = effective_google or traits.is_mistral
    tool_call_id_mode: ToolCallIdMode | None = None
    if traits.is_mistral:
        tool_call_id_mode = "strict9"
    elif sanitize_tool_call_ids:
        tool_call_id_mode = "strict"

    needs_full_sanitize = (
        effective_google or effective_anthropic or traits.is_mistral or traits.is_openrouter_gemini
    )
    thought_signatures = (
        PROXY_THOUGHT_SIGNATURES if traits.is_openrouter_gemini or traits.is_proxied_gemini else None
    )

    policy = TranscriptPolicy(
        sanitize_mode="full" if needs_full_sanitize else "images-only",
        sanitize_tool_call_ids=sanitize_tool_call_ids,
        tool_call_id_mode=tool_call_id_mode,
        repair_tool_use_result_pairing=effective_google or effective_anthropic,
        preserve_signatures=traits.is_antigravity_claude,
        sanitize_thought_signatures=thought_signatures,
        normalize_antigravity_thinking_blocks=traits.is_antigravity_claude,
        apply_google_turn_ordering=traits.is_google and native_transport,
        validate_gemini_turns=traits.is_google and native_transport,
        validate_anthropic_turns=traits.is_anthropic and native_transport,
        allow_synthetic_tool_results=effective_google or effective_anthropic,
    )

    if is_native_openai(traits):
        # Antigravity signature fields are never suppressed.
        policy = replace(
            policy,
            sanitize_mode="images-only",
            sanitize_tool_call_ids=False,
            tool_call_id_mode=None,
            repair_tool_use_result_pairing=False,
            sanitize_thought_signatures=None,
            apply_google_turn_ordering=False,
            validate_gemini_turns=False,
            validate_anthropic_turns=False,
            allow_synthetic_tool_results=False,
        )
    return policy
