"""Transcript policy and classification types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

SanitizeMode = Literal["full", "images-only"]
ToolCallIdMode = Literal["strict", "strict9"]

NativeKind = Literal["anthropic", "google", "openai", "other"]
ProxiedKind = Literal["claude", "gemini", "other"]

# (model_api, provider, model_id) -> bool, inputs already normalized to strings.
AntigravityDetector = Callable[[str, str, str], bool]


@dataclass(frozen=True)
class NativeFamily:
    """Backend reached through its own vendor endpoint."""

    kind: NativeKind
    type: Literal["native"] = "native"


@dataclass(frozen=True)
class ProxiedFamily:
    """Backend reached through an OpenAI-compatible relay."""

    kind: ProxiedKind
    type: Literal["proxied"] = "proxied"


ModelFamily = NativeFamily | ProxiedFamily


@dataclass(frozen=True)
class ProviderTraits:
    """Classification of one (model_api, provider, model_id) triple."""

    is_google: bool = False
    is_anthropic: bool = False
    is_openai: bool = False
    is_mistral: bool = False
    is_proxied_claude: bool = False
    is_proxied_gemini: bool = False
    is_openrouter_gemini: bool = False
    is_antigravity_claude: bool = False
    # Transport speaks an OpenAI-compatible schema (by API name or OpenAI provider).
    is_openai_transport: bool = False
    is_proxy_routed: bool = False

    @property
    def family(self) -> ModelFamily:
        if self.is_proxy_routed:
            if self.is_proxied_claude:
                return ProxiedFamily("claude")
            if self.is_proxied_gemini:
                return ProxiedFamily("gemini")
            return ProxiedFamily("other")
        if self.is_anthropic:
            return NativeFamily("anthropic")
        if self.is_google:
            return NativeFamily("google")
        if self.is_openai:
            return NativeFamily("openai")
        return NativeFamily("other")


@dataclass(frozen=True)
class ThoughtSignaturePolicy:
    """Normalization rule for thought-signature metadata."""

    allow_base64_only: bool = False
    include_camel_case: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            "allowBase64Only": self.allow_base64_only,
            "includeCamelCase": self.include_camel_case,
        }


@dataclass(frozen=True)
class TranscriptPolicy:
    """How a transcript must be sanitized, repaired and validated before sending."""

    sanitize_mode: SanitizeMode = "images-only"
    sanitize_tool_call_ids: bool = False
    tool_call_id_mode: ToolCallIdMode | None = None
    repair_tool_use_result_pairing: bool = False
    preserve_signatures: bool = False
    sanitize_thought_signatures: ThoughtSignaturePolicy | None = None
    normalize_antigravity_thinking_blocks: bool = False
    apply_google_turn_ordering: bool = False
    validate_gemini_turns: bool = False
    validate_anthropic_turns: bool = False
    allow_synthetic_tool_results: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Render the camelCase shape consumed by transcript sanitizers.

        Optional fields are omitted when unset.
        """
        payload: dict[str, Any] = {
            "sanitizeMode": self.sanitize_mode,
            "sanitizeToolCallIds": self.sanitize_tool_call_ids,
            "repairToolUseResultPairing": self.repair_tool_use_result_pairing,
            "preserveSignatures": self.preserve_signatures,
            "normalizeAntigravityThinkingBlocks": self.normalize_antigravity_thinking_blocks,
            "applyGoogleTurnOrdering": self.apply_google_turn_ordering,
            "validateGeminiTurns": self.validate_gemini_turns,
            "validateAnthropicTurns": self.validate_anthropic_turns,
            "allowSyntheticToolResults": self.allow_synthetic_tool_results,
        }
        if self.tool_call_id_mode is not None:
            payload["toolCallIdMode"] = self.tool_call_id_mode
        if self.sanitize_thought_signatures is not None:
            payload["sanitizeThoughtSignatures"] = self.sanitize_thought_signatures.to_dict()
        return payload
