"""Transcript policy resolution.

Turns ``(model_api, provider, model_id)`` into a declarative
``TranscriptPolicy`` describing how a conversation transcript must be
sanitized, repaired and validated for that backend:

    traits = classify(model_api, provider, model_id)
    policy = compose(traits)

``resolve_transcript_policy`` chains both steps.
"""

from switchyard.policy.classifier import classify, normalize_provider_id
from switchyard.policy.composer import compose, is_native_openai
from switchyard.policy.resolver import TranscriptPolicyResolver, resolve_transcript_policy
from switchyard.policy.types import (
    AntigravityDetector,
    ModelFamily,
    NativeFamily,
    ProviderTraits,
    ProxiedFamily,
    SanitizeMode,
    ThoughtSignaturePolicy,
    ToolCallIdMode,
    TranscriptPolicy,
)

__all__ = [
    "AntigravityDetector",
    "ModelFamily",
    "NativeFamily",
    "ProviderTraits",
    "ProxiedFamily",
    "SanitizeMode",
    "ThoughtSignaturePolicy",
    "ToolCallIdMode",
    "TranscriptPolicy",
    "TranscriptPolicyResolver",
    "classify",
    "compose",
    "is_native_openai",
    "normalize_provider_id",
    "resolve_transcript_policy",
]
