"""Transcript policy resolution entrypoints."""

from __future__ import annotations

from loguru import logger

from switchyard.policy.classifier import classify
from switchyard.policy.composer import compose
from switchyard.policy.types import AntigravityDetector, TranscriptPolicy


def resolve_transcript_policy(
    model_api: str | None = None,
    provider: str | None = None,
    model_id: str | None = None,
    *,
    antigravity_detector: AntigravityDetector | None = None,
) -> TranscriptPolicy:
    """Resolve the transcript policy for one request. Never raises."""
    traits = classify(model_api, provider, model_id, antigravity_detector=antigravity_detector)
    policy = compose(traits)
    logger.debug(
        "policy.resolve api={} provider={} model={} family={}:{} sanitize={}",
        model_api or "<none>",
        provider or "<none>",
        model_id or "<none>",
        traits.family.type,
        traits.family.kind,
        policy.sanitize_mode,
    )
    return policy


class TranscriptPolicyResolver:
    """Policy resolver bound to one access-channel detector."""

    def __init__(self, antigravity_detector: AntigravityDetector | None = None) -> None:
        self._antigravity_detector = antigravity_detector

    def resolve(
        self,
        model_api: str | None = None,
        provider: str | None = None,
        model_id: str | None = None,
    ) -> TranscriptPolicy:
        return resolve_transcript_policy(
            model_api,
            provider,
            model_id,
            antigravity_detector=self._antigravity_detector,
        )
