import pytest

from switchyard.policy import (
    ThoughtSignaturePolicy,
    TranscriptPolicy,
    TranscriptPolicyResolver,
    resolve_transcript_policy,
)

MINIMAL = TranscriptPolicy()


def test_native_openai_gets_minimal_policy() -> None:
    policy = resolve_transcript_policy("openai-completions", "openai", "gpt-4")

    assert policy.sanitize_mode == "images-only"
    assert policy.repair_tool_use_result_pairing is False
    assert policy.validate_anthropic_turns is False
    assert policy.validate_gemini_turns is False
    assert policy.allow_synthetic_tool_results is False
    assert policy == MINIMAL


def test_native_anthropic_policy() -> None:
    policy = resolve_transcript_policy("anthropic-messages", "anthropic", "claude-opus-4-5")

    assert policy.sanitize_mode == "full"
    assert policy.repair_tool_use_result_pairing is True
    assert policy.validate_anthropic_turns is True
    assert policy.allow_synthetic_tool_results is True
    assert policy.validate_gemini_turns is False
    assert policy.sanitize_tool_call_ids is False
    assert policy.tool_call_id_mode is None


def test_native_google_policy() -> None:
    policy = resolve_transcript_policy("google-generative-ai", "google", "gemini-2.5-flash")

    assert policy.sanitize_mode == "full"
    assert policy.repair_tool_use_result_pairing is True
    assert policy.validate_gemini_turns is True
    assert policy.apply_google_turn_ordering is True
    assert policy.allow_synthetic_tool_results is True
    assert policy.sanitize_tool_call_ids is True
    assert policy.tool_call_id_mode == "strict"
    # Native Google does not get the proxy thought-signature rule.
    assert policy.sanitize_thought_signatures is None


@pytest.mark.parametrize("model_id", ["claude-opus-4-5", "claude-sonnet-4-5", "claude-haiku-4-5-20251001"])
def test_proxied_claude_via_wisdom_gate(model_id: str) -> None:
    policy = resolve_transcript_policy("openai-completions", "wisdom-gate", model_id)

    assert policy.sanitize_mode == "full"
    assert policy.repair_tool_use_result_pairing is True
    assert policy.allow_synthetic_tool_results is True
    assert policy.validate_anthropic_turns is False
    assert policy.sanitize_tool_call_ids is False


@pytest.mark.parametrize("model_id", ["gemini-2.5-flash", "gemini-3-pro"])
def test_proxied_gemini_via_wisdom_gate(model_id: str) -> None:
    policy = resolve_transcript_policy("openai-completions", "wisdom-gate", model_id)

    assert policy.sanitize_mode == "full"
    assert policy.repair_tool_use_result_pairing is True
    assert policy.sanitize_tool_call_ids is True
    assert policy.tool_call_id_mode == "strict"
    assert policy.sanitize_thought_signatures == ThoughtSignaturePolicy(allow_base64_only=True, include_camel_case=True)
    assert policy.allow_synthetic_tool_results is True
    assert policy.validate_gemini_turns is False
    assert policy.apply_google_turn_ordering is False


@pytest.mark.parametrize("model_id", ["gpt-4", "deepseek-chat", ""])
def test_non_family_models_via_relay_are_minimal(model_id: str) -> None:
    policy = resolve_transcript_policy("openai-completions", "wisdom-gate", model_id)

    assert policy == MINIMAL


def test_relay_variant_suffix_is_still_a_proxy() -> None:
    policy = resolve_transcript_policy("openai-completions", "Wisdom-Gate-Claude ", "claude-opus-4-5")

    assert policy.sanitize_mode == "full"
    assert policy.repair_tool_use_result_pairing is True


def test_claude_via_openrouter() -> None:
    policy = resolve_transcript_policy("openai-completions", "openrouter", "anthropic/claude-opus-4-5")

    assert policy.sanitize_mode == "full"
    assert policy.repair_tool_use_result_pairing is True
    assert policy.allow_synthetic_tool_results is True
    assert policy.sanitize_thought_signatures is None


def test_gemini_via_openrouter_keeps_thought_signature_rule_without_turn_validation() -> None:
    policy = resolve_transcript_policy("openai-completions", "openrouter", "google/gemini-2.5-flash")

    assert policy.sanitize_mode == "full"
    assert policy.repair_tool_use_result_pairing is True
    assert policy.sanitize_thought_signatures is not None
    assert policy.sanitize_thought_signatures.to_dict() == {"allowBase64Only": True, "includeCamelCase": True}
    assert policy.validate_gemini_turns is False
    assert policy.apply_google_turn_ordering is False


def test_mistral_by_provider() -> None:
    policy = resolve_transcript_policy("openai-completions", "mistral", "codestral-latest")

    assert policy.sanitize_mode == "full"
    assert policy.sanitize_tool_call_ids is True
    assert policy.tool_call_id_mode == "strict9"


@pytest.mark.parametrize("provider", ["wisdom-gate", "together", "groq"])
def test_mistral_by_model_hint(provider: str) -> None:
    policy = resolve_transcript_policy("openai-completions", provider, "mistral-7b")

    assert policy.sanitize_tool_call_ids is True
    assert policy.tool_call_id_mode == "strict9"


def test_mistral_overrides_google_tool_call_mode() -> None:
    policy = resolve_transcript_policy("google-generative-ai", "google", "mixtral-on-vertex")

    assert policy.sanitize_tool_call_ids is True
    assert policy.tool_call_id_mode == "strict9"


def test_native_openai_suppression_clears_mistral_tool_call_mode() -> None:
    policy = resolve_transcript_policy("openai-completions", "openai", "mistral-finetune")

    assert policy.sanitize_tool_call_ids is False
    assert policy.tool_call_id_mode is None
    assert policy.sanitize_mode == "images-only"


def test_openai_api_without_provider_is_native_openai() -> None:
    policy = resolve_transcript_policy("openai-responses", None, "claude-opus-4-5")

    assert policy == MINIMAL


def test_anthropic_provider_over_openai_transport_skips_native_validation() -> None:
    # Turn-shape validation targets the native Messages transport. An Anthropic
    # provider reached over an OpenAI-shaped API gets the family repairs only.
    policy = resolve_transcript_policy("openai-completions", "anthropic", "claude-opus-4-5")

    assert policy.sanitize_mode == "full"
    assert policy.repair_tool_use_result_pairing is True
    assert policy.validate_anthropic_turns is False


def test_antigravity_claude_preserves_signatures() -> None:
    policy = resolve_transcript_policy("google-antigravity", "google-antigravity", "claude-sonnet-4-5")

    assert policy.preserve_signatures is True
    assert policy.normalize_antigravity_thinking_blocks is True
    assert policy.validate_gemini_turns is True


def test_antigravity_flags_survive_native_openai_suppression() -> None:
    policy = resolve_transcript_policy(
        "openai-completions",
        "openai",
        "gpt-4",
        antigravity_detector=lambda _api, _provider, _model: True,
    )

    assert policy.sanitize_mode == "images-only"
    assert policy.preserve_signatures is True
    assert policy.normalize_antigravity_thinking_blocks is True


def test_injected_detector_receives_normalized_inputs() -> None:
    seen: list[tuple[str, str, str]] = []

    def detector(model_api: str, provider: str, model_id: str) -> bool:
        seen.append((model_api, provider, model_id))
        return False

    resolver = TranscriptPolicyResolver(antigravity_detector=detector)
    policy = resolver.resolve(None, "  Google-Antigravity ", None)

    assert seen == [("", "google-antigravity", "")]
    assert policy.preserve_signatures is False


@pytest.mark.parametrize(
    ("model_api", "provider", "model_id"),
    [
        (None, None, None),
        ("", "", ""),
        ("unknown-api", "", "claude"),
        (None, "   ", "gemini"),
    ],
)
def test_unclassifiable_input_yields_minimal_policy(model_api, provider, model_id) -> None:
    assert resolve_transcript_policy(model_api, provider, model_id) == MINIMAL


@pytest.mark.parametrize(
    ("model_api", "provider", "model_id"),
    [
        ("openai-completions", "openai", "gpt-4"),
        ("anthropic-messages", "anthropic", "claude-opus-4-5"),
        ("google-generative-ai", "google", "gemini-2.5-flash"),
        ("openai-completions", "wisdom-gate", "gemini-2.5-flash"),
        ("openai-completions", "mistral", "codestral-latest"),
    ],
)
def test_resolution_is_deterministic(model_api: str, provider: str, model_id: str) -> None:
    first = resolve_transcript_policy(model_api, provider, model_id)
    resolve_transcript_policy("google-generative-ai", "google", "gemini-2.5-pro")
    second = resolve_transcript_policy(model_api, provider, model_id)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_to_dict_omits_unset_optional_fields() -> None:
    payload = resolve_transcript_policy("anthropic-messages", "anthropic", "claude-opus-4-5").to_dict()

    assert payload["sanitizeMode"] == "full"
    assert payload["validateAnthropicTurns"] is True
    assert "toolCallIdMode" not in payload
    assert "sanitizeThoughtSignatures" not in payload
