"""Builtin model registry and credential lookup."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from switchyard.catalog._data import BUILTIN_MODELS
from switchyard.catalog.types import AuthLookup, ModelCatalogEntry

# Providers whose key does not follow the "<PROVIDER>_API_KEY" convention.
PROVIDER_ENV_VARS: dict[str, tuple[str, ...]] = {
    "anthropic": ("ANTHROPIC_OAUTH_TOKEN", "ANTHROPIC_API_KEY"),
    "google": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    "google-antigravity": ("ANTIGRAVITY_API_KEY",),
    "openai-codex": ("OPENAI_CODEX_API_KEY", "OPENAI_API_KEY"),
    "amazon-bedrock": ("AWS_BEARER_TOKEN_BEDROCK", "AWS_ACCESS_KEY_ID", "AWS_PROFILE"),
    "zai": ("ZAI_API_KEY", "Z_AI_API_KEY"),
}


def provider_env_var(provider: str) -> str:
    """Return the conventional API key env var for ``provider``."""
    return provider.strip().upper().replace("-", "_").replace(".", "_") + "_API_KEY"


class EnvAuthLookup:
    """Credential lookup backed by environment variables.

    ``custom_keys`` holds providers that declare an inline ``apiKey`` in
    the custom-provider document.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        custom_keys: Mapping[str, str] | None = None,
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self._custom_keys = {name.strip().lower(): key for name, key in (custom_keys or {}).items() if key}

    def resolve_env_var(self, provider: str) -> str | None:
        normalized = provider.strip().lower()
        candidates = PROVIDER_ENV_VARS.get(normalized, (provider_env_var(normalized),))
        for name in candidates:
            if self._environ.get(name):
                return name
        return None

    def has_auth(self, provider: str) -> bool:
        if not provider.strip():
            return False
        if provider.strip().lower() in self._custom_keys:
            return True
        return self.resolve_env_var(provider) is not None


class BuiltinModelRegistry:
    """In-process vendor catalog with an availability view."""

    def __init__(
        self,
        models: Iterable[ModelCatalogEntry] | None = None,
        auth: AuthLookup | None = None,
    ) -> None:
        self._models = list(BUILTIN_MODELS if models is None else models)
        self._auth = auth or EnvAuthLookup()

    def get_all(self) -> list[ModelCatalogEntry]:
        return list(self._models)

    def get_available(self) -> list[ModelCatalogEntry]:
        return [model for model in self._models if self._auth.has_auth(model.provider)]
