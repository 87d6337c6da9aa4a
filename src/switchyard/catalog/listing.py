"""Catalog listing helpers used by model selection and listing UIs."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from urllib.parse import urlsplit

from loguru import logger

from switchyard.catalog.aggregator import ModelCatalogAggregator
from switchyard.catalog.document import ModelsDocument, read_models_document
from switchyard.catalog.registry import BuiltinModelRegistry, EnvAuthLookup
from switchyard.catalog.types import AuthLookup, ModelCatalogEntry
from switchyard.config.settings import CatalogSettings, load_settings
from switchyard.errors import CatalogDiscoveryError, ModelsDocumentError

LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "0.0.0.0", "::1"})  # noqa: S104


def model_key(provider: str, model_id: str) -> str:
    return f"{provider}/{model_id}".lower()


def is_local_base_url(base_url: str | None) -> bool:
    if not base_url:
        return False
    try:
        host = (urlsplit(base_url).hostname or "").lower()
    except ValueError:
        return False
    return host in LOCAL_HOSTS or host.endswith(".local")


@dataclass(frozen=True)
class ModelRegistrySnapshot:
    """Catalog entries plus the keys of those with credentials configured."""

    models: list[ModelCatalogEntry]
    available_keys: frozenset[str]

    def is_available(self, provider: str, model_id: str) -> bool:
        return model_key(provider, model_id) in self.available_keys


@dataclass(frozen=True)
class ModelRow:
    """One rendered row of a model listing."""

    key: str
    name: str
    input: str
    context_window: int | None
    local: bool | None
    available: bool | None
    tags: list[str] = field(default_factory=list)
    missing: bool = False


def _read_document_quietly(settings: CatalogSettings) -> ModelsDocument | None:
    path = settings.resolve_models_path()
    try:
        return read_models_document(path)
    except ModelsDocumentError as exc:
        logger.debug("catalog.listing.document_ignored path={} error={}", str(path), exc)
        return None


async def load_model_registry(
    settings: CatalogSettings | None = None,
    *,
    auth: AuthLookup | None = None,
) -> ModelRegistrySnapshot:
    """Aggregate the catalog uncached and work out which entries are usable.

    Without an explicit ``auth``, credentials come from the environment plus
    any inline ``apiKey`` declared for a custom provider.
    """
    resolved = settings or load_settings()
    if auth is None:
        document = await asyncio.to_thread(_read_document_quietly, resolved)
        auth = EnvAuthLookup(custom_keys=document.api_keys() if document else None)
    resolved_auth = auth

    aggregator = ModelCatalogAggregator(
        lambda: BuiltinModelRegistry(auth=resolved_auth),
        resolved.resolve_models_path(),
    )
    try:
        models = await aggregator.aggregate()
    except CatalogDiscoveryError as exc:
        logger.warning("catalog.listing.partial error={}", exc)
        models = exc.partial

    available_keys = frozenset(entry.key for entry in models if resolved_auth.has_auth(entry.provider))
    return ModelRegistrySnapshot(models=models, available_keys=available_keys)


def _merge_alias_tags(tags: Iterable[str], aliases: Sequence[str]) -> list[str]:
    merged = list(dict.fromkeys(tags))
    if not aliases:
        return merged
    merged = [tag for tag in merged if tag != "alias" and not tag.startswith("alias:")]
    alias_tag = f"alias:{','.join(aliases)}"
    if alias_tag not in merged:
        merged.append(alias_tag)
    return merged


def to_model_row(
    entry: ModelCatalogEntry | None,
    key: str,
    tags: Iterable[str] = (),
    *,
    aliases: Sequence[str] = (),
    available_keys: Iterable[str] | None = None,
    auth: AuthLookup | None = None,
) -> ModelRow:
    """Render one listing row; ``None`` produces a ``missing`` placeholder."""
    if entry is None:
        return ModelRow(
            key=key,
            name=key,
            input="-",
            context_window=None,
            local=None,
            available=None,
            tags=[*dict.fromkeys(tags), "missing"],
            missing=True,
        )

    if auth is not None:
        available = auth.has_auth(entry.provider)
    else:
        available = entry.key in set(available_keys or ())

    return ModelRow(
        key=key,
        name=entry.name or entry.id,
        input="+".join(entry.input or ()) or "text",
        context_window=entry.context_window,
        local=is_local_base_url(entry.base_url),
        available=available,
        tags=_merge_alias_tags(tags, aliases),
        missing=False,
    )
