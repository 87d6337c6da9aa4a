"""Model catalog aggregation.

Merges the builtin vendor registry with custom providers declared in
``models.json``. Sources are consulted in order: custom entries must see the
dedup keys of the builtin entries, and the builtin entry wins on conflict.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from switchyard.catalog.document import read_models_document
from switchyard.catalog.registry import BuiltinModelRegistry
from switchyard.catalog.types import INPUT_KINDS, AuthLookup, InputKind, ModelCatalogEntry, ModelSource
from switchyard.config.settings import CatalogSettings
from switchyard.errors import CatalogDiscoveryError, ModelsDocumentError

SourceResult = ModelSource | Iterable[Any]
SourceFactory = Callable[[], SourceResult | Awaitable[SourceResult]]


def _field(raw: object, name: str, alias: str | None = None) -> Any:
    if isinstance(raw, Mapping):
        if name in raw:
            return raw[name]
        return raw.get(alias) if alias else None
    return getattr(raw, name, None)


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _positive_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int) and value > 0:
        return value
    if isinstance(value, float) and value > 0 and value.is_integer():
        return int(value)
    return None


def _optional_bool(value: object) -> bool | None:
    return value if isinstance(value, bool) else None


def _input_kinds(value: object) -> tuple[InputKind, ...] | None:
    if not isinstance(value, list | tuple):
        return None
    kinds: list[InputKind] = []
    for item in value:
        if item in INPUT_KINDS and item not in kinds:
            kinds.append(item)
    return tuple(kinds)


def build_entry(
    raw: object,
    *,
    provider: str | None = None,
    base_url: str | None = None,
) -> ModelCatalogEntry | None:
    """Build an entry from a registry object or a document item.

    Returns ``None`` when the id (or provider) is missing. Optional fields
    are kept only when well-typed.
    """
    model_id = _text(_field(raw, "id"))
    if not model_id:
        return None
    resolved_provider = provider if provider is not None else _text(_field(raw, "provider"))
    if not resolved_provider:
        return None
    name = _text(_field(raw, "name")) or model_id
    return ModelCatalogEntry(
        id=model_id,
        name=name,
        provider=resolved_provider,
        context_window=_positive_int(_field(raw, "context_window", "contextWindow")),
        reasoning=_optional_bool(_field(raw, "reasoning")),
        input=_input_kinds(_field(raw, "input")),
        base_url=base_url or None,
    )


def catalog_sort_key(entry: ModelCatalogEntry) -> tuple[str, str, str, str, str]:
    """Provider then name, case-insensitive first with the raw text as tie-break."""
    return (
        entry.provider.casefold(),
        entry.provider,
        entry.name.casefold(),
        entry.name,
        entry.id.casefold(),
    )


def sort_catalog(entries: Iterable[ModelCatalogEntry]) -> list[ModelCatalogEntry]:
    return sorted(entries, key=catalog_sort_key)


class ModelCatalogAggregator:
    """Builds a fresh, sorted catalog on every call to ``aggregate``.

    ``source_factory`` is invoked per aggregation so a failed construction is
    retried by the next call. It may return a registry exposing ``get_all()``,
    a plain iterable of model records, or an awaitable of either.
    """

    def __init__(self, source_factory: SourceFactory, models_path: Path | None = None) -> None:
        self._source_factory = source_factory
        self._models_path = models_path

    @property
    def models_path(self) -> Path | None:
        return self._models_path

    async def aggregate(self) -> list[ModelCatalogEntry]:
        entries: list[ModelCatalogEntry] = []
        seen_keys: set[str] = set()
        try:
            await self._collect_builtin(entries, seen_keys)
        except Exception as exc:
            raise CatalogDiscoveryError(
                f"builtin model discovery failed: {exc}", partial=sort_catalog(entries), cause=exc
            ) from exc

        if self._models_path is not None:
            await self._collect_custom(entries, seen_keys, self._models_path)

        logger.debug("catalog.aggregate entries={}", len(entries))
        return sort_catalog(entries)

    async def _collect_builtin(self, entries: list[ModelCatalogEntry], seen_keys: set[str]) -> None:
        source = self._source_factory()
        if inspect.isawaitable(source):
            source = await source
        records = source.get_all() if isinstance(source, ModelSource) else source
        for raw in records:
            entry = build_entry(raw)
            if entry is None or entry.key in seen_keys:
                continue
            seen_keys.add(entry.key)
            entries.append(entry)

    async def _collect_custom(self, entries: list[ModelCatalogEntry], seen_keys: set[str], path: Path) -> None:
        try:
            document = await asyncio.to_thread(read_models_document, path)
        except ModelsDocumentError as exc:
            logger.debug("catalog.custom_providers.ignored path={} error={}", str(path), exc)
            return
        if document is None:
            return

        added = 0
        for provider_name, provider in document.iter_providers():
            for raw in provider.models or []:
                entry = build_entry(raw, provider=provider_name, base_url=provider.base_url)
                if entry is None or entry.key in seen_keys:
                    continue
                seen_keys.add(entry.key)
                entries.append(entry)
                added += 1
        logger.debug("catalog.custom_providers.merged path={} added={}", str(path), added)


def build_catalog_aggregator(
    settings: CatalogSettings,
    *,
    auth: AuthLookup | None = None,
) -> ModelCatalogAggregator:
    """Aggregator over the builtin registry and the configured ``models.json``."""
    return ModelCatalogAggregator(
        lambda: BuiltinModelRegistry(auth=auth),
        settings.resolve_models_path(),
    )
