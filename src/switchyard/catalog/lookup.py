"""Catalog lookup helpers."""

from __future__ import annotations

from collections.abc import Iterable

from switchyard.catalog.types import ModelCatalogEntry


def find_model_in_catalog(
    catalog: Iterable[ModelCatalogEntry],
    provider: str,
    model_id: str,
) -> ModelCatalogEntry | None:
    """Find a model by provider and id, case-insensitive exact match on both."""
    normalized_provider = provider.strip().lower()
    normalized_model_id = model_id.strip().lower()
    for entry in catalog:
        if entry.provider.lower() == normalized_provider and entry.id.lower() == normalized_model_id:
            return entry
    return None


def model_supports_vision(entry: ModelCatalogEntry | None) -> bool:
    """Check if a model accepts image input based on its catalog entry."""
    if entry is None or entry.input is None:
        return False
    return "image" in entry.input
