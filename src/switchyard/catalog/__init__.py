"""Model catalog aggregation and caching.

The catalog is the builtin vendor registry merged with custom providers from
``models.json``, deduplicated by ``provider/id`` and sorted by provider then
name. ``ModelCatalogCache`` memoizes it single-flight and never caches an
empty or failed resolution.
"""

from switchyard.catalog.aggregator import (
    ModelCatalogAggregator,
    build_catalog_aggregator,
    build_entry,
    sort_catalog,
)
from switchyard.catalog.cache import (
    ModelCatalogCache,
    build_model_catalog_cache,
    get_default_catalog_cache,
    load_model_catalog,
    reset_model_catalog_cache,
    set_default_catalog_cache,
)
from switchyard.catalog.document import ModelsDocument, ProviderDocument, read_models_document
from switchyard.catalog.listing import (
    ModelRegistrySnapshot,
    ModelRow,
    is_local_base_url,
    load_model_registry,
    model_key,
    to_model_row,
)
from switchyard.catalog.lookup import find_model_in_catalog, model_supports_vision
from switchyard.catalog.registry import BuiltinModelRegistry, EnvAuthLookup
from switchyard.catalog.types import AuthLookup, InputKind, ModelCatalogEntry, ModelSource

__all__ = [
    "AuthLookup",
    "BuiltinModelRegistry",
    "EnvAuthLookup",
    "InputKind",
    "ModelCatalogAggregator",
    "ModelCatalogCache",
    "ModelCatalogEntry",
    "ModelRegistrySnapshot",
    "ModelRow",
    "ModelSource",
    "ModelsDocument",
    "ProviderDocument",
    "build_catalog_aggregator",
    "build_entry",
    "build_model_catalog_cache",
    "find_model_in_catalog",
    "get_default_catalog_cache",
    "is_local_base_url",
    "load_model_catalog",
    "load_model_registry",
    "model_key",
    "model_supports_vision",
    "read_models_document",
    "reset_model_catalog_cache",
    "set_default_catalog_cache",
    "sort_catalog",
    "to_model_row",
]
