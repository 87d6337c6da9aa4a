"""Single-flight memoization for the model catalog.

State machine::

    empty --get()--> in-flight --non-empty--> cached
                          |
                          +--empty / failure / timeout--> empty

Concurrent callers share one in-flight resolution. Only a successful,
non-empty result is memoized; anything else is handed back to the callers
and the next ``get()`` starts over.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from loguru import logger

from switchyard.catalog.aggregator import ModelCatalogAggregator, build_catalog_aggregator
from switchyard.catalog.types import ModelCatalogEntry
from switchyard.config.settings import CatalogSettings, load_settings
from switchyard.errors import CatalogDiscoveryError

CatalogLoader = Callable[[], Awaitable[list[ModelCatalogEntry]]]


class ModelCatalogCache:
    """Injectable catalog memoization with the no-poison contract."""

    def __init__(
        self,
        loader: ModelCatalogAggregator | CatalogLoader,
        *,
        timeout: float | None = None,
    ) -> None:
        self._load: CatalogLoader = loader.aggregate if isinstance(loader, ModelCatalogAggregator) else loader
        self._timeout = timeout
        self._cached: list[ModelCatalogEntry] | None = None
        self._inflight: asyncio.Task[list[ModelCatalogEntry]] | None = None

    @property
    def cached(self) -> list[ModelCatalogEntry] | None:
        return list(self._cached) if self._cached is not None else None

    @property
    def in_flight(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    def invalidate(self) -> None:
        """Drop the cached catalog and detach any in-flight resolution."""
        self._cached = None
        self._inflight = None

    async def force_refresh(self) -> list[ModelCatalogEntry]:
        return await self.get(force_refresh=True)

    async def get(self, *, force_refresh: bool = False) -> list[ModelCatalogEntry]:
        if force_refresh:
            self.invalidate()
        if self._cached is not None:
            return list(self._cached)

        task = self._inflight
        if task is None or task.done() or task.get_loop() is not asyncio.get_running_loop():
            task = asyncio.create_task(self._resolve())
            self._inflight = task
            logger.debug("catalog.cache.resolve_start")
        # One waiter being cancelled must not cancel the shared resolution.
        entries = await asyncio.shield(task)
        return list(entries)

    async def _resolve(self) -> list[ModelCatalogEntry]:
        task = asyncio.current_task()
        cacheable = False
        try:
            if self._timeout is None:
                entries = await self._load()
            else:
                entries = await asyncio.wait_for(self._load(), timeout=self._timeout)
            cacheable = bool(entries)
            if not cacheable:
                logger.debug("catalog.cache.empty_result")
        except CatalogDiscoveryError as exc:
            self._log_failure(exc)
            entries = list(exc.partial)
        except TimeoutError:
            self._log_failure(f"timed out after {self._timeout}s")
            entries = []
        except Exception as exc:
            self._log_failure(exc)
            entries = []

        # A superseded resolution must not touch state owned by a newer one.
        if self._inflight is task:
            self._inflight = None
            if cacheable:
                self._cached = list(entries)
        return entries

    def _log_failure(self, error: object) -> None:
        global _failure_logged
        if _failure_logged:
            logger.debug("catalog.cache.load_failed error={}", error)
            return
        _failure_logged = True
        logger.warning("catalog.cache.load_failed error={}", error)


_default_cache: ModelCatalogCache | None = None
_default_settings: CatalogSettings | None = None
# Load failures warn once per process; later ones go to DEBUG.
_failure_logged = False


def build_model_catalog_cache(settings: CatalogSettings | None = None) -> ModelCatalogCache:
    resolved = settings or load_settings()
    return ModelCatalogCache(
        build_catalog_aggregator(resolved),
        timeout=resolved.catalog_timeout_seconds,
    )


def get_default_catalog_cache(settings: CatalogSettings | None = None) -> ModelCatalogCache:
    """Return the process-wide cache, creating it from settings on first use.

    Passing settings that differ from the ones the current cache was built
    from replaces it with a cache over the new configuration.
    """
    global _default_cache, _default_settings
    if _default_cache is None or (settings is not None and settings != _default_settings):
        resolved = settings or load_settings()
        _default_cache = build_model_catalog_cache(resolved)
        _default_settings = resolved
        logger.debug("catalog.cache.default_built models_path={}", str(resolved.resolve_models_path()))
    return _default_cache


def set_default_catalog_cache(cache: ModelCatalogCache | None, settings: CatalogSettings | None = None) -> None:
    global _default_cache, _default_settings
    _default_cache = cache
    _default_settings = settings if cache is not None else None


def reset_model_catalog_cache() -> None:
    """Drop the process-wide cache and re-arm the load-failure warning."""
    global _failure_logged
    set_default_catalog_cache(None)
    _failure_logged = False


async def load_model_catalog(
    settings: CatalogSettings | None = None,
    *,
    use_cache: bool = True,
) -> list[ModelCatalogEntry]:
    """Resolve the catalog through the process-wide cache. Never raises."""
    cache = get_default_catalog_cache(settings)
    return await cache.get(force_refresh=not use_cache)
