"""Error hierarchy for switchyard."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from switchyard.catalog.types import ModelCatalogEntry


class SwitchyardError(Exception):
    """Base error for all switchyard errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class CatalogDiscoveryError(SwitchyardError):
    """Builtin model discovery failed part way through an aggregation.

    ``partial`` holds the entries collected before the failure so callers can
    still serve a degraded catalog.
    """

    def __init__(
        self,
        message: str,
        *,
        partial: Sequence[ModelCatalogEntry] = (),
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.partial: list[ModelCatalogEntry] = list(partial)


class ModelsDocumentError(SwitchyardError):
    """The custom-provider document could not be read or validated."""

    def __init__(self, message: str, *, path: Path, cause: BaseException | None = None) -> None:
        super().__init__(message, cause=cause)
        self.path = path
