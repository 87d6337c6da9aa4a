"""Model catalog types."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

InputKind = Literal["text", "image"]
INPUT_KINDS: tuple[InputKind, ...] = ("text", "image")


@dataclass(frozen=True)
class ModelCatalogEntry:
    """One selectable model. Identity is ``(provider, id)``, case-insensitive."""

    id: str
    name: str
    provider: str
    context_window: int | None = None
    reasoning: bool | None = None
    input: tuple[InputKind, ...] | None = None
    # Only set for custom providers declared with a base URL.
    base_url: str | None = field(default=None, compare=False)

    @property
    def key(self) -> str:
        return f"{self.provider}/{self.id}".lower()


@runtime_checkable
class ModelSource(Protocol):
    """Registry exposing the builtin vendor catalog."""

    def get_all(self) -> Sequence[object]: ...


class AuthLookup(Protocol):
    """Answers whether credentials are configured for a provider."""

    def has_auth(self, provider: str) -> bool: ...
