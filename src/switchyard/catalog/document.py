"""Custom-provider document (``models.json``) schema and reader.

On disk the document is camelCase::

    {
      "providers": {
        "wisdom-gate": {
          "baseUrl": "https://relay.example/v1",
          "apiKey": "...",
          "models": [{"id": "claude-opus-4-5", "name": "Opus", "contextWindow": 200000}]
        }
      }
    }

Model items are kept as raw values; the aggregator picks the well-typed
fields out of each one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from switchyard.errors import ModelsDocumentError


class DocumentModel(BaseModel):
    """Base model for the custom-provider document."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )


class ProviderDocument(DocumentModel):
    """One declared custom provider."""

    base_url: str | None = None
    api_key: str | None = None
    api: str | None = None
    models: list[Any] | None = None


class ModelsDocument(DocumentModel):
    """Top-level custom-provider document."""

    providers: dict[str, ProviderDocument] | None = Field(default=None)

    def iter_providers(self) -> list[tuple[str, ProviderDocument]]:
        return list((self.providers or {}).items())

    def api_keys(self) -> dict[str, str]:
        return {name: provider.api_key for name, provider in self.iter_providers() if provider.api_key}


def read_models_document(path: Path) -> ModelsDocument | None:
    """Read and validate ``path``.

    Returns ``None`` when the file does not exist and raises
    ``ModelsDocumentError`` when it cannot be read or is malformed.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise ModelsDocumentError(f"failed to read {path}: {exc}", path=path, cause=exc) from exc

    try:
        return ModelsDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise ModelsDocumentError(
            f"invalid models document {path}: {exc.error_count()} error(s)", path=path, cause=exc
        ) from exc
