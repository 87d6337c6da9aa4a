"""Application settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MODELS_FILE = "models.json"


class CatalogSettings(BaseSettings):
    """Model catalog settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SWITCHYARD_",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    home: str | None = Field(default=None)
    agent_dir: str | None = Field(default=None)
    models_file: str = Field(default=MODELS_FILE)
    catalog_timeout_seconds: float | None = Field(default=None, gt=0)

    def resolve_home(self) -> Path:
        if self.home:
            return Path(self.home).expanduser().resolve()
        return (Path.home() / ".switchyard").resolve()

    def resolve_agent_dir(self) -> Path:
        if self.agent_dir:
            return Path(self.agent_dir).expanduser().resolve()
        return self.resolve_home() / "agent"

    def resolve_models_path(self) -> Path:
        """Return the custom-provider document path.

        An absolute ``models_file`` is used as-is, a relative one lives in the agent dir.
        """
        models_file = Path(self.models_file).expanduser()
        if models_file.is_absolute():
            return models_file
        return self.resolve_agent_dir() / models_file


def load_settings(home: Path | None = None) -> CatalogSettings:
    """Load catalog settings with optional home override."""
    if home is None:
        return CatalogSettings()
    return CatalogSettings(home=str(home.expanduser().resolve()))
