"""Configuration package."""

from switchyard.config.settings import MODELS_FILE, CatalogSettings, load_settings

__all__ = [
    "MODELS_FILE",
    "CatalogSettings",
    "load_settings",
]
