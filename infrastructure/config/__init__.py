"""
Configuration management: models, loading, and validation.

Handles:
- CatalogConfig: language, input files and view options
- YAML loading with environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_catalog_config
from infrastructure.config.models import CatalogConfig, CountsColumnsConfig

__all__ = [
    "CatalogConfig",
    "CountsColumnsConfig",
    "load_catalog_config",
]
