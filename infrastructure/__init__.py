"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Raw type exports and counts tables (JSON/YAML, CSV/Excel)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import CatalogConfig, load_catalog_config
from infrastructure.io import load_schema_types, read_counts

__all__ = [
    # Configuration
    "load_catalog_config",
    "CatalogConfig",
    # Inputs
    "load_schema_types",
    "read_counts",
]
