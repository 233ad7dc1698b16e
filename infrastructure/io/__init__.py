"""I/O utilities: filesystem operations, type exports and counts tables."""

from infrastructure.io.datasets import read_counts, read_table
from infrastructure.io.fs import ensure_exists, read_text
from infrastructure.io.types_source import load_schema_types

__all__ = [
    "ensure_exists",
    "read_text",
    "read_table",
    "read_counts",
    "load_schema_types",
]
