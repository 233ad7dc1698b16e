"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for raw and localized types and menu entries
- taxonomy: Localized views, display ordering, indexing and aggregated counts
"""

from domain.schemas import LocalizedType, SchemaType, TypeSelectMenuEntry

__all__ = [
    "SchemaType",
    "LocalizedType",
    "TypeSelectMenuEntry",
]
