"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure,
building the localized types views and writing them out for the UI.
"""

from application.catalog import build_catalog
from application.serialize import (
    frequency_table,
    menu_entries_as_records,
    write_frequency_table,
    write_menu_entries,
)

__all__ = [
    # Main workflow
    "build_catalog",
    # Serialization
    "menu_entries_as_records",
    "frequency_table",
    "write_menu_entries",
    "write_frequency_table",
]
