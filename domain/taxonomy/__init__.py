"""
Localized taxonomy views: localization, display order, indexing and counts.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.access import (
    TypesAccess,
    TypesView,
    create_types_access,
    format_label,
    to_menu_entry,
    types_access_in_language,
)
from domain.taxonomy.aggregation import calculate_aggregated_counts
from domain.taxonomy.constants import NON_PARENT_RANK, PENDING_ID, ROOT_ID
from domain.taxonomy.errors import TaxonomyCycleError
from domain.taxonomy.frequency import TypesFrequency, create_types_frequency
from domain.taxonomy.index import TypeIndex, build_index
from domain.taxonomy.localizer import localize, pending_review_type
from domain.taxonomy.ordering import to_display_order

__all__ = [
    # Views
    "TypesAccess",
    "TypesFrequency",
    "TypesView",
    "types_access_in_language",
    "create_types_access",
    "create_types_frequency",
    # Building blocks
    "localize",
    "pending_review_type",
    "to_display_order",
    "build_index",
    "TypeIndex",
    "calculate_aggregated_counts",
    "to_menu_entry",
    "format_label",
    # Constants / errors
    "PENDING_ID",
    "ROOT_ID",
    "NON_PARENT_RANK",
    "TaxonomyCycleError",
]
