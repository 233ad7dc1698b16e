"""Build the localized types view the UI consumes."""

import logging
from collections.abc import Mapping, Sequence

from domain.schemas import SchemaType, TypeId
from domain.taxonomy import TypesAccess, TypesFrequency, create_types_frequency, types_access_in_language
from domain.taxonomy.constants import FALLBACK_LANGUAGE

logger = logging.getLogger(__name__)


def build_catalog(
    schema_types: Sequence[SchemaType],
    language: str,
    *,
    counts_by_id: Mapping[TypeId, int] | None = None,
    fallback_language: str = FALLBACK_LANGUAGE,
    only_allowed_parents: bool = False,
    drop_zero_counts: bool = False,
) -> TypesAccess | TypesFrequency:
    """
    Localize, order and index raw types; optionally attach counts and trim.

    Args:
        schema_types: Raw schema records
        language: Language code for common names
        counts_by_id: Optional raw occurrence counts per type id
        fallback_language: Language used for types with no other name
        only_allowed_parents: Drop leaf-only ranks and the Pending Review node
        drop_zero_counts: Drop types whose aggregated count is zero (needs counts)

    Returns:
        TypesFrequency if counts were given, else TypesAccess

    Raises:
        ValueError: If drop_zero_counts is requested without counts
        TaxonomyCycleError: If counts are given and parent ids form a cycle
    """
    if drop_zero_counts and counts_by_id is None:
        raise ValueError("drop_zero_counts requires counts_by_id")

    view: TypesAccess | TypesFrequency = types_access_in_language(schema_types, language, fallback_language)
    logger.info("Localized %d raw types into %d entries (language=%s)", len(schema_types), len(view), language)

    if counts_by_id is not None:
        view = create_types_frequency(view, counts_by_id)
        logger.info("Attached counts for %d type ids", len(counts_by_id))

    # Zero-count pruning reads the full tree's aggregates, before leaf ranks are removed
    if drop_zero_counts and isinstance(view, TypesFrequency):
        before = len(view)
        view = view.drop_zero_counts()
        logger.info("Dropped %d types with zero aggregated count", before - len(view))

    if only_allowed_parents:
        before = len(view)
        view = view.only_allowed_parents()
        logger.info("Kept %d/%d types that may act as parents", len(view), before)

    return view
