"""Resolve raw schema types into language-specific records."""

from collections.abc import Mapping
from typing import Any

from domain.schemas import LocalizedType, SchemaType
from domain.taxonomy.constants import (
    FALLBACK_LANGUAGE,
    PENDING_ID,
    PENDING_REVIEW_NAME,
    ROOT_ID,
)


def as_schema_type(raw: SchemaType | Mapping[str, Any]) -> SchemaType:
    """Accept either a parsed SchemaType or a plain mapping from the API payload."""
    if isinstance(raw, SchemaType):
        return raw
    return SchemaType.model_validate(raw)


def _first(names: list[str] | None) -> str:
    if not names:
        return ""
    return names[0] or ""


def localize(
    schema_type: SchemaType | Mapping[str, Any],
    language: str,
    fallback_language: str = FALLBACK_LANGUAGE,
) -> LocalizedType:
    """
    Convert one raw schema type into a LocalizedType for `language`.

    Absent fields degrade to empty strings / zero; nothing here raises for
    missing data. When neither a scientific name nor a common name in
    `language` exists, the first common name in `fallback_language` is used.

    Examples:
        >>> localize({"id": 3, "common_names": {"en": ["Apple"]}}, "de").common_name
        'Apple'
        >>> localize({"id": 4, "parent_id": 2, "pending": True}, "en").parent_id
        -1

    Args:
        schema_type: Raw schema record (model or mapping)
        language: Language code used to pick the common name
        fallback_language: Language used when the record has no other name

    Returns:
        Frozen LocalizedType
    """
    t = as_schema_type(schema_type)
    common_names = t.common_names or {}

    scientific_name = _first(t.scientific_names)
    common_name = _first(common_names.get(language))
    if not scientific_name and not common_name:
        common_name = _first(common_names.get(fallback_language))

    return LocalizedType(
        id=t.id,
        parent_id=PENDING_ID if t.pending else (t.parent_id or ROOT_ID),
        scientific_name=scientific_name,
        common_name=common_name,
        taxonomic_rank=t.taxonomic_rank or 0,
        urls=t.urls or {},
    )


def pending_review_type() -> LocalizedType:
    """Synthetic root-level node under which pending types are listed."""
    return LocalizedType(
        id=PENDING_ID,
        parent_id=ROOT_ID,
        scientific_name="",
        common_name=PENDING_REVIEW_NAME,
        taxonomic_rank=0,
        urls={},
    )
