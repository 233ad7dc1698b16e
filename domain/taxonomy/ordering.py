"""Canonical presentation order for localized types."""

from collections.abc import Iterable

from domain.schemas import LocalizedType


def display_order_key(t: LocalizedType) -> tuple[bool, str, int, str]:
    # unnamed types sort last
    return (not t.scientific_name, t.scientific_name, -t.taxonomic_rank, t.common_name)


def to_display_order(localized_types: Iterable[LocalizedType]) -> list[LocalizedType]:
    """Return a new list sorted into display order (stable for ties)."""
    return sorted(localized_types, key=display_order_key)
