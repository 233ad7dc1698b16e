"""Types view with per-type and aggregated occurrence counts."""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from domain.schemas import LocalizedType, SchemaType, TypeId, TypeSelectMenuEntry
from domain.taxonomy.access import TypePredicate, TypesAccess, is_allowed_parent
from domain.taxonomy.aggregation import calculate_aggregated_counts
from domain.taxonomy.constants import FALLBACK_LANGUAGE


class TypesFrequency:
    """
    A TypesAccess paired with raw counts per type id.

    Aggregated counts are computed once, at construction, over this view's own
    parent/child index. Transforms return new TypesFrequency instances.

    Raises:
        TaxonomyCycleError: On construction, if the parent ids form a cycle
    """

    __slots__ = ("_access", "_counts", "_aggregated")

    def __init__(self, access: TypesAccess, counts_by_id: Mapping[TypeId, int]) -> None:
        self._access = access
        self._counts: Mapping[TypeId, int] = MappingProxyType(dict(counts_by_id))
        self._aggregated: Mapping[TypeId, int] = MappingProxyType(
            calculate_aggregated_counts(access.children_by_id, self._counts)
        )

    def __repr__(self) -> str:
        return f"TypesFrequency(n_types={len(self._access)}, n_counted={len(self._counts)})"

    def __len__(self) -> int:
        return len(self._access)

    def __iter__(self) -> Iterator[LocalizedType]:
        return iter(self._access)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._access

    @property
    def access(self) -> TypesAccess:
        return self._access

    @property
    def localized_types(self) -> tuple[LocalizedType, ...]:
        return self._access.localized_types

    @property
    def id_index(self) -> Mapping[TypeId, int]:
        return self._access.id_index

    @property
    def children_by_id(self) -> Mapping[TypeId, tuple[TypeId, ...]]:
        return self._access.children_by_id

    @property
    def counts_by_id(self) -> Mapping[TypeId, int]:
        return self._counts

    @property
    def aggregated_counts_by_id(self) -> Mapping[TypeId, int]:
        return self._aggregated

    def get_type(self, type_id: TypeId) -> LocalizedType | None:
        return self._access.get_type(type_id)

    def get_common_name(self, type_id: TypeId) -> str:
        return self._access.get_common_name(type_id)

    def get_scientific_name(self, type_id: TypeId) -> str:
        return self._access.get_scientific_name(type_id)

    def get_children(self, type_id: TypeId) -> tuple[TypeId, ...]:
        return self._access.get_children(type_id)

    def as_menu_entries(self) -> list[TypeSelectMenuEntry]:
        return self._access.as_menu_entries()

    def get_menu_entry(self, type_id: TypeId) -> TypeSelectMenuEntry | None:
        return self._access.get_menu_entry(type_id)

    def get_count(self, type_id: TypeId) -> int:
        return self._counts.get(type_id) or 0

    def get_aggregated_count(self, type_id: TypeId) -> int:
        return self._aggregated.get(type_id) or 0

    def filter(self, predicate: TypePredicate) -> "TypesFrequency":
        """
        Keep the types satisfying `predicate` together with their raw counts.

        Aggregates are recomputed over the surviving types only, so counts of
        removed descendants no longer contribute.
        """
        filtered = self._access.filter(predicate)
        counts = {t.id: self._counts[t.id] for t in filtered if t.id in self._counts}
        return TypesFrequency(filtered, counts)

    def only_allowed_parents(self) -> "TypesFrequency":
        return self.filter(is_allowed_parent)

    def drop_zero_counts(self) -> "TypesFrequency":
        """Keep types whose aggregated count in this view is positive."""
        return self.filter(lambda t: self.get_aggregated_count(t.id) > 0)

    def add_type(
        self,
        new_type: SchemaType | Mapping[str, Any],
        language: str,
        fallback_language: str = FALLBACK_LANGUAGE,
    ) -> "TypesFrequency":
        return TypesFrequency(self._access.add_type(new_type, language, fallback_language), self._counts)


def create_types_frequency(types_access: TypesAccess, counts_by_id: Mapping[TypeId, int]) -> TypesFrequency:
    return TypesFrequency(types_access, counts_by_id)
