"""Read/query facade over an indexed, display-ordered list of localized types."""

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, Protocol, TypeVar

from domain.schemas import LocalizedType, SchemaType, TypeId, TypeSelectMenuEntry
from domain.taxonomy.constants import FALLBACK_LANGUAGE, NON_PARENT_RANK, PENDING_ID
from domain.taxonomy.index import TypeIndex, build_index
from domain.taxonomy.localizer import as_schema_type, localize, pending_review_type
from domain.taxonomy.ordering import to_display_order

TypePredicate = Callable[[LocalizedType], bool]
V = TypeVar("V", bound="TypesView")


class TypesView(Protocol):
    """Read API shared by TypesAccess and TypesFrequency."""

    @property
    def localized_types(self) -> tuple[LocalizedType, ...]: ...

    def get_type(self, type_id: TypeId) -> LocalizedType | None: ...

    def get_common_name(self, type_id: TypeId) -> str: ...

    def get_scientific_name(self, type_id: TypeId) -> str: ...

    def get_children(self, type_id: TypeId) -> tuple[TypeId, ...]: ...

    def as_menu_entries(self) -> list[TypeSelectMenuEntry]: ...

    def get_menu_entry(self, type_id: TypeId) -> TypeSelectMenuEntry | None: ...

    def filter(self: V, predicate: TypePredicate) -> V: ...

    def only_allowed_parents(self: V) -> V: ...

    def add_type(self: V, new_type: SchemaType | Mapping[str, Any], language: str) -> V: ...


def format_label(scientific_name: str, common_name: str) -> str:
    """
    Build the dropdown label for a type.

    Examples:
        >>> format_label("Quercus alba", "White oak")
        'Quercus alba (White oak)'
        >>> format_label("", "Unknown")
        '"Unknown"'
    """
    if scientific_name and common_name:
        return f"{scientific_name} ({common_name})"
    if scientific_name:
        return scientific_name
    return f'"{common_name}"'


def to_menu_entry(t: LocalizedType) -> TypeSelectMenuEntry:
    return TypeSelectMenuEntry(
        value=t.id,
        label=format_label(t.scientific_name, t.common_name),
        common_name=t.common_name,
        scientific_name=t.scientific_name,
        taxonomic_rank=t.taxonomic_rank,
    )


def is_allowed_parent(t: LocalizedType) -> bool:
    return t.taxonomic_rank != NON_PARENT_RANK and t.id != PENDING_ID


class TypesAccess:
    """
    Immutable view over localized types in display order.

    Lookups by unknown id return None / "" rather than raising. Every
    transform (filter, add_type, ...) builds a new instance with fresh indices.
    """

    __slots__ = ("_types", "_index")

    def __init__(self, localized_types: Iterable[LocalizedType], index: TypeIndex | None = None) -> None:
        self._types: tuple[LocalizedType, ...] = tuple(localized_types)
        self._index = index if index is not None else build_index(self._types)

    def __repr__(self) -> str:
        return f"TypesAccess(n_types={len(self._types)})"

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[LocalizedType]:
        return iter(self._types)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._index.id_index

    @property
    def localized_types(self) -> tuple[LocalizedType, ...]:
        return self._types

    @property
    def id_index(self) -> Mapping[TypeId, int]:
        return self._index.id_index

    @property
    def children_by_id(self) -> Mapping[TypeId, tuple[TypeId, ...]]:
        return self._index.children_by_id

    def get_type(self, type_id: TypeId) -> LocalizedType | None:
        position = self._index.id_index.get(type_id)
        return None if position is None else self._types[position]

    def get_common_name(self, type_id: TypeId) -> str:
        t = self.get_type(type_id)
        return t.common_name if t else ""

    def get_scientific_name(self, type_id: TypeId) -> str:
        t = self.get_type(type_id)
        return t.scientific_name if t else ""

    def get_children(self, type_id: TypeId) -> tuple[TypeId, ...]:
        return self._index.children_by_id.get(type_id, ())

    def as_menu_entries(self) -> list[TypeSelectMenuEntry]:
        return [to_menu_entry(t) for t in self._types]

    def get_menu_entry(self, type_id: TypeId) -> TypeSelectMenuEntry | None:
        t = self.get_type(type_id)
        return to_menu_entry(t) if t else None

    def filter(self, predicate: TypePredicate) -> "TypesAccess":
        """
        Keep the types satisfying `predicate`, in their current order.

        Surviving children of a removed parent keep that parent id; nothing
        is re-parented or pruned.
        """
        return TypesAccess(t for t in self._types if predicate(t))

    def only_allowed_parents(self) -> "TypesAccess":
        """Drop leaf-only ranks and the Pending Review node."""
        return self.filter(is_allowed_parent)

    def add_type(
        self,
        new_type: SchemaType | Mapping[str, Any],
        language: str,
        fallback_language: str = FALLBACK_LANGUAGE,
    ) -> "TypesAccess":
        """Return a new view with `new_type` appended (not re-sorted)."""
        return create_types_access([*self._types, localize(new_type, language, fallback_language)])


def create_types_access(localized_types: Iterable[LocalizedType]) -> TypesAccess:
    return TypesAccess(localized_types)


def types_access_in_language(
    schema_types: Sequence[SchemaType | Mapping[str, Any]],
    language: str,
    fallback_language: str = FALLBACK_LANGUAGE,
) -> TypesAccess:
    """
    Localize, sort into display order and index a raw type list.

    A synthetic Pending Review node (id PENDING_ID) is added iff at least one
    raw type is pending.

    Args:
        schema_types: Raw schema records (models or mappings)
        language: Language code for common names
        fallback_language: Language used for types with no other name

    Returns:
        TypesAccess over the display-ordered types
    """
    parsed = [as_schema_type(t) for t in schema_types]
    localized = [localize(t, language, fallback_language) for t in parsed]
    if any(t.pending for t in parsed):
        localized.append(pending_review_type())
    return create_types_access(to_display_order(localized))
