"""Position and parent/child indices over an ordered list of localized types."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from domain.schemas import LocalizedType, TypeId


@dataclass(frozen=True)
class TypeIndex:
    """
    Read-only indices for one ordered sequence of types.

    - id_index: id -> position in the sequence (last duplicate wins)
    - children_by_id: parent id -> child ids, in sequence order
    """

    id_index: Mapping[TypeId, int]
    children_by_id: Mapping[TypeId, tuple[TypeId, ...]]


def build_index(localized_types: Iterable[LocalizedType]) -> TypeIndex:
    """
    Index `localized_types` in the order given; no sorting happens here.

    Parent ids are not validated: children of a missing parent are still
    grouped under that parent's id.
    """
    id_index: dict[TypeId, int] = {}
    children: dict[TypeId, list[TypeId]] = {}
    for position, t in enumerate(localized_types):
        id_index[t.id] = position
        children.setdefault(t.parent_id, []).append(t.id)

    return TypeIndex(
        id_index=MappingProxyType(id_index),
        children_by_id=MappingProxyType({k: tuple(v) for k, v in children.items()}),
    )
