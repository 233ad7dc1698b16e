"""Aggregated (own + descendants) counts over a parent/child index."""

import logging
from collections.abc import Mapping, Sequence

from domain.schemas import TypeId
from domain.taxonomy.errors import TaxonomyCycleError

logger = logging.getLogger(__name__)


def calculate_aggregated_counts(
    children_by_id: Mapping[TypeId, Sequence[TypeId]],
    counts_by_id: Mapping[TypeId, int],
) -> dict[TypeId, int]:
    """
    Sum each node's own count with the aggregated counts of all its descendants.

    Every id that has children is a starting point; every id reachable from
    one of them gets an entry. Each total is computed once (post-order,
    memoized across starting points).

    Examples:
        >>> calculate_aggregated_counts({0: [1], 1: [2], 2: [3]}, {1: 1, 2: 2, 3: 3})
        {3: 3, 2: 5, 1: 6, 0: 6}

    Args:
        children_by_id: parent id -> child ids
        counts_by_id: raw count per id (missing ids count 0)

    Returns:
        Mapping id -> aggregated count

    Raises:
        TaxonomyCycleError: If the parent ids form a cycle
    """
    result: dict[TypeId, int] = {}

    for start in children_by_id:
        if start in result:
            continue

        # (id, children_done) frames; `path` mirrors the ids currently being expanded
        stack: list[tuple[TypeId, bool]] = [(start, False)]
        path: list[TypeId] = []
        on_path: set[TypeId] = set()

        while stack:
            type_id, children_done = stack.pop()
            children = children_by_id.get(type_id, ())

            if children_done:
                result[type_id] = (counts_by_id.get(type_id) or 0) + sum(result[c] for c in children)
                path.pop()
                on_path.discard(type_id)
                continue

            if type_id in result:
                continue

            path.append(type_id)
            on_path.add(type_id)
            stack.append((type_id, True))
            for child_id in reversed(children):
                if child_id in on_path:
                    raise TaxonomyCycleError(path[path.index(child_id) :] + [child_id])
                if child_id not in result:
                    stack.append((child_id, False))

    logger.debug("Aggregated counts for %d ids from %d parents", len(result), len(children_by_id))
    return result
