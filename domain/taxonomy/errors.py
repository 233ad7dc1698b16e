"""Taxonomy errors."""

from domain.schemas import TypeId


class TaxonomyCycleError(ValueError):
    """Raised when parent ids form a cycle, so descendant counts cannot be summed."""

    def __init__(self, path: list[TypeId]) -> None:
        self.path = list(path)
        chain = " -> ".join(str(i) for i in self.path)
        super().__init__(f"Cycle detected in parent ids: {chain}")
