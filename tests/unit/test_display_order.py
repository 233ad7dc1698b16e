from domain.schemas import LocalizedType
from domain.taxonomy import to_display_order


def _t(id_: int, sci: str = "", common: str = "", rank: int = 0) -> LocalizedType:
    return LocalizedType(id=id_, parent_id=0, scientific_name=sci, common_name=common, taxonomic_rank=rank)


def test_named_types_sort_before_unnamed() -> None:
    ordered = to_display_order([_t(1, common="Zzz"), _t(2, sci="Prunus"), _t(3, common="Aaa")])
    assert [t.id for t in ordered] == [2, 3, 1]


def test_ties_on_name_break_by_rank_descending_then_common_name() -> None:
    ordered = to_display_order(
        [
            _t(1, sci="Prunus", common="b", rank=5),
            _t(2, sci="Prunus", common="a", rank=5),
            _t(3, sci="Prunus", common="z", rank=8),
            _t(4, sci="Malus", rank=1),
        ]
    )
    assert [t.id for t in ordered] == [4, 3, 2, 1]


def test_returns_new_list() -> None:
    unsorted = [_t(2, sci="b"), _t(1, sci="a")]
    ordered = to_display_order(unsorted)
    assert [t.id for t in unsorted] == [2, 1]
    assert [t.id for t in ordered] == [1, 2]
