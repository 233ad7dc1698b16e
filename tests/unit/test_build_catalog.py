import pytest

from application import build_catalog, frequency_table, menu_entries_as_records
from domain.schemas import SchemaType
from domain.taxonomy import PENDING_ID, TypesAccess, TypesFrequency

SCHEMA_TYPES = [
    SchemaType(id=1, scientific_names=["Prunus"], common_names={"en": ["Plum"]}, taxonomic_rank=7),
    SchemaType(id=2, parent_id=1, scientific_names=["Prunus avium"], taxonomic_rank=9),
    SchemaType(id=3, parent_id=1, scientific_names=["Prunus persica"], taxonomic_rank=9),
    SchemaType(id=4, pending=True, common_names={"en": ["Mystery fruit"]}),
]


def test_without_counts_returns_access_view() -> None:
    view = build_catalog(SCHEMA_TYPES, "en")
    assert isinstance(view, TypesAccess)
    assert PENDING_ID in view
    assert menu_entries_as_records(view)[0] == {
        "value": 1,
        "label": "Prunus (Plum)",
        "common_name": "Plum",
        "scientific_name": "Prunus",
        "taxonomic_rank": 7,
    }


def test_with_counts_and_trimming() -> None:
    view = build_catalog(
        SCHEMA_TYPES,
        "en",
        counts_by_id={2: 4, 3: 0},
        only_allowed_parents=False,
        drop_zero_counts=True,
    )
    assert isinstance(view, TypesFrequency)
    assert [t.id for t in view] == [1, 2]
    assert view.get_aggregated_count(1) == 4


def test_only_allowed_parents() -> None:
    view = build_catalog(SCHEMA_TYPES, "en", only_allowed_parents=True)
    assert [t.id for t in view] == [1, 4]


def test_drop_zero_counts_needs_counts() -> None:
    with pytest.raises(ValueError):
        build_catalog(SCHEMA_TYPES, "en", drop_zero_counts=True)


def test_frequency_table_columns_and_rows() -> None:
    view = build_catalog(SCHEMA_TYPES, "en", counts_by_id={2: 4, 3: 1, 4: 2})
    df = frequency_table(view)
    assert list(df.columns) == ["id", "parent_id", "label", "count", "aggregated_count"]
    assert df["id"].tolist() == [1, 2, 3, 4, PENDING_ID]
    assert df.set_index("id").loc[PENDING_ID, "aggregated_count"] == 2
    assert df.set_index("id").loc[1, "aggregated_count"] == 5


def test_drop_zero_counts_uses_leaf_counts_before_parent_filter() -> None:
    schema_types = [
        SchemaType(id=1, scientific_names=["Prunus"], taxonomic_rank=7),
        SchemaType(id=2, parent_id=1, scientific_names=["Prunus avium"], taxonomic_rank=9),
        SchemaType(id=3, scientific_names=["Pyrus"], taxonomic_rank=7),
    ]
    view = build_catalog(
        schema_types,
        "en",
        counts_by_id={2: 4},
        only_allowed_parents=True,
        drop_zero_counts=True,
    )
    assert [t.id for t in view] == [1]
