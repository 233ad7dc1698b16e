from domain.schemas import SchemaType
from domain.taxonomy import PENDING_ID, localize, pending_review_type


def test_picks_first_names_for_language() -> None:
    t = localize(
        {
            "id": 7,
            "parent_id": 3,
            "scientific_names": ["Malus domestica", "Malus pumila"],
            "common_names": {"en": ["Apple", "Orchard apple"], "de": ["Apfel"]},
            "taxonomic_rank": 9,
            "urls": {"wikipedia": "https://en.wikipedia.org/wiki/Apple"},
        },
        "de",
    )
    assert t.id == 7
    assert t.parent_id == 3
    assert t.scientific_name == "Malus domestica"
    assert t.common_name == "Apfel"
    assert t.taxonomic_rank == 9
    assert t.urls == {"wikipedia": "https://en.wikipedia.org/wiki/Apple"}


def test_absent_fields_degrade_to_defaults() -> None:
    t = localize(SchemaType(id=1), "en")
    assert t.parent_id == 0
    assert t.scientific_name == ""
    assert t.common_name == ""
    assert t.taxonomic_rank == 0
    assert t.urls == {}


def test_pending_overrides_parent_id() -> None:
    t = localize({"id": 2, "parent_id": 5, "pending": True}, "en")
    assert t.parent_id == PENDING_ID


def test_falls_back_to_english_when_no_other_name() -> None:
    t = localize({"id": 2, "common_names": {"en": ["Fig"]}}, "fr")
    assert t.common_name == "Fig"


def test_fallback_is_empty_when_english_is_missing_too() -> None:
    t = localize({"id": 2, "common_names": {"de": ["Feige"]}}, "fr")
    assert t.common_name == ""


def test_no_fallback_when_scientific_name_exists() -> None:
    t = localize({"id": 2, "scientific_names": ["Ficus carica"], "common_names": {"en": ["Fig"]}}, "fr")
    assert t.scientific_name == "Ficus carica"
    assert t.common_name == ""


def test_fallback_language_is_configurable() -> None:
    t = localize({"id": 2, "common_names": {"es": ["Higo"]}}, "fr", fallback_language="es")
    assert t.common_name == "Higo"


def test_pending_review_type_is_root_level() -> None:
    t = pending_review_type()
    assert t.id == PENDING_ID
    assert t.parent_id == 0
    assert t.common_name == "Pending Review"
    assert t.taxonomic_rank == 0
