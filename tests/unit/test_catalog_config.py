from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config.loader import load_catalog_config
from infrastructure.config.models import CatalogConfig


def test_drop_zero_counts_requires_counts_file() -> None:
    with pytest.raises(ValidationError):
        CatalogConfig(
            language="en",
            types_file_path=Path("data/types.json"),
            drop_zero_counts=True,
        )


def test_language_is_stripped_and_required() -> None:
    cfg = CatalogConfig(language="  de ", types_file_path=Path("data/types.json"))
    assert cfg.language == "de"
    assert cfg.fallback_language == "en"

    with pytest.raises(ValidationError):
        CatalogConfig(language="   ", types_file_path=Path("data/types.json"))


def test_loader_resolves_paths_against_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TYPES_LANGUAGE", raising=False)
    cfg_path = tmp_path / "catalog.yaml"
    cfg_path.write_text(
        "language: fr\n"
        f"data_dir: {tmp_path.as_posix()}\n"
        "types_file: types.json\n"
        "counts_file: counts.csv\n"
        "count_id_col: type\n"
        "only_allowed_parents: true\n",
        encoding="utf-8",
    )

    cfg = load_catalog_config(cfg_path)

    assert cfg.language == "fr"
    assert cfg.types_file_path == tmp_path / "types.json"
    assert cfg.counts_file_path == tmp_path / "counts.csv"
    assert cfg.counts_columns.id_col == "type"
    assert cfg.counts_columns.count_col == "count"
    assert cfg.only_allowed_parents is True
    assert cfg.drop_zero_counts is False


def test_language_env_var_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TYPES_LANGUAGE", "pl")
    cfg_path = tmp_path / "catalog.yaml"
    cfg_path.write_text("language: en\ntypes_file: types.json\n", encoding="utf-8")

    assert load_catalog_config(cfg_path).language == "pl"


def test_missing_types_file_key_is_rejected(tmp_path: Path) -> None:
    cfg_path = tmp_path / "catalog.yaml"
    cfg_path.write_text("language: en\n", encoding="utf-8")
    with pytest.raises(ValueError, match="types_file"):
        load_catalog_config(cfg_path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_catalog_config(tmp_path / "nope.yaml")


def test_count_columns_are_read_from_top_level_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TYPES_LANGUAGE", raising=False)
    cfg_path = tmp_path / "catalog.yaml"
    cfg_path.write_text(
        "language: en\ntypes_file: types.json\ncount_id_col: tid\ncount_value_col: n\n",
        encoding="utf-8",
    )

    cfg = load_catalog_config(cfg_path)

    assert cfg.counts_columns.id_col == "tid"
    assert cfg.counts_columns.count_col == "n"


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    cfg_path = tmp_path / "catalog.yaml"
    cfg_path.write_text(
        "language: en\ntypes_file: types.json\ncounts_columns:\n  id_col: tid\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="counts_columns"):
        load_catalog_config(cfg_path)
