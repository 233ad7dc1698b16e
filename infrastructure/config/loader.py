"""Configuration loading from YAML files."""

import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import CatalogConfig, CountsColumnsConfig
from infrastructure.constants import DATA_DIR, LANGUAGE_ENV_VAR, OUTPUT_ROOT

CATALOG_KEYS = frozenset(
    {
        "language",
        "fallback_language",
        "data_dir",
        "output_dir",
        "types_file",
        "counts_file",
        "count_id_col",
        "count_value_col",
        "only_allowed_parents",
        "drop_zero_counts",
    }
)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_catalog_config(catalog_path: Path) -> CatalogConfig:
    """
    Load catalog.yaml and construct a fully-resolved CatalogConfig.

    Conventions:
    - types_file and counts_file are relative to data_dir.
    - Keys outside CATALOG_KEYS are rejected, so typos do not silently fall back to defaults.
    - If the TYPES_LANGUAGE environment variable is set (e.g. via .env), it
      overrides the `language` key.

    Raises:
        FileNotFoundError: If catalog.yaml does not exist
        ValueError: If required keys are missing or have wrong types
    """
    exp = _load_yaml(catalog_path)

    unknown = sorted(set(exp) - CATALOG_KEYS)
    if unknown:
        raise ValueError(f"Unknown keys in {catalog_path}: {unknown}. Allowed: {sorted(CATALOG_KEYS)}")

    if "types_file" not in exp or not exp.get("types_file"):
        raise ValueError("catalog.yaml missing required key: types_file")

    language = os.getenv(LANGUAGE_ENV_VAR) or exp.get("language")
    if language is None:
        raise ValueError(f"catalog.yaml missing required key: language (or set {LANGUAGE_ENV_VAR})")

    data_dir = Path(exp.get("data_dir", str(DATA_DIR)))
    output_dir = Path(exp.get("output_dir", str(OUTPUT_ROOT)))

    counts_file = exp.get("counts_file")

    columns_kwargs: dict[str, Any] = {}
    if exp.get("count_id_col"):
        columns_kwargs["id_col"] = str(exp["count_id_col"])
    if exp.get("count_value_col"):
        columns_kwargs["count_col"] = str(exp["count_value_col"])

    cfg_kwargs: dict[str, Any] = {}
    if exp.get("fallback_language"):
        cfg_kwargs["fallback_language"] = str(exp["fallback_language"])

    return CatalogConfig(
        language=str(language),
        data_dir=data_dir,
        output_dir=output_dir,
        types_file_path=data_dir / str(exp["types_file"]),
        counts_file_path=(data_dir / str(counts_file)) if counts_file else None,
        counts_columns=CountsColumnsConfig(**columns_kwargs),
        only_allowed_parents=bool(exp.get("only_allowed_parents", False)),
        drop_zero_counts=bool(exp.get("drop_zero_counts", False)),
        **cfg_kwargs,
    )
