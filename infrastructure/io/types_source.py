"""Load raw schema types from a JSON or YAML export."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from domain.schemas import SchemaType
from infrastructure.io.fs import ensure_exists, read_text

logger = logging.getLogger(__name__)


def load_schema_types(path: Path) -> list[SchemaType]:
    """
    Read a list of raw types (the API's `/types` payload saved to disk).

    Accepts either a top-level list or a mapping with a `types` list.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unsupported or the payload is not a list
        pydantic.ValidationError: If a record does not match SchemaType
    """
    ensure_exists(path, "types file")

    suffix = path.suffix.lower()
    text = read_text(path)
    data: Any
    if suffix == ".json":
        data = json.loads(text)
    elif suffix in [".yaml", ".yml"]:
        data = yaml.safe_load(text)
    else:
        raise ValueError(f"Unsupported types file format: {suffix}. Supported formats: .json, .yaml, .yml")

    if isinstance(data, dict):
        data = data.get("types")
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of types in {path}, got {type(data)}")

    types = [SchemaType.model_validate(item) for item in data]
    logger.info("Loaded %d raw types from %s", len(types), path)
    return types
