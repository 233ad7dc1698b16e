"""Menu entry and frequency table serialization utilities."""

import json
import logging
from pathlib import Path

import pandas as pd

from application.constants import (
    AGGREGATED_COUNT_KEY,
    COUNT_KEY,
    ID_KEY,
    LABEL_KEY,
    PARENT_ID_KEY,
)
from domain.taxonomy import TypesAccess, TypesFrequency, format_label

logger = logging.getLogger(__name__)

FREQUENCY_COLUMNS = [ID_KEY, PARENT_ID_KEY, LABEL_KEY, COUNT_KEY, AGGREGATED_COUNT_KEY]


def menu_entries_as_records(view: TypesAccess | TypesFrequency) -> list[dict[str, object]]:
    """Menu entries in display order as JSON-ready dicts."""
    return [entry.model_dump(mode="json") for entry in view.as_menu_entries()]


def frequency_table(frequency: TypesFrequency) -> pd.DataFrame:
    """
    One row per type in display order with its raw and aggregated counts.

    Columns: id, parent_id, label, count, aggregated_count
    """
    rows: list[dict[str, object]] = [
        {
            ID_KEY: t.id,
            PARENT_ID_KEY: t.parent_id,
            LABEL_KEY: format_label(t.scientific_name, t.common_name),
            COUNT_KEY: frequency.get_count(t.id),
            AGGREGATED_COUNT_KEY: frequency.get_aggregated_count(t.id),
        }
        for t in frequency
    ]
    if not rows:
        return pd.DataFrame(columns=FREQUENCY_COLUMNS)
    return pd.DataFrame(rows, columns=FREQUENCY_COLUMNS)


def write_menu_entries(view: TypesAccess | TypesFrequency, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(menu_entries_as_records(view), f, ensure_ascii=False, indent=2)

    logger.info("Saved %d menu entries: %s", len(view), path)
    return path


def write_frequency_table(frequency: TypesFrequency, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    frequency_table(frequency).to_csv(path, index=False)

    logger.info("Saved frequency table: %s", path)
    return path
