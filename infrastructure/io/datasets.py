"""Dataset loading utilities."""

import logging
from pathlib import Path

import pandas as pd

from domain.schemas import TypeId

logger = logging.getLogger(__name__)


def read_table(path: Path) -> pd.DataFrame:
    """
    Read tabular data file (Excel or CSV) based on file extension.

    Supported formats:
    - Excel: .xlsx (openpyxl)
    - CSV: .csv

    Args:
        path: Path to data file

    Returns:
        pandas DataFrame

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
        Exception: If file cannot be read (pandas exceptions)
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".xlsx":
        return pd.read_excel(path)
    elif suffix == ".csv":
        return pd.read_csv(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .xlsx, .csv")


def read_counts(path: Path, id_col: str, count_col: str) -> dict[TypeId, int]:
    """
    Read a per-type counts table into {type_id: count}.

    Rows with a missing id are skipped, missing counts read as 0, and repeated
    ids are summed.

    Raises:
        KeyError: If a configured column is not in the table
    """
    df = read_table(path)
    for col in (id_col, count_col):
        if col not in df.columns:
            raise KeyError(f"Configured column '{col}' not found in {path}: {list(df.columns)}")

    df = df[[id_col, count_col]].dropna(subset=[id_col]).copy()
    df[count_col] = df[count_col].fillna(0)
    totals = df.astype({id_col: "int64", count_col: "int64"}).groupby(id_col, sort=False)[count_col].sum()

    counts = {int(k): int(v) for k, v in totals.items()}
    logger.info("Loaded counts for %d types from %s", len(counts), path)
    return counts
