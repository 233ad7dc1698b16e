"""
CLI entrypoint for building localized type menus.

This script performs the following steps:
- loads .env (if present) and configs/catalog.yaml
- creates a per-run output folder under outputs/
- loads the raw type export and, optionally, the per-type counts table
- builds the display-ordered view (with aggregated counts when available)
- writes menu entries (JSON) and the frequency table (CSV)
- logs a short summary
"""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from application import build_catalog, write_frequency_table, write_menu_entries
from application.constants import (
    CONFIG_SNAPSHOT_FILENAME,
    FREQUENCY_TABLE_FILENAME,
    LOG_FILENAME,
    MENU_ENTRIES_FILENAME,
    SUMMARY_FILENAME,
)
from domain.taxonomy import PENDING_ID, TypesFrequency
from infrastructure.config import load_catalog_config
from infrastructure.constants import CATALOG_FILE
from infrastructure.io import ensure_exists, load_schema_types, read_counts
from infrastructure.observability import configure_logging, get_log_context, make_run_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build localized type menus and frequency tables")
    p.add_argument(
        "--config",
        type=str,
        default=str(CATALOG_FILE),
        help="Path to catalog.yaml (default: configs/catalog.yaml)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file, loaded if it exists (default: .env)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args()


def main() -> None:
    args = _parse_args()

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    config_path = Path(args.config)
    ensure_exists(config_path, "catalog.yaml")
    cfg = load_catalog_config(config_path)

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = (
        f"{ts}_"
        f"{cfg.language}_"
        f"counts{int(cfg.counts_file_path is not None)}_"
        f"parents{int(cfg.only_allowed_parents)}_"
        f"nonzero{int(cfg.drop_zero_counts)}"
    )
    run_dir = cfg.output_dir / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id_full=run_id, language=cfg.language)

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    (run_dir / CONFIG_SNAPSHOT_FILENAME).write_text(
        json.dumps(cfg.model_dump(mode="json"), ensure_ascii=False, indent=2, default=str),
        encoding="utf-8",
    )

    schema_types = load_schema_types(cfg.types_file_path)

    counts_by_id = None
    if cfg.counts_file_path is not None:
        counts_by_id = read_counts(
            cfg.counts_file_path,
            id_col=cfg.counts_columns.id_col,
            count_col=cfg.counts_columns.count_col,
        )

    view = build_catalog(
        schema_types,
        cfg.language,
        counts_by_id=counts_by_id,
        fallback_language=cfg.fallback_language,
        only_allowed_parents=cfg.only_allowed_parents,
        drop_zero_counts=cfg.drop_zero_counts,
    )

    menu_path = write_menu_entries(view, run_dir / MENU_ENTRIES_FILENAME)
    frequency_path = None
    if isinstance(view, TypesFrequency):
        frequency_path = write_frequency_table(view, run_dir / FREQUENCY_TABLE_FILENAME)

    summary = {
        **get_log_context(),
        "raw_types": len(schema_types),
        "entries": len(view),
        "has_pending_review": PENDING_ID in view,
        "menu_entries_file": str(menu_path),
        "frequency_table_file": str(frequency_path) if frequency_path else None,
    }
    (run_dir / SUMMARY_FILENAME).write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding="utf-8")

    logger.info("Entries: %d (from %d raw types)", summary["entries"], summary["raw_types"])
    logger.info("Detailed log: %s", log_path)


if __name__ == "__main__":
    main()
