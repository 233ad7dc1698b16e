"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from domain.taxonomy.constants import FALLBACK_LANGUAGE
from infrastructure.constants import DATA_DIR, OUTPUT_ROOT


class CountsColumnsConfig(BaseModel):
    """Column names in the per-type counts table."""

    id_col: str = "type_id"
    count_col: str = "count"


class CatalogConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from catalog.yaml
    - Paths are resolved against data_dir by the loader
    - Consumed by the catalog builder and the CLI
    """

    language: str = Field(..., description="Language code used for common names (e.g. 'en', 'de').")
    fallback_language: str = Field(
        default=FALLBACK_LANGUAGE,
        description="Common-name language used when a type has no other name.",
    )

    data_dir: Path = Field(default_factory=lambda: DATA_DIR)
    output_dir: Path = Field(default_factory=lambda: OUTPUT_ROOT)

    types_file_path: Path = Field(..., description="JSON or YAML list of raw schema types.")
    counts_file_path: Path | None = Field(
        default=None,
        description="Optional CSV/Excel table of occurrence counts per type id.",
    )
    counts_columns: CountsColumnsConfig = Field(default_factory=CountsColumnsConfig)

    # View options
    only_allowed_parents: bool = Field(
        default=False,
        description="If true, drop leaf-only ranks and the Pending Review node.",
    )
    drop_zero_counts: bool = Field(
        default=False,
        description="If true, drop types whose aggregated count is zero. Requires counts_file.",
    )

    @model_validator(mode="after")
    def _validate(self) -> "CatalogConfig":
        self.language = str(self.language).strip()
        self.fallback_language = str(self.fallback_language).strip() or FALLBACK_LANGUAGE

        if not self.language:
            raise ValueError("language must be a non-empty language code")

        if self.drop_zero_counts and self.counts_file_path is None:
            raise ValueError("counts_file must be set when drop_zero_counts=True")

        if not self.counts_columns.id_col or not self.counts_columns.count_col:
            raise ValueError("counts_columns.id_col and counts_columns.count_col must be non-empty")

        return self
