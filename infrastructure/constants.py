from pathlib import Path

# Repo-root conventional directories/files (overrideable via catalog.yaml)
CONFIG_DIR = Path("configs")
CATALOG_FILE = CONFIG_DIR / "catalog.yaml"

DATA_DIR = Path("data")
OUTPUT_ROOT = Path("outputs")

# Environment override for the display language
LANGUAGE_ENV_VAR = "TYPES_LANGUAGE"
