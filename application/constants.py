"""Application-level constants."""

# Keys / column names for serialized frequency rows
ID_KEY = "id"
PARENT_ID_KEY = "parent_id"
LABEL_KEY = "label"
COUNT_KEY = "count"
AGGREGATED_COUNT_KEY = "aggregated_count"

# Output filenames
MENU_ENTRIES_FILENAME = "menu_entries.json"
FREQUENCY_TABLE_FILENAME = "type_frequencies.csv"
CONFIG_SNAPSHOT_FILENAME = "config.resolved.json"
SUMMARY_FILENAME = "summary.json"
LOG_FILENAME = "run.log"
