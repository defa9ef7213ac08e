"""Constants for graviton."""

# History store defaults
DEFAULT_MAX_HISTORY_SIZE = 20
DEFAULT_REFRESH_INTERVAL_HOURS = 24

# Version 1, YAML format, .txt to make it easy to double click.
HISTORY_FILE_NAME = "history.1.yaml.txt"
CONFIG_FILE_NAME = "config.toml"

# Environment override for the cache directory
CACHE_DIR_ENV_VAR = "GRAVITON_CACHE_DIR"

# How long `graviton history record` waits for the background write (seconds)
FLUSH_TIMEOUT_SECONDS = 5
