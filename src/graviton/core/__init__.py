"""Core logic for graviton.

- user_input: Parsing of what the user typed into flags and a package name
- history_codec: YAML encoding/decoding of the history file
- history_writer: Serial background persistence of history snapshots
- history_store: In-memory history with eviction, staleness and persistence
- cache_dir: OS-appropriate cache directory lookup
"""

from .cache_dir import get_app_cache_dir
from .history_codec import DecodedRecord, decode_history, encode_history
from .history_store import HistoryStore, create_history_store
from .history_writer import HistoryWriter, write_history_file
from .user_input import UserInput, parse_user_input

__all__ = [
    "DecodedRecord",
    "HistoryStore",
    "HistoryWriter",
    "UserInput",
    "create_history_store",
    "decode_history",
    "encode_history",
    "get_app_cache_dir",
    "parse_user_input",
    "write_history_file",
]
