from dataclasses import dataclass
from typing import Any, Dict


DEFAULT_MAX_DEPTH = 2
DEFAULT_MAX_ENTRIES = 1000
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_LINE_LENGTH = 4096
DEFAULT_MAX_KEY_LENGTH = 128
DEFAULT_MAX_VALUE_LENGTH = 1024


@dataclass(frozen=True)
class LoaderConfig:
    # Locator
    max_depth: int = DEFAULT_MAX_DEPTH
    max_entries: int = DEFAULT_MAX_ENTRIES  # per directory level

    # Parser (all lengths in bytes)
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "LoaderConfig":
        allowed = set(LoaderConfig.__dataclass_fields__.keys())
        filtered = {k: int(v) for k, v in (data or {}).items() if k in allowed}
        return LoaderConfig(**filtered)


DEFAULT_CONFIG = LoaderConfig()
