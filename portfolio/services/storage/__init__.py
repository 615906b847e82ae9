from .key_value import FileKeyValueStorage, KeyValueStorage, MemoryKeyValueStorage
from .preference_store import DEFAULT_THEME_KEY, ThemePreferenceStore

__all__ = [
    "DEFAULT_THEME_KEY",
    "FileKeyValueStorage",
    "KeyValueStorage",
    "MemoryKeyValueStorage",
    "ThemePreferenceStore",
]
