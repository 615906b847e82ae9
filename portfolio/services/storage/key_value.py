"""Local key-value storage for user preferences."""

import json
from pathlib import Path
from typing import Any, Protocol

import yaml

from portfolio.core.errors import StorageError
from portfolio.utils.logger import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryKeyValueStorage:
    """Dict-backed storage that lives as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._items)


class FileKeyValueStorage:
    """Mapping persisted as a JSON or YAML document, chosen by file suffix.

    A missing file reads as empty. Unreadable files, parse errors and
    documents that aren't a mapping raise ``StorageError``.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    @property
    def is_yaml(self) -> bool:
        return self.path.suffix in YAML_SUFFIXES

    def get_item(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    def set_item(self, key: str, value: str) -> None:
        try:
            document = self._read()
        except StorageError as e:
            logger.warning(f"[STORAGE] Overwriting unreadable {self.path}: {e}")
            document = {}

        document[key] = value
        self._write(document)

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                if self.is_yaml:
                    document = yaml.safe_load(f)
                else:
                    document = json.load(f)
        except (FileNotFoundError, NotADirectoryError):
            return {}
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise StorageError(f"Failed to read {self.path}: {e}", path=self.path) from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise StorageError(
                f"Expected a mapping in {self.path}, got {type(document).__name__}", path=self.path
            )
        return document

    def _write(self, document: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                if self.is_yaml:
                    yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)
                else:
                    json.dump(document, f, indent=2, ensure_ascii=False)
        except (OSError, yaml.YAMLError, TypeError) as e:
            raise StorageError(f"Failed to write {self.path}: {e}", path=self.path) from e

        logger.debug(f"[STORAGE] Saved {len(document)} keys to {self.path}")
