"""Device-local key/value storage backed by a JSON file."""

import json
from pathlib import Path
from typing import Any

CURRENT_USER_KEY = "avs_current_user"


class LocalStorage:
    """Flat string key/value store persisted as a JSON object."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            loaded = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            print(f"[Storage] Ignoring unreadable {self._path}: {e}")
            return {}
        if not isinstance(loaded, dict):
            print(f"[Storage] Ignoring {self._path}: expected a JSON object")
            return {}
        return loaded

    def _write(self, data: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
