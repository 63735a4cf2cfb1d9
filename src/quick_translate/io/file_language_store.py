"""File-based language store persisting preferences as a JSON document."""

import json
import logging
from pathlib import Path
from typing import Optional

from quick_translate.io.language_store import LanguageStore

logger = logging.getLogger(__name__)


class FileLanguageStore(LanguageStore):
    """
    Stores language preferences in a small JSON file.

    Format:
    {
        "version": 1,
        "values": {
            "source-lang": "en",
            "target-lang": "fa"
        }
    }

    Values are cached in memory after the first read. An unreadable or
    malformed file is treated as empty and rewritten on the next set().
    """

    STORE_VERSION = 1

    def __init__(self, path: Path):
        self._path = Path(path)
        self._values: Optional[dict[str, str]] = None

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Store a value in memory and write the whole document to disk."""
        values = self._load()
        values[key] = value

        data = {"version": self.STORE_VERSION, "values": values}
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.error("Error writing language store %s: %s", self._path, e)

    def _load(self) -> dict[str, str]:
        if self._values is not None:
            return self._values

        self._values = {}
        if not self._path.exists():
            return self._values

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            values = data.get("values", {}) if isinstance(data, dict) else {}
            if isinstance(values, dict):
                self._values = {
                    key: value
                    for key, value in values.items()
                    if isinstance(key, str) and isinstance(value, str)
                }
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable language store %s: %s", self._path, e)

        return self._values
