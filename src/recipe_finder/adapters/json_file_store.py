"""Key-value store persisted to a local JSON file."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from recipe_finder.services.shopping_list import KeyValueStore

_logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores string slots in one JSON object file."""

    path: Path

    def get(self, key: str) -> str | None:
        """Return the slot value, or None when absent."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Write the slot value, replacing the file atomically."""
        slots = self._read()
        slots[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(slots), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            _logger.warning("Unreadable key-value file %s, starting empty", self.path)
            return {}
        return data if isinstance(data, dict) else {}
