# expense_tracker/storage/json_store.py
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict

from expense_tracker.errors import StorageError
from expense_tracker.storage.base import BaseStore

logger = logging.getLogger(__name__)


class JsonFileStore(BaseStore):
    """
    Keeps every key in one JSON object on disk. Each write rewrites the whole
    file through a temp file so a crash never leaves it half written.
    """
    def __init__(self, config=None, path: str | Path | None = None):
        config = config or {}
        self.path = Path(path or config.get('storage_path', 'expenses.json'))

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding='utf-8')
        except OSError as exc:
            raise StorageError(f"Cannot read {self.path}: {exc}") from exc
        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError:
            logger.warning("Store file %s is not valid JSON; treating as empty", self.path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s does not hold an object; treating as empty", self.path)
            return {}
        return data

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fp:
                json.dump(data, fp, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self.path}: {exc}") from exc
