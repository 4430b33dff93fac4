from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict

import yaml

from expense_tracker.ledger import ExpenseLedger
from expense_tracker.persistence import LedgerPersistence
from expense_tracker.storage import get_store

DEFAULT_CONFIG: Dict[str, object] = {
    "storage": "json",
    "storage_path": "expenses.json",
    "storage_key": "expenses",
    "currency_symbol": "$",
    "log_level": "INFO",
    "storage_backends": {
        "memory": "expense_tracker.storage.memory_store.MemoryStore",
        "json": "expense_tracker.storage.json_store.JsonFileStore",
        "sqlite": "expense_tracker.storage.sqlite_store.SqliteStore",
    },
}

CONFIG_ENV = "EXPENSE_LEDGER_CONFIG"
CONFIG_PATH = Path("config.yaml")

_ENV_OVERRIDES = {
    "EXPENSE_LEDGER_STORAGE": "storage",
    "EXPENSE_LEDGER_STORAGE_PATH": "storage_path",
    "EXPENSE_LEDGER_LOG_LEVEL": "log_level",
}


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def load_config(path: Path | str | None = None) -> Dict[str, object]:
    """Read the YAML config, fill in defaults and apply environment overrides.

    The file is *path* when given, else ``$EXPENSE_LEDGER_CONFIG``, else
    ``config.yaml`` in the working directory. A missing file is not an error.
    """
    target = Path(path or os.environ.get(CONFIG_ENV) or CONFIG_PATH)
    data: Dict[str, object] = {}
    if target.exists():
        with target.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {target} must contain a mapping")
    config = _merge_defaults(data, DEFAULT_CONFIG)
    for env_name, key in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            config[key] = value
    return config



def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def build_ledger(config: Dict[str, object]) -> ExpenseLedger:
    store_name = config["storage"]
    backends = config["storage_backends"]
    if store_name not in backends:  # type: ignore[operator]
        raise ValueError(
            f"Unknown storage backend {store_name!r}; choose from {', '.join(backends)}"  # type: ignore[arg-type]
        )
    store = get_store(store_name, config)
    persistence = LedgerPersistence(store, key=str(config["storage_key"]))
    return ExpenseLedger(persistence)
