# expense_tracker/storage/memory_store.py
from expense_tracker.storage.base import BaseStore


class MemoryStore(BaseStore):
    """
    Dict-backed store. Lives only as long as the process; used for tests and
    throwaway sessions.
    """
    def __init__(self, config=None, data=None):
        self.data = dict(data or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
