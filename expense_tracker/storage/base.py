# expense_tracker/storage/base.py
from abc import ABC, abstractmethod

class BaseStore(ABC):
    @abstractmethod
    def get(self, key):
        """Return the text stored under key, or None when it is absent."""
        pass

    @abstractmethod
    def set(self, key, value):
        """Store value under key, replacing whatever was there."""
        pass
