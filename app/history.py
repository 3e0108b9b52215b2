# app/history.py
import json
import logging
from typing import List

from .storage import KeyValueStorage

logger = logging.getLogger(__name__)

HISTORY_KEY = "techHubSearchHistory"
MAX_HISTORY = 5
CURRENT_LOCATION = "My Current Location"


def is_current_location(location: str) -> bool:
    return location.strip().lower() == CURRENT_LOCATION.lower()


class SearchHistory:
    """
    Recent search locations, most recent first.
    Entries are unique ignoring case, capped at MAX_HISTORY, and the
    current-location sentinel is never stored.
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage

    def load(self) -> List[str]:
        raw = self.storage.get_item(HISTORY_KEY)
        if not raw:
            return []
        try:
            items = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Failed to load search history: {e}")
            return []
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            logger.warning("Failed to load search history: stored value is not a list of strings")
            return []
        return items[:MAX_HISTORY]

    def record(self, location: str) -> List[str]:
        location = location.strip()
        if not location or is_current_location(location):
            return self.load()

        history = [location] + [item for item in self.load() if item.lower() != location.lower()]
        history = history[:MAX_HISTORY]
        self.storage.set_item(HISTORY_KEY, json.dumps(history))
        return history

    def clear(self) -> List[str]:
        self.storage.remove_item(HISTORY_KEY)
        return []
