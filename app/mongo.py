from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConfigurationError, PyMongoError
import certifi
import logging
from datetime import datetime
from functools import lru_cache
from typing import Optional

from .config import MONGO_URL, MONGO_DB_NAME, MONGO_COLLECTION_NAME

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_collection() -> Collection:
    if not MONGO_URL:
        raise ConfigurationError("MONGO_URL not found in environment variables")
    client = MongoClient(MONGO_URL, tlsCAFile=certifi.where())
    db = client[MONGO_DB_NAME]
    return db[MONGO_COLLECTION_NAME]


class MongoStorage:
    """
    Key/value storage scoped to one visitor, one document per key.
    Database errors are logged and treated as a missing value or a skipped
    write, so a search never fails because history could not be stored.
    """

    def __init__(self, owner: str, collection: Optional[Collection] = None):
        self.owner = owner
        self._collection = collection

    @property
    def collection(self) -> Collection:
        if self._collection is None:
            self._collection = get_collection()
        return self._collection

    def get_item(self, key: str) -> Optional[str]:
        try:
            doc = self.collection.find_one({"owner": self.owner, "key": key})
        except PyMongoError as e:
            logger.error(f"MongoDB read failed | owner: '{self.owner}' | key: '{key}' | {e!r}")
            return None
        return doc.get("value") if doc else None

    def set_item(self, key: str, value: str) -> None:
        try:
            self.collection.update_one(
                {"owner": self.owner, "key": key},
                {"$set": {"value": value, "updated_at": datetime.now()}},
                upsert=True,
            )
        except PyMongoError as e:
            logger.error(f"MongoDB write failed | owner: '{self.owner}' | key: '{key}' | {e!r}")

    def remove_item(self, key: str) -> None:
        try:
            self.collection.delete_one({"owner": self.owner, "key": key})
        except PyMongoError as e:
            logger.error(f"MongoDB delete failed | owner: '{self.owner}' | key: '{key}' | {e!r}")
