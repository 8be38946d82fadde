"""
Persistence Service

Durable storage for per-day sessions and the global statistics record.

The engine talks to a PersistenceGateway, which maps domain objects onto a
plain key-value store (string keys, JSON-serializable values). Three stores
are provided: in-memory (tests), JSON files on disk (single-player default)
and MongoDB.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi
from pymongo.errors import PyMongoError

from ..exceptions import StorageError
from ..models.game import PuzzleSession
from ..models.stats import Statistics

SESSION_KEY_PREFIX = "lexi_game_state"
STATISTICS_KEY = "lexi_statistics"


def session_key(day_number: int) -> str:
    return f"{SESSION_KEY_PREFIX}_{day_number}"


class KeyValueStore:
    """Key-value store with atomic get/set per key."""

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Process-local store; values are JSON round-tripped so they behave like stored data."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        return None if raw is None else json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Value for '{key}' is not JSON-serializable: {e}", key) from e

    def clear(self) -> None:
        self._data.clear()


class JsonFileStore(KeyValueStore):
    """
    One JSON file per key under a data directory.

    Writes go to a temporary file that replaces the target, so a crash never
    leaves a half-written value behind.
    """

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Failed to read '{key}': {e}", key) from e

    def set(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Failed to write '{key}': {e}", key) from e

    def clear(self) -> None:
        try:
            for path in self.data_dir.glob("*.json"):
                path.unlink()
        except OSError as e:
            raise StorageError(f"Failed to clear {self.data_dir}: {e}") from e


class MongoStore(KeyValueStore):
    """
    MongoDB-backed store: one document {_id: key, value: ...} per key.

    Args:
        collection: pymongo collection holding the documents
    """

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def connect(cls, mongo_uri: str, db_name: str = "lexi", collection_name: str = "kv") -> "MongoStore":
        """Open a client for mongo_uri and check the connection."""
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        try:
            client.admin.command('ping')
        except PyMongoError as e:
            raise StorageError(f"MongoDB connection error: {e}") from e
        return cls(client[db_name][collection_name])

    def get(self, key: str) -> Optional[Any]:
        try:
            document = self.collection.find_one({"_id": key})
        except PyMongoError as e:
            raise StorageError(f"Failed to read '{key}': {e}", key) from e
        return None if document is None else document.get("value")

    def set(self, key: str, value: Any) -> None:
        try:
            self.collection.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)
        except PyMongoError as e:
            raise StorageError(f"Failed to write '{key}': {e}", key) from e

    def clear(self) -> None:
        try:
            self.collection.delete_many({})
        except PyMongoError as e:
            raise StorageError(f"Failed to clear store: {e}") from e


class PersistenceGateway:
    """Typed access to sessions and statistics on top of a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def get_session(self, day_number: int) -> Optional[PuzzleSession]:
        key = session_key(day_number)
        data = self.store.get(key)
        if data is None:
            return None
        try:
            return PuzzleSession.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Corrupt session record '{key}': {e}", key) from e

    def put_session(self, session: PuzzleSession) -> None:
        self.store.set(session_key(session.day_number), session.to_dict())

    def get_statistics(self) -> Optional[Statistics]:
        data = self.store.get(STATISTICS_KEY)
        if data is None:
            return None
        try:
            return Statistics.from_dict(data)
        except (AttributeError, TypeError, ValueError) as e:
            raise StorageError(f"Corrupt statistics record: {e}", STATISTICS_KEY) from e

    def put_statistics(self, stats: Statistics) -> None:
        self.store.set(STATISTICS_KEY, stats.to_dict())

    def clear(self) -> None:
        self.store.clear()


def create_store(config) -> KeyValueStore:
    """
    Build the store named by config.STORAGE_BACKEND.

    Args:
        config: Configuration class (see lexi.config.Config)

    Raises:
        ValueError: Unknown backend or missing MONGO_URI
    """
    backend = (config.STORAGE_BACKEND or "json").lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "json":
        return JsonFileStore(config.DATA_DIR)
    if backend == "mongo":
        if not config.MONGO_URI:
            raise ValueError("STORAGE_BACKEND is 'mongo' but MONGO_URI is not configured")
        return MongoStore.connect(config.MONGO_URI, config.MONGO_DB)
    raise ValueError(f"Unknown storage backend: {config.STORAGE_BACKEND}")
