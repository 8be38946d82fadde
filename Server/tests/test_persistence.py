from unittest.mock import MagicMock

import pytest
from pymongo.errors import PyMongoError

from lexi.config import TestingConfig
from lexi.exceptions import StorageError
from lexi.models.game import PuzzleSession
from lexi.models.stats import Statistics
from lexi.services.persistence import (
    STATISTICS_KEY, JsonFileStore, MemoryStore, MongoStore, PersistenceGateway, create_store, session_key,
)


def sample_session():
    return PuzzleSession(day_number=9790, target_word="allow", guesses=["allot"], game_over=False)


def sample_stats():
    return Statistics(
        games_played=3, games_won=2, guess_distribution=[0, 1, 1, 0, 0, 0],
        current_streak=2, max_streak=2, last_played_day=9790, completed_days={9788, 9789, 9790},
    )


@pytest.fixture(params=["memory", "json"])
def any_store(request, tmp_path):
    if request.param == "memory":
        return MemoryStore()
    return JsonFileStore(str(tmp_path / "data"))


def test_missing_keys_read_as_none(any_store):
    gateway = PersistenceGateway(any_store)
    assert gateway.get_session(1) is None
    assert gateway.get_statistics() is None


def test_session_and_stats_survive_storage(any_store):
    gateway = PersistenceGateway(any_store)
    gateway.put_session(sample_session())
    gateway.put_statistics(sample_stats())
    assert gateway.get_session(9790) == sample_session()
    assert gateway.get_statistics() == sample_stats()


def test_clear_removes_everything(any_store):
    gateway = PersistenceGateway(any_store)
    gateway.put_session(sample_session())
    gateway.put_statistics(sample_stats())
    gateway.clear()
    assert gateway.get_session(9790) is None
    assert gateway.get_statistics() is None


def test_stored_session_uses_camel_case_schema():
    store = MemoryStore()
    PersistenceGateway(store).put_session(sample_session())
    assert store.get(session_key(9790)) == {
        "dayNumber": 9790, "targetWord": "allow", "guesses": ["allot"], "gameOver": False, "hasWon": False,
    }


def test_statistics_record_holds_completed_days():
    store = MemoryStore()
    PersistenceGateway(store).put_statistics(sample_stats())
    assert store.get(STATISTICS_KEY)["completedDays"] == [9788, 9789, 9790]


def test_legacy_uppercase_guesses_are_lowercased():
    store = MemoryStore()
    store.set(session_key(5), {"dayNumber": 5, "targetWord": "allow", "guesses": ["ALLOT"],
                               "gameOver": False, "hasWon": False})
    assert PersistenceGateway(store).get_session(5).guesses == ["allot"]


def test_corrupt_session_record_raises():
    store = MemoryStore()
    store.set(session_key(5), {"guesses": []})
    with pytest.raises(StorageError):
        PersistenceGateway(store).get_session(5)


def test_json_store_corrupt_file_raises(tmp_path):
    store = JsonFileStore(str(tmp_path))
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StorageError):
        store.get("broken")


def test_json_store_leaves_no_temp_files(tmp_path):
    store = JsonFileStore(str(tmp_path))
    store.set("key", {"a": 1})
    assert [path.name for path in tmp_path.iterdir()] == ["key.json"]


def test_json_store_failed_write_cleans_up(tmp_path):
    store = JsonFileStore(str(tmp_path))
    with pytest.raises(StorageError):
        store.set("key", {"value": object()})
    assert list(tmp_path.iterdir()) == []
    assert store.get("key") is None


def test_memory_store_rejects_unserializable_values():
    with pytest.raises(StorageError):
        MemoryStore().set("key", {1, 2})


def test_mongo_store_reads_and_writes_documents():
    collection = MagicMock()
    collection.find_one.return_value = {"_id": "k", "value": {"a": 1}}
    store = MongoStore(collection)

    assert store.get("k") == {"a": 1}
    collection.find_one.assert_called_once_with({"_id": "k"})

    store.set("k", {"b": 2})
    collection.replace_one.assert_called_once_with({"_id": "k"}, {"_id": "k", "value": {"b": 2}}, upsert=True)

    store.clear()
    collection.delete_many.assert_called_once_with({})


def test_mongo_store_missing_document():
    collection = MagicMock()
    collection.find_one.return_value = None
    assert MongoStore(collection).get("k") is None


def test_mongo_errors_become_storage_errors():
    collection = MagicMock()
    collection.find_one.side_effect = PyMongoError("down")
    collection.replace_one.side_effect = PyMongoError("down")
    store = MongoStore(collection)
    with pytest.raises(StorageError):
        store.get("k")
    with pytest.raises(StorageError):
        store.set("k", 1)


def test_create_store_backends(tmp_path):
    assert isinstance(create_store(TestingConfig), MemoryStore)

    class JsonConfig(TestingConfig):
        STORAGE_BACKEND = "json"
        DATA_DIR = str(tmp_path / "store")

    assert isinstance(create_store(JsonConfig), JsonFileStore)

    class MongoWithoutUri(TestingConfig):
        STORAGE_BACKEND = "mongo"
        MONGO_URI = None

    with pytest.raises(ValueError):
        create_store(MongoWithoutUri)

    class Unknown(TestingConfig):
        STORAGE_BACKEND = "redis"

    with pytest.raises(ValueError):
        create_store(Unknown)
