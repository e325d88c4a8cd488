import json
import sqlite3

import pytest

from pim_app.errors import PersistenceError
from pim_app.models import Part
from pim_app.persistence import MAX_AGE_MS, STORAGE_KEY, PartsRepository
from pim_app.storage import MemoryKeyValueStore

NOW = 1_700_000_000_000

PARTS = [
    Part(id="1", name="Engine Oil Filter", quantity=50, price=12.99),
    Part(id="2", name="Brake Pads", quantity=25, price=45.5),
]


def make_repo(items=None, read_only=False):
    store = MemoryKeyValueStore(items, read_only=read_only)
    return store, PartsRepository(store, clock=lambda: NOW)


def test_load_empty_store():
    _, repo = make_repo()
    assert repo.load() == []


def test_save_writes_envelope_and_loads_back():
    store, repo = make_repo()
    repo.save(PARTS)
    payload = json.loads(store.items[STORAGE_KEY])
    assert payload["timestamp"] == NOW
    assert payload["parts"][1] == {"id": "2", "name": "Brake Pads", "quantity": 25, "price": 45.5}
    assert repo.load() == PARTS


def test_save_replaces_previous_content():
    _, repo = make_repo()
    repo.save(PARTS)
    repo.save(PARTS[:1])
    assert repo.load() == PARTS[:1]


def test_save_rejects_non_list_without_touching_storage():
    store, repo = make_repo({STORAGE_KEY: "keep"})
    with pytest.raises(PersistenceError):
        repo.save("not a list")  # type: ignore[arg-type]
    with pytest.raises(PersistenceError):
        repo.save([{"id": "1"}])  # type: ignore[list-item]
    assert store.items[STORAGE_KEY] == "keep"


def test_save_reports_store_failure():
    _, repo = make_repo(read_only=True)
    with pytest.raises(PersistenceError):
        repo.save(PARTS)


def test_load_legacy_list_filters_invalid_records():
    legacy = [
        {"id": "1", "name": "Engine Oil Filter", "quantity": 50, "price": 12.99},
        {"id": 2, "name": "Bad id", "quantity": 1, "price": 1},
        {"id": "3", "name": "Negative", "quantity": -1, "price": 1},
        {"id": "4", "name": "Bool", "quantity": True, "price": 1},
        {"id": "5", "name": "Fraction", "quantity": 1.5, "price": 1},
        "junk",
    ]
    _, repo = make_repo({STORAGE_KEY: json.dumps(legacy)})
    assert repo.load() == [PARTS[0]]


def test_load_expired_envelope_discards_data():
    stale = {"parts": [PARTS[0].to_dict()], "timestamp": NOW - MAX_AGE_MS - 1}
    store, repo = make_repo({STORAGE_KEY: json.dumps(stale)})
    assert repo.load() == []
    assert STORAGE_KEY not in store.items


def test_load_envelope_within_window():
    fresh = {"parts": [p.to_dict() for p in PARTS], "timestamp": NOW - MAX_AGE_MS}
    _, repo = make_repo({STORAGE_KEY: json.dumps(fresh)})
    assert repo.load() == PARTS


def test_load_corrupted_json_discards_data():
    store, repo = make_repo({STORAGE_KEY: "{not json"})
    assert repo.load() == []
    assert STORAGE_KEY not in store.items


def test_load_drops_numbers_too_large_for_float():
    huge = "1" + "0" * 400
    stored = (
        '[{"id": "1", "name": "A", "quantity": ' + huge + ', "price": 1},'
        ' {"id": "2", "name": "B", "quantity": 1, "price": ' + huge + '},'
        ' {"id": "3", "name": "C", "quantity": 2, "price": 3.5}]'
    )
    _, repo = make_repo({STORAGE_KEY: stored})
    assert repo.load() == [Part(id="3", name="C", quantity=2, price=3.5)]


def test_load_integer_beyond_conversion_limit_discards_data():
    huge = "9" * 5001
    store, repo = make_repo({STORAGE_KEY: '[{"id": "1", "name": "A", "quantity": ' + huge + ', "price": 1}]'})
    assert repo.load() == []
    assert STORAGE_KEY not in store.items
    store.items[STORAGE_KEY] = '{"parts": [], "timestamp": ' + huge + "}"
    with pytest.raises(PersistenceError):
        repo.delete("1")


def test_load_unknown_shape_returns_empty():
    _, repo = make_repo({STORAGE_KEY: json.dumps({"items": []})})
    assert repo.load() == []


def test_delete_single_part_from_storage():
    store, repo = make_repo()
    repo.save(PARTS)
    repo.delete("1")
    assert repo.load() == PARTS[1:]
    assert json.loads(store.items[STORAGE_KEY])["timestamp"] == NOW


def test_delete_from_legacy_list():
    _, repo = make_repo({STORAGE_KEY: json.dumps([p.to_dict() for p in PARTS])})
    repo.delete("2")
    assert repo.load() == PARTS[:1]


def test_delete_without_data_fails():
    _, repo = make_repo()
    with pytest.raises(PersistenceError):
        repo.delete("1")


def test_sqlite_backed_round_trip(tmp_path):
    from pim_app.storage import SqliteKeyValueStore

    store = SqliteKeyValueStore(tmp_path / "nested" / "inventory.db")
    repo = PartsRepository(store, clock=lambda: NOW)
    repo.save(PARTS)
    assert PartsRepository(SqliteKeyValueStore(tmp_path / "nested" / "inventory.db"), clock=lambda: NOW).load() == PARTS


def test_open_repository_writes_to_given_file(tmp_path):
    from pim_app.persistence import open_repository
    from pim_app.storage import SqliteKeyValueStore

    first = open_repository(tmp_path / "first.db")
    second = open_repository(tmp_path / "second.db")
    second.save(PARTS)
    assert first.load() == []
    assert SqliteKeyValueStore(tmp_path / "second.db").get_item(STORAGE_KEY) is not None


def test_sqlite_error_surfaces_as_persistence_error():
    class BrokenStore(MemoryKeyValueStore):
        def set_item(self, key, value):
            raise sqlite3.OperationalError("database is locked")

    repo = PartsRepository(BrokenStore(), clock=lambda: NOW)
    with pytest.raises(PersistenceError):
        repo.save(PARTS)
