from pim_app.storage import SqliteKeyValueStore


def test_sqlite_store_set_get_remove(tmp_path):
    store = SqliteKeyValueStore(tmp_path / "kv.db")
    assert store.get_item("k") is None
    store.set_item("k", "one")
    store.set_item("k", "two")
    assert store.get_item("k") == "two"
    store.remove_item("k")
    assert store.get_item("k") is None
    store.remove_item("k")
