from unittest.mock import MagicMock, patch

import pytest

from europeana_catalog import cache


def test_memory_store_write_and_read():
    store = cache.MemoryStore()
    store.write("key", {"success": True})
    assert store.read("key") == {"success": True}


def test_memory_store_read_missing_key():
    assert cache.MemoryStore().read("missing") is None


@patch("europeana_catalog.cache.time")
def test_memory_store_expires_entries(mock_time):
    store = cache.MemoryStore(expires_in=60)
    mock_time.time.return_value = 1000
    store.write("key", "value")

    mock_time.time.return_value = 1060
    assert store.read("key") == "value"

    mock_time.time.return_value = 1061
    assert store.read("key") is None


@patch("europeana_catalog.cache.time")
def test_memory_store_write_with_custom_expiry(mock_time):
    store = cache.MemoryStore(expires_in=60)
    mock_time.time.return_value = 1000
    store.write("key", "value", expires_in=3600)

    mock_time.time.return_value = 2000
    assert store.read("key") == "value"


def test_memory_store_fetch_calls_func_once():
    store = cache.MemoryStore()
    func = MagicMock(return_value={"items": []})

    assert store.fetch("key", func) == {"items": []}
    assert store.fetch("key", func) == {"items": []}
    func.assert_called_once_with()


def test_memory_store_fetch_does_not_cache_none():
    store = cache.MemoryStore()
    func = MagicMock(return_value=None)

    store.fetch("key", func)
    store.fetch("key", func)
    assert func.call_count == 2


def test_memory_store_fetch_propagates_errors():
    store = cache.MemoryStore()
    func = MagicMock(side_effect=RuntimeError("boom"))

    with pytest.raises(RuntimeError):
        store.fetch("key", func)
    assert store.read("key") is None


def test_memory_store_delete_and_clear():
    store = cache.MemoryStore()
    store.write("a", 1)
    store.write("b", 2)

    assert store.delete("a") is True
    assert store.delete("a") is False
    store.clear()
    assert store.read("b") is None


@patch("europeana_catalog.cache.time")
def test_memory_store_cleanup_expired(mock_time):
    store = cache.MemoryStore(expires_in=60)
    mock_time.time.return_value = 1000
    store.write("old", 1)
    mock_time.time.return_value = 1050
    store.write("new", 2)

    mock_time.time.return_value = 1070
    assert store.cleanup_expired() == 1
    assert store.read("new") == 2


@patch("europeana_catalog.cache.time")
def test_memory_store_evicts_expired_entries_on_write(mock_time):
    store = cache.MemoryStore(expires_in=60)
    mock_time.time.return_value = 1000
    for i in range(store.CLEANUP_INTERVAL - 1):
        store.write(f"old-{i}", i)
    assert len(store._entries) == store.CLEANUP_INTERVAL - 1

    mock_time.time.return_value = 2000
    store.write("new", "value")

    assert list(store._entries) == ["new"]


@patch("europeana_catalog.cache.time")
def test_memory_store_stays_bounded_with_distinct_keys(mock_time):
    store = cache.MemoryStore(expires_in=0)
    for i in range(1000):
        mock_time.time.return_value = 1000 + i
        store.fetch(f"search-{i}", lambda: {"items": []})

    assert len(store._entries) < store.CLEANUP_INTERVAL


def test_null_store_never_stores():
    store = cache.NullStore()
    func = MagicMock(return_value="value")

    store.write("key", "value")
    assert store.read("key") is None
    assert store.fetch("key", func) == "value"
    assert store.fetch("key", func) == "value"
    assert func.call_count == 2
    assert store.delete("key") is False
    assert store.cleanup_expired() == 0


def test_build_store():
    assert isinstance(cache.build_store("memory"), cache.MemoryStore)
    assert isinstance(cache.build_store("MEMORY", expires_in=10), cache.MemoryStore)
    assert cache.build_store("memory", expires_in=10).expires_in == 10
    assert isinstance(cache.build_store("null"), cache.NullStore)
    assert isinstance(cache.build_store(None), cache.NullStore)


def test_build_store_with_unknown_name():
    with pytest.raises(ValueError):
        cache.build_store("redis")
