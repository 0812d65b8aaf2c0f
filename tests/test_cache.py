"""Tests for icon_pack.cache module."""

import json
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from icon_pack.cache import (
    CACHE_EXPIRY_SECONDS,
    FileStore,
    MemoryStore,
    ResourceCache,
    icon_key,
    list_key,
)

HOUR = 60 * 60
MINUTE = 60


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FailingStore(MemoryStore):
    """Store whose writes and removals always fail."""

    def write(self, key, value):
        raise OSError("quota exceeded")

    def remove(self, key):
        raise OSError("read-only")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def cache(store, clock):
    return ResourceCache(store, clock=clock)


class TestKeys:
    """Tests for cache key builders."""

    def test_list_key(self):
        assert list_key("lucide") == "iconify_cache_list_lucide"

    def test_icon_key(self):
        assert icon_key("lucide", "home") == "iconify_cache_lucide_home"

    def test_key_spaces_do_not_collide(self):
        assert list_key("lucide") != icon_key("lucide", "list")


class TestResourceCache:
    """Tests for ResourceCache."""

    def test_miss(self, cache):
        assert cache.get("missing") is None

    def test_put_then_get(self, cache):
        cache.put("k", "<svg/>")
        assert cache.get("k") == "<svg/>"

    def test_list_payload(self, cache):
        cache.put("k", ["a", "b"])
        assert cache.get("k") == ["a", "b"]

    def test_put_overwrites(self, cache):
        cache.put("k", "old")
        cache.put("k", "new")
        assert cache.get("k") == "new"

    def test_entry_format(self, cache, store, clock):
        cache.put("k", "payload")
        entry = json.loads(store.read("k"))
        assert entry == {"data": "payload", "timestamp": int(clock.now * 1000)}

    def test_fresh_before_expiry(self, cache, clock):
        cache.put("k", "payload")
        clock.advance(23 * HOUR + 59 * MINUTE)
        assert cache.get("k") == "payload"

    def test_expired_after_window(self, cache, store, clock):
        cache.put("k", "payload")
        clock.advance(24 * HOUR + 1 * MINUTE)
        assert cache.get("k") is None
        assert store.read("k") is None

    def test_exact_boundary_is_fresh(self, cache, clock):
        cache.put("k", "payload")
        clock.advance(CACHE_EXPIRY_SECONDS)
        assert cache.get("k") == "payload"

    def test_rewrite_renews_timestamp(self, cache, clock):
        cache.put("k", "payload")
        clock.advance(20 * HOUR)
        cache.put("k", "payload")
        clock.advance(20 * HOUR)
        assert cache.get("k") == "payload"

    def test_custom_expiry(self, store, clock):
        cache = ResourceCache(store, expiry=10, clock=clock)
        cache.put("k", "payload")
        clock.advance(11)
        assert cache.get("k") is None

    def test_corrupt_entry_is_absent(self, cache, store):
        store.write("k", "not json")
        assert cache.get("k") is None

    def test_entry_without_timestamp_is_absent(self, cache, store):
        store.write("k", json.dumps({"data": "x"}))
        assert cache.get("k") is None

    @pytest.mark.parametrize("timestamp", ["abc", None, [1], True])
    def test_entry_with_invalid_timestamp_is_evicted(self, cache, store, timestamp):
        store.write("k", json.dumps({"data": "x", "timestamp": timestamp}))
        assert cache.get("k") is None
        assert store.read("k") is None

    def test_write_failure_is_swallowed(self, clock):
        cache = ResourceCache(FailingStore(), clock=clock)
        cache.put("k", "payload")
        assert cache.get("k") is None

    def test_unserializable_payload_is_swallowed(self, cache):
        cache.put("k", object())
        assert cache.get("k") is None

    def test_eviction_failure_is_swallowed(self, clock):
        store = FailingStore()
        store._items["k"] = json.dumps({"data": "x", "timestamp": 0})
        cache = ResourceCache(store, clock=clock)
        assert cache.get("k") is None

    def test_default_store(self):
        cache = ResourceCache()
        cache.put("k", "v")
        assert cache.get("k") == "v"


class TestFileStore:
    """Tests for FileStore."""

    def test_read_missing(self, tmp_path):
        assert FileStore(tmp_path).read("nope") is None

    def test_write_read(self, tmp_path):
        store = FileStore(tmp_path / "cache")
        store.write("iconify_cache_mdi_a:b/c", "value")
        assert store.read("iconify_cache_mdi_a:b/c") == "value"
        assert len(list((tmp_path / "cache").iterdir())) == 1

    def test_remove(self, tmp_path):
        store = FileStore(tmp_path)
        store.write("k", "v")
        store.remove("k")
        assert store.read("k") is None

    def test_remove_missing(self, tmp_path):
        FileStore(tmp_path).remove("nope")

    def test_cache_on_file_store(self, tmp_path):
        clock = FakeClock()
        ResourceCache(FileStore(tmp_path), clock=clock).put("k", ["x"])
        assert ResourceCache(FileStore(tmp_path), clock=clock).get("k") == ["x"]
