import threading

import pytest

from media_atlas.services.thumbnails import ThumbnailCache


def test_missing_thumbnail_returns_placeholder():
    cache = ThumbnailCache(placeholder="/none.png")
    assert cache.get("unknown") == "/none.png"


def test_preload_and_get():
    cache = ThumbnailCache()
    cache.preload({"a": "blob:a", "b": "blob:b"})
    assert cache.get("a") == "blob:a"
    assert "b" in cache
    assert len(cache) == 2


def test_least_recently_used_entry_is_evicted():
    cache = ThumbnailCache(max_entries=2)
    cache.preload({"a": "blob:a", "b": "blob:b"})
    cache.get("a")
    cache.preload({"c": "blob:c"})

    assert "a" in cache
    assert "b" not in cache
    assert "c" in cache


def test_invalidate_one_or_all():
    cache = ThumbnailCache()
    cache.preload({"a": "blob:a", "b": "blob:b"})

    cache.invalidate("a")
    assert "a" not in cache
    assert len(cache) == 1

    cache.invalidate("missing")
    cache.invalidate()
    assert len(cache) == 0


def test_max_entries_must_be_positive():
    with pytest.raises(ValueError):
        ThumbnailCache(max_entries=0)


def test_empty_url_falls_back_to_placeholder():
    cache = ThumbnailCache(placeholder="/none.png")
    cache.preload({"a": ""})
    assert cache.get("a") == "/none.png"


def test_concurrent_readers_and_writers():
    cache = ThumbnailCache(max_entries=50)
    ids = [f"r{i}" for i in range(100)]
    errors = []

    def write():
        try:
            for _ in range(200):
                cache.preload({resource_id: f"blob:{resource_id}" for resource_id in ids})
                for resource_id in ids[::3]:
                    cache.invalidate(resource_id)
        except Exception as exc:
            errors.append(repr(exc))

    def read():
        try:
            for _ in range(200):
                for resource_id in ids:
                    assert cache.get(resource_id) in (f"blob:{resource_id}", cache.placeholder)
        except Exception as exc:
            errors.append(repr(exc))

    threads = [threading.Thread(target=write) for _ in range(2)]
    threads += [threading.Thread(target=read) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(cache) <= 50
