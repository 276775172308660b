"""编码缓存测试：同一键只计算一次，包括并发场景。"""

from concurrent.futures import ThreadPoolExecutor
import threading
import time

import pytest

from filmstrip.thumbnails.cache import EncodingCache


def test_factory_runs_once_per_key() -> None:
    cache: EncodingCache[str] = EncodingCache()
    calls = []

    def factory() -> str:
        calls.append(1)
        return "payload"

    assert cache.get_or_create(3, factory) == "payload"
    assert cache.get_or_create(3, factory) == "payload"
    assert cache.get_or_create(4, factory) == "payload"

    assert len(calls) == 2
    assert cache.hits == 1
    assert cache.misses == 2
    assert 3 in cache and len(cache) == 2


def test_concurrent_callers_share_single_computation() -> None:
    cache: EncodingCache[int] = EncodingCache()
    lock = threading.Lock()
    calls = {"count": 0}

    def factory() -> int:
        with lock:
            calls["count"] += 1
        time.sleep(0.05)
        return 42

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: cache.get_or_create("frame", factory), range(16)))

    assert results == [42] * 16
    assert calls["count"] == 1


def test_factory_error_propagates_to_later_callers() -> None:
    cache: EncodingCache[str] = EncodingCache()

    def factory() -> str:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        cache.get_or_create(0, factory)
    with pytest.raises(RuntimeError):
        cache.get_or_create(0, lambda: "never")
