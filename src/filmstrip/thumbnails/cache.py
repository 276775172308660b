"""单次构建内的编码缓存：同一帧最多缩放、编码一次。"""

from __future__ import annotations

from concurrent.futures import Future
import threading
from typing import Callable, Dict, Generic, Hashable, TypeVar

T = TypeVar("T")


class EncodingCache(Generic[T]):
    """以帧下标为键的缓存，并发访问时同一个键只有一个写入者。

    第一个请求某个键的调用方负责计算，其余调用方等待同一个 Future；
    计算失败时异常会传给所有等待者。
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[Hashable, Future[T]] = {}
        self.hits = 0
        self.misses = 0

    def get_or_create(self, key: Hashable, factory: Callable[[], T]) -> T:
        with self._lock:
            future = self._entries.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._entries[key] = future
                self.misses += 1
            else:
                self.hits += 1
        if owner:
            try:
                future.set_result(factory())
            except BaseException as exc:
                future.set_exception(exc)
                raise
        return future.result()

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
