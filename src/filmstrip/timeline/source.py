"""时间线来源接口，以及按 trace 去重的记忆化包装。"""

from __future__ import annotations

from concurrent.futures import Future
import threading
from typing import Any, Dict, Hashable, Protocol

from filmstrip.core import Timeline, get_logger


class TimelineSource(Protocol):
    """时间线提供方：失败时抛出带错误码的 TimelineError。"""

    def request(self, trace: Any, context: Any) -> Timeline:
        ...


class MemoizedTimelineSource:
    """同一 trace 最多计算一次，并发的相同请求共享同一个 Future。

    结果（包括失败）会被保留，因为相同输入的重新计算不会改变结果。
    """

    def __init__(self, inner: TimelineSource) -> None:
        self._inner = inner
        self._lock = threading.Lock()
        self._futures: Dict[Hashable, Future[Timeline]] = {}
        self.logger = get_logger(__name__)

    def request(self, trace: Any, context: Any) -> Timeline:
        key = self._key(trace)
        with self._lock:
            future = self._futures.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._futures[key] = future
        if owner:
            self.logger.debug("计算时间线: %s", key)
            try:
                future.set_result(self._inner.request(trace, context))
            except BaseException as exc:
                future.set_exception(exc)
                raise
        return future.result()

    def clear(self) -> None:
        with self._lock:
            self._futures.clear()

    @staticmethod
    def _key(trace: Any) -> Hashable:
        try:
            hash(trace)
        except TypeError:
            return id(trace)
        return trace
