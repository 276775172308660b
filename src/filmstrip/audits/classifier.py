"""错误分类：根据错误码与执行模式决定降级为“不适用”还是原样抛出。"""

from __future__ import annotations

from typing import Callable

from filmstrip.core import AuditProduct, Outcome, TimelineError, get_logger
from filmstrip.core.errors import NO_FRAMES_ERRORS

from .base import ExecutionMode

logger = get_logger(__name__)


def capture(compute: Callable[[], AuditProduct]) -> Outcome:
    """执行计算并把带错误码的时间线异常收拢为 Outcome；其他异常直接抛出。"""

    try:
        return Outcome.success(compute())
    except TimelineError as exc:
        return Outcome.failure(exc)


def resolve(outcome: Outcome, mode: ExecutionMode) -> AuditProduct:
    if outcome.error is None:
        if outcome.product is None:
            raise ValueError("成功的 Outcome 缺少 product")
        return outcome.product
    if outcome.code in NO_FRAMES_ERRORS and mode == ExecutionMode.TIMESPAN:
        # 时间段内恰好没有截图属于正常情况
        logger.info("时间段内没有可用帧（%s），标记为不适用", outcome.code.value)
        return AuditProduct(score=1, not_applicable=True)
    raise outcome.error
