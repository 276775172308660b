"""错误分类：带错误码的时间线异常，以及显式的计算结果类型。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from .datamodels import AuditProduct


class ErrorCode(str, Enum):
    """时间线获取与采样阶段的错误码。"""

    NO_SCREENSHOTS = "NO_SCREENSHOTS"
    SPEEDINDEX_OF_ZERO = "SPEEDINDEX_OF_ZERO"
    NO_ANALYZED_FRAMES = "NO_ANALYZED_FRAMES"
    INVALID_TIMELINE = "INVALID_TIMELINE"
    TRACE_UNREADABLE = "TRACE_UNREADABLE"


# 这些错误意味着“没有可用帧”，timespan 模式下降级为不适用
NO_FRAMES_ERRORS: FrozenSet[ErrorCode] = frozenset(
    {
        ErrorCode.NO_SCREENSHOTS,
        ErrorCode.SPEEDINDEX_OF_ZERO,
        ErrorCode.NO_ANALYZED_FRAMES,
        ErrorCode.INVALID_TIMELINE,
    }
)


class FilmstripError(Exception):
    """本项目异常基类。"""


class TimelineError(FilmstripError):
    """时间线不可用时抛出，code 决定是否可以降级。"""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or code.value)


class EncodeError(FilmstripError):
    """缩略图编码失败，始终视为致命错误。"""


class ImageDecodeError(FilmstripError):
    """截图解码失败，始终视为致命错误。"""


@dataclass(slots=True)
class Outcome:
    """一次计算的结果：成功时携带 product，失败时携带错误码与原始异常。"""

    product: Optional[AuditProduct] = None
    code: Optional[ErrorCode] = None
    error: Optional[TimelineError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, product: AuditProduct) -> "Outcome":
        return cls(product=product)

    @classmethod
    def failure(cls, error: TimelineError) -> "Outcome":
        return cls(code=error.code, error=error)
