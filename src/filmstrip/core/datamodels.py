"""核心数据结构定义，覆盖帧、时间线与胶片条产物。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

import numpy as np
from numpy.typing import NDArray

CHANNELS = 4


@dataclass(slots=True)
class Raster:
    """RGBA 像素矩阵，shape 为 (height, width, 4)，dtype 为 uint8。"""

    pixels: NDArray[np.uint8]

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != CHANNELS:
            raise ValueError(f"Raster 需为 (H, W, 4) 的 RGBA 数组，实际 shape={self.pixels.shape}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Raster dtype 需为 uint8，实际 {self.pixels.dtype}")

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def from_bytes(cls, width: int, height: int, data: bytes | bytearray | Sequence[int]) -> "Raster":
        """由扁平 RGBA 字节序列构造，长度必须为 width*height*4。"""

        expected = width * height * CHANNELS
        if len(data) != expected:
            raise ValueError(f"像素长度 {len(data)} 与 {width}x{height}x{CHANNELS}={expected} 不符")
        pixels = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, CHANNELS)
        return cls(pixels=pixels.copy())

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes()

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        r, g, b, a = (int(v) for v in self.pixels[y, x])
        return r, g, b, a


class Frame(Protocol):
    """时间线中的单帧：时间戳、是否插值帧，以及按需解码的像素。"""

    timestamp: float
    is_interpolated: bool

    def raster(self) -> Raster:
        """返回完整分辨率 RGBA 像素，可能涉及昂贵的解码。"""

        ...


@dataclass(slots=True)
class ScreenshotFrame:
    """基于 loader 回调的帧实现，raster() 每次调用都会重新解码。"""

    timestamp: float
    is_interpolated: bool
    loader: Callable[[], Raster] = field(repr=False)

    def raster(self) -> Raster:
        return self.loader()


@dataclass(slots=True)
class Timeline:
    """时间线：按时间戳升序排列的帧，以及起止时间（毫秒）。"""

    frames: List[Frame]
    beginning: float
    completion: Optional[float] = None

    def analyzed_frames(self) -> List[tuple[int, Frame]]:
        """返回 (原始下标, 帧) 列表，仅包含非插值帧。"""

        return [(idx, frame) for idx, frame in enumerate(self.frames) if not frame.is_interpolated]


@dataclass(slots=True, frozen=True)
class Bucket:
    index: int
    target_timestamp: float


@dataclass(slots=True)
class BucketSelection:
    """单个时间桶及其选中的帧，frame_index 为帧在时间线中的稳定下标。"""

    bucket: Bucket
    frame_index: int
    frame: Frame


@dataclass(slots=True)
class Thumbnail:
    timing_ms: int
    timestamp_micros: float
    payload: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timing": self.timing_ms,
            "timestamp": self.timestamp_micros,
            "data": self.payload,
        }


@dataclass(slots=True)
class FilmstripResult:
    """胶片条结果，scale_ms 为时间线总长度。"""

    scale_ms: float
    thumbnails: List[Thumbnail] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "filmstrip",
            "scale": self.scale_ms,
            "items": [thumb.to_dict() for thumb in self.thumbnails],
        }


@dataclass(slots=True)
class AuditProduct:
    """审计产物：信息型结果，score 恒为 1。"""

    score: float = 1
    not_applicable: bool = False
    details: Optional[FilmstripResult] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"score": self.score}
        if self.not_applicable:
            payload["notApplicable"] = True
        if self.details is not None:
            payload["details"] = self.details.to_dict()
        return payload
