"""基于 JSON 清单的时间线来源：清单列出截图路径、时间戳与插值标记。"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import cv2
import numpy as np

from filmstrip.core import ErrorCode, ImageDecodeError, Raster, ScreenshotFrame, Timeline, TimelineError, get_logger

logger = get_logger(__name__)


def load_image_rgba(path: str | Path) -> Raster:
    """读取截图并统一转换为 RGBA。"""

    image = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
    if image is None:
        raise ImageDecodeError(f"无法解码截图: {path}")
    if image.dtype != np.uint8:
        raise ImageDecodeError(f"截图 {path} dtype 需为 uint8，实际 {image.dtype}")
    if image.ndim == 2:
        rgba = cv2.cvtColor(image, cv2.COLOR_GRAY2RGBA)
    elif image.shape[2] == 3:
        rgba = cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
    elif image.shape[2] == 4:
        rgba = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
    else:
        raise ImageDecodeError(f"截图 {path} 通道数不支持: {image.shape}")
    return Raster(pixels=rgba)


class ManifestTimelineSource:
    """trace 为清单文件路径；图片路径相对清单所在目录解析，按需解码。"""

    def request(self, trace: Any, context: Any = None) -> Timeline:
        path = Path(trace)
        payload = self._read_manifest(path)
        frames_data = payload.get("frames", [])
        if not isinstance(frames_data, list):
            raise TimelineError(ErrorCode.TRACE_UNREADABLE, f"清单 {path} 的 frames 需为数组")
        if not frames_data:
            raise TimelineError(ErrorCode.NO_SCREENSHOTS, f"清单 {path} 中没有截图")

        try:
            frames = sorted(
                (self._build_frame(entry, path.parent) for entry in frames_data),
                key=lambda frame: frame.timestamp,
            )
            beginning = float(payload.get("beginning", frames[0].timestamp))
            completion = payload.get("completion")
            completion = float(completion) if completion is not None else None
        except (KeyError, TypeError, ValueError) as exc:
            raise TimelineError(ErrorCode.TRACE_UNREADABLE, f"清单 {path} 格式错误: {exc}") from exc

        logger.debug("读取清单 %s：%d 帧", path, len(frames))
        return Timeline(frames=frames, beginning=beginning, completion=completion)

    @staticmethod
    def _read_manifest(path: Path) -> Dict[str, Any]:
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise TimelineError(ErrorCode.TRACE_UNREADABLE, f"无法读取清单 {path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise TimelineError(ErrorCode.TRACE_UNREADABLE, f"清单 {path} 内容需为字典")
        return payload

    @staticmethod
    def _build_frame(entry: Dict[str, Any], root: Path) -> ScreenshotFrame:
        image_path = root / entry["path"]
        return ScreenshotFrame(
            timestamp=float(entry["timestamp"]),
            is_interpolated=bool(entry.get("interpolated", False)),
            loader=lambda: load_image_rgba(image_path),
        )


def write_manifest(path: Path, frames: List[Dict[str, Any]], *, beginning: float, completion: float | None = None) -> None:
    """写出清单文件，便于脚本或测试构造时间线。"""

    payload = {"beginning": beginning, "completion": completion, "frames": frames}
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
