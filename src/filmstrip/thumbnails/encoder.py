"""缩略图编码后端：默认使用 OpenCV 输出 JPEG，并包装为 data URI。"""

from __future__ import annotations

import base64
from typing import Protocol

import cv2

from filmstrip.core import EncodeError, Raster
from filmstrip.core.config import JPEG_QUALITY

DATA_URI_PREFIX = "data:image/jpeg;base64,"


class ImageEncoder(Protocol):
    """编码接口：将 RGBA 像素压缩为字节串。"""

    def encode(self, raster: Raster, quality: int) -> bytes:
        ...


class JpegEncoder:
    """OpenCV JPEG 编码，alpha 通道直接丢弃。"""

    def encode(self, raster: Raster, quality: int = JPEG_QUALITY) -> bytes:
        if raster.width == 0 or raster.height == 0:
            raise EncodeError(f"无法编码空图像: {raster.width}x{raster.height}")
        bgr = cv2.cvtColor(raster.pixels, cv2.COLOR_RGBA2BGR)
        ok, buffer = cv2.imencode(".jpg", bgr, [int(cv2.IMWRITE_JPEG_QUALITY), int(quality)])
        if not ok:
            raise EncodeError("cv2.imencode 返回失败")
        return buffer.tobytes()


def to_data_uri(payload: bytes) -> str:
    return DATA_URI_PREFIX + base64.b64encode(payload).decode("ascii")
