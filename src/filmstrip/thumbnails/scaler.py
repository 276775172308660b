"""最近邻缩放：按固定宽度保持宽高比缩小截图。"""

from __future__ import annotations

import math

import numpy as np

from filmstrip.core import Raster
from filmstrip.core.config import THUMBNAIL_WIDTH


def scale_to_thumbnail(raster: Raster, width: int = THUMBNAIL_WIDTH) -> Raster:
    """点采样缩放，不做插值/抗锯齿；非整数比例下的宽高比偏差不做修正。"""

    if raster.width <= 0:
        raise ValueError("无法缩放宽度为 0 的图像")
    scale_factor = raster.width / width
    scaled_height = math.floor(raster.height / scale_factor)

    # 非负数 astype 截断即 floor
    xs = (np.arange(width) * scale_factor).astype(np.intp)
    ys = (np.arange(scaled_height) * scale_factor).astype(np.intp)
    pixels = raster.pixels[ys[:, None], xs[None, :]]
    return Raster(pixels=pixels)
