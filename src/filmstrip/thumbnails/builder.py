"""胶片条构建：采样 -> 缩放 -> 编码（经缓存） -> 组装。"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import math
from typing import List

from filmstrip.core import BucketSelection, FilmstripResult, Thumbnail, Timeline, get_logger
from filmstrip.core.config import JPEG_QUALITY, NUMBER_OF_THUMBNAILS, THUMBNAIL_WIDTH

from .cache import EncodingCache
from .encoder import ImageEncoder, JpegEncoder, to_data_uri
from .sampler import select_frames
from .scaler import scale_to_thumbnail


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class FilmstripBuilder:
    """单次构建的编排器；缓存只在 build() 内部存在，不跨构建共享。"""

    def __init__(
        self,
        encoder: ImageEncoder | None = None,
        *,
        max_workers: int = 1,
        count: int = NUMBER_OF_THUMBNAILS,
        width: int = THUMBNAIL_WIDTH,
        quality: int = JPEG_QUALITY,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.encoder = encoder or JpegEncoder()
        self.max_workers = max_workers
        self.count = count
        self.width = width
        self.quality = quality
        self.logger = get_logger(__name__)

    def build(self, timeline: Timeline, minimum_duration: float = 3000.0) -> FilmstripResult:
        selections, timeline_end = select_frames(timeline, minimum_duration, self.count)
        self.logger.info(
            "构建胶片条：共 %d 帧，选中 %d 个不同帧，时间线长度 %.1fms",
            len(timeline.frames),
            len({sel.frame_index for sel in selections}),
            timeline_end,
        )

        cache: EncodingCache[str] = EncodingCache()

        def render(selection: BucketSelection) -> str:
            return cache.get_or_create(selection.frame_index, lambda: self._render_frame(selection))

        if self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                payloads = list(pool.map(render, selections))
        else:
            payloads = [render(selection) for selection in selections]

        self.logger.debug("编码缓存：%d 次命中，%d 次编码", cache.hits, cache.misses)
        thumbnails = assemble(timeline, selections, payloads)
        return FilmstripResult(scale_ms=timeline_end, thumbnails=thumbnails)

    def _render_frame(self, selection: BucketSelection) -> str:
        raster = selection.frame.raster()
        thumbnail = scale_to_thumbnail(raster, self.width)
        return to_data_uri(self.encoder.encode(thumbnail, self.quality))


def assemble(
    timeline: Timeline,
    selections: List[BucketSelection],
    payloads: List[str],
) -> List[Thumbnail]:
    """按桶顺序拼接时间与编码结果。"""

    thumbnails: List[Thumbnail] = []
    for selection, payload in zip(selections, payloads):
        target = selection.bucket.target_timestamp
        thumbnails.append(
            Thumbnail(
                timing_ms=_round_half_up(target - timeline.beginning),
                timestamp_micros=target * 1000,
                payload=payload,
            )
        )
    return thumbnails
