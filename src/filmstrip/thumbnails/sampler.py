"""时间桶采样：为每个等间距目标时间挑选代表帧。"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from filmstrip.core import Bucket, BucketSelection, ErrorCode, Frame, Timeline, TimelineError, get_logger
from filmstrip.core.config import NUMBER_OF_THUMBNAILS

logger = get_logger(__name__)


def compute_timeline_end(timeline: Timeline, minimum_duration: float) -> float:
    """时间线长度：completion 优先，否则取最晚帧的相对时间，再与最短长度取大。"""

    if timeline.completion is not None:
        max_frame_time = timeline.completion
    elif timeline.frames:
        offsets = [frame.timestamp - timeline.beginning for frame in timeline.frames]
        # 任意位置的 NaN 都会让时间线长度无效
        max_frame_time = math.nan if any(math.isnan(value) for value in offsets) else max(offsets)
    else:
        max_frame_time = -math.inf
    # NaN 放在左侧，保证 max 结果仍为 NaN 并被下方检查拦截
    timeline_end = max(max_frame_time, minimum_duration)
    if not math.isfinite(timeline_end):
        raise TimelineError(ErrorCode.INVALID_TIMELINE, f"时间线长度非有限值: {timeline_end}")
    return timeline_end


def select_frames(
    timeline: Timeline,
    minimum_duration: float = 3000.0,
    count: int = NUMBER_OF_THUMBNAILS,
) -> Tuple[List[BucketSelection], float]:
    """返回 (每个桶的选中帧, 时间线长度)。

    前 count-1 个桶取目标时间之前（含）的最后一帧；最后一个桶始终取最后一个
    非插值帧，保证胶片条以最终画面结束。
    """

    analyzed = timeline.analyzed_frames()
    if not analyzed:
        raise TimelineError(ErrorCode.INVALID_TIMELINE, "时间线中没有非插值帧")
    timeline_end = compute_timeline_end(timeline, minimum_duration)

    selections: List[BucketSelection] = []
    for i in range(1, count + 1):
        target = timeline.beginning + timeline_end * i / count
        bucket = Bucket(index=i, target_timestamp=target)
        if i == count:
            frame_index, frame = analyzed[-1]
        else:
            frame_index, frame = _last_frame_at_or_before(analyzed, target)
        selections.append(BucketSelection(bucket=bucket, frame_index=frame_index, frame=frame))
    return selections, timeline_end


def _last_frame_at_or_before(analyzed: Sequence[Tuple[int, Frame]], target: float) -> Tuple[int, Frame]:
    chosen: Optional[Tuple[int, Frame]] = None
    for entry in analyzed:
        if entry[1].timestamp <= target:
            chosen = entry
    if chosen is None:
        # 首帧晚于目标时间：回退到第一帧
        logger.debug("目标时间 %.1f 之前没有帧，回退到首帧 %.1f", target, analyzed[0][1].timestamp)
        chosen = analyzed[0]
    return chosen
