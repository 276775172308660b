"""时间线来源模块入口。"""

from .manifest import ManifestTimelineSource, load_image_rgba, write_manifest
from .source import MemoizedTimelineSource, TimelineSource

__all__ = [
    "ManifestTimelineSource",
    "MemoizedTimelineSource",
    "TimelineSource",
    "load_image_rgba",
    "write_manifest",
]
