"""核心模块入口，聚合数据模型、错误类型与配置加载工具供各步骤复用。"""

from .datamodels import (
    AuditProduct,
    Bucket,
    BucketSelection,
    FilmstripResult,
    Frame,
    Raster,
    ScreenshotFrame,
    Thumbnail,
    Timeline,
)
from .config import FilmstripConfig, load_config
from .errors import EncodeError, ErrorCode, FilmstripError, ImageDecodeError, Outcome, TimelineError
from .logging_utils import get_logger, setup_logging

__all__ = [
    "AuditProduct",
    "Bucket",
    "BucketSelection",
    "FilmstripResult",
    "Frame",
    "Raster",
    "ScreenshotFrame",
    "Thumbnail",
    "Timeline",
    "FilmstripConfig",
    "load_config",
    "EncodeError",
    "ErrorCode",
    "FilmstripError",
    "ImageDecodeError",
    "Outcome",
    "TimelineError",
    "get_logger",
    "setup_logging",
]
