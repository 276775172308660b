"""缩略图流水线：采样、缩放、编码与组装。"""

from .builder import FilmstripBuilder, assemble
from .cache import EncodingCache
from .encoder import DATA_URI_PREFIX, ImageEncoder, JpegEncoder, to_data_uri
from .sampler import compute_timeline_end, select_frames
from .scaler import scale_to_thumbnail

__all__ = [
    "FilmstripBuilder",
    "assemble",
    "EncodingCache",
    "DATA_URI_PREFIX",
    "ImageEncoder",
    "JpegEncoder",
    "to_data_uri",
    "compute_timeline_end",
    "select_frames",
    "scale_to_thumbnail",
]
