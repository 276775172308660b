"""JPEG 编码与 data URI 测试。"""

import base64

import cv2
import numpy as np
import pytest

from filmstrip.core import EncodeError, Raster
from filmstrip.thumbnails.encoder import DATA_URI_PREFIX, JpegEncoder, to_data_uri


def test_jpeg_encoder_produces_decodable_jpeg() -> None:
    pixels = np.zeros((80, 120, 4), dtype=np.uint8)
    pixels[..., 0] = 255  # 红色
    pixels[..., 3] = 255

    data = JpegEncoder().encode(Raster(pixels=pixels), 90)

    assert data[:2] == b"\xff\xd8"
    decoded = cv2.imdecode(np.frombuffer(data, np.uint8), cv2.IMREAD_COLOR)
    assert decoded.shape == (80, 120, 3)
    b, g, r = (int(v) for v in decoded[40, 60])
    assert r > 200 and g < 50 and b < 50


def test_jpeg_encoder_rejects_empty_raster() -> None:
    with pytest.raises(EncodeError):
        JpegEncoder().encode(Raster(pixels=np.zeros((0, 120, 4), dtype=np.uint8)), 90)


def test_data_uri_format() -> None:
    uri = to_data_uri(b"\x00\x01payload")

    assert DATA_URI_PREFIX == "data:image/jpeg;base64,"
    assert uri.startswith("data:image/jpeg;base64,")
    assert base64.b64decode(uri[len(DATA_URI_PREFIX):]) == b"\x00\x01payload"
