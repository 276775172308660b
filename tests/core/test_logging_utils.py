"""日志工具测试。"""

import logging

import pytest

from filmstrip.core import get_logger, setup_logging


@pytest.fixture
def restore_package_level():
    logger = logging.getLogger("filmstrip")
    previous = logger.level
    yield logger
    logger.setLevel(previous)


def test_setup_logging_sets_package_level(restore_package_level) -> None:
    level = setup_logging("debug")

    assert level == logging.DEBUG
    assert restore_package_level.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(restore_package_level) -> None:
    assert setup_logging("chatty") == logging.INFO


def test_get_logger_nests_under_package() -> None:
    assert get_logger().name == "filmstrip"
    assert get_logger("filmstrip.thumbnails.builder").name == "filmstrip.thumbnails.builder"
    assert get_logger("scripts.demo").name == "filmstrip.scripts.demo"
