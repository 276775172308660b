"""日志工具：统一格式，并单独控制 filmstrip 包内 logger 的级别。"""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "filmstrip"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def setup_logging(level: str | int = "INFO", *, third_party_level: str | int = "WARNING") -> int:
    """配置日志：filmstrip 包使用 level，其余库默认只输出 WARNING 以上。

    返回实际生效的 filmstrip 日志级别，便于 CLI 回显或测试断言。
    """

    package_level = _resolve_level(level)
    logging.basicConfig(level=_resolve_level(third_party_level), format=LOG_FORMAT)
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(package_level)
    return package_level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """获取模块 logger；非 filmstrip 前缀的名字会挂到 filmstrip 根 logger 下。"""

    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
