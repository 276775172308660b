"""配置加载工具：YAML 文件 + 环境变量覆盖，统一由 pydantic 校验。"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, MutableMapping, Sequence, Tuple

import yaml
from pydantic import BaseModel, Field

CONFIG_ENV_KEY = "FILMSTRIP_CONFIG_PATH"

# 胶片条的固定参数，属于下游兼容约定，不开放配置
NUMBER_OF_THUMBNAILS = 10
THUMBNAIL_WIDTH = 120
JPEG_QUALITY = 90


class ThumbnailConfig(BaseModel):
    """缩略图生成参数。"""

    minimum_timeline_duration: float = Field(
        default=3000.0,
        gt=0,
        description="时间线最短长度（毫秒），避免加载极快的页面只得到一张截图",
    )
    max_workers: int = Field(default=1, ge=1, description="缩放/编码线程数，1 表示串行")


class TimelineConfig(BaseModel):
    """时间线来源参数。"""

    memoize: bool = Field(default=True, description="同一 trace 只计算一次时间线")


class LoggingConfig(BaseModel):
    level: str = "INFO"


class FilmstripConfig(BaseModel):
    """聚合各阶段配置。"""

    thumbnails: ThumbnailConfig = Field(default_factory=ThumbnailConfig)
    timeline: TimelineConfig = Field(default_factory=TimelineConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    raw: Dict[str, Any] = Field(default_factory=dict, description="原始配置字典，便于调试。")

    def to_raw_dict(self) -> Dict[str, Any]:
        return {
            "thumbnails": self.thumbnails.model_dump(),
            "timeline": self.timeline.model_dump(),
            "logging": self.logging.model_dump(),
        }


def _default_config_path() -> Path:
    return Path(__file__).resolve().parents[3] / "configs" / "baseline.yaml"


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
        if not isinstance(data, dict):
            raise ValueError(f"配置文件 {path} 内容需为字典")
        return data


ENV_OVERRIDE_MAP: Dict[str, Tuple[Sequence[str], Callable[[str], Any]]] = {
    "FILMSTRIP_MIN_DURATION_MS": (("thumbnails", "minimum_timeline_duration"), float),
    "FILMSTRIP_MAX_WORKERS": (("thumbnails", "max_workers"), int),
    "FILMSTRIP_LOG_LEVEL": (("logging", "level"), str),
}


def _apply_env_overrides(data: MutableMapping[str, Any], env: Mapping[str, str]) -> None:
    for env_key, (path, caster) in ENV_OVERRIDE_MAP.items():
        if env_key in env:
            _set_nested_value(data, path, caster(env[env_key]))


def _set_nested_value(target: MutableMapping[str, Any], path: Sequence[str], value: Any) -> None:
    cursor: MutableMapping[str, Any] = target
    *parents, last = path
    for key in parents:
        if key not in cursor or not isinstance(cursor[key], MutableMapping):
            cursor[key] = {}
        cursor = cursor[key]  # type: ignore[assignment]
    cursor[last] = value


def load_config(path: str | Path | None = None, *, env: Mapping[str, str] | None = None) -> FilmstripConfig:
    """加载配置：优先显式路径，其次环境变量，最后回退默认 baseline。"""

    env_map = os.environ if env is None else env
    config_path = path or env_map.get(CONFIG_ENV_KEY)
    target_path = Path(config_path).expanduser() if config_path else _default_config_path()
    data = _load_yaml(target_path)
    raw = dict(data)
    _apply_env_overrides(data, env_map)
    return FilmstripConfig.model_validate({**data, "raw": raw})
