"""配置加载器测试，覆盖默认及环境变量覆盖场景。"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from filmstrip.core import FilmstripConfig, load_config


def test_load_config_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.yaml", env={})

    assert isinstance(cfg, FilmstripConfig)
    assert cfg.thumbnails.minimum_timeline_duration == 3000.0
    assert cfg.thumbnails.max_workers == 1
    assert cfg.timeline.memoize is True
    assert cfg.logging.level == "INFO"


def test_load_config_with_env_overrides(tmp_path: Path) -> None:
    custom_cfg = tmp_path / "custom.yaml"
    custom_cfg.write_text(
        """
thumbnails:
  minimum_timeline_duration: 5000
  max_workers: 2
        """.strip()
    )

    cfg = load_config(custom_cfg, env={"FILMSTRIP_MAX_WORKERS": "4", "FILMSTRIP_LOG_LEVEL": "DEBUG"})

    assert cfg.thumbnails.minimum_timeline_duration == 5000.0
    assert cfg.thumbnails.max_workers == 4  # 环境变量覆盖文件值
    assert cfg.logging.level == "DEBUG"
    assert cfg.raw["thumbnails"]["max_workers"] == 2


def test_config_path_from_env(tmp_path: Path) -> None:
    custom_cfg = tmp_path / "env.yaml"
    custom_cfg.write_text("thumbnails:\n  minimum_timeline_duration: 1500\n")

    cfg = load_config(env={"FILMSTRIP_CONFIG_PATH": str(custom_cfg)})

    assert cfg.thumbnails.minimum_timeline_duration == 1500.0


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    custom_cfg = tmp_path / "list.yaml"
    custom_cfg.write_text("- a\n- b\n")

    with pytest.raises(ValueError):
        load_config(custom_cfg, env={})


def test_invalid_values_are_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        load_config(tmp_path / "missing.yaml", env={"FILMSTRIP_MAX_WORKERS": "0"})
    with pytest.raises(ValidationError):
        load_config(tmp_path / "missing.yaml", env={"FILMSTRIP_MIN_DURATION_MS": "-1"})
