"""CLI 行为测试。"""

import json
from pathlib import Path

import cv2
import numpy as np
from typer.testing import CliRunner

from filmstrip.cli import app
from filmstrip.core import FilmstripConfig
from filmstrip.timeline import write_manifest

runner = CliRunner()


def _manifest(tmp_path: Path, count: int = 3) -> Path:
    frames = []
    for idx in range(count):
        image = np.full((400, 600, 3), idx * 80, dtype=np.uint8)
        name = f"frame_{idx}.png"
        cv2.imwrite(str(tmp_path / name), image)
        frames.append({"timestamp": 1000.0 + idx * 700.0, "path": name})
    manifest = tmp_path / "frames.json"
    write_manifest(manifest, frames, beginning=1000.0)
    return manifest


def test_build_cli_writes_filmstrip(monkeypatch, tmp_path):
    monkeypatch.setattr("filmstrip.cli.load_config", lambda *_, **__: FilmstripConfig())
    output = tmp_path / "out" / "thumbnails.json"

    result = runner.invoke(app, ["build", str(_manifest(tmp_path)), "--output", str(output), "--workers", "2"])

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text())
    assert data["score"] == 1
    assert data["details"]["type"] == "filmstrip"
    assert data["details"]["scale"] == 3000.0
    items = data["details"]["items"]
    assert len(items) == 10
    assert all(item["data"].startswith("data:image/jpeg;base64,") for item in items)


def test_build_cli_timespan_without_screenshots(monkeypatch, tmp_path):
    monkeypatch.setattr("filmstrip.cli.load_config", lambda *_, **__: FilmstripConfig())
    manifest = tmp_path / "empty.json"
    write_manifest(manifest, [], beginning=0.0)
    output = tmp_path / "na.json"

    result = runner.invoke(app, ["build", str(manifest), "--mode", "timespan", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_text()) == {"score": 1, "notApplicable": True}


def test_build_cli_navigation_without_screenshots_fails(monkeypatch, tmp_path):
    monkeypatch.setattr("filmstrip.cli.load_config", lambda *_, **__: FilmstripConfig())
    manifest = tmp_path / "empty.json"
    write_manifest(manifest, [], beginning=0.0)

    result = runner.invoke(app, ["build", str(manifest), "--mode", "navigation"])

    assert result.exit_code == 1


def test_thumbnail_cli(tmp_path):
    image_path = tmp_path / "shot.png"
    cv2.imwrite(str(image_path), np.zeros((800, 1200, 3), dtype=np.uint8))
    output = tmp_path / "thumb.jpg"

    result = runner.invoke(app, ["thumbnail", str(image_path), "--output", str(output)])

    assert result.exit_code == 0, result.output
    decoded = cv2.imread(str(output))
    assert decoded.shape == (80, 120, 3)


def test_audits_cli_lists_registry():
    result = runner.invoke(app, ["audits"])

    assert result.exit_code == 0
    assert "screenshot-thumbnails" in result.stdout
    assert "use-landmarks\t" in result.stdout
    assert "manual" in result.stdout


def test_build_cli_rejects_non_positive_min_duration(monkeypatch, tmp_path):
    monkeypatch.setattr("filmstrip.cli.load_config", lambda *_, **__: FilmstripConfig())
    manifest = _manifest(tmp_path)

    for value in ("0", "-500"):
        result = runner.invoke(app, ["build", str(manifest), "--min-duration", value])
        assert result.exit_code == 2
