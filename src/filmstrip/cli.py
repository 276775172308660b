"""filmstrip Typer CLI，便于在命令行生成胶片条。"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from filmstrip.audits import AuditArtifacts, AuditContext, ExecutionMode, ScreenshotThumbnailsAudit, list_audits
from filmstrip.core import FilmstripConfig, FilmstripError, load_config, setup_logging
from filmstrip.thumbnails import JpegEncoder, scale_to_thumbnail
from filmstrip.timeline import load_image_rgba

app = typer.Typer(help="filmstrip 开发 CLI")


@app.callback()
def main() -> None:
    """filmstrip 顶层 CLI，占位以展示子命令列表。"""

    return None


def _resolve_config(config_path: Optional[Path]) -> FilmstripConfig:
    return load_config(config_path) if config_path else load_config()


@app.command("build")
def build_cmd(
    manifest: Path = typer.Argument(..., exists=True, resolve_path=True, help="截图清单 JSON 路径"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="审计结果输出路径，默认打印到终端"),
    mode: ExecutionMode = typer.Option(ExecutionMode.NAVIGATION, "--mode", help="执行模式：navigation 或 timespan", case_sensitive=False),
    min_duration: Optional[float] = typer.Option(None, "--min-duration", help="覆盖最短时间线长度（毫秒）"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="缩放/编码线程数"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="自定义配置文件"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="日志级别"),
) -> None:
    """读取截图清单并输出 screenshot-thumbnails 审计结果。"""

    if min_duration is not None and min_duration <= 0:
        raise typer.BadParameter("--min-duration 需为正数", param_hint="min_duration")
    cfg = _resolve_config(config_path)
    setup_logging(log_level or cfg.logging.level)
    if workers is not None:
        cfg = cfg.model_copy(update={"thumbnails": cfg.thumbnails.model_copy(update={"max_workers": workers})})

    audit = ScreenshotThumbnailsAudit(config=cfg)
    options = {"minimum_timeline_duration": min_duration} if min_duration is not None else {}
    try:
        product = audit.run(AuditArtifacts(trace=manifest), AuditContext(mode=mode, options=options))
    except FilmstripError as exc:
        typer.echo(f"生成胶片条失败：{exc}", err=True)
        raise typer.Exit(code=1) from exc

    text = json.dumps(product.to_dict(), ensure_ascii=False, indent=2)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    if product.not_applicable:
        typer.echo(f"没有可用截图，已标记为不适用：{output}")
    else:
        typer.echo(f"生成 {len(product.details.thumbnails)} 张缩略图，输出到 {output}")


@app.command("thumbnail")
def thumbnail_cmd(
    image: Path = typer.Argument(..., exists=True, resolve_path=True, help="待缩放截图"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="JPEG 输出路径"),
) -> None:
    """将单张截图缩放为缩略图 JPEG。"""

    try:
        thumbnail = scale_to_thumbnail(load_image_rgba(image))
        data = JpegEncoder().encode(thumbnail)
    except FilmstripError as exc:
        typer.echo(f"处理失败：{exc}", err=True)
        raise typer.Exit(code=1) from exc

    output = output or image.with_name(f"{image.stem}_thumb.jpg")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(data)
    typer.echo(f"{thumbnail.width}x{thumbnail.height} -> {output}")


@app.command("audits")
def audits_cmd() -> None:
    """列出已注册的审计。"""

    for meta in list_audits():
        typer.echo(f"{meta.id}\t{meta.title}\t{meta.score_display_mode.value}")


if __name__ == "__main__":  # pragma: no cover
    app()
