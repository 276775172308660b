"""截图缩略图审计：展示页面加载过程中的视觉变化。"""

from __future__ import annotations

from filmstrip.core import AuditProduct, FilmstripConfig, get_logger
from filmstrip.thumbnails import FilmstripBuilder
from filmstrip.timeline import ManifestTimelineSource, MemoizedTimelineSource, TimelineSource

from .base import AuditArtifacts, AuditContext, AuditMeta, ScoreDisplayMode
from .classifier import capture, resolve

META = AuditMeta(
    id="screenshot-thumbnails",
    title="Screenshot Thumbnails",
    description="This is what the load of your site looked like.",
    score_display_mode=ScoreDisplayMode.INFORMATIVE,
    required_artifacts=("traces", "GatherContext"),
)


class ScreenshotThumbnailsAudit:
    """获取时间线 -> 构建胶片条 -> 按执行模式分类失败。"""

    def __init__(
        self,
        *,
        source: TimelineSource | None = None,
        builder: FilmstripBuilder | None = None,
        config: FilmstripConfig | None = None,
    ) -> None:
        self.config = config or FilmstripConfig()
        if source is None:
            source = ManifestTimelineSource()
            if self.config.timeline.memoize:
                source = MemoizedTimelineSource(source)
        self.source = source
        self.builder = builder or FilmstripBuilder(max_workers=self.config.thumbnails.max_workers)
        self.logger = get_logger(__name__)

    def metadata(self) -> AuditMeta:
        return META

    def run(self, artifacts: AuditArtifacts, context: AuditContext) -> AuditProduct:
        outcome = capture(lambda: self._compute(artifacts, context))
        return resolve(outcome, context.mode)

    def _compute(self, artifacts: AuditArtifacts, context: AuditContext) -> AuditProduct:
        timeline = self.source.request(artifacts.trace, context)
        minimum_duration = (
            context.options.get("minimum_timeline_duration")
            or self.config.thumbnails.minimum_timeline_duration
        )
        result = self.builder.build(timeline, float(minimum_duration))
        return AuditProduct(score=1, details=result)
