"""人工审计：只提供元数据，需要人工核查，自动运行时得分恒为 0。"""

from __future__ import annotations

from filmstrip.core import AuditProduct

from .base import AuditArtifacts, AuditContext, AuditMeta, ScoreDisplayMode


class ManualAudit:
    """人工审计基础实现，由具体审计提供 id/标题/描述。"""

    def __init__(self, meta: AuditMeta) -> None:
        self._meta = meta

    def metadata(self) -> AuditMeta:
        return self._meta

    def run(self, artifacts: AuditArtifacts, context: AuditContext) -> AuditProduct:
        return AuditProduct(score=0)


def manual_meta(audit_id: str, title: str, description: str) -> AuditMeta:
    return AuditMeta(
        id=audit_id,
        title=title,
        description=description,
        score_display_mode=ScoreDisplayMode.MANUAL,
        required_artifacts=(),
    )


USE_LANDMARKS_META = manual_meta(
    "use-landmarks",
    "HTML5 landmark elements are used to improve navigation",
    "Landmark elements (<main>, <nav>, etc.) are used to improve the keyboard navigation of the page "
    "for assistive technology. [Learn more](https://web.dev/use-landmarks/).",
)


class UseLandmarksAudit(ManualAudit):
    """检查页面是否尽量使用 landmark 元素。"""

    def __init__(self) -> None:
        super().__init__(USE_LANDMARKS_META)
