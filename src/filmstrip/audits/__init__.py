"""审计注册表：按 id 查找相互独立的审计实现。"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from .base import Audit, AuditArtifacts, AuditContext, AuditMeta, ExecutionMode, ScoreDisplayMode
from .classifier import capture, resolve
from .manual import USE_LANDMARKS_META, ManualAudit, UseLandmarksAudit
from .screenshot_thumbnails import META as SCREENSHOT_THUMBNAILS_META, ScreenshotThumbnailsAudit

AUDIT_REGISTRY: Dict[str, Callable[..., Audit]] = {
    SCREENSHOT_THUMBNAILS_META.id: ScreenshotThumbnailsAudit,
    USE_LANDMARKS_META.id: UseLandmarksAudit,
}


def create_audit(audit_id: str, **kwargs: Any) -> Audit:
    try:
        factory = AUDIT_REGISTRY[audit_id]
    except KeyError as exc:
        raise ValueError(f"未知审计: {audit_id}") from exc
    return factory(**kwargs)


def list_audits() -> List[AuditMeta]:
    return [factory().metadata() for factory in AUDIT_REGISTRY.values()]


__all__ = [
    "AUDIT_REGISTRY",
    "Audit",
    "AuditArtifacts",
    "AuditContext",
    "AuditMeta",
    "ExecutionMode",
    "ManualAudit",
    "ScoreDisplayMode",
    "ScreenshotThumbnailsAudit",
    "UseLandmarksAudit",
    "capture",
    "create_audit",
    "list_audits",
    "resolve",
]
