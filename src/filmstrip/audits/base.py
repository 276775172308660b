"""审计能力接口：元数据 + run(artifacts, context)，由注册表按 id 查找。"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Protocol, Tuple

from filmstrip.core import AuditProduct


class ExecutionMode(str, Enum):
    """navigation 为完整页面加载，timespan 为用户录制的时间段。"""

    NAVIGATION = "navigation"
    TIMESPAN = "timespan"


class ScoreDisplayMode(str, Enum):
    NUMERIC = "numeric"
    BINARY = "binary"
    INFORMATIVE = "informative"
    MANUAL = "manual"


@dataclass(slots=True, frozen=True)
class AuditMeta:
    id: str
    title: str
    description: str
    score_display_mode: ScoreDisplayMode
    required_artifacts: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "scoreDisplayMode": self.score_display_mode.value,
            "requiredArtifacts": list(self.required_artifacts),
        }


@dataclass(slots=True)
class AuditArtifacts:
    """审计输入：trace 为时间线来源可识别的句柄（如清单路径）。"""

    trace: Any


@dataclass(slots=True)
class AuditContext:
    mode: ExecutionMode = ExecutionMode.NAVIGATION
    options: Dict[str, Any] = field(default_factory=dict)


class Audit(Protocol):
    def metadata(self) -> AuditMeta:
        ...

    def run(self, artifacts: AuditArtifacts, context: AuditContext) -> AuditProduct:
        ...
