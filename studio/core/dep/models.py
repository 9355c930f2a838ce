"""受管包数据模型

常量:
- MARKER_FILENAMES: 本地版本标记文件，按优先级排列
- LOCAL_VERSION:    无标记文件时使用的版本，表示"本地工作副本"

数据类:
- RepositoryEntry: 注册到宿主的 path 类型仓库条目
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MARKER_FILENAMES = (".studio.version", "studio.version")
LOCAL_VERSION = "dev-studio"


@dataclass
class RepositoryEntry:
    """path 类型仓库条目"""

    name: str
    url: str
    type: str = "path"
    options: dict[str, Any] = field(default_factory=lambda: {"symlink": True})

    def to_config(self) -> dict[str, Any]:
        """宿主仓库配置格式（不含 name）"""
        return {
            "type": self.type,
            "url": self.url,
            "options": dict(self.options),
        }
