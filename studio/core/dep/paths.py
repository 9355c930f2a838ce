"""受管路径解析

将 glob 模式展开为当前存在的目录列表，每次调用都重新读取文件系统。
"""

from __future__ import annotations

import glob
import logging
import os

logger = logging.getLogger(__name__)


class PathResolver:
    """glob 模式 → 去重、顺序稳定的绝对目录路径列表

    相对模式以 base_dir 为基准展开。无匹配、模式无效或目录无权限
    时返回空列表，不抛异常。
    """

    def __init__(self, base_dir: str = ".") -> None:
        self.base_dir = os.path.abspath(base_dir)

    def resolve(self, pattern: str) -> list[str]:
        expanded = os.path.expanduser(pattern)
        if not os.path.isabs(expanded):
            expanded = os.path.join(glob.escape(self.base_dir), expanded)

        paths: list[str] = []
        for match in sorted(glob.glob(expanded)):
            real = os.path.normpath(match)
            if real in paths or not os.path.isdir(real):
                continue
            paths.append(real)

        if not paths:
            logger.debug("路径模式无匹配: %s", pattern)
        return paths
