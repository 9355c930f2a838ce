"""本地版本探测

从包目录中的标记文件读取版本，用于标识本地工作副本:

  1. .studio.version
  2. studio.version
  3. 都不存在 → dev-studio
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from studio.core.dep.models import LOCAL_VERSION, MARKER_FILENAMES
from studio.utils.fileio import is_readable

logger = logging.getLogger(__name__)


class LocalVersionProbe:
    """标记文件版本探测，同时实现宿主的 VersionStrategy 协议"""

    def read_marker(self, path: str | Path) -> str | None:
        """读取首个可读标记文件的内容（去除首尾空白）

        异常:
            OSError: 文件可读但读取失败
        """
        for filename in MARKER_FILENAMES:
            marker = Path(path) / filename
            if is_readable(marker):
                try:
                    return marker.read_text(encoding="utf-8").strip()
                except UnicodeDecodeError as e:
                    raise OSError(f"版本标记文件不是有效的 UTF-8: {marker}") from e
        return None

    def probe(self, path: str | Path) -> dict[str, str]:
        version = self.read_marker(path) or LOCAL_VERSION
        logger.debug("本地版本: %s -> %s", path, version)
        return {"version": version, "pretty_version": version}

    def guess_version(self, package_config: dict[str, Any], path: str) -> dict[str, str]:
        return self.probe(path)
