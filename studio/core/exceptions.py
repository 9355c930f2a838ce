"""统一异常体系

所有业务异常继承 StudioError。
"缺失"（清单不存在、标记文件不存在、glob 无匹配）不是异常，由调用方跳过；
格式错误与非缺失类 IO 错误直接抛给宿主，中止本次 install / update。
"""

from __future__ import annotations


class StudioError(Exception):
    """基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(StudioError):
    """studio 配置文件内容无效"""

    code = "CONFIG_ERROR"


class ManifestError(StudioError):
    """包清单 (composer.json) 无法解析为包描述"""

    code = "MANIFEST_ERROR"

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


class RepositoryError(StudioError):
    """仓库配置无效"""

    code = "REPOSITORY_ERROR"
