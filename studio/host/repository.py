"""宿主仓库层

ArrayRepository:   内存仓库（模拟远程注册表）
PathRepository:    本地目录仓库，版本检测策略通过构造参数注入
RepositoryManager: 仓库查找顺序，prepend 即最高优先级
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol

from studio.core.exceptions import ManifestError, RepositoryError
from studio.host.package import DEFAULT_VERSION, AliasPackage, ArrayLoader, Package
from studio.utils.fileio import is_readable
from studio.utils.json_io import load_json

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "composer.json"


class VersionStrategy(Protocol):
    """版本检测策略协议

    PathRepository 通过它为目录中的包确定版本，
    替换策略即可绕过默认的版本检测链。
    """

    def guess_version(self, package_config: dict[str, Any], path: str) -> dict[str, str] | None:
        """返回 {"version": ..., "pretty_version": ...}，无法确定时返回 None"""
        ...


class ManifestVersionStrategy:
    """默认策略：使用清单中声明的 version"""

    def guess_version(self, package_config: dict[str, Any], path: str) -> dict[str, str] | None:
        version = package_config.get("version")
        if not isinstance(version, str) or not version:
            return None
        return {"version": version, "pretty_version": version}


class ArrayRepository:
    """内存包仓库"""

    def __init__(self, packages: list[Package | AliasPackage] | None = None) -> None:
        self._packages: list[Package | AliasPackage] = list(packages or [])

    def add_package(self, package: Package | AliasPackage) -> None:
        self._packages.append(package)

    def packages(self) -> list[Package | AliasPackage]:
        return list(self._packages)

    def find_packages(self, name: str) -> list[Package | AliasPackage]:
        name = name.lower()
        return [p for p in self.packages() if p.name == name]


class PathRepository(ArrayRepository):
    """本地目录仓库

    配置:
        {"type": "path", "url": "/abs/dir", "options": {"symlink": true}}
    """

    def __init__(
        self,
        repo_config: dict[str, Any],
        version_strategy: VersionStrategy | None = None,
    ) -> None:
        super().__init__()
        if repo_config.get("type", "path") != "path":
            raise RepositoryError(f"PathRepository 不支持类型: {repo_config.get('type')}")
        url = repo_config.get("url")
        if not url:
            raise RepositoryError("path 类型仓库必须指定 url")
        self.url = str(url)
        self.options: dict[str, Any] = dict(repo_config.get("options") or {})
        self.version_strategy: VersionStrategy = version_strategy or ManifestVersionStrategy()
        self._loaded = False

    def packages(self) -> list[Package | AliasPackage]:
        if not self._loaded:
            self._loaded = True
            self._load()
        return super().packages()

    def _load(self) -> None:
        manifest = Path(self.url) / MANIFEST_FILENAME
        if not is_readable(manifest):
            logger.debug("目录中没有可读的清单: %s", self.url)
            return

        try:
            data = load_json(manifest)
        except ValueError as e:
            raise ManifestError(f"清单解析失败: {manifest}: {e}", str(manifest)) from e
        if not isinstance(data, dict):
            raise ManifestError(f"清单顶层必须是对象: {manifest}", str(manifest))

        guessed = self.version_strategy.guess_version(data, self.url)
        data["version"] = guessed["version"] if guessed else DEFAULT_VERSION

        package = ArrayLoader().load(data)
        target = package.alias_of if isinstance(package, AliasPackage) else package
        target.dist_type = "path"
        target.dist_url = self.url
        target.dist_reference = None
        self.add_package(package)


class RepositoryManager:
    """仓库查找顺序管理"""

    def __init__(self) -> None:
        self._repositories: list[ArrayRepository] = []

    @property
    def repositories(self) -> list[ArrayRepository]:
        return list(self._repositories)

    def add_repository(self, repository: ArrayRepository) -> None:
        """追加到末尾（最低优先级）"""
        self._repositories.append(repository)

    def prepend_repository(self, repository: ArrayRepository) -> None:
        """插入到最前（最高优先级）"""
        self._repositories.insert(0, repository)

    def find_packages(self, name: str) -> list[Package | AliasPackage]:
        """按优先级顺序返回所有仓库中的同名包"""
        found: list[Package | AliasPackage] = []
        for repo in self._repositories:
            found.extend(repo.find_packages(name))
        return found
