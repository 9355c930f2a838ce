"""受管包注册表

遍历全部路径模式，解析目录并构建受管包，生成 {包名: 受管包} 映射。
每次调用都重新扫描，不跨调用缓存。
"""

from __future__ import annotations

import logging

from studio.core.dep.builder import ManagedPackageBuilder
from studio.core.dep.paths import PathResolver
from studio.host.package import Package

logger = logging.getLogger(__name__)


class ManagedPackageRegistry:
    """受管包注册表

    同名包由后解析到的路径覆盖先前的，并记录警告。
    """

    def __init__(
        self,
        patterns: list[str],
        resolver: PathResolver,
        builder: ManagedPackageBuilder,
    ) -> None:
        self.patterns = list(patterns)
        self.resolver = resolver
        self.builder = builder

    def paths(self, patterns: list[str] | None = None) -> list[str]:
        """所有模式展开后的目录（跨模式不去重）"""
        result: list[str] = []
        for pattern in self.patterns if patterns is None else patterns:
            result.extend(self.resolver.resolve(pattern))
        return result

    def build_all(self, patterns: list[str] | None = None) -> dict[str, Package]:
        packages: dict[str, Package] = {}
        for path in self.paths(patterns):
            package = self.builder.build(path)
            if package is None:
                continue
            previous = packages.get(package.name)
            if previous is not None:
                logger.warning(
                    "受管包重名: %s (%s 覆盖 %s)",
                    package.name, path, previous.dist_url,
                )
            packages[package.name] = package

        logger.debug("已发现 %d 个受管包", len(packages))
        return packages

    def list_packages(self, packages: dict[str, Package] | None = None) -> list[dict[str, str]]:
        """格式化受管包列表用于展示"""
        if packages is None:
            packages = self.build_all()
        return [
            {
                "name": p.name,
                "version": p.pretty_version,
                "path": p.dist_url or "",
                "description": p.description,
            }
            for p in packages.values()
        ]
