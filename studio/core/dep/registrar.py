"""受管仓库注册

在求解开始前，把每个受管包目录注册为最高优先级的 path 仓库，
使求解器优先从本地工作副本满足约束。
"""

from __future__ import annotations

import logging

from studio.core.dep.models import RepositoryEntry
from studio.core.dep.version_probe import LocalVersionProbe
from studio.host.composer import Composer
from studio.host.package import Package
from studio.host.repository import PathRepository

logger = logging.getLogger(__name__)


class RepositoryRegistrar:
    """受管包 → path 仓库

    每个条目同时写入三处:
      - 宿主运行期配置 (config.repositories)
      - 仓库管理器查找顺序（prepend，最高优先级）
      - 根项目的仓库声明列表（append）
    """

    def __init__(self, probe: LocalVersionProbe | None = None) -> None:
        self.probe = probe or LocalVersionProbe()

    def register(self, managed_packages: dict[str, Package], composer: Composer) -> None:
        manager = composer.repository_manager
        root = composer.package

        for name, package in managed_packages.items():
            entry = RepositoryEntry(name=name, url=package.dist_url or "")
            repo_config = entry.to_config()

            composer.config.merge({"repositories": {name: repo_config}})

            manager.prepend_repository(
                PathRepository(repo_config, version_strategy=self.probe),
            )

            root.repositories.append({"name": name, **repo_config})
            logger.info("已注册本地仓库: %s -> %s", name, entry.url)
