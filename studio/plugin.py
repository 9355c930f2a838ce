"""studio 插件 - 接入宿主的 install / update 生命周期

  pre-install-cmd / pre-update-cmd  → register_studio_packages  (优先级 512)
  pre-dependencies-solving          → alter_request             (优先级 256)
  post-dependencies-solving         → alter_operations          (优先级 256)

用法:
    composer = Composer(RootPackage("acme/app", target_dir="/work/app"))
    StudioPlugin().activate(composer)
    Installer(composer, solver).run("install")
"""

from __future__ import annotations

import logging
import os

from studio.core.config import StudioConfig
from studio.core.dep import (
    LocalVersionProbe,
    ManagedPackageBuilder,
    ManagedPackageRegistry,
    OperationRewriter,
    PathResolver,
    RepositoryRegistrar,
    RequestRewriter,
)
from studio.host.composer import Composer
from studio.host.events import (
    POST_DEPENDENCIES_SOLVING,
    PRE_DEPENDENCIES_SOLVING,
    PRE_INSTALL_CMD,
    PRE_UPDATE_CMD,
    Event,
    InstallerEvent,
)

logger = logging.getLogger(__name__)


class StudioPlugin:
    """本地工作副本覆盖插件"""

    def __init__(self, config: StudioConfig | None = None) -> None:
        self._config = config
        self.composer: Composer | None = None
        self.registry: ManagedPackageRegistry | None = None
        self.probe = LocalVersionProbe()
        self.registrar = RepositoryRegistrar(self.probe)
        self.operation_rewriter = OperationRewriter()
        self.request_rewriter = RequestRewriter()

    def activate(self, composer: Composer) -> None:
        """绑定宿主并订阅事件；未显式传入配置时读取根项目目录下的配置文件"""
        self.composer = composer
        target_dir = os.path.realpath(composer.package.target_dir)
        config = self._config or StudioConfig.locate(target_dir)

        self.registry = ManagedPackageRegistry(
            config.paths,
            resolver=PathResolver(target_dir),
            builder=ManagedPackageBuilder(composer.package.name, probe=self.probe),
        )
        composer.event_dispatcher.add_subscriber(self)
        logger.debug("studio 已激活: %d 个路径模式", len(config.paths))

    def subscribed_events(self) -> dict[str, list[tuple[str, int]]]:
        return {
            PRE_UPDATE_CMD: [("register_studio_packages", 512)],
            PRE_INSTALL_CMD: [("register_studio_packages", 512)],
            POST_DEPENDENCIES_SOLVING: [("alter_operations", 256)],
            PRE_DEPENDENCIES_SOLVING: [("alter_request", 256)],
        }

    def _require_active(self) -> tuple[Composer, ManagedPackageRegistry]:
        if self.composer is None or self.registry is None:
            raise RuntimeError("StudioPlugin 尚未 activate()")
        return self.composer, self.registry

    def register_studio_packages(self, event: Event | None = None) -> None:
        """把所有受管目录注册为最高优先级的 path 仓库"""
        composer, registry = self._require_active()
        self.registrar.register(registry.build_all(), composer)

    def alter_request(self, event: InstallerEvent) -> None:
        self._require_active()
        if event.request is None:
            return
        # 重写器生效前不扫描受管路径
        self.request_rewriter.rewrite(event.request, {})

    def alter_operations(self, event: InstallerEvent) -> None:
        """求解后把受管包的操作改为指向本地目录"""
        _, registry = self._require_active()
        self.operation_rewriter.rewrite(event.operations, registry.build_all())


def register(composer: Composer) -> None:
    """插件入口，供 load_plugins() 调用"""
    StudioPlugin().activate(composer)
