"""宿主容器与安装流程

Composer 持有一次命令调用内共享的宿主对象；
Installer 按固定顺序驱动生命周期:

  pre-install-cmd / pre-update-cmd
      → 构造 Request
      → pre-dependencies-solving
      → solver(request, repository_manager)
      → post-dependencies-solving
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from studio.host.events import (
    POST_DEPENDENCIES_SOLVING,
    PRE_DEPENDENCIES_SOLVING,
    PRE_INSTALL_CMD,
    PRE_UPDATE_CMD,
    Event,
    EventDispatcher,
    InstallerEvent,
)
from studio.host.operations import Operation
from studio.host.package import RootPackage
from studio.host.repository import RepositoryManager
from studio.host.request import Request

logger = logging.getLogger(__name__)

Solver = Callable[[Request, RepositoryManager], list[Operation]]

_COMMAND_EVENTS = {
    "install": PRE_INSTALL_CMD,
    "update": PRE_UPDATE_CMD,
}


class HostConfig:
    """宿主运行期配置（仅内存，不落盘）"""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {"repositories": {}}
        if data:
            self.merge(data)

    def merge(self, data: dict[str, Any]) -> None:
        """合并配置，repositories 按名称覆盖"""
        for key, value in data.items():
            if key == "repositories":
                self._data["repositories"].update(value)
            else:
                self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    @property
    def repositories(self) -> dict[str, dict[str, Any]]:
        return dict(self._data["repositories"])


class Composer:
    """一次命令调用内共享的宿主对象"""

    def __init__(
        self,
        package: RootPackage,
        config: HostConfig | None = None,
        repository_manager: RepositoryManager | None = None,
        event_dispatcher: EventDispatcher | None = None,
    ) -> None:
        self.package = package
        self.config = config or HostConfig()
        self.repository_manager = repository_manager or RepositoryManager()
        self.event_dispatcher = event_dispatcher or EventDispatcher()


class Installer:
    """驱动 install / update 生命周期"""

    def __init__(self, composer: Composer, solver: Solver) -> None:
        self.composer = composer
        self.solver = solver

    def run(self, command: str = "install") -> list[Operation]:
        if command not in _COMMAND_EVENTS:
            raise ValueError(f"不支持的命令: {command}")
        dispatcher = self.composer.event_dispatcher

        dispatcher.dispatch(Event(_COMMAND_EVENTS[command]))

        request = Request()
        for name, constraint in self.composer.package.requires.items():
            if command == "update":
                request.update(name, constraint)
            else:
                request.install(name, constraint)

        dispatcher.dispatch(InstallerEvent(PRE_DEPENDENCIES_SOLVING, request=request))

        operations = list(self.solver(request, self.composer.repository_manager))
        logger.debug("求解完成: %d 个操作", len(operations))

        dispatcher.dispatch(InstallerEvent(
            POST_DEPENDENCIES_SOLVING, request=request, operations=operations,
        ))
        return operations
