"""生命周期事件与插件加载

事件按优先级从高到低分发，同优先级按注册顺序。
监听器抛出的异常直接向上传播，中止当前命令。

注册插件：创建一个包含 `register(composer)` 函数的模块即可。
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Protocol

if TYPE_CHECKING:
    from studio.host.composer import Composer
    from studio.host.operations import Operation
    from studio.host.request import Request

logger = logging.getLogger(__name__)

PRE_INSTALL_CMD = "pre-install-cmd"
PRE_UPDATE_CMD = "pre-update-cmd"
PRE_DEPENDENCIES_SOLVING = "pre-dependencies-solving"
POST_DEPENDENCIES_SOLVING = "post-dependencies-solving"

KNOWN_EVENTS = (
    PRE_INSTALL_CMD,
    PRE_UPDATE_CMD,
    PRE_DEPENDENCIES_SOLVING,
    POST_DEPENDENCIES_SOLVING,
)


@dataclass
class Event:
    """命令级事件"""

    name: str


@dataclass
class InstallerEvent(Event):
    """求解前后事件，携带请求与操作计划"""

    request: Request | None = None
    operations: list[Operation] = field(default_factory=list)


class EventSubscriber(Protocol):
    """事件订阅者协议

    subscribed_events() 返回 {事件名: [(方法名, 优先级), ...]}
    """

    def subscribed_events(self) -> dict[str, list[tuple[str, int]]]:
        ...


class EventDispatcher:
    """事件分发器"""

    def __init__(self) -> None:
        self._listeners: dict[str, list[tuple[int, int, Callable[[Any], Any]]]] = {
            name: [] for name in KNOWN_EVENTS
        }
        self._seq = 0

    def add_listener(self, event: str, callback: Callable[[Any], Any], priority: int = 0) -> None:
        if event not in self._listeners:
            raise ValueError(f"未知的事件: {event}")
        self._seq += 1
        self._listeners[event].append((priority, self._seq, callback))

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        for event, handlers in subscriber.subscribed_events().items():
            for method, priority in handlers:
                self.add_listener(event, getattr(subscriber, method), priority)

    def listeners(self, event: str) -> list[Callable[[Any], Any]]:
        ordered = sorted(self._listeners.get(event, []), key=lambda x: (-x[0], x[1]))
        return [cb for _, _, cb in ordered]

    def dispatch(self, event: Event) -> None:
        for callback in self.listeners(event.name):
            callback(event)


def load_plugins(plugin_names: list[str], composer: Composer) -> None:
    """按模块名加载插件并注册"""
    for name in plugin_names:
        mod = importlib.import_module(name)
        if not hasattr(mod, "register"):
            logger.warning("插件 '%s' 没有 register() 函数，跳过。", name)
            continue
        mod.register(composer)
        logger.info("插件已加载: %s", name)
