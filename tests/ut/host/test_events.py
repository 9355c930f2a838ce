"""事件分发与插件加载单元测试"""

from __future__ import annotations

import sys
import types

import pytest

from studio.host.composer import Composer
from studio.host.events import (
    POST_DEPENDENCIES_SOLVING,
    PRE_INSTALL_CMD,
    Event,
    EventDispatcher,
    load_plugins,
)
from studio.host.package import RootPackage


class TestEventDispatcher:
    def test_priority_order(self) -> None:
        calls: list[str] = []
        d = EventDispatcher()
        d.add_listener(PRE_INSTALL_CMD, lambda e: calls.append("low"), 0)
        d.add_listener(PRE_INSTALL_CMD, lambda e: calls.append("high"), 512)
        d.add_listener(PRE_INSTALL_CMD, lambda e: calls.append("mid-1"), 256)
        d.add_listener(PRE_INSTALL_CMD, lambda e: calls.append("mid-2"), 256)
        d.dispatch(Event(PRE_INSTALL_CMD))
        assert calls == ["high", "mid-1", "mid-2", "low"]

    def test_unknown_event_rejected(self) -> None:
        with pytest.raises(ValueError, match="未知的事件"):
            EventDispatcher().add_listener("post-foo", lambda e: None)

    def test_listener_errors_propagate(self) -> None:
        d = EventDispatcher()

        def boom(event: Event) -> None:
            raise RuntimeError("boom")

        d.add_listener(POST_DEPENDENCIES_SOLVING, boom)
        with pytest.raises(RuntimeError, match="boom"):
            d.dispatch(Event(POST_DEPENDENCIES_SOLVING))

    def test_add_subscriber(self) -> None:
        class Sub:
            def __init__(self) -> None:
                self.seen: list[str] = []

            def subscribed_events(self) -> dict[str, list[tuple[str, int]]]:
                return {PRE_INSTALL_CMD: [("on_install", 10)]}

            def on_install(self, event: Event) -> None:
                self.seen.append(event.name)

        sub = Sub()
        d = EventDispatcher()
        d.add_subscriber(sub)
        d.dispatch(Event(PRE_INSTALL_CMD))
        assert sub.seen == [PRE_INSTALL_CMD]


class TestLoadPlugins:
    def test_register_called(self, monkeypatch: pytest.MonkeyPatch) -> None:
        mod = types.ModuleType("fake_studio_plugin")
        seen: list[Composer] = []
        mod.register = seen.append  # type: ignore[attr-defined]
        monkeypatch.setitem(sys.modules, "fake_studio_plugin", mod)
        composer = Composer(RootPackage("acme/app"))
        load_plugins(["fake_studio_plugin"], composer)
        assert seen == [composer]

    def test_module_without_register_skipped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "empty_plugin", types.ModuleType("empty_plugin"))
        load_plugins(["empty_plugin"], Composer(RootPackage("acme/app")))

    def test_missing_module_raises(self) -> None:
        with pytest.raises(ImportError):
            load_plugins(["no_such_plugin_module_xyz"], Composer(RootPackage("acme/app")))
