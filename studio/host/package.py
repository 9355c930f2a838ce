"""宿主包模型

Package:      解析后的包描述（含 source / dist 元数据，可原地修改）
AliasPackage: 分支别名包，包装真实包，自身不携带独立的 dist 元数据
RootPackage:  根项目
ArrayLoader:  将清单字典加载为包对象
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from studio.core.exceptions import ManifestError

DEFAULT_VERSION = "dev-main"


@dataclass
class Package:
    """单个包的描述"""

    name: str
    version: str
    pretty_version: str = ""
    type: str = "library"
    description: str = ""
    requires: dict[str, str] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)
    source_type: str | None = None
    source_url: str | None = None
    source_reference: str | None = None
    dist_type: str | None = None
    dist_url: str | None = None
    dist_reference: str | None = None
    # 用户最初请求的版本字符串，仅用于展示
    requested_pretty_version: str = ""

    def __post_init__(self) -> None:
        self.name = self.name.lower()
        if not self.pretty_version:
            self.pretty_version = self.version

    def clear_source(self) -> None:
        self.source_type = None
        self.source_url = None
        self.source_reference = None

    def replace_version(self, version: str, pretty_version: str) -> None:
        """替换版本，保留首次请求的展示版本"""
        if not self.requested_pretty_version:
            self.requested_pretty_version = self.pretty_version
        self.version = version
        self.pretty_version = pretty_version

    @property
    def full_pretty_version(self) -> str:
        if self.requested_pretty_version and self.requested_pretty_version != self.pretty_version:
            return f"{self.pretty_version} (requested {self.requested_pretty_version})"
        return self.pretty_version

    def __str__(self) -> str:
        return f"{self.name} {self.full_pretty_version}"


class AliasPackage:
    """分支别名包

    dist 元数据只读，始终来自 alias_of。
    """

    def __init__(self, alias_of: Package, version: str, pretty_version: str) -> None:
        self.alias_of = alias_of
        self.version = version
        self.pretty_version = pretty_version

    @property
    def name(self) -> str:
        return self.alias_of.name

    @property
    def dist_type(self) -> str | None:
        return self.alias_of.dist_type

    @property
    def dist_url(self) -> str | None:
        return self.alias_of.dist_url

    @property
    def dist_reference(self) -> str | None:
        return self.alias_of.dist_reference

    def replace_version(self, version: str, pretty_version: str) -> None:
        self.version = version
        self.pretty_version = pretty_version

    def __str__(self) -> str:
        return f"{self.name} {self.pretty_version} (alias of {self.alias_of.pretty_version})"


@dataclass
class RootPackage:
    """根项目"""

    name: str
    target_dir: str = "."
    requires: dict[str, str] = field(default_factory=dict)
    repositories: list[dict[str, Any]] = field(default_factory=list)
    config: dict[str, Any] = field(default_factory=dict)


def _branch_alias(config: dict[str, Any], pretty_version: str) -> str | None:
    """返回当前开发版本对应的分支别名"""
    if not (pretty_version.startswith("dev-") or pretty_version.endswith("-dev")):
        return None
    extra = config.get("extra") or {}
    aliases = extra.get("branch-alias") if isinstance(extra, dict) else None
    if not isinstance(aliases, dict):
        return None
    alias = aliases.get(pretty_version)
    return alias if isinstance(alias, str) and alias else None


class ArrayLoader:
    """清单字典 → Package / AliasPackage"""

    def load(self, config: dict[str, Any]) -> Package | AliasPackage:
        name = config.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ManifestError("包清单缺少 name 字段")

        version = config.get("version") or DEFAULT_VERSION
        if not isinstance(version, str):
            raise ManifestError(f"{name}: version 必须是字符串")

        requires = config.get("require") or {}
        if not isinstance(requires, dict):
            raise ManifestError(f"{name}: require 必须是对象")
        extra = config.get("extra") or {}
        if not isinstance(extra, dict):
            raise ManifestError(f"{name}: extra 必须是对象")

        source = config.get("source")
        source = source if isinstance(source, dict) else {}
        dist = config.get("dist")
        dist = dist if isinstance(dist, dict) else {}
        package = Package(
            name=name.strip().lower(),
            version=version,
            pretty_version=version,
            type=config.get("type", "library"),
            description=config.get("description", ""),
            requires=dict(requires),
            extra=dict(extra),
            source_type=source.get("type"),
            source_url=source.get("url"),
            source_reference=source.get("reference"),
            dist_type=dist.get("type"),
            dist_url=dist.get("url"),
            dist_reference=dist.get("reference"),
        )

        alias = _branch_alias(config, version)
        if alias:
            return AliasPackage(package, alias, alias)
        return package
