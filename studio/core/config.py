"""studio 项目配置

配置文件位于根项目目录，列出需要以本地工作副本覆盖的包目录（glob 模式）:

    {"path-patterns": ["packages/*", "../lib-foo"]}

优先读取 studio.json；不存在时读取 studio.yml。旧版的 "paths" 键同样接受。
配置对象由调用方显式传入，不提供全局单例。
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from studio.core.exceptions import ConfigError
from studio.utils.json_io import load_json, save_json
from studio.utils.yaml_io import load_yaml, save_yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("studio.json", "studio.yml")
PATTERNS_KEY = "path-patterns"
LEGACY_PATTERNS_KEY = "paths"


@dataclass
class StudioConfig:
    """受管路径配置"""

    paths: list[str] = field(default_factory=list)
    source: str = ""  # 配置文件路径，为空表示未落盘

    @classmethod
    def from_file(cls, path: str | Path) -> StudioConfig:
        """从 JSON / YAML 文件加载，文件不存在则返回空配置"""
        p = Path(path)
        try:
            if p.suffix in (".yml", ".yaml"):
                data = load_yaml(p)
            else:
                data = load_json(p)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigError(f"配置文件格式错误: {p}: {e}") from e

        if data is None:
            return cls(source=str(p))
        if not isinstance(data, dict):
            raise ConfigError(f"配置文件顶层必须是对象: {p}")

        raw = data.get(PATTERNS_KEY, data.get(LEGACY_PATTERNS_KEY, []))
        if raw is None:
            raw = []
        if not isinstance(raw, list) or not all(isinstance(x, str) for x in raw):
            raise ConfigError(f"{PATTERNS_KEY} 必须是字符串列表: {p}")

        logger.debug("配置已加载: %s (%d 个路径模式)", p, len(raw))
        return cls(paths=list(raw), source=str(p))

    @classmethod
    def locate(cls, directory: str | Path) -> StudioConfig:
        """在目录中查找配置文件 (studio.json → studio.yml)"""
        base = Path(directory)
        for name in CONFIG_FILENAMES:
            candidate = base / name
            if candidate.exists():
                return cls.from_file(candidate)
        return cls(source=str(base / CONFIG_FILENAMES[0]))

    def add_path(self, pattern: str) -> bool:
        """添加路径模式，已存在返回 False"""
        if pattern in self.paths:
            return False
        self.paths.append(pattern)
        return True

    def remove_path(self, pattern: str) -> bool:
        """移除路径模式，不存在返回 False"""
        if pattern not in self.paths:
            return False
        self.paths.remove(pattern)
        return True

    def save(self) -> None:
        """写回 source 指向的文件"""
        if not self.source:
            raise ConfigError("配置未关联文件，无法保存")
        p = Path(self.source)
        data = {PATTERNS_KEY: self.paths}
        if p.suffix in (".yml", ".yaml"):
            save_yaml(p, data)
        else:
            save_json(p, data)
        logger.info("配置已保存: %s", p)
