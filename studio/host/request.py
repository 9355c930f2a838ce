"""求解请求"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Request:
    """交给求解器的任务列表

    每个任务形如 {"cmd": "install", "packageName": ..., "constraint": ...}。
    """

    jobs: list[dict[str, Any]] = field(default_factory=list)

    def install(self, package_name: str, constraint: str | None = None) -> None:
        self.jobs.append({
            "cmd": "install",
            "packageName": package_name.lower(),
            "constraint": constraint,
        })

    def update(self, package_name: str, constraint: str | None = None) -> None:
        self.jobs.append({
            "cmd": "update",
            "packageName": package_name.lower(),
            "constraint": constraint,
        })

    def replace_jobs(self, jobs: list[dict[str, Any]]) -> None:
        """整体替换任务列表（求解前重写约束的扩展点）"""
        self.jobs = list(jobs)
