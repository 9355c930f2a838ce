"""测试辅助函数 — 构造包目录与模拟求解器"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from studio.host.operations import InstallOperation, Operation, UpdateOperation
from studio.host.package import Package
from studio.host.repository import RepositoryManager
from studio.host.request import Request


def write_package(
    base: Path,
    name: str,
    *,
    version: str | None = None,
    marker: str | None = None,
    marker_file: str = ".studio.version",
    **extra_fields: Any,
) -> Path:
    """在 base 下创建包目录（目录名取包名最后一段）"""
    pkg_dir = base / name.split("/")[-1]
    pkg_dir.mkdir(parents=True, exist_ok=True)
    manifest: dict[str, Any] = {"name": name}
    if version is not None:
        manifest["version"] = version
    manifest.update(extra_fields)
    (pkg_dir / "composer.json").write_text(json.dumps(manifest), encoding="utf-8")
    if marker is not None:
        (pkg_dir / marker_file).write_text(marker, encoding="utf-8")
    return pkg_dir


def registry_package(name: str, version: str) -> Package:
    """模拟注册表中的包（带 VCS source 与 zip dist）"""
    return Package(
        name=name,
        version=version,
        source_type="git",
        source_url=f"https://example.com/{name}.git",
        source_reference="abc123",
        dist_type="zip",
        dist_url=f"https://example.com/{name}/{version}.zip",
        dist_reference="abc123",
    )


def first_match_solver(request: Request, manager: RepositoryManager) -> list[Operation]:
    """最简求解器：每个任务取查找顺序中第一个同名包"""
    operations: list[Operation] = []
    for job in request.jobs:
        candidates = manager.find_packages(job["packageName"])
        if not candidates:
            continue
        operations.append(InstallOperation(candidates[0]))
    return operations


def make_registry_solver(*packages: Package):
    """总是从模拟注册表选包的求解器（忽略本地仓库）"""
    by_name = {p.name: p for p in packages}

    def solve(request: Request, manager: RepositoryManager) -> list[Operation]:
        ops: list[Operation] = []
        for job in request.jobs:
            pkg = by_name.get(job["packageName"])
            if pkg is None:
                continue
            if job["cmd"] == "update":
                ops.append(UpdateOperation(registry_package(pkg.name, "0.0.1"), pkg))
            else:
                ops.append(InstallOperation(pkg))
        return ops

    return solve
