"""求解前后的重写

OperationRewriter: 求解后，把操作计划中的受管包改为指向本地目录
RequestRewriter:   求解前重写请求约束的扩展点，目前不做任何修改
"""

from __future__ import annotations

import logging

from studio.host.operations import (
    AnyPackage,
    InstallOperation,
    Operation,
    UninstallOperation,
    UpdateOperation,
)
from studio.host.package import Package
from studio.host.request import Request

logger = logging.getLogger(__name__)


def _relevant_packages(operation: Operation) -> list[AnyPackage]:
    if isinstance(operation, (InstallOperation, UninstallOperation)):
        return [operation.package]
    if isinstance(operation, UpdateOperation):
        return [operation.initial_package, operation.target_package]
    return []


class OperationRewriter:
    """将操作计划中的受管包原地改写为本地 path 包"""

    def rewrite(self, operations: list[Operation], managed_packages: dict[str, Package]) -> None:
        for operation in operations:
            for package in _relevant_packages(operation):
                managed = managed_packages.get(package.name)
                if managed is None:
                    continue
                self._apply(package, managed)
                logger.debug("%s: %s -> %s", operation.kind, package.name, managed.dist_url)

    @staticmethod
    def _apply(package: AnyPackage, managed: Package) -> None:
        # AliasPackage 的 dist 元数据来自被别名的包
        target = package if isinstance(package, Package) else package.alias_of
        target.clear_source()
        target.dist_type = managed.dist_type
        target.dist_url = managed.dist_url
        target.dist_reference = managed.dist_reference

        package.replace_version(managed.version, managed.pretty_version)


class RequestRewriter:
    """求解前的请求重写（占位）

    预留用于把受管包的安装约束改为精确匹配本地版本，
    生效时通过 Request.replace_jobs() 替换任务列表。
    """

    def rewrite(self, request: Request, managed_packages: dict[str, Package]) -> None:
        return None
