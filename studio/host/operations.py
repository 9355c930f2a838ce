"""求解器产出的操作计划"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from studio.host.package import AliasPackage, Package

AnyPackage = Union[Package, AliasPackage]


@dataclass
class InstallOperation:
    package: AnyPackage
    kind: str = "install"

    def __str__(self) -> str:
        return f"Installing {self.package}"


@dataclass
class UninstallOperation:
    package: AnyPackage
    kind: str = "uninstall"

    def __str__(self) -> str:
        return f"Removing {self.package}"


@dataclass
class UpdateOperation:
    initial_package: AnyPackage
    target_package: AnyPackage
    kind: str = "update"

    def __str__(self) -> str:
        return f"Updating {self.initial_package} to {self.target_package}"


Operation = Union[InstallOperation, UninstallOperation, UpdateOperation]
