"""受管包覆盖模块

- paths.py:         glob 路径解析
- version_probe.py: 本地版本标记探测
- builder.py:       目录 → 受管包
- registry.py:      全部受管包映射
- registrar.py:     求解前注册 path 仓库
- rewriter.py:      求解后改写操作计划
"""

from studio.core.dep.builder import ManagedPackageBuilder
from studio.core.dep.models import LOCAL_VERSION, RepositoryEntry
from studio.core.dep.paths import PathResolver
from studio.core.dep.registrar import RepositoryRegistrar
from studio.core.dep.registry import ManagedPackageRegistry
from studio.core.dep.rewriter import OperationRewriter, RequestRewriter
from studio.core.dep.version_probe import LocalVersionProbe

__all__ = [
    "LOCAL_VERSION",
    "LocalVersionProbe",
    "ManagedPackageBuilder",
    "ManagedPackageRegistry",
    "OperationRewriter",
    "PathResolver",
    "RepositoryEntry",
    "RepositoryRegistrar",
    "RequestRewriter",
]
