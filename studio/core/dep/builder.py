"""受管包构建

读取目录中的 composer.json，以本地版本标记覆盖声明的版本，
构造 dist 类型为 path 的包描述。
"""

from __future__ import annotations

import logging
from pathlib import Path

from studio.core.dep.version_probe import LocalVersionProbe
from studio.core.exceptions import ManifestError
from studio.host.package import ArrayLoader, Package
from studio.host.repository import MANIFEST_FILENAME
from studio.utils.fileio import is_readable
from studio.utils.json_io import load_json

logger = logging.getLogger(__name__)


class ManagedPackageBuilder:
    """目录 → 受管包"""

    def __init__(
        self,
        root_name: str,
        probe: LocalVersionProbe | None = None,
        loader: ArrayLoader | None = None,
    ) -> None:
        self.root_name = root_name.lower()
        self.probe = probe or LocalVersionProbe()
        self.loader = loader or ArrayLoader()

    def build(self, path: str) -> Package | None:
        """构建受管包

        返回 None 的情况:
          - 目录中没有可读的 composer.json（不是包）
          - 包名与根项目相同（禁止覆盖自身）

        异常:
            ManifestError: 清单存在但无法解析
            OSError: 清单可读但读取失败
        """
        manifest = Path(path) / MANIFEST_FILENAME
        if not is_readable(manifest):
            logger.debug("跳过无清单目录: %s", path)
            return None

        try:
            data = load_json(manifest)
        except ValueError as e:
            raise ManifestError(f"清单解析失败: {manifest}: {e}", str(manifest)) from e
        if not isinstance(data, dict):
            raise ManifestError(f"清单顶层必须是对象: {manifest}", str(manifest))

        version = self.probe.probe(path)
        data["version"] = version["version"]

        # 存在 branch-alias 时 loader 返回 AliasPackage，无法单独设置 dist 元数据
        extra = data.get("extra")
        if isinstance(extra, dict):
            extra.pop("branch-alias", None)

        try:
            package: Package = self.loader.load(data)  # type: ignore[assignment]
        except ManifestError as e:
            e.path = str(manifest)
            raise

        package.pretty_version = version["pretty_version"]
        package.clear_source()
        package.dist_type = "path"
        package.dist_url = path
        package.dist_reference = None

        if package.name == self.root_name:
            logger.debug("跳过根项目自身: %s", path)
            return None
        return package
