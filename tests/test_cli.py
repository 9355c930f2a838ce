"""CLI 测试"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from studio import __version__
from studio.cli import main
from studio.utils.logger import reset_logging
from tests.helpers import write_package


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()


def _invoke(project: Path, *args: str):
    return CliRunner().invoke(main, ["--dir", str(project), *args])


class TestCli:
    def test_version(self) -> None:
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_load_and_unload(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "load", "packages/*")
        assert result.exit_code == 0
        assert "已加载" in result.output
        data = json.loads((tmp_path / "studio.json").read_text())
        assert data == {"path-patterns": ["packages/*"]}

        result = _invoke(tmp_path, "load", "packages/*")
        assert "已在管理中" in result.output

        result = _invoke(tmp_path, "unload", "packages/*")
        assert "已卸载" in result.output
        assert json.loads((tmp_path / "studio.json").read_text()) == {"path-patterns": []}

        result = _invoke(tmp_path, "unload", "packages/*")
        assert "未在管理中" in result.output

    def test_scan_lists_packages(self, tmp_path: Path) -> None:
        (tmp_path / "composer.json").write_text(json.dumps({"name": "acme/app"}))
        write_package(tmp_path / "packages", "acme/app")
        lib = write_package(tmp_path / "packages", "acme/lib", marker="1.2.3")
        _invoke(tmp_path, "load", "packages/*")

        result = _invoke(tmp_path, "scan")

        assert result.exit_code == 0
        assert "acme/lib" in result.output
        assert "1.2.3" in result.output
        assert str(lib) in result.output
        assert "acme/app " not in result.output

    def test_scan_without_paths(self, tmp_path: Path) -> None:
        result = _invoke(tmp_path, "scan")
        assert result.exit_code == 0
        assert "没有受管路径" in result.output

    def test_scan_reports_manifest_error(self, tmp_path: Path) -> None:
        bad = tmp_path / "packages" / "bad"
        bad.mkdir(parents=True)
        (bad / "composer.json").write_text("{")
        _invoke(tmp_path, "load", "packages/*")
        result = _invoke(tmp_path, "scan")
        assert result.exit_code != 0
        assert "清单解析失败" in result.output

    def test_invalid_config_reported(self, tmp_path: Path) -> None:
        (tmp_path / "studio.json").write_text("{")
        result = _invoke(tmp_path, "load", "x")
        assert result.exit_code != 0
        assert "配置文件格式错误" in result.output
