"""PathResolver 单元测试"""

from __future__ import annotations

import os
from pathlib import Path

from studio.core.dep.paths import PathResolver


class TestPathResolver:
    def test_no_match_returns_empty(self, tmp_path: Path) -> None:
        assert PathResolver(str(tmp_path)).resolve("packages/*") == []

    def test_nonexistent_absolute_pattern(self, tmp_path: Path) -> None:
        assert PathResolver().resolve(str(tmp_path / "nope" / "*")) == []

    def test_glob_expands_directories_sorted(self, tmp_path: Path) -> None:
        for name in ("b-lib", "a-lib", "c-lib"):
            (tmp_path / "packages" / name).mkdir(parents=True)
        paths = PathResolver(str(tmp_path)).resolve("packages/*")
        assert paths == [
            str(tmp_path / "packages" / "a-lib"),
            str(tmp_path / "packages" / "b-lib"),
            str(tmp_path / "packages" / "c-lib"),
        ]

    def test_files_are_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "packages" / "lib").mkdir(parents=True)
        (tmp_path / "packages" / "README.md").write_text("x")
        paths = PathResolver(str(tmp_path)).resolve("packages/*")
        assert paths == [str(tmp_path / "packages" / "lib")]

    def test_relative_pattern_uses_base_dir(self, tmp_path: Path) -> None:
        (tmp_path / "lib-foo").mkdir()
        project = tmp_path / "app"
        project.mkdir()
        paths = PathResolver(str(project)).resolve("../lib-foo")
        assert paths == [str(tmp_path / "lib-foo")]
        assert all(os.path.isabs(p) for p in paths)

    def test_duplicates_removed(self, tmp_path: Path) -> None:
        (tmp_path / "lib").mkdir()
        (tmp_path / "other").mkdir()
        resolver = PathResolver(str(tmp_path))
        assert resolver.resolve("*/../lib") == [str(tmp_path / "lib")]

    def test_reflects_current_filesystem(self, tmp_path: Path) -> None:
        resolver = PathResolver(str(tmp_path))
        assert resolver.resolve("pkgs/*") == []
        (tmp_path / "pkgs" / "one").mkdir(parents=True)
        assert resolver.resolve("pkgs/*") == [str(tmp_path / "pkgs" / "one")]

    def test_base_dir_with_glob_characters(self, tmp_path: Path) -> None:
        project = tmp_path / "app[1]"
        (project / "packages" / "acme-lib").mkdir(parents=True)
        paths = PathResolver(str(project)).resolve("packages/*")
        assert paths == [str(project / "packages" / "acme-lib")]
