"""文件读写公共工具

统一 encoding="utf-8"、可读性判断、原子写入。
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

# 配置 / 清单文件最大大小限制 (10MB)，防止异常大文件导致内存耗尽
MAX_FILE_SIZE = 10 * 1024 * 1024


def is_readable(path: str | Path) -> bool:
    """路径是可读的普通文件"""
    p = Path(path)
    return p.is_file() and os.access(p, os.R_OK)


def check_size(path: Path) -> None:
    """文件超过 MAX_FILE_SIZE 时抛出 ValueError"""
    file_size = path.stat().st_size
    if file_size > MAX_FILE_SIZE:
        raise ValueError(
            f"文件过大: {path} ({file_size} 字节), "
            f"超过限制 {MAX_FILE_SIZE} 字节"
        )


def atomic_write(path: Path, content: str) -> None:
    """原子写入文件：先写临时文件再 rename，防止中途崩溃导致损坏

    异常:
        OSError: 文件写入或移动失败
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(
        dir=str(path.parent), suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, str(path))
    except Exception:
        # 只捕获普通异常，不拦截 KeyboardInterrupt/SystemExit
        try:
            os.unlink(tmp)
        except OSError:
            # 临时文件清理失败不影响原异常抛出
            pass
        raise
