"""JSON 文件统一读写工具

包清单 (composer.json) 与 studio.json 均经由此处读取。
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from studio.utils.fileio import atomic_write, check_size

logger = logging.getLogger(__name__)


def load_json(path: str | Path) -> Any:
    """读取并解析 JSON 文件

    返回:
        解析结果。文件不存在时返回 None

    异常:
        json.JSONDecodeError: JSON 格式错误
        OSError: 文件存在但读取失败
        ValueError: 文件过大
    """
    p = Path(path)
    if not p.exists():
        return None

    check_size(p)
    try:
        with open(p, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error("解析 JSON 文件失败: %s, 错误: %s", path, e)
        raise
    except OSError as e:
        logger.error("读取文件失败: %s, 错误: %s", path, e)
        raise


def save_json(path: str | Path, data: Any) -> None:
    """原子写入 JSON 文件（4 空格缩进，保留 Unicode，末尾换行）"""
    content = json.dumps(data, indent=4, ensure_ascii=False) + "\n"
    try:
        atomic_write(Path(path), content)
    except OSError as e:
        logger.error("写入文件失败: %s, 错误: %s", path, e)
        raise
