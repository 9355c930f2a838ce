"""studio 命令行接口

CLI 按领域拆分为子模块，每个模块注册自己的命令到 main group。
"""

import os

import click

from studio import __version__
from studio.utils.logger import setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option("--dir", "-d", "project_dir", default=".", help="根项目目录")
@click.pass_context
def main(ctx: click.Context, project_dir: str) -> None:
    """studio - 以本地工作副本覆盖依赖包"""
    setup_logging(
        level=os.getenv("STUDIO_LOG_LEVEL", "WARNING"),
        json_output=os.getenv("STUDIO_LOG_JSON", "") == "1",
    )
    ctx.obj = {"project_dir": project_dir}


# 注册各领域子命令
from studio.cli.cmd_paths import register as _reg_paths  # noqa: E402

_reg_paths(main)
