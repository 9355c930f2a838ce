"""CLI — 受管路径管理命令"""

from __future__ import annotations

import os

import click

from studio.core.config import StudioConfig
from studio.core.dep import ManagedPackageBuilder, ManagedPackageRegistry, PathResolver
from studio.core.exceptions import StudioError
from studio.utils.json_io import load_json


def register(group: click.Group) -> None:
    group.add_command(load)
    group.add_command(unload)
    group.add_command(scan)


def _config(ctx: click.Context) -> StudioConfig:
    try:
        return StudioConfig.locate(ctx.obj["project_dir"])
    except StudioError as e:
        raise click.ClickException(str(e)) from e


def _root_name(project_dir: str) -> str:
    """根项目名称，读不到清单时为空"""
    data = load_json(os.path.join(project_dir, "composer.json"))
    if isinstance(data, dict) and isinstance(data.get("name"), str):
        return data["name"]
    return ""


@click.command()
@click.argument("pattern")
@click.pass_context
def load(ctx: click.Context, pattern: str) -> None:
    """添加受管路径模式（支持 glob）"""
    cfg = _config(ctx)
    if not cfg.add_path(pattern):
        click.echo(f"已在管理中: {pattern}")
        return
    cfg.save()
    click.echo(f"已加载: {pattern}")


@click.command()
@click.argument("pattern")
@click.pass_context
def unload(ctx: click.Context, pattern: str) -> None:
    """移除受管路径模式"""
    cfg = _config(ctx)
    if not cfg.remove_path(pattern):
        click.echo(f"未在管理中: {pattern}")
        return
    cfg.save()
    click.echo(f"已卸载: {pattern}")


@click.command()
@click.pass_context
def scan(ctx: click.Context) -> None:
    """列出受管路径当前解析出的本地包"""
    project_dir = os.path.realpath(ctx.obj["project_dir"])
    cfg = _config(ctx)
    if not cfg.paths:
        click.echo("没有受管路径。")
        return

    try:
        registry = ManagedPackageRegistry(
            cfg.paths,
            resolver=PathResolver(project_dir),
            builder=ManagedPackageBuilder(_root_name(project_dir)),
        )
        packages = registry.list_packages()
    except (StudioError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    if not packages:
        click.echo("受管路径下没有发现包。")
        return
    for p in packages:
        click.echo(f"  {p['name']:30s} {p['version']:16s} {p['path']}")
