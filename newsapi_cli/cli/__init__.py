"""NewsAPI CLI 顶层入口。

本模块仅负责定义 Click 命令组并导入各子命令模块，
实际请求与渲染逻辑拆分在 `newsapi_cli.cli.*` 子模块中。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..config import Settings
from ..logging import setup_logging


@click.group()
@click.option(
    "--env-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="额外加载的 .env 文件。",
)
@click.option("--log-level", default=None, help="日志级别，覆盖 NEWSAPI_LOG_LEVEL。")
@click.pass_context
def main(ctx: click.Context, env_file: Optional[Path], log_level: Optional[str]) -> None:
    """NewsAPI search CLI."""
    overrides = {"log_level": log_level} if log_level else None
    settings = Settings.load(env_file=env_file, overrides=overrides)
    setup_logging(settings.log_level)
    ctx.obj = settings


# 导入子模块以注册子命令（装饰器在导入时执行）
from . import articles as _articles  # noqa: F401,E402
from . import sources as _sources  # noqa: F401,E402


__all__ = ["main"]
