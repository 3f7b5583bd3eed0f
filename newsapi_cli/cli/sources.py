"""新闻源列表子命令。"""

from __future__ import annotations

import click

from ..config import Settings
from ..params import SourceParams
from . import main
from .common import build_client, execute, print_sources


@main.command("sources")
@click.option("--category", "categories", multiple=True, help="分类，可重复。")
@click.option("--language", "languages", multiple=True, help="语言代码，可重复。")
@click.option("--country", "countries", multiple=True, help="国家代码，可重复。")
@click.pass_obj
def sources(
    settings: Settings,
    categories: tuple[str, ...],
    languages: tuple[str, ...],
    countries: tuple[str, ...],
) -> None:
    """列出可用的新闻源，不带过滤条件时返回全部。"""
    params = SourceParams(
        categories=list(categories),
        languages=list(languages),
        countries=list(countries),
    )

    async def _run() -> None:
        async with build_client(settings) as client:
            result = await client.sources(params)
        print_sources(result)

    execute(_run())


__all__ = ["sources"]
