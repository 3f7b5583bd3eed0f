"""文章检索相关 CLI 子命令。

包含：

- everything：全文检索（支持高级检索语法）；
- headlines：头条新闻。
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

import click

from ..config import Settings
from ..params import EverythingParams, TopHeadlinesParams
from . import main
from .common import TIME_FORMATS, build_client, execute, print_articles


@main.command("everything")
@click.option("--query", "-q", default="", help='检索语句，支持 "短语"、+必含、-排除、AND/OR/NOT。')
@click.option("--title", "query_in_title", default="", help="仅在标题中检索的关键词。")
@click.option("--search-in", default="", help="title|description|content")
@click.option("--source", "sources", multiple=True, help="新闻源 ID，可重复，最多 20 个。")
@click.option("--domain", "domains", multiple=True, help="限定域名，可重复。")
@click.option("--exclude-domain", "exclude_domains", multiple=True, help="排除域名，可重复。")
@click.option("--from", "from_time", type=click.DateTime(formats=TIME_FORMATS), default=None, help="最早发布时间（UTC）。")
@click.option("--to", "to_time", type=click.DateTime(formats=TIME_FORMATS), default=None, help="最晚发布时间（UTC）。")
@click.option("--language", default="", help="语言代码，如 en。")
@click.option("--sort-by", default="", help="relevancy|popularity|publishedAt")
@click.option("--page-size", default=20, show_default=True, type=int)
@click.option("--page", default=1, show_default=True, type=int)
@click.pass_obj
def everything(
    settings: Settings,
    query: str,
    query_in_title: str,
    search_in: str,
    sources: tuple[str, ...],
    domains: tuple[str, ...],
    exclude_domains: tuple[str, ...],
    from_time: Optional[datetime],
    to_time: Optional[datetime],
    language: str,
    sort_by: str,
    page_size: int,
    page: int,
) -> None:
    """全文检索文章。"""
    params = EverythingParams(
        query=query,
        query_in_title=query_in_title,
        search_in=search_in,
        sources=list(sources),
        domains=list(domains),
        exclude_domains=list(exclude_domains),
        from_time=from_time,
        to_time=to_time,
        language=language,
        sort_by=sort_by,
        page_size=page_size,
        page=page,
    )

    async def _run() -> None:
        async with build_client(settings) as client:
            result = await client.everything(params)
        print_articles(result, title="Everything")

    execute(_run())


@main.command("headlines")
@click.option("--query", "-q", default="", help="关键词或短语（不支持高级语法）。")
@click.option("--category", default="", help="business|entertainment|general|health|science|sports|technology")
@click.option("--language", default="", help="语言代码，如 en。")
@click.option("--country", default="", help="国家代码，如 us。")
@click.option("--source", "sources", multiple=True, help="新闻源 ID，可重复；不能与 --country/--category 同用。")
@click.option("--page-size", default=20, show_default=True, type=int)
@click.option("--page", default=1, show_default=True, type=int)
@click.pass_obj
def headlines(
    settings: Settings,
    query: str,
    category: str,
    language: str,
    country: str,
    sources: tuple[str, ...],
    page_size: int,
    page: int,
) -> None:
    """获取头条新闻。"""
    params = TopHeadlinesParams(
        query=query,
        category=category,
        language=language,
        country=country,
        sources=list(sources),
        page_size=page_size,
        page=page,
    )

    async def _run() -> None:
        async with build_client(settings) as client:
            result = await client.top_headlines(params)
        print_articles(result, title="Top Headlines")

    execute(_run())


__all__ = ["everything", "headlines"]
