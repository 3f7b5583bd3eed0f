"""CLI 通用工具与共享对象。

本模块提供：

- 统一的 Rich `console` 实例；
- 客户端构建与请求执行辅助函数；
- 用于各子命令复用的表格渲染函数。
"""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine

import click
import httpx
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..clients.newsapi import NewsAPIClient
from ..config import Settings
from ..errors import NewsAPIError
from ..types import ArticlesPage, Source

console = Console()

# 时间参数既可只给日期，也可给到秒
TIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def build_client(settings: Settings) -> NewsAPIClient:
    """根据配置构建 NewsAPI 客户端。

    Raises:
        click.UsageError: 未配置 API Key 时抛出。
    """
    if not settings.api_key:
        raise click.UsageError("NEWSAPI_API_KEY is not configured (set it in the environment or .env)")
    return NewsAPIClient.from_settings(settings)


def execute(coro: Coroutine[Any, Any, None]) -> None:
    """运行子命令协程，把库抛出的错误转为红色提示与退出码 1。"""
    try:
        asyncio.run(coro)
    except NewsAPIError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise SystemExit(1) from exc
    except httpx.HTTPError as exc:
        console.print(f"[red]Request failed: {escape(str(exc))}[/red]")
        raise SystemExit(1) from exc


def print_articles(page: ArticlesPage, title: str) -> None:
    """以 Rich 表格形式渲染文章列表及命中总数。

    Args:
        page: 客户端返回的文章分页结果。
        title: 表格标题。
    """
    if not page.articles:
        console.print("[yellow]No articles found[/yellow]")
        return
    table = Table(
        title=title,
        header_style="bold cyan",
        show_lines=False,
        row_styles=["dim", ""],
    )
    table.add_column("Published", no_wrap=True)
    table.add_column("Source", style="magenta")
    table.add_column("Title", overflow="fold")
    table.add_column("URL", overflow="fold")
    for article in page.articles:
        published = article.published_at.strftime("%Y-%m-%d %H:%M") if article.published_at else "-"
        table.add_row(published, article.source.name, article.title, article.url)
    console.print(table)
    console.print(f"Total results: {page.total_results}")


def print_sources(sources: list[Source]) -> None:
    """渲染新闻源列表。"""
    if not sources:
        console.print("[yellow]No sources found[/yellow]")
        return
    table = Table(title="Sources", header_style="bold cyan")
    table.add_column("ID", style="magenta")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Language")
    table.add_column("Country")
    for source in sources:
        table.add_row(source.id, source.name, source.category, source.language, source.country)
    console.print(table)


__all__ = [
    "console",
    "TIME_FORMATS",
    "build_client",
    "execute",
    "print_articles",
    "print_sources",
]
