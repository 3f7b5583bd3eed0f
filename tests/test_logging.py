"""库默认静默、setup_logging 开启日志的测试。"""

from __future__ import annotations

import importlib

import httpx
import pytest
from loguru import logger

import newsapi_cli
from newsapi_cli.clients.newsapi import NewsAPIClient
from newsapi_cli.logging import setup_logging
from newsapi_cli.params import SourceParams


async def _request_sources() -> None:
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"status": "ok", "sources": []}))
    )
    async with http:
        client = NewsAPIClient("k", base_url="https://newsapi.test/v2/", http_client=http)
        await client.sources(SourceParams())


@pytest.fixture
def messages():
    captured: list[str] = []
    yield captured
    logger.remove()
    logger.disable("newsapi_cli")


@pytest.mark.asyncio
async def test_library_is_silent_after_import(messages: list[str]) -> None:
    importlib.reload(newsapi_cli)
    logger.add(messages.append, level="DEBUG")
    await _request_sources()
    assert messages == []


@pytest.mark.asyncio
async def test_setup_logging_enables_package_logs(messages: list[str]) -> None:
    importlib.reload(newsapi_cli)
    setup_logging("DEBUG")
    logger.add(messages.append, level="DEBUG")
    await _request_sources()
    assert any("top-headlines/sources" in m for m in messages)
