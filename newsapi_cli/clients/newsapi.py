"""NewsAPI HTTP 客户端封装。"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, Settings
from ..errors import NewsAPIServiceError
from ..params import EverythingParams, RequestParams, SourceParams, TopHeadlinesParams
from ..types import Article, ArticlesPage, Source

API_KEY_HEADER = "X-Api-Key"

EVERYTHING_ENDPOINT = "everything"
TOP_HEADLINES_ENDPOINT = "top-headlines"
SOURCES_ENDPOINT = "top-headlines/sources"


class NewsAPIClient:
    """NewsAPI 数据客户端。

    每次调用都是一次 校验 → GET → 解码 的顺序流程，不做重试、缓存或限流。
    构造后 api key / base url / http 客户端均只读，可在多个协程间共享。

    参数校验失败时直接抛出 ``ValidationError``，不会发出任何请求；
    httpx 的网络异常与 JSON 解码异常原样抛出；服务端返回非 ``ok``
    时抛出 ``NewsAPIServiceError``。
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_key = api_key
        self.base_url = base_url or DEFAULT_BASE_URL
        # 外部注入的 http 客户端由调用方负责关闭
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, http_client: Optional[httpx.AsyncClient] = None) -> "NewsAPIClient":
        """根据配置构建客户端。

        Raises:
            ValueError: 未配置 ``NEWSAPI_API_KEY`` 时抛出。
        """
        if not settings.api_key:
            raise ValueError("NEWSAPI_API_KEY is not configured")
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            http_client=http_client,
            timeout=settings.timeout_seconds,
        )

    async def everything(self, params: EverythingParams) -> ArticlesPage:
        """全文检索文章，对应 ``/everything``。

        Args:
            params: 检索条件。

        Returns:
            当前页文章与命中总数。
        """
        return await self._get_articles(EVERYTHING_ENDPOINT, params)

    async def top_headlines(self, params: TopHeadlinesParams) -> ArticlesPage:
        """获取头条新闻，对应 ``/top-headlines``。"""
        return await self._get_articles(TOP_HEADLINES_ENDPOINT, params)

    async def sources(self, params: Optional[SourceParams] = None) -> list[Source]:
        """列出可用的新闻源，对应 ``/top-headlines/sources``。

        Args:
            params: 过滤条件，省略时返回全部新闻源。
        """
        _, data = await self._get(SOURCES_ENDPOINT, params or SourceParams())
        return [Source.from_dict(raw) for raw in data.get("sources") or []]

    async def _get_articles(self, endpoint: str, params: RequestParams) -> ArticlesPage:
        _, data = await self._get(endpoint, params)
        articles = [Article.from_dict(raw) for raw in data.get("articles") or []]
        return ArticlesPage(articles=articles, total_results=int(data.get("totalResults") or 0))

    async def _get(self, endpoint: str, params: RequestParams) -> tuple[int, dict[str, Any]]:
        """校验参数并发送 GET 请求，返回 HTTP 状态码与解码后的响应体。"""
        params.validate()

        query = params.raw_query()
        url = f"{self.base_url}{endpoint}?{query}"
        logger.debug("GET {} ?{}", endpoint, query)

        async with self._http.stream("GET", url, headers={API_KEY_HEADER: self.api_key}) as resp:
            await resp.aread()
            payload = resp.json()

        data: dict[str, Any] = payload if isinstance(payload, dict) else {}
        status = data.get("status")
        logger.debug("{} responded http={} status={}", endpoint, resp.status_code, status)
        if status != "ok":
            err = NewsAPIServiceError(
                status_code=resp.status_code,
                code=str(data.get("code") or ""),
                message=str(data.get("message") or ""),
            )
            logger.warning("NewsAPI {} failed: {}", endpoint, err)
            raise err
        return resp.status_code, data

    async def close(self) -> None:
        """关闭自建的底层 HTTP 客户端。"""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> "NewsAPIClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
