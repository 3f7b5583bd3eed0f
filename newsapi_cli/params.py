"""三个接口的请求参数：本地校验与查询串编码。

每个参数类都实现 ``RequestParams`` 协议：

- ``validate()``：按固定顺序逐条检查，遇到第一条不满足的规则即抛出；
- ``raw_query()``：生成按 key 字母序排列、已做 URL 编码的查询串。

字段既可以传枚举成员，也可以直接传字符串；空字符串 / 空列表表示未设置。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Protocol, Union, runtime_checkable
from urllib.parse import urlencode

from .errors import (
    IncompatibleParamsError,
    InvalidCategoryError,
    InvalidCountryError,
    InvalidLanguageError,
    InvalidSearchInError,
    InvalidSortByError,
    InvalidTimeRangeError,
    PageSizeTooLargeError,
    QueryTooLongError,
    ScopeTooBroadError,
    TooManySourcesError,
)
from .types import Category, Country, Language, SearchIn, SortBy

MAX_QUERY_LENGTH = 500
MAX_PAGE_SIZE = 100
MAX_SOURCES = 20

# 与服务端约定的时间格式：不带时区后缀，按 UTC 解释
TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

CategoryLike = Union[Category, str]
LanguageLike = Union[Language, str]
CountryLike = Union[Country, str]


@runtime_checkable
class RequestParams(Protocol):
    """客户端统一调用的参数契约。"""

    def validate(self) -> None:
        """校验参数，失败时抛出 ``ValidationError`` 子类。"""

        ...

    def raw_query(self) -> str:
        """返回编码后的查询串（不含 ``?``）。"""

        ...


def _value(item: Any) -> str:
    if isinstance(item, Enum):
        return str(item.value)
    return str(item)


def _encode(pairs: list[tuple[str, str]]) -> str:
    # 稳定排序：同名 key 保留插入顺序
    ordered = sorted(pairs, key=lambda kv: kv[0])
    return urlencode(ordered)


def _to_utc(moment: datetime) -> datetime:
    """统一为 naive UTC；naive 输入视为已是 UTC。"""

    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass
class SourceParams:
    """sources 接口的过滤条件，列表为空表示不限。"""

    categories: list[CategoryLike] = field(default_factory=list)
    languages: list[LanguageLike] = field(default_factory=list)
    countries: list[CountryLike] = field(default_factory=list)

    def validate(self) -> None:
        for category in self.categories:
            if not Category.is_valid(category):
                raise InvalidCategoryError()
        for language in self.languages:
            if not Language.is_valid(language):
                raise InvalidLanguageError()
        for country in self.countries:
            if not Country.is_valid(country):
                raise InvalidCountryError()

    def raw_query(self) -> str:
        pairs: list[tuple[str, str]] = []
        pairs.extend(("category", _value(c)) for c in self.categories)
        pairs.extend(("language", _value(lang)) for lang in self.languages)
        pairs.extend(("country", _value(c)) for c in self.countries)
        return _encode(pairs)


@dataclass
class TopHeadlinesParams:
    """top-headlines 接口的过滤条件。

    Attributes:
        query: 关键词或短语，不支持高级检索语法，最长 500 字符。
        category: 分类，留空表示全部。
        language: 语言，留空表示全部。
        country: 国家，留空表示全部。
        sources: 新闻源 ID 列表，不能与 country / category 同时使用。
        page_size: 每页条数，默认 20，最大 100。
        page: 页码。
    """

    query: str = ""
    category: CategoryLike = ""
    language: LanguageLike = ""
    country: CountryLike = ""
    sources: list[str] = field(default_factory=list)
    page_size: int = 0
    page: int = 0

    def validate(self) -> None:
        if len(self.query) > MAX_QUERY_LENGTH:
            raise QueryTooLongError()
        if self.category and not Category.is_valid(self.category):
            raise InvalidCategoryError()
        if self.language and not Language.is_valid(self.language):
            raise InvalidLanguageError()
        if self.country and not Country.is_valid(self.country):
            raise InvalidCountryError()
        if self.sources and (self.country or self.category):
            raise IncompatibleParamsError()
        if self.page_size > MAX_PAGE_SIZE:
            raise PageSizeTooLargeError()
        if not (self.query or self.category or self.language or self.country or self.sources):
            raise ScopeTooBroadError()

    def raw_query(self) -> str:
        pairs: list[tuple[str, str]] = []
        if self.query:
            pairs.append(("q", self.query))
        if self.category:
            pairs.append(("category", _value(self.category)))
        if self.country:
            pairs.append(("country", _value(self.country)))
        if self.language:
            pairs.append(("language", _value(self.language)))
        pairs.extend(("sources", source) for source in self.sources)
        if self.page_size > 0:
            pairs.append(("pageSize", str(self.page_size)))
        if self.page > 0:
            pairs.append(("page", str(self.page)))
        return _encode(pairs)


@dataclass
class EverythingParams:
    """everything 接口的过滤条件。

    ``query`` 支持服务端的高级检索语法（本地只校验长度）：

    - 用双引号包裹短语做精确匹配，如 ``"my short phrase"``；
    - ``+bitcoin`` 表示必须出现，``-bitcoin`` 表示必须不出现；
    - 可用 ``AND`` / ``OR`` / ``NOT`` 组合，并用括号分组，
      如 ``crypto AND (ethereum OR litecoin) NOT bitcoin``。

    Attributes:
        query: 正文检索语句，最长 500 字符。
        query_in_title: 仅在标题中检索的关键词。
        search_in: 检索范围（title / description / content）。
        sources: 新闻源 ID 列表，最多 20 个。
        domains: 限定的域名列表。
        exclude_domains: 排除的域名列表。
        from_time: 最早发布时间。
        to_time: 最晚发布时间。
        language: 语言。
        sort_by: 排序方式。
        page_size: 每页条数，默认 20，最大 100。
        page: 页码。
    """

    query: str = ""
    query_in_title: str = ""
    search_in: Union[SearchIn, str] = ""
    sources: list[str] = field(default_factory=list)
    domains: list[str] = field(default_factory=list)
    exclude_domains: list[str] = field(default_factory=list)
    from_time: Optional[datetime] = None
    to_time: Optional[datetime] = None
    language: LanguageLike = ""
    sort_by: Union[SortBy, str] = ""
    page_size: int = 0
    page: int = 0

    def validate(self) -> None:
        if len(self.query) > MAX_QUERY_LENGTH:
            raise QueryTooLongError()
        if self.search_in and not SearchIn.is_valid(self.search_in):
            raise InvalidSearchInError()
        if len(self.sources) > MAX_SOURCES:
            raise TooManySourcesError()
        if (
            self.from_time is not None
            and self.to_time is not None
            and _to_utc(self.from_time) > _to_utc(self.to_time)
        ):
            raise InvalidTimeRangeError()
        if self.language and not Language.is_valid(self.language):
            raise InvalidLanguageError()
        if self.sort_by and not SortBy.is_valid(self.sort_by):
            raise InvalidSortByError()
        if self.page_size > MAX_PAGE_SIZE:
            raise PageSizeTooLargeError()
        if not (self.query or self.query_in_title or self.sources or self.domains):
            raise ScopeTooBroadError()

    def raw_query(self) -> str:
        pairs: list[tuple[str, str]] = []
        if self.query:
            pairs.append(("q", self.query))
        if self.query_in_title:
            pairs.append(("qInTitle", self.query_in_title))
        if self.search_in:
            pairs.append(("searchIn", _value(self.search_in)))
        pairs.extend(("sources", source) for source in self.sources)
        pairs.extend(("domains", domain) for domain in self.domains)
        pairs.extend(("excludeDomains", domain) for domain in self.exclude_domains)
        if self.from_time is not None:
            pairs.append(("from", _to_utc(self.from_time).strftime(TIME_FORMAT)))
        if self.to_time is not None:
            pairs.append(("to", _to_utc(self.to_time).strftime(TIME_FORMAT)))
        if self.language:
            pairs.append(("language", _value(self.language)))
        if self.sort_by:
            pairs.append(("sortBy", _value(self.sort_by)))
        if self.page_size > 0:
            pairs.append(("pageSize", str(self.page_size)))
        if self.page > 0:
            pairs.append(("page", str(self.page)))
        return _encode(pairs)


__all__ = [
    "RequestParams",
    "SourceParams",
    "TopHeadlinesParams",
    "EverythingParams",
    "MAX_QUERY_LENGTH",
    "MAX_PAGE_SIZE",
    "MAX_SOURCES",
]
