from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Iterator, Optional

from pydantic import TypeAdapter


class _ClosedSet(str, Enum):
    """闭集字符串枚举的公共基类。

    ``is_valid`` 只做精确匹配（区分大小写、不做规范化），
    空字符串永远不是合法取值。
    """

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        if isinstance(value, Enum):
            value = value.value
        if not isinstance(value, str):
            return False
        return value in cls._value2member_map_


class SortBy(_ClosedSet):
    RELEVANCY = "relevancy"
    POPULARITY = "popularity"
    PUBLISHED_AT = "publishedAt"


class SearchIn(_ClosedSet):
    """文章中参与全文检索的字段。"""

    TITLE = "title"
    DESCRIPTION = "description"
    CONTENT = "content"


class Language(_ClosedSet):
    ARABIC = "ar"
    GERMAN = "de"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    HEBREW = "hr"  # 服务端对希伯来语使用 hr
    ITALIAN = "it"
    DUTCH = "nl"
    NORWEGIAN = "no"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SAMI = "se"
    URDU = "ud"
    CHINESE = "zh"


class Category(_ClosedSet):
    BUSINESS = "business"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"
    TECHNOLOGY = "technology"


class Country(_ClosedSet):
    UNITED_ARAB_EMIRATES = "ae"
    ARGENTINA = "ar"
    AUSTRIA = "at"
    AUSTRALIA = "au"
    BELGIUM = "be"
    BULGARIA = "bg"
    BRAZIL = "br"
    CANADA = "ca"
    SWITZERLAND = "ch"
    CHINA = "cn"
    COLOMBIA = "co"
    CUBA = "cu"
    CZECHIA = "cz"
    GERMANY = "de"
    EGYPT = "eg"
    FRANCE = "fr"
    UNITED_KINGDOM = "gb"
    GREECE = "gr"
    HONG_KONG = "hk"
    HUNGARY = "hu"
    INDONESIA = "id"
    IRELAND = "ie"
    ISRAEL = "il"
    INDIA = "in"
    ITALY = "it"
    JAPAN = "jp"
    KOREA = "kr"
    LITHUANIA = "lt"
    LATVIA = "lv"
    MOROCCO = "ma"
    MEXICO = "mx"
    MALAYSIA = "my"
    NIGERIA = "ng"
    NETHERLANDS = "nl"
    NORWAY = "no"
    NEW_ZEALAND = "nz"
    PHILIPPINES = "ph"
    POLAND = "pl"
    PORTUGAL = "pt"
    ROMANIA = "ro"
    SERBIA = "rs"
    RUSSIA = "ru"
    SAUDI_ARABIA = "sa"
    SWEDEN = "se"
    SINGAPORE = "sg"
    SLOVENIA = "si"
    SLOVAKIA = "sk"
    THAILAND = "th"
    TURKEY = "tr"
    TAIWAN = "tw"
    UKRAINE = "ua"
    UNITED_STATES = "us"
    VENEZUELA = "ve"
    SOUTH_AFRICA = "za"


def _text(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    return "" if value is None else str(value)


# RFC3339 允许小写 t/z 与任意位数的小数秒，统一为大写并截断/补齐到微秒
_FRACTION_RE = re.compile(r"(T\d{2}:\d{2}:\d{2})\.(\d+)")
_DATETIME = TypeAdapter(datetime)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """解析 RFC3339 时间戳。"""

    if not value:
        return None
    text = _FRACTION_RE.sub(
        lambda m: f"{m.group(1)}.{(m.group(2) + '000000')[:6]}",
        str(value).upper(),
    )
    return _DATETIME.validate_python(text)


@dataclass(frozen=True)
class SourceIdentity:
    """新闻源的标识信息。

    Attributes:
        id: 新闻源 ID（部分文章的来源没有 ID，此时为空字符串）。
        name: 新闻源名称。
    """

    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, raw: Optional[dict[str, Any]]) -> "SourceIdentity":
        raw = raw or {}
        return cls(id=_text(raw, "id"), name=_text(raw, "name"))


@dataclass(frozen=True)
class Source:
    """新闻发布方（publisher）元数据，对应 sources 接口的单条记录。

    Attributes:
        id: 新闻源 ID，可用作 ``sources`` 过滤参数。
        name: 新闻源名称。
        description: 简介。
        url: 新闻源主页。
        category: 所属分类，如 ``"business"``。
        language: 发布语言代码。
        country: 所在国家代码。
    """

    id: str = ""
    name: str = ""
    description: str = ""
    url: str = ""
    category: str = ""
    language: str = ""
    country: str = ""

    @property
    def identity(self) -> SourceIdentity:
        return SourceIdentity(id=self.id, name=self.name)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Source":
        return cls(
            id=_text(raw, "id"),
            name=_text(raw, "name"),
            description=_text(raw, "description"),
            url=_text(raw, "url"),
            category=_text(raw, "category"),
            language=_text(raw, "language"),
            country=_text(raw, "country"),
        )


@dataclass(frozen=True)
class Article:
    """单篇新闻文章。

    Attributes:
        source: 文章来源的标识信息。
        author: 作者。
        title: 标题。
        description: 摘要。
        url: 文章链接。
        url_to_image: 配图链接。
        published_at: 发布时间（带时区），缺失时为 None。
        content: 未格式化的正文片段，服务端截断为 200 字符。
    """

    source: SourceIdentity = field(default_factory=SourceIdentity)
    author: str = ""
    title: str = ""
    description: str = ""
    url: str = ""
    url_to_image: str = ""
    published_at: Optional[datetime] = None
    content: str = ""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Article":
        return cls(
            source=SourceIdentity.from_dict(raw.get("source")),
            author=_text(raw, "author"),
            title=_text(raw, "title"),
            description=_text(raw, "description"),
            url=_text(raw, "url"),
            url_to_image=_text(raw, "urlToImage"),
            published_at=_parse_timestamp(raw.get("publishedAt")),
            content=_text(raw, "content"),
        )


@dataclass
class ArticlesPage:
    """文章类接口的返回结果：当前页文章与命中总数。"""

    articles: list[Article]
    total_results: int = 0

    def __iter__(self) -> Iterator[Any]:
        # 支持 ``articles, total = await client.everything(...)`` 的解包写法
        yield self.articles
        yield self.total_results
