"""NewsAPI client library and command line front-end."""

from loguru import logger

from .clients.newsapi import NewsAPIClient
from .config import Settings
from .errors import (
    IncompatibleParamsError,
    InvalidCategoryError,
    InvalidCountryError,
    InvalidLanguageError,
    InvalidSearchInError,
    InvalidSortByError,
    InvalidTimeRangeError,
    NewsAPIError,
    NewsAPIServiceError,
    PageSizeTooLargeError,
    QueryTooLongError,
    ScopeTooBroadError,
    TooManySourcesError,
    ValidationError,
)
from .params import EverythingParams, RequestParams, SourceParams, TopHeadlinesParams
from .types import (
    Article,
    ArticlesPage,
    Category,
    Country,
    Language,
    SearchIn,
    SortBy,
    Source,
    SourceIdentity,
)

# 作为库被导入时默认静默，由 setup_logging 显式开启
logger.disable(__name__)

__all__ = [
    "NewsAPIClient",
    "Settings",
    "EverythingParams",
    "TopHeadlinesParams",
    "SourceParams",
    "RequestParams",
    "Article",
    "ArticlesPage",
    "Source",
    "SourceIdentity",
    "Category",
    "Country",
    "Language",
    "SearchIn",
    "SortBy",
    "NewsAPIError",
    "ValidationError",
    "NewsAPIServiceError",
    "QueryTooLongError",
    "InvalidSearchInError",
    "InvalidCategoryError",
    "InvalidLanguageError",
    "InvalidCountryError",
    "InvalidSortByError",
    "IncompatibleParamsError",
    "TooManySourcesError",
    "InvalidTimeRangeError",
    "PageSizeTooLargeError",
    "ScopeTooBroadError",
]
