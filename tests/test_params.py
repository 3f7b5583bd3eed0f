"""参数校验顺序与查询串编码的单元测试。"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from newsapi_cli.errors import (
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
from newsapi_cli.params import EverythingParams, RequestParams, SourceParams, TopHeadlinesParams
from newsapi_cli.types import Category, Country, Language, SearchIn, SortBy

TSTAMP = datetime(2022, 2, 22, 22, 22, 22, tzinfo=timezone.utc)
LONG_QUERY = "x" * 501


def test_params_implement_request_protocol() -> None:
    for params in (SourceParams(), TopHeadlinesParams(), EverythingParams()):
        assert isinstance(params, RequestParams)


# --- SourceParams ---


def test_source_params_empty_is_valid_and_serializes_to_empty() -> None:
    params = SourceParams()
    params.validate()
    assert params.raw_query() == ""


@pytest.mark.parametrize(
    ("params", "expected"),
    [
        (SourceParams(categories=["test"]), InvalidCategoryError),
        (SourceParams(languages=["test"]), InvalidLanguageError),
        (SourceParams(countries=["test"]), InvalidCountryError),
        # 分类先于语言、语言先于国家
        (SourceParams(categories=["test"], languages=["test"], countries=["test"]), InvalidCategoryError),
        (SourceParams(languages=[Language.ENGLISH, "test"], countries=["test"]), InvalidLanguageError),
    ],
)
def test_source_params_validation(params: SourceParams, expected: type[Exception]) -> None:
    with pytest.raises(expected):
        params.validate()


def test_source_params_raw_query_keeps_input_order() -> None:
    params = SourceParams(
        categories=[Category.SPORTS, Category.BUSINESS],
        languages=[Language.ENGLISH, Language.ENGLISH],
        countries=[Country.UNITED_STATES, Country.ARGENTINA],
    )
    params.validate()
    assert params.raw_query() == (
        "category=sports&category=business&country=us&country=ar&language=en&language=en"
    )


# --- TopHeadlinesParams ---


@pytest.mark.parametrize(
    ("params", "expected"),
    [
        (TopHeadlinesParams(query=LONG_QUERY, category="test"), QueryTooLongError),
        (TopHeadlinesParams(category="test", language="test"), InvalidCategoryError),
        (TopHeadlinesParams(language="test", country="test"), InvalidLanguageError),
        (TopHeadlinesParams(country="test", sources=["test"]), InvalidCountryError),
        (TopHeadlinesParams(country=Country.ARGENTINA, sources=["test"]), IncompatibleParamsError),
        (TopHeadlinesParams(category=Category.HEALTH, sources=["test"], page_size=101), IncompatibleParamsError),
        (TopHeadlinesParams(query="q", page_size=101), PageSizeTooLargeError),
        (TopHeadlinesParams(page_size=101), PageSizeTooLargeError),
        (TopHeadlinesParams(), ScopeTooBroadError),
        (TopHeadlinesParams(page_size=10, page=2), ScopeTooBroadError),
    ],
)
def test_top_headlines_validation_order(params: TopHeadlinesParams, expected: type[Exception]) -> None:
    with pytest.raises(expected):
        params.validate()


@pytest.mark.parametrize(
    "params",
    [
        TopHeadlinesParams(query="a" * 500),
        TopHeadlinesParams(category=Category.SCIENCE),
        TopHeadlinesParams(language="en"),
        TopHeadlinesParams(country=Country.JAPAN, page_size=100),
        TopHeadlinesParams(sources=["bbc-news"], language=Language.ENGLISH),
    ],
)
def test_top_headlines_valid(params: TopHeadlinesParams) -> None:
    params.validate()


def test_top_headlines_empty_raw_query() -> None:
    assert TopHeadlinesParams().raw_query() == ""


def test_top_headlines_raw_query() -> None:
    params = TopHeadlinesParams(
        query="bitcoin price",
        category=Category.BUSINESS,
        language=Language.ENGLISH,
        country=Country.UNITED_STATES,
        sources=["b", "a"],
        page_size=30,
        page=2,
    )
    assert params.raw_query() == (
        "category=business&country=us&language=en&page=2&pageSize=30&q=bitcoin+price&sources=b&sources=a"
    )


# --- EverythingParams ---


def test_everything_empty_raw_query() -> None:
    assert EverythingParams().raw_query() == ""


def test_everything_raw_query_full() -> None:
    params = EverythingParams(
        query="123",
        query_in_title="312",
        search_in=SearchIn.CONTENT,
        sources=["test", "test2"],
        domains=["test.com", "test2.com"],
        exclude_domains=["tes4.com", "test3.com"],
        from_time=TSTAMP,
        to_time=TSTAMP + timedelta(minutes=1),
        language=Language.HEBREW,
        sort_by=SortBy.PUBLISHED_AT,
        page_size=50,
        page=3,
    )
    params.validate()
    assert params.raw_query() == (
        "domains=test.com&domains=test2.com&excludeDomains=tes4.com&excludeDomains=test3.com"
        "&from=2022-02-22T22%3A22%3A22&language=hr&page=3&pageSize=50&q=123&qInTitle=312"
        "&searchIn=content&sortBy=publishedAt&sources=test&sources=test2&to=2022-02-22T22%3A23%3A22"
    )


def test_everything_times_are_rendered_in_utc() -> None:
    plus_two = timezone(timedelta(hours=2))
    params = EverythingParams(query="x", from_time=datetime(2022, 2, 23, 0, 22, 22, tzinfo=plus_two))
    assert params.raw_query() == "from=2022-02-22T22%3A22%3A22&q=x"


def test_everything_advanced_query_is_encoded() -> None:
    params = EverythingParams(query='"short phrase" +bitcoin -eth AND (a OR b)')
    params.validate()
    assert params.raw_query() == "q=%22short+phrase%22+%2Bbitcoin+-eth+AND+%28a+OR+b%29"


@pytest.mark.parametrize(
    ("params", "expected"),
    [
        (EverythingParams(query=LONG_QUERY, search_in="test"), QueryTooLongError),
        (EverythingParams(search_in="test", sources=["s"] * 21), InvalidSearchInError),
        (
            EverythingParams(sources=["s"] * 21, from_time=TSTAMP, to_time=TSTAMP - timedelta(seconds=1)),
            TooManySourcesError,
        ),
        (
            EverythingParams(query="x", from_time=TSTAMP, to_time=TSTAMP - timedelta(seconds=1), language="test"),
            InvalidTimeRangeError,
        ),
        (EverythingParams(query="x", language="test", sort_by="test"), InvalidLanguageError),
        (EverythingParams(query="x", sort_by="test", page_size=101), InvalidSortByError),
        (EverythingParams(page_size=101), PageSizeTooLargeError),
        (EverythingParams(exclude_domains=["a.com"], search_in=SearchIn.TITLE), ScopeTooBroadError),
        (EverythingParams(), ScopeTooBroadError),
    ],
)
def test_everything_validation_order(params: EverythingParams, expected: type[Exception]) -> None:
    with pytest.raises(expected):
        params.validate()


@pytest.mark.parametrize(
    "params",
    [
        EverythingParams(query="a" * 500),
        EverythingParams(query_in_title="title"),
        EverythingParams(sources=["s"] * 20),
        EverythingParams(domains=["example.com"]),
        EverythingParams(query="x", from_time=TSTAMP, to_time=TSTAMP),
        EverythingParams(query="x", from_time=TSTAMP),
        EverythingParams(query="x", language="en", sort_by="popularity", page_size=100),
    ],
)
def test_everything_valid(params: EverythingParams) -> None:
    params.validate()
