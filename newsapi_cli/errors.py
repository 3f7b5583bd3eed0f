"""NewsAPI 客户端的错误类型。

分两类：

- ``ValidationError``：发请求之前的本地参数校验失败，结果确定，不应重试；
- ``NewsAPIServiceError``：服务端返回的非 ``ok`` 响应，携带 HTTP 状态码、
  服务端错误码与错误信息。

网络层（httpx）与 JSON 解码异常不在此定义，原样抛给调用方。
"""

from __future__ import annotations


class NewsAPIError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(NewsAPIError, ValueError):
    """参数校验失败的基类，子类的默认消息固定。"""

    default_message = "invalid parameters"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class QueryTooLongError(ValidationError):
    default_message = "query exceeds 500 character limit"


class InvalidSearchInError(ValidationError):
    default_message = "invalid search key"


class InvalidCategoryError(ValidationError):
    default_message = "invalid category"


class InvalidLanguageError(ValidationError):
    default_message = "invalid language"


class InvalidCountryError(ValidationError):
    default_message = "invalid country"


class InvalidSortByError(ValidationError):
    default_message = "invalid sort key"


class IncompatibleParamsError(ValidationError):
    default_message = "country/category parameter cannot be used along with sources parameter"


class TooManySourcesError(ValidationError):
    default_message = "sources exceeds 20 entries limit"


class InvalidTimeRangeError(ValidationError):
    default_message = "from time cannot be after to time"


class PageSizeTooLargeError(ValidationError):
    default_message = "page size exceeds 100 entries limit"


class ScopeTooBroadError(ValidationError):
    default_message = "scope of parameters is too broad"


class NewsAPIServiceError(NewsAPIError):
    """服务端返回 ``status != "ok"`` 时抛出。

    Attributes:
        status_code: 响应的 HTTP 状态码（即便为 200 也可能是错误响应）。
        code: 服务端错误码，如 ``"apiKeyInvalid"``。
        message: 服务端给出的可读错误信息。
    """

    def __init__(self, status_code: int, code: str, message: str):
        self.status_code = status_code
        self.code = code
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        return f'statusCode: "{self.status_code}", code: "{self.code}", message: "{self.message}"'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NewsAPIServiceError):
            return NotImplemented
        return (self.status_code, self.code, self.message) == (
            other.status_code,
            other.code,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.status_code, self.code, self.message))


__all__ = [
    "NewsAPIError",
    "ValidationError",
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
    "NewsAPIServiceError",
]
