"""Client wrappers for the NewsAPI service."""

from .newsapi import NewsAPIClient

__all__ = ["NewsAPIClient"]
