"""Adapters – httpx, Elasticsearch and web scraping implementations of the ports."""
from article_search.adapters.factory import SearchAdapterFactory, SearchAdapters

__all__ = ["SearchAdapterFactory", "SearchAdapters"]
