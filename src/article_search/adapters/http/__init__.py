"""HTTP adapter – async httpx client with error mapping."""
from article_search.adapters.http.client import HttpxHttpClient

__all__ = ["HttpxHttpClient"]
