"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from article_search.kernel.errors import UpstreamFetchError, UpstreamTimeoutError
from article_search.observability.correlation import CorrelationContext


class HttpxHttpClient:
    """Thin async httpx wrapper with structured error mapping.

    Doubles as the :class:`~article_search.application.enrichment.MediaFetcher`
    through :meth:`fetch`. Nothing is retried.
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        kwargs.setdefault("follow_redirects", True)
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def fetch(self, url: str) -> bytes:
        """Raw body of *url*."""
        response = await self.get(url)
        return response.content

    def _headers(self, headers: dict[str, str] | None) -> dict[str, str]:
        merged: dict[str, str] = {}
        ctx = CorrelationContext.get()
        if ctx is not None:
            merged["X-Correlation-ID"] = ctx.correlation_id
        for name, value in (headers or {}).items():
            # explicit headers win, whatever their case
            for existing in [k for k in merged if k.lower() == name.lower()]:
                del merged[existing]
            merged[name] = value
        return merged

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        kwargs["headers"] = self._headers(kwargs.get("headers"))
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise UpstreamTimeoutError(url, f"{method} {url} timed out", cause=exc)
        except httpx.HTTPStatusError as exc:
            raise UpstreamFetchError(
                url,
                f"HTTP {exc.response.status_code} from {method} {url}",
                status_code=exc.response.status_code,
                cause=exc,
            )
        except httpx.HTTPError as exc:
            raise UpstreamFetchError(url, str(exc) or type(exc).__name__, cause=exc)


__all__ = ["HttpxHttpClient"]
