"""Elasticsearch adapter – ElasticsearchArticleStore."""

from __future__ import annotations

from typing import Any, Sequence

import elasticsearch
from elasticsearch import AsyncElasticsearch

from article_search.application.search.request import SearchRequest
from article_search.kernel.errors import NotFoundError, UpstreamFetchError, UpstreamTimeoutError
from article_search.observability.logging import get_logger

logger = get_logger(__name__)


class ElasticsearchArticleStore:
    """:class:`~article_search.application.enrichment.ArticleStore` on top of
    :class:`elasticsearch.AsyncElasticsearch`.

    A missing document raises :class:`NotFoundError`; every other client
    failure is mapped to an infrastructure error carrying the original as
    ``cause``.

    Usage::

        adapters = SearchAdapterFactory.create(settings)
        compiler = ArticleQueryCompiler(adapters.enrichment_context(), settings)
        request = await compiler.compile(filter_spec, sort_spec, paging, caller)
        hits = await adapters.store.execute(request)
    """

    def __init__(self, client: AsyncElasticsearch) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "ElasticsearchArticleStore":
        return cls(AsyncElasticsearch(url, **kwargs))

    async def close(self) -> None:
        await self._client.close()

    async def get_by_id(
        self, collection: str, doc_id: str, *, fields: Sequence[str] | None = None
    ) -> dict[str, Any]:
        params: dict[str, Any] = {"index": collection, "id": doc_id}
        if fields:
            params["source_includes"] = list(fields)
        try:
            response = await self._client.get(**params)
        except elasticsearch.NotFoundError as exc:
            raise NotFoundError(collection, doc_id, cause=exc)
        except elasticsearch.ConnectionTimeout as exc:
            raise UpstreamTimeoutError("elasticsearch", f"get {collection}/{doc_id} timed out", cause=exc)
        except elasticsearch.ApiError as exc:
            raise UpstreamFetchError("elasticsearch", str(exc), status_code=exc.meta.status, cause=exc)
        except elasticsearch.TransportError as exc:
            raise UpstreamFetchError("elasticsearch", str(exc), cause=exc)
        return dict(response["_source"])

    async def search(self, collection: str, body: dict[str, Any], **params: Any) -> dict[str, Any]:
        try:
            response = await self._client.search(index=collection, **body, **params)
        except elasticsearch.ConnectionTimeout as exc:
            raise UpstreamTimeoutError("elasticsearch", f"search on {collection} timed out", cause=exc)
        except elasticsearch.ApiError as exc:
            raise UpstreamFetchError("elasticsearch", str(exc), status_code=exc.meta.status, cause=exc)
        except elasticsearch.TransportError as exc:
            raise UpstreamFetchError("elasticsearch", str(exc), cause=exc)
        return dict(response.body)

    async def execute(self, request: SearchRequest) -> dict[str, Any]:
        """Run *request*; ``first`` becomes the page size.

        Cursors (``after``/``before``) are decoded by the pagination layer,
        which passes ``search_after`` through :meth:`search` itself.
        """
        params: dict[str, Any] = {}
        if request.paging.first is not None:
            params["size"] = request.paging.first
        logger.debug("article_store.search", index=request.collection, **params)
        return await self.search(request.collection, request.body, **params)


__all__ = ["ElasticsearchArticleStore"]
