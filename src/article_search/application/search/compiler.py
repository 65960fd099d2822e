"""Application search – ArticleQueryCompiler, the ``compile`` entry point."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from article_search.application.enrichment import EnrichmentContext, EnrichmentResolver
from article_search.application.pagination import PagingParams
from article_search.application.search.buckets import ClauseBucket, ClauseBuckets
from article_search.application.search.clauses import compile_clauses
from article_search.application.search.common import CommonListFilter, DefaultCommonListFilter
from article_search.application.search.filters import ArticleFilter
from article_search.application.search.query import assemble
from article_search.application.search.request import SearchRequest, build_search_request
from article_search.application.search.sort import SortSpec, compile_sort
from article_search.config import SearchSettings
from article_search.observability.correlation import CorrelationContext, RequestContext
from article_search.observability.logging import get_logger

__all__ = ["ArticleQueryCompiler"]

logger = get_logger(__name__)


class ArticleQueryCompiler:
    """Turn an article list filter, sort order and paging into a :class:`SearchRequest`.

    External lookups run first, concurrently; clause compilation after that
    is synchronous and pure. A failed or cancelled lookup aborts the whole
    compilation, so no partial request ever reaches the executor.

    Usage::

        compiler = ArticleQueryCompiler(EnrichmentContext(store, scraper, http))
        request = await compiler.compile(
            {"replyCount": {"GTE": 1}},
            [{"lastRepliedAt": "DESC"}],
            {"first": 10},
            RequestContext.new(user_id="u1", app_id="WEBSITE"),
        )
    """

    def __init__(
        self,
        enrichment: EnrichmentContext,
        settings: SearchSettings | None = None,
        common_filter: CommonListFilter | None = None,
    ) -> None:
        self._settings = settings or SearchSettings()
        self._resolver = EnrichmentResolver(enrichment, self._settings.collection)
        self._common_filter = common_filter or DefaultCommonListFilter()

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    async def compile(
        self,
        filter_spec: ArticleFilter | Mapping[str, Any] | None = None,
        sort_spec: Iterable[SortSpec | Mapping[str, Any]] | None = None,
        paging: PagingParams | Mapping[str, Any] | None = None,
        caller: RequestContext | None = None,
    ) -> SearchRequest:
        article_filter = (
            filter_spec if isinstance(filter_spec, ArticleFilter) else ArticleFilter.from_mapping(filter_spec)
        )
        paging_params = paging if isinstance(paging, PagingParams) else PagingParams.from_mapping(paging)
        caller = caller or CorrelationContext.get() or RequestContext.anonymous()

        # Sort keys and common filters are checked before any lookup is issued.
        sort = compile_sort(sort_spec or [])
        buckets = ClauseBuckets()
        buckets.add(ClauseBucket.FILTER, *self._common_filter.clauses(article_filter, caller))

        enrichment = await self._resolver.resolve(article_filter)
        compile_clauses(article_filter, enrichment, self._settings, buckets)
        query = assemble(buckets, sort)

        logger.debug(
            "article_query.compiled",
            should=len(buckets.should),
            filter=len(query.filter),
            must_not=len(query.must_not),
            sort=len(query.sort),
        )
        return build_search_request(self._settings.collection, query, paging_params)
