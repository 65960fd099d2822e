"""Enrichment – resolve every lookup a filter needs."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Awaitable

from article_search.application.enrichment.context import EnrichmentContext
from article_search.application.enrichment.fanout import gather_or_cancel
from article_search.application.enrichment.media import resolve_media_hash
from article_search.application.enrichment.reference import ArticleOwner, resolve_article_owner
from article_search.application.enrichment.scraping import ScrapResult, scrape_like_text

if TYPE_CHECKING:
    from article_search.application.search.filters import ArticleFilter

__all__ = ["Enrichment", "EnrichmentResolver"]


@dataclasses.dataclass(frozen=True)
class Enrichment:
    """Results of the external lookups; fields stay at their default when
    the matching filter is absent."""
    article_owner: ArticleOwner | None = None
    scrape_results: tuple[ScrapResult, ...] = ()
    media_hash: str | None = None


class EnrichmentResolver:
    def __init__(self, context: EnrichmentContext, collection: str) -> None:
        self._ctx = context
        self._collection = collection

    async def resolve(self, article_filter: ArticleFilter) -> Enrichment:
        steps: dict[str, Awaitable[Any]] = {}
        if article_filter.from_user_of_article_id:
            steps["article_owner"] = resolve_article_owner(
                self._ctx.store, self._collection, article_filter.from_user_of_article_id
            )
        if article_filter.more_like_this:
            steps["scrape_results"] = scrape_like_text(
                self._ctx.scraper, article_filter.more_like_this.like
            )
        if article_filter.media_url:
            steps["media_hash"] = resolve_media_hash(
                self._ctx.fetcher, self._ctx.hasher, article_filter.media_url
            )
        if not steps:
            return Enrichment()
        results = await gather_or_cancel(*steps.values())
        return Enrichment(**dict(zip(steps, results)))
