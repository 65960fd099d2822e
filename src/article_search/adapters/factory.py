"""Adapters – SearchAdapterFactory."""
from __future__ import annotations

import dataclasses

from article_search.adapters.elasticsearch.store import ElasticsearchArticleStore
from article_search.adapters.http.client import HttpxHttpClient
from article_search.adapters.scraping.scraper import HttpUrlScraper
from article_search.application.enrichment import CachedUrlScraper, EnrichmentContext
from article_search.config.search import SearchSettings


@dataclasses.dataclass(frozen=True)
class SearchAdapters:
    """The long-lived clients behind one process."""
    http: HttpxHttpClient
    store: ElasticsearchArticleStore

    def enrichment_context(self) -> EnrichmentContext:
        """Fresh per-request context; the scrape cache lives as long as it does."""
        return EnrichmentContext(
            store=self.store,
            scraper=CachedUrlScraper(HttpUrlScraper(self.http)),
            fetcher=self.http,
        )

    async def aclose(self) -> None:
        await self.http.aclose()
        await self.store.close()


class SearchAdapterFactory:
    """Build the concrete adapters from :class:`SearchSettings`.

    ``http_timeout`` applies to both page/media fetches and Elasticsearch
    requests.
    """

    @staticmethod
    def create(settings: SearchSettings | None = None) -> SearchAdapters:
        settings = settings or SearchSettings()
        return SearchAdapters(
            http=HttpxHttpClient(timeout=settings.http_timeout),
            store=ElasticsearchArticleStore.from_url(
                settings.elasticsearch_url, request_timeout=settings.http_timeout
            ),
        )


__all__ = ["SearchAdapterFactory", "SearchAdapters"]
