"""Enrichment – the collaborators a compilation may call out to."""
from __future__ import annotations

import dataclasses

from article_search.application.enrichment.media import MediaFetcher, MediaHasher, Sha256MediaHasher
from article_search.application.enrichment.reference import ArticleStore
from article_search.application.enrichment.scraping import UrlScraper

__all__ = ["EnrichmentContext"]


@dataclasses.dataclass(frozen=True)
class EnrichmentContext:
    """Explicit bundle of external clients, one per request.

    Wrap ``scraper`` in :class:`CachedUrlScraper` to share scrapes across the
    request.
    """
    store: ArticleStore
    scraper: UrlScraper
    fetcher: MediaFetcher
    hasher: MediaHasher = dataclasses.field(default_factory=Sha256MediaHasher)
