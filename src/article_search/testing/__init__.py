"""Testing support – in-memory doubles for the enrichment ports."""

from article_search.testing.fakes import (
    InMemoryArticleStore,
    InMemoryMediaFetcher,
    StaticUrlScraper,
    fake_enrichment_context,
)

__all__ = [
    "InMemoryArticleStore",
    "InMemoryMediaFetcher",
    "StaticUrlScraper",
    "fake_enrichment_context",
]
