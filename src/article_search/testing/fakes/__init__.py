"""Testing fakes – in-memory doubles for the enrichment ports."""
from article_search.testing.fakes.context import fake_enrichment_context
from article_search.testing.fakes.media import InMemoryMediaFetcher
from article_search.testing.fakes.scraper import StaticUrlScraper
from article_search.testing.fakes.store import InMemoryArticleStore

__all__ = [
    "InMemoryArticleStore",
    "InMemoryMediaFetcher",
    "StaticUrlScraper",
    "fake_enrichment_context",
]
