"""Application enrichment – external lookups feeding the query compiler."""
from article_search.application.enrichment.context import EnrichmentContext
from article_search.application.enrichment.fanout import gather_or_cancel
from article_search.application.enrichment.media import (
    MediaFetcher,
    MediaHasher,
    MediaKind,
    Sha256MediaHasher,
    resolve_media_hash,
)
from article_search.application.enrichment.reference import ArticleOwner, ArticleStore, resolve_article_owner
from article_search.application.enrichment.resolver import Enrichment, EnrichmentResolver
from article_search.application.enrichment.scraping import (
    CachedUrlScraper,
    ScrapResult,
    UrlScraper,
    extract_urls,
    scrape_like_text,
)

__all__ = [
    "ArticleOwner",
    "ArticleStore",
    "CachedUrlScraper",
    "Enrichment",
    "EnrichmentContext",
    "EnrichmentResolver",
    "MediaFetcher",
    "MediaHasher",
    "MediaKind",
    "ScrapResult",
    "Sha256MediaHasher",
    "UrlScraper",
    "extract_urls",
    "gather_or_cancel",
    "resolve_article_owner",
    "resolve_media_hash",
    "scrape_like_text",
]
