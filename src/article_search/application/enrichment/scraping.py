"""Enrichment – scraping URLs mentioned in ``moreLikeThis`` text."""
from __future__ import annotations

import asyncio
import dataclasses
import re
from typing import Iterator, Protocol, Sequence, runtime_checkable

from article_search.kernel.errors import InfrastructureError
from article_search.observability.logging import get_logger

__all__ = [
    "CachedUrlScraper",
    "ScrapResult",
    "UrlScraper",
    "extract_urls",
    "scrape_like_text",
]

logger = get_logger(__name__)

# Stops at CJK and full-width punctuation, which often follows a URL without a space.
_URL_RE = re.compile(r"https?://[^\s<>\"'\u3000-\u303f\uff01-\uff5e]+", re.IGNORECASE)
_TRAILING = ".,;:!?)]}"


@dataclasses.dataclass(frozen=True)
class ScrapResult:
    """Readable summary of one fetched web page."""
    url: str | None = None
    canonical: str | None = None
    title: str = ""
    summary: str = ""

    @property
    def like_text(self) -> str:
        return f"{self.title} {self.summary}"

    def urls(self) -> Iterator[str]:
        if self.url:
            yield self.url
        if self.canonical:
            yield self.canonical


@runtime_checkable
class UrlScraper(Protocol):
    """Port: fetch and summarise pages. ``None`` marks a URL that failed."""

    async def scrape(self, urls: Sequence[str]) -> Sequence[ScrapResult | None]: ...


def extract_urls(text: str) -> list[str]:
    """URLs in *text*, deduplicated, first occurrence order."""
    found = (match.group(0).rstrip(_TRAILING) for match in _URL_RE.finditer(text or ""))
    return list(dict.fromkeys(found))


class CachedUrlScraper:
    """Request-scoped memo in front of a :class:`UrlScraper`.

    Each URL is scraped at most once for the lifetime of the instance;
    concurrent callers share the in-flight fetch. A URL whose scrape raised
    an infrastructure error is remembered as ``None``. Cancelling one caller
    leaves the shared fetch running for the others.
    """

    def __init__(self, scraper: UrlScraper) -> None:
        self._scraper = scraper
        self._tasks: dict[str, asyncio.Task[ScrapResult | None]] = {}

    async def _load(self, url: str) -> ScrapResult | None:
        try:
            results = await self._scraper.scrape([url])
        except InfrastructureError as exc:
            logger.warning("scrape.failed", url=url, error=exc)
            return None
        return results[0] if results else None

    async def scrape(self, urls: Sequence[str]) -> list[ScrapResult | None]:
        for url in urls:
            task = self._tasks.get(url)
            if task is None or task.cancelled():
                self._tasks[url] = asyncio.ensure_future(self._load(url))
        return list(await asyncio.gather(*(asyncio.shield(self._tasks[url]) for url in urls)))


async def scrape_like_text(scraper: UrlScraper, text: str) -> tuple[ScrapResult, ...]:
    """Successful scrapes for the URLs in *text*; failures are dropped."""
    urls = extract_urls(text)
    if not urls:
        return ()
    results = await scraper.scrape(urls)
    kept = tuple(r for r in results if r is not None and (r.title or r.summary or r.url))
    if len(kept) < len(urls):
        logger.info("enrichment.scrape_dropped", requested=len(urls), dropped=len(urls) - len(kept))
    return kept
