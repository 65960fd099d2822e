"""Scraping adapter – HttpUrlScraper."""
from __future__ import annotations

import asyncio
from typing import Sequence

from bs4 import BeautifulSoup

from article_search.adapters.http.client import HttpxHttpClient
from article_search.application.enrichment.scraping import ScrapResult
from article_search.kernel.errors import InfrastructureError
from article_search.observability.logging import get_logger

logger = get_logger(__name__)

SUMMARY_LIMIT = 1000


def _meta(soup: BeautifulSoup, **attrs: str) -> str:
    tag = soup.find("meta", attrs=attrs)
    content = tag.get("content") if tag is not None else None
    return " ".join(str(content).split()) if content else ""


def parse_page(html: str, url: str | None = None) -> ScrapResult:
    """Title, summary and canonical URL of an HTML document."""
    soup = BeautifulSoup(html, "html.parser")

    title = _meta(soup, property="og:title")
    if not title and soup.title is not None and soup.title.string:
        title = " ".join(soup.title.string.split())

    summary = _meta(soup, property="og:description") or _meta(soup, name="description")
    if not summary:
        for element in soup(["script", "style", "nav", "header", "footer", "aside"]):
            element.decompose()
        body = soup.find("body") or soup
        summary = " ".join(body.get_text(separator=" ", strip=True).split())[:SUMMARY_LIMIT]

    link = soup.find("link", rel="canonical")
    canonical = link.get("href") if link is not None else None

    return ScrapResult(url=url, canonical=str(canonical) if canonical else None, title=title, summary=summary)


class HttpUrlScraper:
    """:class:`~article_search.application.enrichment.UrlScraper` that fetches
    pages with :class:`HttpxHttpClient` and summarises them with BeautifulSoup.

    A URL that cannot be fetched or is not HTML yields ``None``.
    """

    def __init__(self, http: HttpxHttpClient) -> None:
        self._http = http

    async def _scrape_one(self, url: str) -> ScrapResult | None:
        try:
            response = await self._http.get(url)
        except InfrastructureError as exc:
            logger.warning("scrape.failed", url=url, error=exc)
            return None
        if "html" not in response.headers.get("content-type", ""):
            logger.info("scrape.skipped", url=url, content_type=response.headers.get("content-type"))
            return None
        return parse_page(response.text, url=str(response.url))

    async def scrape(self, urls: Sequence[str]) -> list[ScrapResult | None]:
        return list(await asyncio.gather(*(self._scrape_one(url) for url in urls)))


__all__ = ["HttpUrlScraper", "parse_page"]
