"""Unit tests – enrichment resolvers and the concurrent fan-out."""
from __future__ import annotations

import asyncio
import gc
import hashlib

import pytest

from article_search.application.enrichment import (
    ArticleOwner,
    CachedUrlScraper,
    Enrichment,
    EnrichmentResolver,
    MediaKind,
    ScrapResult,
    Sha256MediaHasher,
    extract_urls,
    gather_or_cancel,
    resolve_article_owner,
    resolve_media_hash,
    scrape_like_text,
)
from article_search.application.search import ArticleFilter, MoreLikeThis
from article_search.kernel.errors import NotFoundError, ReferenceNotFoundError, UpstreamFetchError
from article_search.testing.fakes import (
    InMemoryArticleStore,
    InMemoryMediaFetcher,
    StaticUrlScraper,
    fake_enrichment_context,
)


class TestResolveArticleOwner:
    def test_found(self) -> None:
        store = InMemoryArticleStore({"articles": {"a1": {"userId": "u1", "appId": "LINE"}}})
        owner = asyncio.run(resolve_article_owner(store, "articles", "a1"))
        assert owner == ArticleOwner(user_id="u1", app_id="LINE")

    def test_not_found_carries_id_and_cause(self) -> None:
        with pytest.raises(ReferenceNotFoundError) as exc_info:
            asyncio.run(resolve_article_owner(InMemoryArticleStore(), "articles", "zzz"))
        err = exc_info.value
        assert err.reference_id == "zzz"
        assert err.detail == {"reference_id": "zzz"}
        assert isinstance(err.__cause__, NotFoundError)

    def test_article_without_owner_fields(self) -> None:
        store = InMemoryArticleStore({"articles": {"a1": {"appId": "LINE"}}})
        with pytest.raises(ReferenceNotFoundError) as exc_info:
            asyncio.run(resolve_article_owner(store, "articles", "a1"))
        assert isinstance(exc_info.value.__cause__, KeyError)


class TestExtractUrls:
    def test_finds_and_dedupes(self) -> None:
        text = "see https://a.example/x, and http://b.example/y?q=1 then https://a.example/x."
        assert extract_urls(text) == ["https://a.example/x", "http://b.example/y?q=1"]

    def test_stops_at_full_width_punctuation(self) -> None:
        assert extract_urls("網址https://a.example/x，謝謝") == ["https://a.example/x"]

    def test_no_urls(self) -> None:
        assert extract_urls("just words") == []
        assert extract_urls("") == []


class TestScrapeLikeText:
    def test_keeps_successful_results(self) -> None:
        page = ScrapResult(url="https://a.example/", title="A", summary="about a")
        scraper = StaticUrlScraper({"https://a.example/": page})
        results = asyncio.run(scrape_like_text(scraper, "https://a.example/ https://b.example/"))
        assert results == (page,)

    def test_empty_results_dropped(self) -> None:
        scraper = StaticUrlScraper({"https://a.example/": ScrapResult()})
        assert asyncio.run(scrape_like_text(scraper, "https://a.example/")) == ()

    def test_no_urls_skips_scraper(self) -> None:
        scraper = StaticUrlScraper()
        assert asyncio.run(scrape_like_text(scraper, "plain text")) == ()
        assert scraper.requested == []


class _FlakyScraper:
    def __init__(self) -> None:
        self.calls: list[str] = []

    async def scrape(self, urls):  # noqa: ANN001, ANN201
        self.calls.extend(urls)
        await asyncio.sleep(0)
        if urls[0].endswith("bad"):
            raise UpstreamFetchError(urls[0], status_code=500)
        return [ScrapResult(url=urls[0], title="ok")]


class _GatedScraper:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.started = asyncio.Event()
        self.gate = asyncio.Event()

    async def scrape(self, urls):  # noqa: ANN001, ANN201
        self.calls.extend(urls)
        self.started.set()
        await self.gate.wait()
        return [ScrapResult(url=u, title="late") for u in urls]


class TestCachedUrlScraper:
    def test_each_url_fetched_once(self) -> None:
        inner = _FlakyScraper()
        cached = CachedUrlScraper(inner)

        async def run() -> None:
            await asyncio.gather(
                cached.scrape(["https://a.example/1", "https://a.example/2"]),
                cached.scrape(["https://a.example/1"]),
            )
            await cached.scrape(["https://a.example/2"])

        asyncio.run(run())
        assert sorted(inner.calls) == ["https://a.example/1", "https://a.example/2"]

    def test_failure_becomes_none(self) -> None:
        cached = CachedUrlScraper(_FlakyScraper())
        results = asyncio.run(cached.scrape(["https://a.example/bad", "https://a.example/good"]))
        assert results[0] is None
        assert results[1] == ScrapResult(url="https://a.example/good", title="ok")

    def test_cancelled_caller_leaves_fetch_for_the_next(self) -> None:
        inner = _GatedScraper()
        cached = CachedUrlScraper(inner)

        async def run() -> tuple[ScrapResult, ...]:
            first = asyncio.ensure_future(scrape_like_text(cached, "https://a.example/"))
            await inner.started.wait()
            first.cancel()
            with pytest.raises(asyncio.CancelledError):
                await first
            inner.gate.set()
            return await scrape_like_text(cached, "https://a.example/")

        assert asyncio.run(run()) == (ScrapResult(url="https://a.example/", title="late"),)
        assert inner.calls == ["https://a.example/"]


class TestMediaHash:
    def test_sha256_of_raw_bytes(self) -> None:
        fetcher = InMemoryMediaFetcher({"https://m.example/a.png": b"\x89PNG"})
        digest = asyncio.run(resolve_media_hash(fetcher, Sha256MediaHasher(), "https://m.example/a.png"))
        assert digest == hashlib.sha256(b"\x89PNG").hexdigest()

    def test_kind_is_declared_image(self) -> None:
        seen: list[MediaKind] = []

        class Recorder:
            def hash(self, data: bytes, kind: MediaKind) -> str:
                seen.append(kind)
                return "h"

        fetcher = InMemoryMediaFetcher({"u": b""})
        asyncio.run(resolve_media_hash(fetcher, Recorder(), "u"))
        assert seen == [MediaKind.IMAGE]

    def test_fetch_error_propagates(self) -> None:
        with pytest.raises(UpstreamFetchError):
            asyncio.run(resolve_media_hash(InMemoryMediaFetcher(), Sha256MediaHasher(), "missing"))


class TestEnrichmentResolver:
    def test_nothing_to_resolve(self) -> None:
        resolver = EnrichmentResolver(fake_enrichment_context(), "articles")
        assert asyncio.run(resolver.resolve(ArticleFilter())) == Enrichment()

    def test_all_steps(self) -> None:
        store = InMemoryArticleStore({"articles": {"a1": {"userId": "u", "appId": "app"}}})
        page = ScrapResult(url="https://p.example/", title="P")
        context = fake_enrichment_context(
            store=store,
            scraper=StaticUrlScraper({"https://p.example/": page}),
            fetcher=InMemoryMediaFetcher({"https://m.example/": b"img"}),
        )
        f = ArticleFilter(
            from_user_of_article_id="a1",
            more_like_this=MoreLikeThis(like="https://p.example/"),
            media_url="https://m.example/",
        )
        enrichment = asyncio.run(EnrichmentResolver(context, "articles").resolve(f))
        assert enrichment == Enrichment(
            article_owner=ArticleOwner("u", "app"),
            scrape_results=(page,),
            media_hash=hashlib.sha256(b"img").hexdigest(),
        )


class TestGatherOrCancel:
    def test_results_in_order(self) -> None:
        async def value(v: int, delay: float) -> int:
            await asyncio.sleep(delay)
            return v

        assert asyncio.run(gather_or_cancel(value(1, 0.02), value(2, 0))) == [1, 2]

    def test_empty(self) -> None:
        assert asyncio.run(gather_or_cancel()) == []

    def test_first_error_reraised_unchanged(self) -> None:
        boom = RuntimeError("boom")
        cancelled: list[bool] = []

        async def fail() -> None:
            raise boom

        async def hang() -> None:
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(True)
                raise

        with pytest.raises(RuntimeError) as exc_info:
            asyncio.run(gather_or_cancel(hang(), fail()))
        assert exc_info.value is boom
        assert cancelled == [True]

    def test_every_failure_is_retrieved(self) -> None:
        first, second = RuntimeError("first"), ValueError("second")
        unretrieved: list[dict] = []

        async def fail(exc: Exception) -> None:
            await asyncio.sleep(0)
            raise exc

        async def attempt() -> BaseException:
            with pytest.raises(RuntimeError) as exc_info:
                await gather_or_cancel(fail(first), fail(second))
            return exc_info.value

        async def run() -> BaseException:
            asyncio.get_running_loop().set_exception_handler(lambda loop, ctx: unretrieved.append(ctx))
            raised = await attempt()
            # drop the frames that still reference the finished tasks
            raised.__traceback__ = None
            gc.collect()
            return raised

        assert asyncio.run(run()) is first
        assert unretrieved == []
