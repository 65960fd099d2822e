"""Application search – per-filter clause compilers.

Each compiler reads one filter (plus whatever enrichment it needs) and
appends clauses to :class:`ClauseBuckets`. :data:`CLAUSE_COMPILERS` fixes
the order they run in, which is the order clauses appear in the query.
"""
from __future__ import annotations

from typing import Any, Callable

from article_search.application.enrichment.resolver import Enrichment
from article_search.application.search.buckets import ClauseBucket, ClauseBuckets, Inclusion
from article_search.application.search.filters import ArticleFilter
from article_search.application.search.predicates import more_positive_feedback, no_more_negative_feedback
from article_search.application.search.ranges import range_clause, range_params
from article_search.config import SearchSettings
from article_search.kernel.errors import CompilerError

__all__ = ["CLAUSE_COMPILERS", "ClauseCompiler", "compile_clauses"]

NORMAL = "NORMAL"

Clause = dict[str, Any]
ClauseCompiler = Callable[[ArticleFilter, Enrichment, ClauseBuckets, SearchSettings], None]


def _nested(path: str, query: Clause, **options: Any) -> Clause:
    return {"nested": {"path": path, **options, "query": query}}


def _must(*clauses: Clause) -> Clause:
    return {"bool": {"must": list(clauses)}}


def _normal_status(path: str) -> Clause:
    return {"term": {f"{path}.status": NORMAL}}


def from_user_of_article(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if not f.from_user_of_article_id:
        return
    owner = enrichment.article_owner
    if owner is None:
        raise CompilerError("fromUserOfArticleId was not resolved before compiling")
    buckets.add(
        ClauseBucket.FILTER,
        {"term": {"userId": owner.user_id}},
        {"term": {"appId": owner.app_id}},
    )


def more_like_this(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if not f.more_like_this:
        return
    like = [f.more_like_this.like, *(r.like_text for r in enrichment.scrape_results)]
    minimum_should_match = f.more_like_this.minimum_should_match or settings.mlt_minimum_should_match

    def similar_to(*fields: str) -> Clause:
        return {
            "more_like_this": {
                "fields": list(fields),
                "like": like,
                "min_term_freq": 1,
                "min_doc_freq": 1,
                "minimum_should_match": minimum_should_match,
            },
        }

    snippet = {
        "number_of_fragments": 1,
        "fragment_size": settings.highlight_fragment_size,
        "type": "plain",
    }
    buckets.add(
        ClauseBucket.SHOULD,
        similar_to("text"),
        _nested(
            "hyperlinks",
            similar_to("hyperlinks.title", "hyperlinks.summary"),
            score_mode="sum",
            inner_hits={
                "highlight": {
                    "order": "score",
                    "fields": {
                        "hyperlinks.title": dict(snippet),
                        "hyperlinks.summary": dict(snippet),
                    },
                    "require_field_match": False,
                    "pre_tags": [settings.highlight_pre_tag],
                    "post_tags": [settings.highlight_post_tag],
                },
            },
        ),
    )

    # Articles quoting the very pages the input links to.
    urls = [url for result in enrichment.scrape_results for url in result.urls()]
    if urls:
        buckets.add(
            ClauseBucket.SHOULD,
            _nested("hyperlinks", {"terms": {"hyperlinks.url": urls}}, score_mode="sum"),
        )


def reply_count(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if f.reply_count:
        buckets.add(ClauseBucket.FILTER, range_clause("normalArticleReplyCount", f.reply_count))


def reply_request_count(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if f.reply_request_count:
        buckets.add(ClauseBucket.FILTER, range_clause("replyRequestCount", f.reply_request_count))


def replied_at(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if not f.replied_at:
        return
    buckets.add(
        ClauseBucket.FILTER,
        _nested(
            "articleReplies",
            _must(
                {"match": {"articleReplies.status": NORMAL}},
                {"range": {"articleReplies.createdAt": range_params(f.replied_at)}},
            ),
        ),
    )


def category_ids(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if not f.category_ids:
        return
    buckets.add(
        ClauseBucket.FILTER,
        {
            "bool": {
                "should": [
                    _nested(
                        "articleCategories",
                        _must(
                            {"term": {"articleCategories.categoryId": category_id}},
                            _normal_status("articleCategories"),
                            no_more_negative_feedback("articleCategories").to_clause(),
                        ),
                    )
                    for category_id in f.category_ids
                ],
            },
        },
    )


def positive_feedback_reply(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    buckets.route(
        Inclusion.from_flag(f.has_article_reply_with_more_positive_feedback),
        _nested(
            "articleReplies",
            _must(
                _normal_status("articleReplies"),
                more_positive_feedback("articleReplies").to_clause(),
            ),
        ),
    )


def article_replies_from(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if not f.article_replies_from:
        return
    buckets.route(
        Inclusion.from_flag(f.article_replies_from.exists),
        _nested(
            "articleReplies",
            _must(
                _normal_status("articleReplies"),
                {"term": {"articleReplies.userId": f.article_replies_from.user_id}},
            ),
        ),
    )


def reply_types(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if f.reply_types is None:
        return
    buckets.add(
        ClauseBucket.FILTER,
        _nested(
            "articleReplies",
            _must(
                _normal_status("articleReplies"),
                {"terms": {"articleReplies.replyType": [t.value for t in f.reply_types]}},
            ),
        ),
    )


def article_types(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if f.article_types is not None:
        buckets.add(
            ClauseBucket.FILTER,
            {"terms": {"articleType": [t.value for t in f.article_types]}},
        )
    elif not f.media_url and settings.restrict_default_article_type:
        buckets.add(ClauseBucket.FILTER, {"term": {"articleType": settings.default_article_type}})


def media_url(
    f: ArticleFilter, enrichment: Enrichment, buckets: ClauseBuckets, settings: SearchSettings
) -> None:
    if not f.media_url:
        return
    if enrichment.media_hash is None:
        raise CompilerError("mediaUrl was not hashed before compiling")
    buckets.add(
        ClauseBucket.FILTER,
        _nested("attachment", {"term": {"attachment.hash": enrichment.media_hash}}),
    )


CLAUSE_COMPILERS: tuple[ClauseCompiler, ...] = (
    from_user_of_article,
    more_like_this,
    reply_count,
    reply_request_count,
    replied_at,
    category_ids,
    positive_feedback_reply,
    article_replies_from,
    reply_types,
    article_types,
    media_url,
)


def compile_clauses(
    f: ArticleFilter,
    enrichment: Enrichment,
    settings: SearchSettings,
    buckets: ClauseBuckets | None = None,
) -> ClauseBuckets:
    buckets = buckets if buckets is not None else ClauseBuckets()
    for compiler in CLAUSE_COMPILERS:
        compiler(f, enrichment, buckets, settings)
    return buckets
