"""Unit tests – sort compiler."""
from __future__ import annotations

import pytest

from article_search.application.pagination import SortDirection
from article_search.application.search import SORT_KEYS, SortSpec, compile_sort
from article_search.kernel.errors import UnknownSortKeyError

TIEBREAKER = {"_id": "desc"}


class TestCompileSort:
    def test_empty_has_only_tiebreaker(self) -> None:
        assert compile_sort([]) == [TIEBREAKER]

    def test_plain_field(self) -> None:
        assert compile_sort([SortSpec("createdAt", SortDirection.DESC)]) == [
            {"createdAt": {"order": "desc"}},
            TIEBREAKER,
        ]

    def test_score(self) -> None:
        assert compile_sort([SortSpec("_score", SortDirection.DESC)])[0] == {"_score": {"order": "desc"}}

    def test_reply_count_maps_to_counter_field(self) -> None:
        clause = compile_sort([SortSpec("replyCount", SortDirection.ASC)])[0]
        assert clause == {"normalArticleReplyCount": {"order": "asc"}}
        assert "nested" not in clause["normalArticleReplyCount"]

    def test_last_replied_at_is_nested_max(self) -> None:
        clause = compile_sort([SortSpec("lastRepliedAt", SortDirection.DESC)])[0]
        assert clause == {
            "articleReplies.createdAt": {
                "order": "desc",
                "mode": "max",
                "nested": {
                    "path": "articleReplies",
                    "filter": {"term": {"articleReplies.status": "NORMAL"}},
                },
            },
        }

    def test_order_preserved(self) -> None:
        clauses = compile_sort([{"replyRequestCount": "DESC"}, {"updatedAt": "asc"}])
        assert clauses == [
            {"replyRequestCount": {"order": "desc"}},
            {"updatedAt": {"order": "asc"}},
            TIEBREAKER,
        ]

    def test_unknown_key_fails_fast(self) -> None:
        with pytest.raises(UnknownSortKeyError) as exc_info:
            compile_sort([SortSpec("popularity")])
        assert exc_info.value.key == "popularity"

    def test_every_key_compiles(self) -> None:
        assert len(compile_sort([SortSpec(k) for k in SORT_KEYS])) == len(SORT_KEYS) + 1


class TestSortSpecFromMapping:
    def test_direction_parsed(self) -> None:
        assert SortSpec.from_mapping({"lastRequestedAt": "DESC"}) == SortSpec("lastRequestedAt", SortDirection.DESC)

    def test_multiple_keys_rejected(self) -> None:
        with pytest.raises(ValueError):
            SortSpec.from_mapping({"a": "ASC", "b": "DESC"})
