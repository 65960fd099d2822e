"""Unit tests – clause buckets, tri-state routing and computed predicates."""
from __future__ import annotations

import pytest

from article_search.application.search import (
    ClauseBucket,
    ClauseBuckets,
    Comparison,
    FieldComparison,
    Inclusion,
)


class TestInclusion:
    @pytest.mark.parametrize(
        ("flag", "expected"),
        [(True, Inclusion.INCLUDE), (False, Inclusion.EXCLUDE), (None, Inclusion.OMIT)],
    )
    def test_from_flag(self, flag: bool | None, expected: Inclusion) -> None:
        assert Inclusion.from_flag(flag) is expected

    def test_bucket_mapping(self) -> None:
        assert Inclusion.INCLUDE.bucket is ClauseBucket.FILTER
        assert Inclusion.EXCLUDE.bucket is ClauseBucket.MUST_NOT
        assert Inclusion.OMIT.bucket is None


class TestClauseBuckets:
    def test_add_keeps_insertion_order(self) -> None:
        buckets = ClauseBuckets()
        buckets.add(ClauseBucket.FILTER, {"a": 1})
        buckets.add(ClauseBucket.FILTER, {"b": 2}, {"c": 3})
        assert buckets.filter == [{"a": 1}, {"b": 2}, {"c": 3}]

    def test_route_include(self) -> None:
        buckets = ClauseBuckets()
        buckets.route(Inclusion.INCLUDE, {"x": 1})
        assert buckets.filter == [{"x": 1}]
        assert buckets.must_not == []

    def test_route_exclude(self) -> None:
        buckets = ClauseBuckets()
        buckets.route(Inclusion.EXCLUDE, {"x": 1})
        assert buckets.filter == []
        assert buckets.must_not == [{"x": 1}]

    def test_route_omit(self) -> None:
        buckets = ClauseBuckets()
        buckets.route(Inclusion.OMIT, {"x": 1})
        assert buckets == ClauseBuckets()


class TestFieldComparison:
    def test_gte_script(self) -> None:
        cmp = FieldComparison("a.pos", Comparison.GTE, "a.neg")
        assert cmp.to_clause() == {
            "script": {
                "script": {
                    "source": "doc['a.pos'].value >= doc['a.neg'].value",
                    "lang": "painless",
                },
            },
        }

    def test_gt_script(self) -> None:
        cmp = FieldComparison("a.pos", Comparison.GT, "a.neg")
        assert cmp.script_source() == "doc['a.pos'].value > doc['a.neg'].value"
