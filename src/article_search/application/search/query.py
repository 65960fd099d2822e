"""Application search – CompiledQuery and the bool query assembler."""
from __future__ import annotations

import copy
import dataclasses
from typing import Any

from article_search.application.search.buckets import ClauseBuckets

__all__ = ["MATCH_ALL", "CompiledQuery", "assemble"]

MATCH_ALL: dict[str, Any] = {"match_all": {}}


@dataclasses.dataclass(frozen=True)
class CompiledQuery:
    should: tuple[dict[str, Any], ...]
    filter: tuple[dict[str, Any], ...]
    must_not: tuple[dict[str, Any], ...]
    sort: tuple[dict[str, Any], ...]
    track_scores: bool = True
    minimum_should_match: int = 1

    def to_body(self) -> dict[str, Any]:
        """Elasticsearch search body; a deep copy, safe to mutate."""
        return copy.deepcopy({
            "sort": list(self.sort),
            "track_scores": self.track_scores,
            "query": {
                "bool": {
                    "should": list(self.should),
                    "filter": list(self.filter),
                    "must_not": list(self.must_not),
                    "minimum_should_match": self.minimum_should_match,
                },
            },
        })


def assemble(buckets: ClauseBuckets, sort: list[dict[str, Any]]) -> CompiledQuery:
    """Merge clause buckets into one bool query, keeping insertion order.

    With no scoring clause, ``match_all`` stands in so that
    ``minimum_should_match: 1`` still lets every document through.
    """
    should = buckets.should or [dict(MATCH_ALL)]
    return CompiledQuery(
        should=tuple(should),
        filter=tuple(buckets.filter),
        must_not=tuple(buckets.must_not),
        sort=tuple(sort),
        track_scores=True,
    )
