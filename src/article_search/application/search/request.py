"""Application search – SearchRequest handed to the executor."""
from __future__ import annotations

import dataclasses
from typing import Any

from article_search.application.pagination import PagingParams
from article_search.application.search.query import CompiledQuery

__all__ = ["SearchRequest", "build_search_request"]


@dataclasses.dataclass(frozen=True)
class SearchRequest:
    collection: str
    query: CompiledQuery
    paging: PagingParams = dataclasses.field(default_factory=PagingParams)

    @property
    def body(self) -> dict[str, Any]:
        return self.query.to_body()

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.collection, "body": self.body, **self.paging.as_params()}


def build_search_request(
    collection: str, query: CompiledQuery, paging: PagingParams | None = None
) -> SearchRequest:
    return SearchRequest(collection=collection, query=query, paging=paging or PagingParams())
