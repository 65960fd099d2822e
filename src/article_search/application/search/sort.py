"""Application search – sort keys and their Elasticsearch sort clauses."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Iterable, Mapping

from article_search.application.pagination import SortDirection
from article_search.kernel.errors import UnknownSortKeyError

__all__ = ["SORT_KEYS", "SortSpec", "compile_sort"]

NORMAL = "NORMAL"

SortClause = dict[str, Any]


@dataclasses.dataclass(frozen=True)
class SortSpec:
    key: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def from_mapping(cls, item: Mapping[str, Any]) -> "SortSpec":
        """``{"replyCount": "DESC"}`` -> ``SortSpec("replyCount", DESC)``."""
        if len(item) != 1:
            raise ValueError(f"sort item must have exactly one key, got {sorted(item)}")
        (key, direction), = item.items()
        return cls(key=key, direction=SortDirection(str(direction).upper()))


def _field(name: str) -> Callable[[str], SortClause]:
    return lambda order: {name: {"order": order}}


def _last_replied_at(order: str) -> SortClause:
    return {
        "articleReplies.createdAt": {
            "order": order,
            "mode": "max",
            "nested": {
                "path": "articleReplies",
                "filter": {"term": {"articleReplies.status": NORMAL}},
            },
        },
    }


_SORTERS: dict[str, Callable[[str], SortClause]] = {
    "_score": _field("_score"),
    "updatedAt": _field("updatedAt"),
    "createdAt": _field("createdAt"),
    "replyRequestCount": _field("replyRequestCount"),
    "replyCount": _field("normalArticleReplyCount"),
    "lastRequestedAt": _field("lastRequestedAt"),
    "lastRepliedAt": _last_replied_at,
}

SORT_KEYS: tuple[str, ...] = tuple(_SORTERS)

# Cursor pagination needs a total order.
TIEBREAKER: SortClause = {"_id": "desc"}


def compile_sort(order_by: Iterable[SortSpec | Mapping[str, Any]]) -> list[SortClause]:
    clauses: list[SortClause] = []
    for item in order_by:
        spec = item if isinstance(item, SortSpec) else SortSpec.from_mapping(item)
        sorter = _SORTERS.get(spec.key)
        if sorter is None:
            raise UnknownSortKeyError(spec.key)
        clauses.append(sorter(spec.direction.order))
    clauses.append(dict(TIEBREAKER))
    return clauses
