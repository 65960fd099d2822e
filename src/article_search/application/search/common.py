"""Application search – baseline filters shared by every list query."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from article_search.application.search.filters import ArticleFilter
from article_search.application.search.ranges import range_clause
from article_search.kernel.errors import UnauthorizedError
from article_search.observability.correlation import RequestContext

__all__ = ["CommonListFilter", "DefaultCommonListFilter"]


@runtime_checkable
class CommonListFilter(Protocol):
    """Port: FILTER clauses for ownership, ids and timestamps."""

    def clauses(self, article_filter: ArticleFilter, caller: RequestContext) -> list[dict[str, Any]]: ...


class DefaultCommonListFilter:
    def clauses(self, article_filter: ArticleFilter, caller: RequestContext) -> list[dict[str, Any]]:
        f = article_filter
        clauses: list[dict[str, Any]] = []

        if f.user_id:
            clauses.append({"term": {"userId": f.user_id}})
        if f.app_id:
            clauses.append({"term": {"appId": f.app_id}})
        if f.ids is not None:
            clauses.append({"ids": {"values": list(f.ids)}})
        if f.self_only:
            if not caller.is_authenticated:
                raise UnauthorizedError("selfOnly can be set only after log in")
            clauses.append({"term": {"userId": caller.user_id}})
            clauses.append({"term": {"appId": caller.app_id}})
        if f.created_at:
            clauses.append(range_clause("createdAt", f.created_at))
        if f.updated_at:
            clauses.append(range_clause("updatedAt", f.updated_at))
        return clauses
