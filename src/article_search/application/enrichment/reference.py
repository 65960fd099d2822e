"""Enrichment – owner lookup for ``fromUserOfArticleId``."""
from __future__ import annotations

import dataclasses
from typing import Any, Protocol, Sequence, runtime_checkable

from article_search.kernel.errors import NotFoundError, ReferenceNotFoundError

__all__ = ["ArticleOwner", "ArticleStore", "resolve_article_owner"]


@runtime_checkable
class ArticleStore(Protocol):
    """Port: the document store holding articles."""

    async def get_by_id(
        self, collection: str, doc_id: str, *, fields: Sequence[str] | None = None
    ) -> dict[str, Any]:
        """Return the document source; raise :class:`NotFoundError` if absent."""
        ...

    async def search(self, collection: str, body: dict[str, Any], **params: Any) -> Any: ...


@dataclasses.dataclass(frozen=True)
class ArticleOwner:
    """Who submitted an article, and through which app."""
    user_id: str
    app_id: str


async def resolve_article_owner(store: ArticleStore, collection: str, article_id: str) -> ArticleOwner:
    try:
        source = await store.get_by_id(collection, article_id, fields=("userId", "appId"))
    except NotFoundError as exc:
        raise ReferenceNotFoundError(article_id, cause=exc)
    try:
        return ArticleOwner(user_id=source["userId"], app_id=source["appId"])
    except KeyError as exc:
        # an article without an owner cannot anchor the filter either
        raise ReferenceNotFoundError(article_id, cause=exc)
