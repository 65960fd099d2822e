"""Domain errors – rejected filter input and missing documents."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from article_search.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class ValidationError(DomainError):
    """The filter mapping could not be parsed.

    ``errors`` has one ``{"field", "message"}`` entry per rejected key, so a
    caller sees every problem at once.
    """

    default_code = "invalid_filter"
    exposed = True

    def __init__(self, message: str, *, errors: Sequence[Mapping[str, Any]] = (), **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = [dict(e) for e in errors]

    @property
    def fields(self) -> list[str]:
        return [e["field"] for e in self.errors]

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


class NotFoundError(DomainError):
    """No document with ``doc_id`` exists in ``collection``."""

    default_code = "document_not_found"

    def __init__(self, collection: str, doc_id: str, **kwargs: Any) -> None:
        super().__init__(
            f"document {doc_id!r} not found in {collection!r}",
            detail={"collection": collection, "id": doc_id},
            **kwargs,
        )
        self.collection = collection
        self.doc_id = doc_id


class UserInputError(DomainError):
    """A filter value is well-formed but cannot be honoured."""

    default_code = "user_input_error"
    exposed = True


class ReferenceNotFoundError(UserInputError):
    """``fromUserOfArticleId`` names an article that does not exist."""

    default_code = "reference_not_found"

    def __init__(self, reference_id: str, **kwargs: Any) -> None:
        super().__init__(
            "the referenced article does not match any existing article",
            detail={"reference_id": reference_id},
            **kwargs,
        )
        self.reference_id = reference_id


__all__ = [
    "DomainError",
    "NotFoundError",
    "ReferenceNotFoundError",
    "UserInputError",
    "ValidationError",
]
