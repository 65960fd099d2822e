"""Kernel – framework-agnostic building blocks."""

from article_search.kernel.errors import (
    ApplicationError,
    BaseError,
    CompilerError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ReferenceNotFoundError,
    UnauthorizedError,
    UnknownSortKeyError,
    UnsupportedOperatorError,
    UpstreamFetchError,
    UpstreamTimeoutError,
    UserInputError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CompilerError",
    "DomainError",
    "InfrastructureError",
    "NotFoundError",
    "ReferenceNotFoundError",
    "UnauthorizedError",
    "UnknownSortKeyError",
    "UnsupportedOperatorError",
    "UpstreamFetchError",
    "UpstreamTimeoutError",
    "UserInputError",
    "ValidationError",
]
