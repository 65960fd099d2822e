"""Kernel error hierarchy.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── UserInputError
    │       └── ReferenceNotFoundError
    ├── ApplicationError         (application.py)
    │   └── UnauthorizedError
    ├── InfrastructureError      (infrastructure.py)
    │   └── UpstreamFetchError
    │       └── UpstreamTimeoutError
    └── CompilerError            (compiler.py)
        ├── UnsupportedOperatorError
        └── UnknownSortKeyError

Errors with ``exposed = True`` are safe to show to API callers as they are.
``InfrastructureError`` subclasses are raised by adapters and pass through
the query compiler untouched. ``CompilerError`` marks a programming error
and is never caught inside the package.
"""

from article_search.kernel.errors.application import ApplicationError, UnauthorizedError
from article_search.kernel.errors.base import BaseError
from article_search.kernel.errors.compiler import (
    CompilerError,
    UnknownSortKeyError,
    UnsupportedOperatorError,
)
from article_search.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    ReferenceNotFoundError,
    UserInputError,
    ValidationError,
)
from article_search.kernel.errors.infrastructure import (
    InfrastructureError,
    UpstreamFetchError,
    UpstreamTimeoutError,
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
