"""Application errors – the caller may not run the request as given."""

from __future__ import annotations

from article_search.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """The filter is only available to a logged-in caller (``selfOnly``)."""

    default_code = "unauthorized"
    exposed = True


__all__ = ["ApplicationError", "UnauthorizedError"]
