"""Infrastructure errors – failed calls to the store, web pages or media hosts."""

from __future__ import annotations

from typing import Any

from article_search.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class UpstreamFetchError(InfrastructureError):
    """A collaborator answered with an error or could not be reached.

    ``service`` names the collaborator (``"elasticsearch"`` or the fetched
    URL). ``status_code`` is set when the collaborator answered at all.
    """

    default_code = "upstream_fetch_failed"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        detail: dict[str, Any] = {"service": service}
        if status_code is not None:
            detail["status_code"] = status_code
        kwargs.setdefault("detail", detail)
        super().__init__(message or f"request to {service} failed", **kwargs)
        self.service = service
        self.status_code = status_code


class UpstreamTimeoutError(UpstreamFetchError):
    default_code = "upstream_timeout"


__all__ = ["InfrastructureError", "UpstreamFetchError", "UpstreamTimeoutError"]
