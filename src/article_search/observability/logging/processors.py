"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

from article_search.kernel.errors import BaseError
from article_search.observability.correlation import CorrelationContext


class RequestContextProcessor:
    """Add the ambient caller to every event.

    ``correlation_id`` is always added once a context is bound; ``user_id``
    and ``app_id`` only for logged-in callers. Keys bound on the event win.
    """

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        ctx = CorrelationContext.get()
        if ctx is None:
            return event_dict
        event_dict.setdefault("correlation_id", ctx.correlation_id)
        for key in ("user_id", "app_id"):
            value = getattr(ctx, key)
            if value is not None:
                event_dict.setdefault(key, value)
        return event_dict


class ErrorPayloadProcessor:
    """Render kernel errors passed as event values through ``to_dict()``."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        for key, value in event_dict.items():
            if isinstance(value, BaseError):
                event_dict[key] = value.to_dict()
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """structlog logger for *name*, with *initial_values* bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["ErrorPayloadProcessor", "RequestContextProcessor", "get_logger"]
