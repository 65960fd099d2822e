"""Observability – request context and structured logging."""

from article_search.observability.correlation import CorrelationContext, RequestContext
from article_search.observability.logging import (
    ErrorPayloadProcessor,
    JsonLoggerFactory,
    RequestContextProcessor,
    get_logger,
)

__all__ = [
    "CorrelationContext",
    "ErrorPayloadProcessor",
    "JsonLoggerFactory",
    "RequestContext",
    "RequestContextProcessor",
    "get_logger",
]
