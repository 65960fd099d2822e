"""Observability – structured logging helpers."""
from article_search.observability.logging.factory import NOISY_LOGGERS, JsonLoggerFactory
from article_search.observability.logging.processors import (
    ErrorPayloadProcessor,
    RequestContextProcessor,
    get_logger,
)

__all__ = [
    "NOISY_LOGGERS",
    "ErrorPayloadProcessor",
    "JsonLoggerFactory",
    "RequestContextProcessor",
    "get_logger",
]
