"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import IO, Any

import structlog

from article_search.observability.logging.processors import ErrorPayloadProcessor, RequestContextProcessor

# Client libraries that log every request at INFO.
NOISY_LOGGERS = ("elastic_transport", "elasticsearch", "httpx", "httpcore")


class JsonLoggerFactory:
    """One-call structlog setup for services embedding the query compiler.

    Events go through the stdlib root handler so that records from the
    client libraries share the same format. ``json=False`` swaps in the
    console renderer for local development.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        *,
        json: bool = True,
        stream: IO[str] | None = None,
        quiet_clients: bool = True,
    ) -> None:
        pre_chain: list[Any] = [
            structlog.contextvars.merge_contextvars,
            RequestContextProcessor(),
            ErrorPayloadProcessor(),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ]
        structlog.configure(
            processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=pre_chain,
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            )
        )
        root = logging.getLogger()
        root.handlers[:] = [handler]
        root.setLevel(level)

        if quiet_clients:
            for name in NOISY_LOGGERS:
                logging.getLogger(name).setLevel(max(level, logging.WARNING))


__all__ = ["JsonLoggerFactory", "NOISY_LOGGERS"]
