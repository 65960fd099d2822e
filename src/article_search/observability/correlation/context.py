"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import contextlib
import dataclasses
from contextvars import ContextVar, Token
from typing import Iterator
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Who is asking, for one compilation.

    ``user_id`` and ``app_id`` scope the ``selfOnly`` list filter; both are
    ``None`` for anonymous callers.
    """
    correlation_id: str
    user_id: str | None = None
    app_id: str | None = None

    @classmethod
    def new(cls, user_id: str | None = None, app_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=uuid4().hex, user_id=user_id, app_id=app_id)

    @classmethod
    def anonymous(cls) -> "RequestContext":
        return cls.new()

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


_current: ContextVar[RequestContext | None] = ContextVar("article_search_request", default=None)


class CorrelationContext:
    """Ambient :class:`RequestContext` for logging and outgoing HTTP headers."""

    @staticmethod
    def get() -> RequestContext | None:
        return _current.get()

    @staticmethod
    def set(ctx: RequestContext) -> Token[RequestContext | None]:
        return _current.set(ctx)

    @staticmethod
    def reset(token: Token[RequestContext | None]) -> None:
        _current.reset(token)

    @staticmethod
    @contextlib.contextmanager
    def bind(ctx: RequestContext) -> Iterator[RequestContext]:
        """Make *ctx* ambient for the duration of the ``with`` block."""
        token = _current.set(ctx)
        try:
            yield ctx
        finally:
            _current.reset(token)


__all__ = ["CorrelationContext", "RequestContext"]
