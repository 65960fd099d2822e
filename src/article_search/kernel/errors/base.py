"""Root error class shared by every article_search failure."""

from __future__ import annotations

from typing import Any, ClassVar


class BaseError(Exception):
    """Common shape of article_search errors.

    ``code`` is a stable slug for API error payloads and ``detail`` holds the
    values that caused the failure. ``cause`` chains the lower-level exception
    the error was translated from. ``exposed`` marks errors whose message can
    be shown to API callers unchanged.
    """

    default_code: ClassVar[str] = "error"
    exposed: ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Payload for API errors and log events."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = type(self.cause).__name__
        return payload


__all__ = ["BaseError"]
