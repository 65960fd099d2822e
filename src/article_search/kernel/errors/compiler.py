"""Compiler errors – programming mistakes in filter or sort input."""

from __future__ import annotations

from typing import Any

from article_search.kernel.errors.base import BaseError


class CompilerError(BaseError):
    """The query compiler was handed input it has no translation for."""

    default_code = "compiler_error"


class UnsupportedOperatorError(CompilerError):
    default_code = "unsupported_operator"

    def __init__(self, operator: Any, **kwargs: Any) -> None:
        super().__init__(f"Unsupported range operator {operator!r}", **kwargs)
        self.operator = operator


class UnknownSortKeyError(CompilerError):
    default_code = "unknown_sort_key"

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(f"Unknown sort key {key!r}", **kwargs)
        self.key = key


__all__ = [
    "CompilerError",
    "UnknownSortKeyError",
    "UnsupportedOperatorError",
]
