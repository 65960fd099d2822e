"""Application pagination – PagingParams, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Mapping


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @property
    def order(self) -> str:
        """Elasticsearch ``order`` value."""
        return self.value.lower()


@dataclasses.dataclass(frozen=True)
class PagingParams:
    """Relay-style paging arguments handed through to the pagination resolver.

    The compiler never interprets these; cursor decoding and page size
    limits belong to the executor.
    """
    first: int | None = None
    after: str | None = None
    before: str | None = None

    def __post_init__(self) -> None:
        if self.first is not None and self.first < 0:
            raise ValueError("first must be >= 0")

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any] | None) -> "PagingParams":
        params = params or {}
        return cls(
            first=params.get("first"),
            after=params.get("after"),
            before=params.get("before"),
        )

    def as_params(self) -> dict[str, Any]:
        """Only the arguments the caller actually supplied."""
        return {
            name: value
            for name, value in dataclasses.asdict(self).items()
            if value is not None
        }


__all__ = ["PagingParams", "SortDirection"]
