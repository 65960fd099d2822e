"""Application search – bool query buckets and tri-state routing."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

__all__ = ["ClauseBucket", "ClauseBuckets", "Inclusion"]

Clause = dict[str, Any]


class ClauseBucket(str, Enum):
    SHOULD = "should"        # scores; at least one must match
    FILTER = "filter"        # must match, no score
    MUST_NOT = "must_not"


class Inclusion(Enum):
    """Tri-state filter value: require, forbid, or ignore a clause."""

    INCLUDE = "include"
    EXCLUDE = "exclude"
    OMIT = "omit"

    @classmethod
    def from_flag(cls, flag: bool | None) -> "Inclusion":
        if flag is None:
            return cls.OMIT
        return cls.INCLUDE if flag else cls.EXCLUDE

    @property
    def bucket(self) -> ClauseBucket | None:
        if self is Inclusion.INCLUDE:
            return ClauseBucket.FILTER
        if self is Inclusion.EXCLUDE:
            return ClauseBucket.MUST_NOT
        return None


@dataclasses.dataclass
class ClauseBuckets:
    """Clauses collected for one compilation, kept in insertion order."""

    should: list[Clause] = dataclasses.field(default_factory=list)
    filter: list[Clause] = dataclasses.field(default_factory=list)
    must_not: list[Clause] = dataclasses.field(default_factory=list)

    def add(self, bucket: ClauseBucket, *clauses: Clause) -> None:
        getattr(self, bucket.value).extend(clauses)

    def route(self, inclusion: Inclusion, clause: Clause) -> None:
        """Place *clause* in FILTER or MUST_NOT per *inclusion*; drop it on OMIT."""
        bucket = inclusion.bucket
        if bucket is not None:
            self.add(bucket, clause)
