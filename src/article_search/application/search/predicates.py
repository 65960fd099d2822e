"""Application search – computed comparisons between two numeric fields.

Elasticsearch cannot compare two fields of the same document in a plain
query, so these compile to a painless ``script`` query. Only the closed set
of comparisons below is supported; script source is generated, never taken
from input.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

__all__ = ["Comparison", "FieldComparison", "more_positive_feedback", "no_more_negative_feedback"]


class Comparison(str, Enum):
    GT = ">"
    GTE = ">="


@dataclasses.dataclass(frozen=True)
class FieldComparison:
    """``left <comparison> right`` evaluated per (sub-)document."""
    left: str
    comparison: Comparison
    right: str

    def script_source(self) -> str:
        return f"doc['{self.left}'].value {self.comparison.value} doc['{self.right}'].value"

    def to_clause(self) -> dict[str, Any]:
        return {
            "script": {
                "script": {
                    "source": self.script_source(),
                    "lang": "painless",
                },
            },
        }


def more_positive_feedback(path: str) -> FieldComparison:
    """Positive feedback strictly outnumbers negative feedback."""
    return FieldComparison(
        f"{path}.positiveFeedbackCount", Comparison.GT, f"{path}.negativeFeedbackCount"
    )


def no_more_negative_feedback(path: str) -> FieldComparison:
    return FieldComparison(
        f"{path}.positiveFeedbackCount", Comparison.GTE, f"{path}.negativeFeedbackCount"
    )
