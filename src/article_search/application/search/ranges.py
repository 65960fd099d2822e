"""Application search – arithmetic expressions and their range clauses."""
from __future__ import annotations

import dataclasses
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping

from article_search.kernel.errors import UnsupportedOperatorError

__all__ = ["ArithmeticExpression", "RangeOperator", "range_clause", "range_params"]


class RangeOperator(str, Enum):
    EQ = "EQ"
    GT = "GT"
    GTE = "GTE"
    LT = "LT"
    LTE = "LTE"

    @classmethod
    def parse(cls, operator: Any) -> "RangeOperator":
        if isinstance(operator, cls):
            return operator
        try:
            return cls(str(operator).upper())
        except ValueError:
            raise UnsupportedOperatorError(operator) from None


@dataclasses.dataclass(frozen=True)
class ArithmeticExpression:
    """Bounds on a numeric or date field, e.g. ``{GTE: 5}`` or ``{GT: 1, LT: 10}``.

    ``EQ`` wins over every other bound.
    """
    eq: Any = None
    gt: Any = None
    gte: Any = None
    lt: Any = None
    lte: Any = None

    @classmethod
    def of(cls, operator: RangeOperator | str, value: Any) -> "ArithmeticExpression":
        op = RangeOperator.parse(operator)
        return cls(**{op.value.lower(): value})

    @classmethod
    def from_mapping(cls, expression: Mapping[str, Any]) -> "ArithmeticExpression":
        kwargs: dict[str, Any] = {}
        for operator, value in expression.items():
            kwargs[RangeOperator.parse(operator).value.lower()] = value
        return cls(**kwargs)

    def bounds(self) -> dict[RangeOperator, Any]:
        return {
            op: getattr(self, op.value.lower())
            for op in RangeOperator
            if getattr(self, op.value.lower()) is not None
        }


def _serialise(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def range_params(expression: ArithmeticExpression) -> dict[str, Any]:
    """Translate *expression* into the body of an Elasticsearch ``range`` query."""
    bounds = expression.bounds()
    if RangeOperator.EQ in bounds:
        value = _serialise(bounds[RangeOperator.EQ])
        return {"gte": value, "lte": value}
    return {op.value.lower(): _serialise(value) for op, value in bounds.items()}


def range_clause(field: str, expression: ArithmeticExpression) -> dict[str, Any]:
    return {"range": {field: range_params(expression)}}
