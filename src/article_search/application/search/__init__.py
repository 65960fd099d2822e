"""Application search – compile article list filters into a bool query."""
from article_search.application.search.buckets import ClauseBucket, ClauseBuckets, Inclusion
from article_search.application.search.clauses import CLAUSE_COMPILERS, compile_clauses
from article_search.application.search.common import CommonListFilter, DefaultCommonListFilter
from article_search.application.search.compiler import ArticleQueryCompiler
from article_search.application.search.filters import (
    ArticleFilter,
    ArticleType,
    MoreLikeThis,
    ReplyType,
    UserInvolvement,
)
from article_search.application.search.predicates import Comparison, FieldComparison
from article_search.application.search.query import MATCH_ALL, CompiledQuery, assemble
from article_search.application.search.ranges import (
    ArithmeticExpression,
    RangeOperator,
    range_clause,
    range_params,
)
from article_search.application.search.request import SearchRequest, build_search_request
from article_search.application.search.sort import SORT_KEYS, SortSpec, compile_sort

__all__ = [
    "CLAUSE_COMPILERS",
    "MATCH_ALL",
    "SORT_KEYS",
    "ArithmeticExpression",
    "ArticleFilter",
    "ArticleQueryCompiler",
    "ArticleType",
    "ClauseBucket",
    "ClauseBuckets",
    "CommonListFilter",
    "Comparison",
    "CompiledQuery",
    "DefaultCommonListFilter",
    "FieldComparison",
    "Inclusion",
    "MoreLikeThis",
    "RangeOperator",
    "ReplyType",
    "SearchRequest",
    "SortSpec",
    "UserInvolvement",
    "assemble",
    "build_search_request",
    "compile_clauses",
    "compile_sort",
    "range_clause",
    "range_params",
]
