"""Application pagination – pass-through paging parameters and sort direction."""
from article_search.application.pagination.params import PagingParams, SortDirection

__all__ = ["PagingParams", "SortDirection"]
