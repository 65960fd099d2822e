"""Elasticsearch adapter – article document store."""
from article_search.adapters.elasticsearch.store import ElasticsearchArticleStore

__all__ = ["ElasticsearchArticleStore"]
