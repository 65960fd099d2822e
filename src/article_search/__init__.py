"""
article_search – compile article list filters into Elasticsearch queries.

Import path convention::

    from article_search.application.search import ArticleQueryCompiler
    from article_search.application.enrichment import EnrichmentContext
    from article_search.kernel.errors import ReferenceNotFoundError
    from article_search.adapters.elasticsearch import ElasticsearchArticleStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
