"""Config – SearchSettings for the article query compiler."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from article_search.config.settings.base import Settings
from article_search.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class SearchSettings(Settings):
    """Tunables of the article list query.

    ``restrict_default_article_type`` keeps list results to
    ``default_article_type`` whenever the caller names neither
    ``articleTypes`` nor ``mediaUrl``. Clients that render media articles
    switch it off.
    """

    _prefix: ClassVar[str] = "ARTICLE_SEARCH"

    collection: str = "articles"
    default_article_type: str = "TEXT"
    restrict_default_article_type: bool = True
    mlt_minimum_should_match: str = "10<70%"
    highlight_pre_tag: str = "<HIGHLIGHT>"
    highlight_post_tag: str = "</HIGHLIGHT>"
    highlight_fragment_size: int = 200
    elasticsearch_url: str = "http://localhost:9200"
    http_timeout: float = 10.0

    def _validate(self) -> None:
        if not self.collection:
            raise InvalidSettingValueError("collection", self.collection, "must not be empty")
        if self.highlight_fragment_size < 1:
            raise InvalidSettingValueError(
                "highlight_fragment_size", self.highlight_fragment_size, "must be >= 1"
            )
        if self.http_timeout <= 0:
            raise InvalidSettingValueError("http_timeout", self.http_timeout, "must be > 0")


__all__ = ["SearchSettings"]
