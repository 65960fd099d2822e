"""Application search – typed article list filter."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Mapping

from article_search.application.search.ranges import ArithmeticExpression
from article_search.kernel.errors import ValidationError

__all__ = [
    "ArticleFilter",
    "ArticleType",
    "MoreLikeThis",
    "ReplyType",
    "UserInvolvement",
]


class ReplyType(str, Enum):
    NOT_ARTICLE = "NOT_ARTICLE"
    OPINIONATED = "OPINIONATED"
    NOT_RUMOR = "NOT_RUMOR"
    RUMOR = "RUMOR"


class ArticleType(str, Enum):
    TEXT = "TEXT"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    AUDIO = "AUDIO"


@dataclasses.dataclass(frozen=True)
class MoreLikeThis:
    """Free text (possibly containing URLs) to find similar articles for."""
    like: str
    minimum_should_match: str | None = None


@dataclasses.dataclass(frozen=True)
class UserInvolvement:
    """With (``exists=True``) or without a given user's involvement."""
    user_id: str
    exists: bool = True


@dataclasses.dataclass(frozen=True)
class ArticleFilter:
    """Every filter the article list understands; ``None`` means "not given"."""

    # common list filter
    ids: tuple[str, ...] | None = None
    user_id: str | None = None
    app_id: str | None = None
    self_only: bool | None = None
    created_at: ArithmeticExpression | None = None
    updated_at: ArithmeticExpression | None = None

    reply_count: ArithmeticExpression | None = None
    reply_request_count: ArithmeticExpression | None = None
    replied_at: ArithmeticExpression | None = None
    category_ids: tuple[str, ...] | None = None
    more_like_this: MoreLikeThis | None = None
    from_user_of_article_id: str | None = None
    article_replies_from: UserInvolvement | None = None
    has_article_reply_with_more_positive_feedback: bool | None = None
    reply_types: tuple[ReplyType, ...] | None = None
    article_types: tuple[ArticleType, ...] | None = None
    media_url: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ArticleFilter":
        """Build from API input keyed by camelCase names.

        Raises :class:`ValidationError` listing every unknown key or bad value.
        """
        data = data or {}
        errors: list[dict[str, Any]] = []
        kwargs: dict[str, Any] = {}

        for key, raw in data.items():
            field_name = _API_KEYS.get(key)
            if field_name is None:
                errors.append({"field": key, "message": "unknown filter"})
                continue
            if raw is None:
                continue
            try:
                kwargs[field_name] = _PARSERS.get(field_name, _identity)(raw)
            except (TypeError, ValueError, KeyError) as exc:
                errors.append({"field": key, "message": str(exc)})

        if errors:
            raise ValidationError("Invalid article filter", errors=errors)
        return cls(**kwargs)


def _identity(value: Any) -> Any:
    return value


def _flag(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError("expected true or false")
    return value


def _expression(value: Any) -> ArithmeticExpression:
    if isinstance(value, ArithmeticExpression):
        return value
    return ArithmeticExpression.from_mapping(value)


def _strings(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        raise TypeError("expected a list of strings")
    return tuple(str(v) for v in value)


def _more_like_this(value: Any) -> MoreLikeThis:
    if isinstance(value, MoreLikeThis):
        return value
    return MoreLikeThis(like=value["like"], minimum_should_match=value.get("minimumShouldMatch"))


def _user_involvement(value: Any) -> UserInvolvement:
    if isinstance(value, UserInvolvement):
        return value
    exists = value.get("exists")
    return UserInvolvement(user_id=value["userId"], exists=True if exists is None else _flag(exists))


def _enum_tuple(enum_cls: type[Enum]) -> Any:
    def parse(value: Any) -> tuple[Any, ...]:
        if isinstance(value, str):
            raise TypeError(f"expected a list of {enum_cls.__name__}")
        return tuple(enum_cls(v) for v in value)
    return parse


_API_KEYS: dict[str, str] = {
    "ids": "ids",
    "userId": "user_id",
    "appId": "app_id",
    "selfOnly": "self_only",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
    "replyCount": "reply_count",
    "replyRequestCount": "reply_request_count",
    "repliedAt": "replied_at",
    "categoryIds": "category_ids",
    "moreLikeThis": "more_like_this",
    "fromUserOfArticleId": "from_user_of_article_id",
    "articleRepliesFrom": "article_replies_from",
    "hasArticleReplyWithMorePositiveFeedback": "has_article_reply_with_more_positive_feedback",
    "replyTypes": "reply_types",
    "articleTypes": "article_types",
    "mediaUrl": "media_url",
}

_PARSERS: dict[str, Any] = {
    "ids": _strings,
    "self_only": _flag,
    "created_at": _expression,
    "updated_at": _expression,
    "reply_count": _expression,
    "reply_request_count": _expression,
    "replied_at": _expression,
    "category_ids": _strings,
    "more_like_this": _more_like_this,
    "article_replies_from": _user_involvement,
    "has_article_reply_with_more_positive_feedback": _flag,
    "reply_types": _enum_tuple(ReplyType),
    "article_types": _enum_tuple(ArticleType),
}
