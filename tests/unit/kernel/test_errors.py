"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import pytest

from article_search.kernel.errors import (
    ApplicationError,
    BaseError,
    CompilerError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    ReferenceNotFoundError,
    UnauthorizedError,
    UnknownSortKeyError,
    UnsupportedOperatorError,
    UpstreamFetchError,
    UpstreamTimeoutError,
    UserInputError,
    ValidationError,
)


class TestBaseError:
    def test_default_and_custom_code(self) -> None:
        assert BaseError("m").code == "error"
        assert BaseError("m", code="custom").code == "custom"

    def test_str_shows_code_and_message(self) -> None:
        assert str(BaseError("boom", code="oops")) == "[oops] boom"

    def test_to_dict_omits_empty_detail(self) -> None:
        assert BaseError("m").to_dict() == {"code": "error", "message": "m"}

    def test_cause_is_chained_and_named(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause, detail={"k": "v"})
        assert err.__cause__ is cause
        assert err.to_dict() == {"code": "error", "message": "wrap", "detail": {"k": "v"}, "cause": "RuntimeError"}

    def test_not_exposed_by_default(self) -> None:
        assert BaseError.exposed is False


class TestDomainErrors:
    def test_validation_error_lists_fields(self) -> None:
        err = ValidationError(
            "Invalid article filter",
            errors=[{"field": "colour", "message": "unknown filter"}, {"field": "replyTypes", "message": "bad"}],
        )
        assert isinstance(err, DomainError)
        assert err.exposed is True
        assert err.fields == ["colour", "replyTypes"]
        assert err.to_dict()["errors"][1]["message"] == "bad"

    def test_not_found(self) -> None:
        err = NotFoundError("articles", "a1")
        assert (err.collection, err.doc_id) == ("articles", "a1")
        assert err.detail == {"collection": "articles", "id": "a1"}
        assert err.code == "document_not_found"

    def test_reference_not_found_is_user_input(self) -> None:
        err = ReferenceNotFoundError("a1")
        assert isinstance(err, UserInputError)
        assert err.exposed is True
        assert err.code == "reference_not_found"
        assert err.detail == {"reference_id": "a1"}
        assert err.message == "the referenced article does not match any existing article"


class TestApplicationAndInfrastructureErrors:
    def test_unauthorized(self) -> None:
        err = UnauthorizedError("selfOnly can be set only after log in")
        assert isinstance(err, ApplicationError)
        assert err.exposed is True

    def test_upstream_fetch_error(self) -> None:
        err = UpstreamFetchError("elasticsearch", status_code=503)
        assert isinstance(err, InfrastructureError)
        assert err.message == "request to elasticsearch failed"
        assert err.detail == {"service": "elasticsearch", "status_code": 503}
        assert err.exposed is False

    def test_timeout_is_a_fetch_error(self) -> None:
        err = UpstreamTimeoutError("https://cdn.example/a.png")
        assert isinstance(err, UpstreamFetchError)
        assert err.code == "upstream_timeout"
        assert err.status_code is None


class TestCompilerErrors:
    def test_unsupported_operator(self) -> None:
        err = UnsupportedOperatorError("BETWEEN")
        assert isinstance(err, CompilerError)
        assert err.operator == "BETWEEN"
        assert "BETWEEN" in err.message

    def test_unknown_sort_key(self) -> None:
        err = UnknownSortKeyError("hotness")
        assert err.key == "hotness"
        assert err.code == "unknown_sort_key"

    def test_compiler_errors_are_not_user_errors(self) -> None:
        with pytest.raises(CompilerError):
            raise UnknownSortKeyError("x")
        assert not issubclass(CompilerError, UserInputError)
