"""
Unit tests for core.errors (domain error hierarchy and error body).
"""
import pytest

from taskhub.core.errors import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
    error_body,
)


@pytest.mark.parametrize(
    "error_cls, status, phrase",
    [
        (BadRequestError, 400, "Bad Request"),
        (UnauthorizedError, 401, "Unauthorized"),
        (ForbiddenError, 403, "Forbidden"),
        (NotFoundError, 404, "Not Found"),
        (ConflictError, 409, "Conflict"),
        (InternalServerError, 500, "Internal Server Error"),
    ],
)
def test_error_phrase_and_body(error_cls, status, phrase):
    err = error_cls("something went wrong")
    assert err.error == phrase
    assert err.to_dict() == {"statusCode": status, "error": phrase, "message": "something went wrong"}
    assert err.to_dict() == error_body(status, "something went wrong")
