# taskhub/core/errors.py
"""
Domain error hierarchy.

Services raise these to report an outcome the caller has to deal with
(bad input, missing record, denied action, broken state). Each error carries
the HTTP status the API layer answers with; the exception handlers in
``taskhub.main`` turn them into the uniform ``{statusCode, error, message}``
body.
"""
from http import HTTPStatus


class DomainError(Exception):
    """Base class for every error the services raise on purpose."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def error(self) -> str:
        """HTTP reason phrase for the status code, e.g. "Not Found"."""
        return HTTPStatus(self.status_code).phrase

    def to_dict(self) -> dict:
        return {"statusCode": int(self.status_code), "error": self.error, "message": self.message}


class BadRequestError(DomainError):
    status_code = HTTPStatus.BAD_REQUEST


class UnauthorizedError(DomainError):
    status_code = HTTPStatus.UNAUTHORIZED


class ForbiddenError(DomainError):
    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(DomainError):
    status_code = HTTPStatus.NOT_FOUND


class ConflictError(DomainError):
    status_code = HTTPStatus.CONFLICT


class InternalServerError(DomainError):
    """A well-formed, authorized request the system could not complete."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR


def error_body(status_code: int, message: str) -> dict:
    """Uniform error payload: ``{statusCode, error, message}``."""
    return {"statusCode": int(status_code), "error": HTTPStatus(status_code).phrase, "message": message}
