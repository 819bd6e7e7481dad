from __future__ import annotations


class UserApiError(Exception):
    """Base error for user operations.

    Each subclass carries the HTTP status the request layer answers with. The
    message is returned to the caller verbatim as a plain-text body.
    """

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(UserApiError):
    status_code = 400


class NotFound(UserApiError):
    status_code = 404


class Conflict(UserApiError):
    status_code = 409


class EncodingFailure(UserApiError):
    """Response serialization failed after the store operation succeeded."""

    status_code = 500
