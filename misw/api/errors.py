"""
API Errors - Failures talking to the game service.

Every failure the client can see falls into one of:
- TransportError: the request never got a response (DNS, refused, timeout)
- MissingCredentialsError: an authenticated call on a client without credentials
- UnexpectedStatusError: any non-2xx status, with the code and body text
- MalformedResponseError: a 2xx response whose body doesn't match the schema

Callers decide whether a failure is fatal; this module only classifies.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base class for game service failures."""


class TransportError(ApiError):
    """The HTTP request failed before a response arrived."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"HTTP error: {cause}")


class MissingCredentialsError(ApiError):
    """An authenticated endpoint was called without credentials."""

    def __init__(self):
        super().__init__("Missing credentials for authenticated request")


class UnexpectedStatusError(ApiError):
    """The service answered with a status the caller did not expect."""

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        detail = body.strip()
        if detail:
            message = f"Unexpected status {status_code}: {detail}"
        else:
            message = f"Unexpected status {status_code}"
        super().__init__(message)


class MalformedResponseError(ApiError):
    """The response body could not be decoded into the expected shape."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Malformed response: {detail}")
