"""Exception hierarchy for mastoclient."""
from http import HTTPStatus
from typing import Any


##
# Exceptions
##
class MastodonError(Exception):
    """Base class for mastoclient exceptions."""


class MastodonIllegalArgumentError(ValueError, MastodonError):
    """Raised when an incorrect parameter is passed to a function."""


class MastodonAuthenticationRequiredError(MastodonError):
    """Raised before any request is sent when an endpoint needs an OAuth token
    and neither the client nor the call supplied one.
    """

    def __init__(self, operation: str, scope: str) -> None:
        """Initialize the error."""
        super().__init__(
            f"{operation} requires an OAuth access token with the '{scope}' scope",
        )
        self.operation = operation
        self.scope = scope


class MastodonIOError(IOError, MastodonError):
    """Base class for mastoclient I/O errors."""


class MastodonFileNotFoundError(MastodonIOError):
    """Raised when a file requested to be uploaded can not be opened."""


class MastodonNetworkError(MastodonIOError):
    """Raised when network communication with the server fails."""


class MastodonReadTimeout(MastodonNetworkError):
    """Raised when a request times out."""


class MastodonDeserializationError(MastodonError):
    """Raised when a successful response body does not match the entity shape.

    `errors` holds the field-level problems, one dict per problem, in the
    format pydantic reports them.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        """Initialize the error."""
        super().__init__(message)
        self.errors = errors or []


class MastodonAPIError(MastodonError):
    """Raised when the Mastodon API answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        description: str | None = None,
    ) -> None:
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.description = description

    def __str__(self) -> str:
        return f"{self.message} (Status: {self.status_code})"


class MastodonBadRequestError(MastodonAPIError):
    """Raised when the Mastodon API returns a 400 Bad Request error."""


class MastodonUnauthorizedError(MastodonAPIError):
    """Raised when the Mastodon API returns a 401 Unauthorized error.

    This happens when an OAuth token is invalid or has been revoked,
    or when trying to access an endpoint that can't be used without
    authentication without providing credentials.
    """


class MastodonForbiddenError(MastodonAPIError):
    """Raised when the token lacks the scope an endpoint needs (403)."""


class MastodonNotFoundError(MastodonAPIError):
    """Raised when the Mastodon API returns a 404 Not Found error."""


class MastodonGoneError(MastodonAPIError):
    """Raised when the requested account has been deleted (410)."""


class MastodonUnprocessableEntityError(MastodonAPIError):
    """Raised when the Mastodon API rejects the submitted parameters (422)."""


class MastodonRatelimitError(MastodonAPIError):
    """Raised when the Mastodon API returns a 429 Too Many Requests error.

    Requests are never retried; the caller decides whether to wait.
    """


class MastodonServerError(MastodonAPIError):
    """Raised if the Server is malconfigured and returns a 5xx error code."""


class MastodonInternalServerError(MastodonServerError):
    """Raised if the Server returns a 500 error."""


class MastodonBadGatewayError(MastodonServerError):
    """Raised if the Server returns a 502 error."""


class MastodonServiceUnavailableError(MastodonServerError):
    """Raised if the Server returns a 503 error."""


class MastodonGatewayTimeoutError(MastodonServerError):
    """Raised if the Server returns a 504 error."""


_ERRORS_BY_STATUS: dict[int, type[MastodonAPIError]] = {
    HTTPStatus.BAD_REQUEST: MastodonBadRequestError,
    HTTPStatus.UNAUTHORIZED: MastodonUnauthorizedError,
    HTTPStatus.FORBIDDEN: MastodonForbiddenError,
    HTTPStatus.NOT_FOUND: MastodonNotFoundError,
    HTTPStatus.GONE: MastodonGoneError,
    HTTPStatus.UNPROCESSABLE_ENTITY: MastodonUnprocessableEntityError,
    HTTPStatus.TOO_MANY_REQUESTS: MastodonRatelimitError,
    HTTPStatus.INTERNAL_SERVER_ERROR: MastodonInternalServerError,
    HTTPStatus.BAD_GATEWAY: MastodonBadGatewayError,
    HTTPStatus.SERVICE_UNAVAILABLE: MastodonServiceUnavailableError,
    HTTPStatus.GATEWAY_TIMEOUT: MastodonGatewayTimeoutError,
}


def api_error_class(status_code: int) -> type[MastodonAPIError]:
    """Pick the exception class for an HTTP error status."""
    if status_code in _ERRORS_BY_STATUS:
        return _ERRORS_BY_STATUS[status_code]
    if status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return MastodonServerError
    return MastodonAPIError
