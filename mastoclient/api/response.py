"""Turn raw HTTP responses into typed results or typed errors."""
import json
import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from mastoclient.api.client import RawResponse
from mastoclient.api.errors import MastodonDeserializationError, api_error_class

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class MastodonResponse(Generic[T]):
    """A decoded response, along with what the server said about it."""

    method: str
    url: str
    status_code: int
    data: T
    headers: dict[str, str] = field(default_factory=dict)


def is_success(status: int) -> bool:
    """Whether the status is in the 2xx range."""
    return HTTPStatus.OK <= status < HTTPStatus.MULTIPLE_CHOICES


def error_message(status: int, body: bytes) -> tuple[str, str | None]:
    """Extract the server's error message, falling back to the status phrase."""
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        payload = None
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        description = payload.get("error_description")
        return payload["error"], description if isinstance(description, str) else None
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = "Unknown Status"
    return f"HTTP {status}: {phrase}", None


def raise_for_status(raw: RawResponse) -> None:
    """Raise the typed API error for a non-2xx response."""
    if is_success(raw.status):
        return
    message, description = error_message(raw.status, raw.body)
    logging.error(
        f"Error with API: {raw.method} {raw.url} returned {raw.status}: {message}",
    )
    raise api_error_class(raw.status)(raw.status, message, description)


def _decode(raw: RawResponse) -> Any:
    try:
        return json.loads(raw.body)
    except (ValueError, UnicodeDecodeError) as ex:
        msg = f"{raw.method} {raw.url} returned a body that is not JSON"
        raise MastodonDeserializationError(msg) from ex


def _validate(adapter: TypeAdapter, payload: Any, raw: RawResponse) -> Any:
    try:
        return adapter.validate_python(payload)
    except ValidationError as ex:
        logging.debug(f"Rejected payload from {raw.url}: {payload}")
        msg = f"{raw.method} {raw.url} returned a malformed payload: {ex}"
        raise MastodonDeserializationError(msg, ex.errors()) from ex


def _wrap(raw: RawResponse, data: T) -> MastodonResponse[T]:
    return MastodonResponse(
        method=raw.method,
        url=raw.url,
        status_code=raw.status,
        data=data,
        headers=raw.headers,
    )


def transform_single(raw: RawResponse, model: type[M]) -> MastodonResponse[M]:
    """Decode a JSON object body into one entity."""
    raise_for_status(raw)
    payload = _decode(raw)
    if not isinstance(payload, dict):
        msg = (
            f"{raw.method} {raw.url} returned {type(payload).__name__}, "
            f"expected an object for {model.__name__}"
        )
        raise MastodonDeserializationError(msg)
    return _wrap(raw, _validate(TypeAdapter(model), payload, raw))


def transform_multi(raw: RawResponse, model: type[M]) -> MastodonResponse[list[M]]:
    """Decode a JSON array body into a list of entities, keeping server order."""
    raise_for_status(raw)
    payload = _decode(raw)
    if not isinstance(payload, list):
        msg = (
            f"{raw.method} {raw.url} returned {type(payload).__name__}, "
            f"expected a list of {model.__name__}"
        )
        raise MastodonDeserializationError(msg)
    return _wrap(raw, _validate(TypeAdapter(list[model]), payload, raw))


def evaluate(raw: RawResponse) -> MastodonResponse[bool]:
    """Report success of a request whose body carries nothing of interest."""
    raise_for_status(raw)
    return _wrap(raw, True)  # noqa: FBT003
