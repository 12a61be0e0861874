"""Generic client for API requests."""
import asyncio
import logging
import mimetypes
from collections.abc import Coroutine, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
from urllib.parse import quote, urlencode

import aiohttp
from yarl import URL

from mastoclient.api.auth import Operation, authorization_headers
from mastoclient.api.errors import (
    MastodonFileNotFoundError,
    MastodonNetworkError,
    MastodonReadTimeout,
)

QueryParams = Mapping[str, Any] | Iterable[tuple[str, Any]]


@dataclass(frozen=True)
class RawResponse:
    """The uninterpreted outcome of one HTTP round trip."""

    method: str
    url: str
    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""


def segment(value: str) -> str:
    """Percent-encode an identifier for use as a single path segment."""
    return quote(str(value), safe="")


def encode_query(params: QueryParams | None) -> str:
    """Encode query parameters, leaving out the ones that are None.

    Booleans go out as ``true``/``false``. Square brackets stay literal so
    repeated ``id[]`` keys reach the server as written.
    """
    if not params:
        return ""
    pairs = params.items() if isinstance(params, Mapping) else params
    encoded: list[tuple[str, str]] = []
    for key, value in pairs:
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        encoded.append((key, str(value)))
    return urlencode(encoded, safe="[]")


def strip_none(body: Any) -> Any:
    """Drop None values from a JSON body, and maps left empty by doing so."""
    if isinstance(body, dict):
        stripped = {}
        for key, value in body.items():
            value = strip_none(value)
            if value is None or value == {}:
                continue
            stripped[key] = value
        return stripped
    if isinstance(body, list):
        return [strip_none(item) for item in body]
    return body


class HttpMethod:
    """A class representing a request client."""

    def __init__(
        self,
        api_base_url: str,
        session: aiohttp.ClientSession,
        token: str | None = None,
    ) -> None:
        """Initialize the client."""
        self.api_base_url = api_base_url
        self.token = token
        self.session = session

    def build_url(self, endpoint: str, params: QueryParams | None = None) -> str:
        """Build the absolute URL for an endpoint path."""
        url = f"https://{self.api_base_url}{endpoint}"
        query = encode_query(params)
        if query:
            separator = "&" if "?" in endpoint else "?"
            url = f"{url}{separator}{query}"
        return url

    async def request(  # noqa: PLR0913
        self,
        method: str,
        operation: Operation,
        endpoint: str,
        params: QueryParams | None = None,
        json: dict[str, Any] | None = None,
        data: aiohttp.FormData | None = None,
        bearer_token: str | None = None,
    ) -> RawResponse:
        """Perform one request to the server and return the raw response.

        The authentication gate runs first, so a missing token fails here
        without touching the network.
        """
        headers = authorization_headers(operation, self.token, bearer_token)
        url = self.build_url(endpoint, params)
        logging.debug(f"{method} {url} for {operation.name} with {json}")
        try:
            async with self.session.request(
                method,
                URL(url, encoded=True),
                headers=headers,
                json=json,
                data=data,
            ) as response:
                body = await response.read()
                logging.debug(f"{method} {url} status {response.status}")
                return RawResponse(
                    method=method,
                    url=url,
                    status=response.status,
                    headers=dict(response.headers),
                    body=body,
                )
        except asyncio.TimeoutError as ex:
            logging.warning(
                f"Timeout error with API on server {self.api_base_url}.",
            )
            msg = f"Timed out waiting for {method} {url}"
            raise MastodonReadTimeout(msg) from ex
        except aiohttp.ClientError as ex:
            logging.warning(f"Error with API on server {self.api_base_url}: {ex}")
            msg = f"Could not complete {method} {url}: {ex}"
            raise MastodonNetworkError(msg) from ex

    def get(
        self,
        operation: Operation,
        endpoint: str,
        params: QueryParams | None = None,
        bearer_token: str | None = None,
    ) -> Coroutine[Any, Any, RawResponse]:
        """Perform a GET request to the server."""
        return self.request(
            "GET", operation, endpoint, params=params, bearer_token=bearer_token,
        )

    def post(
        self,
        operation: Operation,
        endpoint: str,
        json: dict[str, Any] | None = None,
    ) -> Coroutine[Any, Any, RawResponse]:
        """Perform a POST request to the server."""
        return self.request(
            "POST", operation, endpoint,
            json=strip_none(json) if json is not None else None,
        )

    def patch(
        self,
        operation: Operation,
        endpoint: str,
        json: dict[str, Any] | None = None,
    ) -> Coroutine[Any, Any, RawResponse]:
        """Perform a PATCH request to the server."""
        return self.request(
            "PATCH", operation, endpoint,
            json=strip_none(json) if json is not None else None,
        )

    def delete(
        self,
        operation: Operation,
        endpoint: str,
    ) -> Coroutine[Any, Any, RawResponse]:
        """Perform a DELETE request to the server."""
        return self.request("DELETE", operation, endpoint)

    async def patch_multipart(
        self,
        operation: Operation,
        endpoint: str,
        files: Mapping[str, str | Path],
    ) -> RawResponse:
        """Perform a multipart PATCH request, one part per named file."""
        authorization_headers(operation, self.token)
        form = aiohttp.FormData()
        for name, file in files.items():
            path = Path(file)
            try:
                content = await asyncio.to_thread(path.read_bytes)
            except OSError as ex:
                msg = f"Could not read {path} for upload"
                raise MastodonFileNotFoundError(msg) from ex
            content_type = mimetypes.guess_type(path.name)[0]
            form.add_field(
                name,
                content,
                filename=path.name,
                content_type=content_type or "application/octet-stream",
            )
        return await self.request("PATCH", operation, endpoint, data=form)
