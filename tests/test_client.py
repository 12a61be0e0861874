"""Test the HttpMethod class."""
import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from mastoclient.api.auth import OPERATIONS
from mastoclient.api.client import (
    HttpMethod,
    RawResponse,
    encode_query,
    segment,
    strip_none,
)
from mastoclient.api.errors import (
    MastodonAuthenticationRequiredError,
    MastodonFileNotFoundError,
    MastodonNetworkError,
    MastodonReadTimeout,
)
from tests.payloads import ACCOUNT, mock_session, sent_request

pytest_plugins = ('pytest_asyncio',)  # noqa: Q000


def make_client(session: MagicMock, token: str | None = "token") -> HttpMethod:
    return HttpMethod(api_base_url="example.com", session=session, token=token)


class TestEncoding:
    """Test query and body encoding."""

    def test_none_values_are_omitted(self) -> None:
        """Parameters the caller did not supply are not sent at all."""
        result = encode_query({"max_id": None, "limit": 20, "tagged": None})
        assert result == "limit=20"

    def test_booleans_are_lowercase(self) -> None:
        """Booleans go out the way Rails parses them."""
        result = encode_query({"resolve": True, "following": False})
        assert result == "resolve=true&following=false"

    def test_repeated_ids_keep_order_and_brackets(self) -> None:
        """Batch ids are repeated id[] entries in input order."""
        result = encode_query([("id[]", "1"), ("id[]", "2"), ("id[]", "3")])
        assert result == "id[]=1&id[]=2&id[]=3"

    def test_values_are_escaped(self) -> None:
        """Reserved characters in values are percent-encoded."""
        result = encode_query({"acct": "alice@mastodon.example", "q": "a&b"})
        assert result == "acct=alice%40mastodon.example&q=a%26b"

    def test_empty(self) -> None:
        """No parameters means no query string."""
        assert encode_query(None) == ""
        assert encode_query({"limit": None}) == ""

    def test_strip_none_nested(self) -> None:
        """Nested maps emptied by dropping None values disappear too."""
        body = {
            "display_name": "Teq",
            "note": None,
            "source": {"privacy": None, "sensitive": None},
            "fields_attributes": [{"name": "a", "value": "b"}],
        }
        expected_result = {
            "display_name": "Teq",
            "fields_attributes": [{"name": "a", "value": "b"}],
        }
        assert strip_none(body) == expected_result

    def test_strip_none_keeps_falsy_values(self) -> None:
        """False, zero and empty strings are real values."""
        body = {"bot": False, "duration": 0, "comment": ""}
        assert strip_none(body) == body

    def test_segment(self) -> None:
        """Path identifiers cannot break out of their segment."""
        assert segment("123") == "123"
        assert segment("a/b?c") == "a%2Fb%3Fc"


class TestHttpMethod:
    """Test the HttpMethod class."""

    class TestBuildUrl:
        """Test the build_url method."""

        def test_without_params(self) -> None:
            """A bare endpoint."""
            client = make_client(MagicMock())
            result = client.build_url("/api/v1/preferences")
            assert result == "https://example.com/api/v1/preferences"

        def test_with_params(self) -> None:
            """Parameters are appended as a query string."""
            client = make_client(MagicMock())
            result = client.build_url("/api/v1/followed_tags", {"limit": 5})
            assert result == "https://example.com/api/v1/followed_tags?limit=5"

    class TestRequest:
        """Test the request method."""

        async def test_success(self) -> None:
            """A response is returned raw, without interpreting the body."""
            session = mock_session(ACCOUNT, headers={"Link": "<x>; rel=\"next\""})
            client = make_client(session)
            result = await client.get(OPERATIONS["lookup_by_id"], "/api/v1/accounts/1")
            assert isinstance(result, RawResponse)
            assert result.status == 200
            assert result.method == "GET"
            assert result.url == "https://example.com/api/v1/accounts/1"
            assert result.headers == {"Link": "<x>; rel=\"next\""}
            assert b"109608061015969173" in result.body

        async def test_error_status_is_not_raised(self) -> None:
            """HTTP-level errors are left to the response transformer."""
            session = mock_session({"error": "Record not found"}, status=404)
            client = make_client(session)
            result = await client.get(OPERATIONS["lookup_by_id"], "/api/v1/accounts/1")
            assert result.status == 404

        async def test_sends_bearer_token(self) -> None:
            """OAuth endpoints carry the client's token."""
            session = mock_session(ACCOUNT)
            client = make_client(session)
            await client.get(
                OPERATIONS["verify_account_credentials"],
                "/api/v1/accounts/verify_credentials",
            )
            _, _, kwargs = sent_request(session)
            assert kwargs["headers"] == {"Authorization": "Bearer token"}

        async def test_ad_hoc_bearer_token(self) -> None:
            """A per-call token works without a client token and takes precedence."""
            session = mock_session(ACCOUNT)
            client = make_client(session, token=None)
            await client.get(
                OPERATIONS["verify_account_credentials"],
                "/api/v1/accounts/verify_credentials",
                bearer_token="other",
            )
            _, _, kwargs = sent_request(session)
            assert kwargs["headers"] == {"Authorization": "Bearer other"}

        async def test_anonymous_only_never_sends_token(self) -> None:
            """Anonymous endpoints go out without credentials."""
            session = mock_session(ACCOUNT)
            client = make_client(session)
            await client.get(
                OPERATIONS["lookup_account_from_webfinger_address"],
                "/api/v1/accounts/lookup",
                params={"acct": "teq"},
            )
            _, _, kwargs = sent_request(session)
            assert kwargs["headers"] == {}

        async def test_missing_token_makes_no_request(self) -> None:
            """The gate fails before the network is touched."""
            session = mock_session(ACCOUNT)
            client = make_client(session, token=None)
            with pytest.raises(MastodonAuthenticationRequiredError) as excinfo:
                await client.get(OPERATIONS["lookup_preferences"], "/api/v1/preferences")
            assert excinfo.value.scope == "read:accounts"
            assert session.request.call_count == 0

        async def test_connection_error(self) -> None:
            """Transport failures surface as a network error."""
            session = MagicMock()
            session.request.side_effect = aiohttp.ClientConnectionError("reset")
            client = make_client(session)
            with pytest.raises(MastodonNetworkError):
                await client.get(OPERATIONS["lookup_by_id"], "/api/v1/accounts/1")
            assert session.request.call_count == 1

        async def test_timeout(self) -> None:
            """Timeouts surface as a read timeout, without a retry."""
            session = MagicMock()
            session.request.side_effect = asyncio.TimeoutError()
            client = make_client(session)
            with pytest.raises(MastodonReadTimeout):
                await client.get(OPERATIONS["lookup_by_id"], "/api/v1/accounts/1")
            assert session.request.call_count == 1

    class TestPost:
        """Test the post and patch methods."""

        async def test_post_strips_none(self) -> None:
            """Absent body fields are not sent as null."""
            session = mock_session({"id": "1"})
            client = make_client(session)
            await client.post(
                OPERATIONS["create_mute"],
                "/api/v1/accounts/1/mute",
                json={"notifications": True, "duration": None},
            )
            method, url, kwargs = sent_request(session)
            assert method == "POST"
            assert url == "https://example.com/api/v1/accounts/1/mute"
            assert kwargs["json"] == {"notifications": True}

        async def test_post_without_body(self) -> None:
            """Action endpoints may send no body at all."""
            session = mock_session({"id": "1"})
            client = make_client(session)
            await client.post(OPERATIONS["create_block"], "/api/v1/accounts/1/block")
            _, _, kwargs = sent_request(session)
            assert kwargs["json"] is None

        async def test_delete(self) -> None:
            """DELETE goes out with no body."""
            session = mock_session({})
            client = make_client(session)
            result = await client.delete(
                OPERATIONS["destroy_featured_tag"], "/api/v1/featured_tags/1",
            )
            method, _, kwargs = sent_request(session)
            assert method == "DELETE"
            assert kwargs["json"] is None
            assert result.status == 200

    class TestPatchMultipart:
        """Test the patch_multipart method."""

        async def test_uploads_named_file(self, tmp_path) -> None:  # noqa: ANN001
            """The file goes out as a form part under the given name."""
            image = tmp_path / "avatar.png"
            image.write_bytes(b"\x89PNG")
            session = mock_session(ACCOUNT)
            client = make_client(session)
            await client.patch_multipart(
                OPERATIONS["update_avatar_image"],
                "/api/v1/accounts/update_credentials",
                files={"avatar": image},
            )
            method, _, kwargs = sent_request(session)
            assert method == "PATCH"
            assert isinstance(kwargs["data"], aiohttp.FormData)
            assert kwargs["json"] is None
            assert [part[2] for part in kwargs["data"]._fields] == [b"\x89PNG"]
            assert kwargs["data"]._fields[0][0]["filename"] == "avatar.png"

        async def test_reads_in_worker_thread(
            self,
            tmp_path,  # noqa: ANN001
            monkeypatch: pytest.MonkeyPatch,
        ) -> None:
            """The file is read in a worker thread, not on the event loop."""
            image = tmp_path / "avatar.png"
            image.write_bytes(b"\x89PNG")
            to_thread = AsyncMock(return_value=b"\x89PNG")
            monkeypatch.setattr(asyncio, "to_thread", to_thread)
            session = mock_session(ACCOUNT)
            client = make_client(session)
            await client.patch_multipart(
                OPERATIONS["update_avatar_image"],
                "/api/v1/accounts/update_credentials",
                files={"avatar": image},
            )
            to_thread.assert_awaited_once()
            (read,), _ = to_thread.await_args
            assert read.__self__ == image
            assert read.__name__ == "read_bytes"

        async def test_missing_file(self, tmp_path) -> None:  # noqa: ANN001
            """An unreadable file fails before any request."""
            session = mock_session(ACCOUNT)
            client = make_client(session)
            with pytest.raises(MastodonFileNotFoundError):
                await client.patch_multipart(
                    OPERATIONS["update_avatar_image"],
                    "/api/v1/accounts/update_credentials",
                    files={"avatar": tmp_path / "missing.png"},
                )
            assert session.request.call_count == 0

        async def test_missing_token(self, tmp_path) -> None:  # noqa: ANN001
            """The gate runs before the file is read."""
            session = mock_session(ACCOUNT)
            client = make_client(session, token=None)
            with pytest.raises(MastodonAuthenticationRequiredError):
                await client.patch_multipart(
                    OPERATIONS["update_header_image"],
                    "/api/v1/accounts/update_credentials",
                    files={"header": tmp_path / "missing.png"},
                )
            assert session.request.call_count == 0


if __name__ == "__main__":
    pytest.main()
