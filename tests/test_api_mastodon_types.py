"""Test the Mastodon entity types."""
from datetime import UTC, datetime
from typing import Any

import pytest
from pydantic import BaseModel, ValidationError

from mastoclient.api.mastodon.types import (
    Account,
    AccountPreferences,
    FamiliarFollower,
    FeaturedTag,
    Relationship,
    Status,
    Tag,
    Token,
    UserList,
)
from tests.payloads import (
    ACCOUNT,
    FAMILIAR_FOLLOWER,
    FEATURED_TAG,
    PREFERENCES,
    RELATIONSHIP,
    STATUS,
    TAG,
    TOKEN,
    USER_LIST,
)

# Scalar keys whose values must come through unchanged.
FIELD_MAPPINGS: list[tuple[type[BaseModel], dict[str, Any], list[str]]] = [
    (Account, ACCOUNT, [
        "id", "username", "acct", "display_name", "locked", "bot", "discoverable",
        "group", "note", "url", "avatar", "avatar_static", "header",
        "header_static", "followers_count", "following_count", "statuses_count",
        "noindex",
    ]),
    (Status, STATUS, [
        "id", "uri", "url", "content", "visibility", "sensitive", "spoiler_text",
        "language", "replies_count", "reblogs_count", "favourites_count",
        "favourited", "reblogged", "muted", "bookmarked", "pinned",
        "in_reply_to_id", "in_reply_to_account_id",
    ]),
    (Relationship, RELATIONSHIP, [
        "id", "following", "showing_reblogs", "notifying", "languages",
        "followed_by", "blocking", "blocked_by", "muting", "muting_notifications",
        "requested", "domain_blocking", "endorsed", "note",
    ]),
    (Tag, TAG, ["name", "url", "following"]),
    (FeaturedTag, FEATURED_TAG, ["id", "name", "url", "statuses_count"]),
    (Token, TOKEN, ["access_token", "token_type", "scope", "created_at"]),
    (UserList, USER_LIST, ["id", "title", "replies_policy"]),
    (FamiliarFollower, FAMILIAR_FOLLOWER, ["id"]),
]


class TestFieldMapping:
    """Each entity exposes the JSON keys under the same names."""

    @pytest.mark.parametrize(
        ("model", "payload", "key"),
        [
            (model, payload, key)
            for model, payload, keys in FIELD_MAPPINGS
            for key in keys
        ],
        ids=lambda value: value.__name__ if isinstance(value, type) else None,
    )
    def test_field(self, model: type[BaseModel], payload: dict, key: str) -> None:
        """The attribute equals the JSON value."""
        entity = model.model_validate(payload)
        assert getattr(entity, key) == payload[key]


class TestAccount:
    """Test the Account entity."""

    def test_minimal(self) -> None:
        """Only the id and username are required; the rest stays None."""
        account = Account.model_validate({"id": "1", "username": "alice"})
        assert account.id == "1"
        assert account.username == "alice"
        assert account.acct is None
        assert account.emojis is None
        assert account.fields is None

    def test_nested(self) -> None:
        """Emojis and profile fields become entities of their own."""
        account = Account.model_validate(ACCOUNT)
        assert account.emojis is not None
        assert account.emojis[0].shortcode == "verified_animate"
        assert account.fields is not None
        assert account.fields[0].name == "Home"

    def test_dates(self) -> None:
        """Timestamps and bare dates both parse."""
        account = Account.model_validate(ACCOUNT)
        assert account.created_at == datetime(2022, 12, 31, tzinfo=UTC)
        assert account.last_status_at == datetime(2023, 8, 3)  # noqa: DTZ001

    def test_moved(self) -> None:
        """A moved account points at its new account."""
        account = Account.model_validate(
            {**ACCOUNT, "moved": {"id": "2", "username": "teq2"}},
        )
        assert account.moved is not None
        assert account.moved.id == "2"

    def test_ids_must_be_strings(self) -> None:
        """Identifiers are opaque strings, not numbers."""
        with pytest.raises(ValidationError):
            Account.model_validate({"id": 1, "username": "alice"})

    def test_frozen(self) -> None:
        """Entities are immutable."""
        account = Account.model_validate(ACCOUNT)
        with pytest.raises(ValidationError):
            account.username = "someone"  # type: ignore[misc]

    def test_unknown_keys_are_ignored(self) -> None:
        """Newer servers may send keys this client does not know."""
        account = Account.model_validate({**ACCOUNT, "hide_collections": True})
        assert not hasattr(account, "hide_collections")


class TestStatus:
    """Test the Status entity."""

    def test_nested(self) -> None:
        """The author, tags and application are entities."""
        status = Status.model_validate(STATUS)
        assert status.account.username == "teq"
        assert status.tags is not None
        assert status.tags[0].name == "introduction"
        assert status.application is not None
        assert status.application.name == "Web"
        assert status.reblog is None

    def test_reblog(self) -> None:
        """A reblog wraps the original status."""
        status = Status.model_validate({**STATUS, "id": "2", "reblog": STATUS})
        assert status.reblog is not None
        assert status.reblog.id == STATUS["id"]

    def test_missing_account(self) -> None:
        """The author is required."""
        payload = {key: value for key, value in STATUS.items() if key != "account"}
        with pytest.raises(ValidationError):
            Status.model_validate(payload)


class TestFeaturedTag:
    """Test the FeaturedTag entity."""

    def test_string_count(self) -> None:
        """Older servers send the count as a string."""
        featured_tag = FeaturedTag.model_validate({**FEATURED_TAG, "statuses_count": "70"})
        assert featured_tag.statuses_count == 70

    def test_bare_date(self) -> None:
        """Newer servers send the last status date without a time."""
        featured_tag = FeaturedTag.model_validate(
            {**FEATURED_TAG, "last_status_at": "2022-08-29"},
        )
        assert featured_tag.last_status_at == datetime(2022, 8, 29)  # noqa: DTZ001


class TestAccountPreferences:
    """Test the AccountPreferences entity."""

    def test_colon_keys(self) -> None:
        """The server's colon-separated keys map onto attributes."""
        preferences = AccountPreferences.model_validate(PREFERENCES)
        assert preferences.posting_default_visibility == "public"
        assert preferences.posting_default_sensitive is False
        assert preferences.posting_default_language is None
        assert preferences.reading_expand_media == "default"
        assert preferences.reading_expand_spoilers is False

    def test_dump_uses_server_keys(self) -> None:
        """Serialising by alias gives back the server's keys."""
        preferences = AccountPreferences.model_validate(PREFERENCES)
        assert preferences.model_dump(by_alias=True) == PREFERENCES


class TestFamiliarFollower:
    """Test the FamiliarFollower entity."""

    def test_accounts(self) -> None:
        """The familiar followers are full accounts."""
        familiar_follower = FamiliarFollower.model_validate(FAMILIAR_FOLLOWER)
        assert [account.id for account in familiar_follower.accounts] == [ACCOUNT["id"]]
