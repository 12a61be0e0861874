"""Mastodon API relationships endpoints."""
from collections.abc import Coroutine, Iterable
from datetime import timedelta
from typing import Any

from mastoclient.api.auth import OPERATIONS
from mastoclient.api.client import HttpMethod, RawResponse, segment
from mastoclient.api.mastodon.types import FamiliarFollower, Relationship
from mastoclient.api.response import (
    MastodonResponse,
    transform_multi,
    transform_single,
)


def id_params(account_ids: Iterable[str]) -> list[tuple[str, str]]:
    """Encode account ids as repeated ``id[]`` entries, in the given order."""
    return [("id[]", account_id) for account_id in account_ids]


class Relationships:
    """Class containing Mastodon API relationships endpoints."""

    async def _account_action(
        self,
        client: HttpMethod,
        operation: str,
        account_id: str,
        action: str,
        json: dict | None = None,
    ) -> MastodonResponse[Relationship]:
        raw: RawResponse = await client.post(
            OPERATIONS[operation],
            f"/api/v1/accounts/{segment(account_id)}/{action}",
            json=json,
        )
        return transform_single(raw, Relationship)

    def create_follow(
        self,
        client: HttpMethod,
        account_id: str,
        reblogs: bool | None = None,
        notify: bool | None = None,
        languages: list[str] | None = None,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Follow the given account.

        Can also be used to update whether to show reblogs or enable
        notifications. `languages` are ISO 639-1 codes to filter the
        followed account's posts by.

        Reference: https://docs.joinmastodon.org/methods/accounts/#follow
        """
        return self._account_action(
            client, "create_follow", account_id, "follow",
            json={"reblogs": reblogs, "notify": notify, "languages": languages},
        )

    def destroy_follow(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Unfollow the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#unfollow
        """
        return self._account_action(client, "destroy_follow", account_id, "unfollow")

    def destroy_follower(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Remove the given account from your followers.

        Reference: https://docs.joinmastodon.org/methods/accounts/#remove_from_followers
        """
        return self._account_action(
            client, "destroy_follower", account_id, "remove_from_followers",
        )

    def create_block(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Block the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#block
        """
        return self._account_action(client, "create_block", account_id, "block")

    def destroy_block(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Unblock the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#unblock
        """
        return self._account_action(client, "destroy_block", account_id, "unblock")

    def create_mute(
        self,
        client: HttpMethod,
        account_id: str,
        notifications: bool | None = None,
        duration: timedelta | None = None,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Mute the given account.

        A `duration` of None mutes indefinitely.

        Reference: https://docs.joinmastodon.org/methods/accounts/#mute
        """
        return self._account_action(
            client, "create_mute", account_id, "mute",
            json={
                "notifications": notifications,
                "duration": (
                    int(duration.total_seconds()) if duration is not None else None
                ),
            },
        )

    def destroy_mute(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Unmute the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#unmute
        """
        return self._account_action(client, "destroy_mute", account_id, "unmute")

    def create_featured_profile(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Add the given account to the user's featured profiles.

        Reference: https://docs.joinmastodon.org/methods/accounts/#pin
        """
        return self._account_action(
            client, "create_featured_profile", account_id, "pin",
        )

    def destroy_featured_profile(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Remove the given account from the user's featured profiles.

        Reference: https://docs.joinmastodon.org/methods/accounts/#unpin
        """
        return self._account_action(
            client, "destroy_featured_profile", account_id, "unpin",
        )

    def update_private_comment(
        self,
        client: HttpMethod,
        account_id: str,
        text: str = "",
    ) -> Coroutine[Any, Any, MastodonResponse[Relationship]]:
        """Set a private note on a user. An empty text clears the note.

        Reference: https://docs.joinmastodon.org/methods/accounts/#note
        """
        return self._account_action(
            client, "update_private_comment", account_id, "note",
            json={"comment": text},
        )

    async def lookup_relationships(
        self,
        client: HttpMethod,
        account_ids: list[str],
    ) -> MastodonResponse[list[Relationship]]:
        """Find out whether a given account is followed, blocked, muted, etc.

        Reference: https://docs.joinmastodon.org/methods/accounts/#relationships
        """
        raw = await client.get(
            OPERATIONS["lookup_relationships"],
            "/api/v1/accounts/relationships",
            params=id_params(account_ids),
        )
        return transform_multi(raw, Relationship)

    async def lookup_familiar_followers(
        self,
        client: HttpMethod,
        account_ids: list[str],
    ) -> MastodonResponse[list[FamiliarFollower]]:
        """Accounts that follow the given accounts and that you also follow.

        Reference: https://docs.joinmastodon.org/methods/accounts/#familiar_followers
        """
        raw = await client.get(
            OPERATIONS["lookup_familiar_followers"],
            "/api/v1/accounts/familiar_followers",
            params=id_params(account_ids),
        )
        return transform_multi(raw, FamiliarFollower)
