"""Mastodon API accounts endpoints."""
from pathlib import Path

from mastoclient.api.auth import OPERATIONS
from mastoclient.api.client import HttpMethod, segment
from mastoclient.api.mastodon.params import (
    AccountDefaultSettingsParam,
    AccountProfileMetaParam,
)
from mastoclient.api.mastodon.types import (
    Account,
    FeaturedTag,
    Status,
    Token,
    UserList,
)
from mastoclient.api.response import (
    MastodonResponse,
    transform_multi,
    transform_single,
)

AVATAR_IMAGE_FIELD = "avatar"
# Mastodon takes the header image under its own field, not under "avatar".
HEADER_IMAGE_FIELD = "header"


class Accounts:
    """Class containing Mastodon API accounts endpoints."""

    async def create_account(  # noqa: PLR0913
        self,
        client: HttpMethod,
        username: str,
        email: str,
        password: str,
        agreement: bool,
        locale: str,
        reason: str | None = None,
    ) -> MastodonResponse[Token]:
        """Register an account.

        Returns an access token for the app that initiated the request. The
        user still has to confirm the account through the emailed link.
        `agreement` must only be True once the user has consented to the
        server's rules and terms. `reason` is shown to moderators when
        registrations need manual approval.

        Reference: https://docs.joinmastodon.org/methods/accounts/#create
        """
        raw = await client.post(
            OPERATIONS["create_account"],
            "/api/v1/accounts",
            json={
                "username": username,
                "email": email,
                "password": password,
                "agreement": agreement,
                "locale": locale,
                "reason": reason,
            },
        )
        return transform_single(raw, Token)

    async def verify_account_credentials(
        self,
        client: HttpMethod,
        bearer_token: str | None = None,
    ) -> MastodonResponse[Account]:
        """Test to make sure that the user token works.

        `bearer_token` checks a token other than the client's own.

        Reference: https://docs.joinmastodon.org/methods/accounts/#verify_credentials
        """
        raw = await client.get(
            OPERATIONS["verify_account_credentials"],
            "/api/v1/accounts/verify_credentials",
            bearer_token=bearer_token,
        )
        return transform_single(raw, Account)

    async def update_account(  # noqa: PLR0913
        self,
        client: HttpMethod,
        display_name: str | None = None,
        bio: str | None = None,
        discoverable: bool | None = None,
        bot: bool | None = None,
        locked: bool | None = None,
        default_settings: AccountDefaultSettingsParam | None = None,
        profile_meta: list[AccountProfileMetaParam] | None = None,
    ) -> MastodonResponse[Account]:
        """Update the user's display and preferences.

        Reference: https://docs.joinmastodon.org/methods/accounts/#update_credentials
        """
        raw = await client.patch(
            OPERATIONS["update_account"],
            "/api/v1/accounts/update_credentials",
            json={
                "display_name": display_name,
                "note": bio,
                "discoverable": discoverable,
                "bot": bot,
                "locked": locked,
                "source": default_settings.to_json() if default_settings else None,
                "fields_attributes": [
                    meta.to_json() for meta in profile_meta
                ] if profile_meta is not None else None,
            },
        )
        return transform_single(raw, Account)

    async def update_avatar_image(
        self,
        client: HttpMethod,
        file: str | Path,
    ) -> MastodonResponse[Account]:
        """Update the user's avatar image.

        Reference: https://docs.joinmastodon.org/methods/accounts/#update_credentials
        """
        raw = await client.patch_multipart(
            OPERATIONS["update_avatar_image"],
            "/api/v1/accounts/update_credentials",
            files={AVATAR_IMAGE_FIELD: file},
        )
        return transform_single(raw, Account)

    async def update_header_image(
        self,
        client: HttpMethod,
        file: str | Path,
    ) -> MastodonResponse[Account]:
        """Update the user's header image.

        Reference: https://docs.joinmastodon.org/methods/accounts/#update_credentials
        """
        raw = await client.patch_multipart(
            OPERATIONS["update_header_image"],
            "/api/v1/accounts/update_credentials",
            files={HEADER_IMAGE_FIELD: file},
        )
        return transform_single(raw, Account)

    async def lookup_by_id(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> MastodonResponse[Account]:
        """View information about a profile.

        Reference: https://docs.joinmastodon.org/methods/accounts/#get
        """
        raw = await client.get(
            OPERATIONS["lookup_by_id"],
            f"/api/v1/accounts/{segment(account_id)}",
        )
        return transform_single(raw, Account)

    async def lookup_statuses(  # noqa: PLR0913
        self,
        client: HttpMethod,
        account_id: str,
        max_id: str | None = None,
        min_id: str | None = None,
        since_id: str | None = None,
        tagged: str | None = None,
        limit: int | None = None,
        exclude_reblogs: bool | None = None,
    ) -> MastodonResponse[list[Status]]:
        """Statuses posted to the given account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#statuses
        """
        raw = await client.get(
            OPERATIONS["lookup_statuses"],
            f"/api/v1/accounts/{segment(account_id)}/statuses",
            params={
                "max_id": max_id,
                "min_id": min_id,
                "since_id": since_id,
                "tagged": tagged,
                "limit": limit,
                "exclude_reblogs": exclude_reblogs,
            },
        )
        return transform_multi(raw, Status)

    async def lookup_followers(
        self,
        client: HttpMethod,
        account_id: str,
        limit: int | None = None,
    ) -> MastodonResponse[list[Account]]:
        """Accounts which follow the given account.

        If network is not hidden by the account owner.

        Reference: https://docs.joinmastodon.org/methods/accounts/#followers
        """
        raw = await client.get(
            OPERATIONS["lookup_followers"],
            f"/api/v1/accounts/{segment(account_id)}/followers",
            params={"limit": limit},
        )
        return transform_multi(raw, Account)

    async def lookup_followings(
        self,
        client: HttpMethod,
        account_id: str,
        limit: int | None = None,
    ) -> MastodonResponse[list[Account]]:
        """Accounts which the given account is following.

        If network is not hidden by the account owner.

        Reference: https://docs.joinmastodon.org/methods/accounts/#following
        """
        raw = await client.get(
            OPERATIONS["lookup_followings"],
            f"/api/v1/accounts/{segment(account_id)}/following",
            params={"limit": limit},
        )
        return transform_multi(raw, Account)

    async def lookup_featured_tags(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> MastodonResponse[list[FeaturedTag]]:
        """Tags featured by this account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#featured_tags
        """
        raw = await client.get(
            OPERATIONS["lookup_featured_tags"],
            f"/api/v1/accounts/{segment(account_id)}/featured_tags",
        )
        return transform_multi(raw, FeaturedTag)

    async def lookup_contained_lists(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> MastodonResponse[list[UserList]]:
        """User lists that you have added this account to.

        Reference: https://docs.joinmastodon.org/methods/accounts/#lists
        """
        raw = await client.get(
            OPERATIONS["lookup_contained_lists"],
            f"/api/v1/accounts/{segment(account_id)}/lists",
        )
        return transform_multi(raw, UserList)

    async def search_accounts(
        self,
        client: HttpMethod,
        query: str,
        limit: int | None = None,
        resolve_with_webfinger: bool | None = None,
        only_followings: bool | None = None,
    ) -> MastodonResponse[list[Account]]:
        """Search for matching accounts by username or display name.

        Set `resolve_with_webfinger` when `query` is an exact address.

        Reference: https://docs.joinmastodon.org/methods/accounts/#search
        """
        raw = await client.get(
            OPERATIONS["search_accounts"],
            "/api/v1/accounts/search",
            params={
                "q": query,
                "limit": limit,
                "resolve": resolve_with_webfinger,
                "following": only_followings,
            },
        )
        return transform_multi(raw, Account)

    async def lookup_account_from_webfinger_address(
        self,
        client: HttpMethod,
        account_identifier: str,
        skip_webfinger: bool | None = None,
    ) -> MastodonResponse[Account]:
        """Quickly lookup a username, or resolve a WebFinger address to an account.

        Reference: https://docs.joinmastodon.org/methods/accounts/#lookup
        """
        raw = await client.get(
            OPERATIONS["lookup_account_from_webfinger_address"],
            "/api/v1/accounts/lookup",
            params={
                "acct": account_identifier,
                "skip_webfinger": skip_webfinger,
            },
        )
        return transform_single(raw, Account)
