"""Mastodon API preferences endpoints."""
from mastoclient.api.auth import OPERATIONS
from mastoclient.api.client import HttpMethod
from mastoclient.api.mastodon.types import AccountPreferences
from mastoclient.api.response import MastodonResponse, transform_single


class Preferences:
    """Class containing Mastodon API preferences endpoints."""

    async def lookup_preferences(
        self,
        client: HttpMethod,
    ) -> MastodonResponse[AccountPreferences]:
        """Preferences defined by the user in their account settings.

        Reference: https://docs.joinmastodon.org/methods/preferences/#get
        """
        raw = await client.get(OPERATIONS["lookup_preferences"], "/api/v1/preferences")
        return transform_single(raw, AccountPreferences)
