"""Mastodon API suggestions endpoints."""
from mastoclient.api.auth import OPERATIONS
from mastoclient.api.client import HttpMethod, segment
from mastoclient.api.response import MastodonResponse, evaluate


class Suggestions:
    """Class containing Mastodon API suggestions endpoints."""

    async def destroy_follow_suggestion(
        self,
        client: HttpMethod,
        account_id: str,
    ) -> MastodonResponse[bool]:
        """Remove an account from follow suggestions.

        Reference: https://docs.joinmastodon.org/methods/suggestions/#remove
        """
        raw = await client.delete(
            OPERATIONS["destroy_follow_suggestion"],
            f"/api/v1/suggestions/{segment(account_id)}",
        )
        return evaluate(raw)
