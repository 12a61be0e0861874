"""Mastodon API featured and followed tags endpoints."""
from mastoclient.api.auth import OPERATIONS
from mastoclient.api.client import HttpMethod, segment
from mastoclient.api.mastodon.types import FeaturedTag, Tag
from mastoclient.api.response import (
    MastodonResponse,
    evaluate,
    transform_multi,
    transform_single,
)


class Tags:
    """Class containing Mastodon API featured_tags and followed_tags endpoints."""

    async def lookup_owned_featured_tags(
        self,
        client: HttpMethod,
    ) -> MastodonResponse[list[FeaturedTag]]:
        """List all hashtags featured on your profile.

        Reference: https://docs.joinmastodon.org/methods/featured_tags/#get
        """
        raw = await client.get(
            OPERATIONS["lookup_owned_featured_tags"],
            "/api/v1/featured_tags",
        )
        return transform_multi(raw, FeaturedTag)

    async def create_featured_tag(
        self,
        client: HttpMethod,
        tag_name: str,
    ) -> MastodonResponse[FeaturedTag]:
        """Promote a hashtag on your profile.

        Reference: https://docs.joinmastodon.org/methods/featured_tags/#feature
        """
        raw = await client.post(
            OPERATIONS["create_featured_tag"],
            "/api/v1/featured_tags",
            json={"name": tag_name},
        )
        return transform_single(raw, FeaturedTag)

    async def destroy_featured_tag(
        self,
        client: HttpMethod,
        tag_id: str,
    ) -> MastodonResponse[bool]:
        """Stop promoting a hashtag on your profile.

        Reference: https://docs.joinmastodon.org/methods/featured_tags/#unfeature
        """
        raw = await client.delete(
            OPERATIONS["destroy_featured_tag"],
            f"/api/v1/featured_tags/{segment(tag_id)}",
        )
        return evaluate(raw)

    async def lookup_suggested_tags(
        self,
        client: HttpMethod,
    ) -> MastodonResponse[list[Tag]]:
        """Your 10 most-used hashtags, as candidates for featuring.

        Reference: https://docs.joinmastodon.org/methods/featured_tags/#suggestions
        """
        raw = await client.get(
            OPERATIONS["lookup_suggested_tags"],
            "/api/v1/featured_tags/suggestions",
        )
        return transform_multi(raw, Tag)

    async def lookup_followed_tags(
        self,
        client: HttpMethod,
        limit: int | None = None,
    ) -> MastodonResponse[list[Tag]]:
        """View your followed hashtags.

        Reference: https://docs.joinmastodon.org/methods/followed_tags/#get
        """
        raw = await client.get(
            OPERATIONS["lookup_followed_tags"],
            "/api/v1/followed_tags",
            params={"limit": limit},
        )
        return transform_multi(raw, Tag)
