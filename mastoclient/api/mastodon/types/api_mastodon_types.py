"""Mastodon entity types.

Each entity is an immutable pydantic model built from one JSON object.
Required keys missing from a response, or values of the wrong type, fail
validation with a per-field error. Optional keys that the server leaves out
stay None.
"""
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from dateutil import parser
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _parse_datetime(value: Any) -> Any:
    """Accept both bare dates and full timestamps.

    Servers before 3.1 send ``last_status_at`` as a timestamp, newer ones as
    a date only.
    """
    if isinstance(value, str) and value:
        return parser.isoparse(value)
    return value


FlexibleDatetime = Annotated[datetime, BeforeValidator(_parse_datetime)]


class Entity(BaseModel):
    """Base for all entities: frozen, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class CustomEmoji(Entity):
    """A custom emoji.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/CustomEmoji/
    """

    shortcode: str
    """
    The name of the custom emoji.
    """

    url: str
    """
    A link to the custom emoji.
    """

    static_url: str
    """
    A link to a static copy of the custom emoji.
    """

    visible_in_picker: bool
    """
    Whether this Emoji should be visible in the picker or unlisted.
    """

    category: str | None = None
    """
    Used for sorting custom emoji in the picker. (nullable)
    """


class AccountField(Entity):
    """A field, displayed on a users profile (e.g. "Pronouns", "Favorite color").

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Account/
    """

    name: str
    """
    The key of a given field's key-value pair.
    """

    value: str
    """
    The value associated with the `name` key.
    """

    verified_at: str | None = None
    """
    Timestamp of when the server verified a URL value for a rel="me" link. (nullable)
    """


class Role(Entity):
    """A role granting a user a set of permissions.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Role/
    """

    id: str
    name: str
    color: str | None = None
    permissions: str | None = None
    highlighted: bool | None = None


class AccountSource(Entity):
    """Source values useful for editing a user's profile.

    Only present on the account returned by verify_credentials and
    update_credentials.
    """

    privacy: str | None = None
    """
    The user's default visibility setting ("private", "unlisted" or "public").
    """

    sensitive: bool | None = None
    """
    Denotes whether user media should be marked sensitive by default.
    """

    language: str | None = None
    """
    The default posting language for new statuses.
    """

    note: str | None = None
    """
    Plain text version of the user's bio.
    """

    fields: list[AccountField] | None = None
    """
    Metadata about the account.
    """

    follow_requests_count: int | None = None
    """
    The number of pending follow requests.
    """


class Account(Entity):
    """A user acccount, local or remote.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Account/
    """

    id: str
    """
    The accounts id.
    """

    username: str
    """
    The username, without the domain part.
    """

    acct: str | None = None
    """
    The user's account name as username@domain (@domain omitted for local users).
    """

    display_name: str | None = None
    """
    The user's display name.
    """

    locked: bool | None = None
    """
    Denotes whether the account can be followed without a follow request.
    """

    bot: bool | None = None
    """
    Boolean indicating whether this account is automated.
    """

    discoverable: bool | None = None
    """
    Indicates whether or not a user is visible on the discovery page. (nullable)
    """

    group: bool | None = None
    """
    A boolean indicating whether the account represents a group rather than an individual.
    """

    created_at: FlexibleDatetime | None = None
    """
    The accounts creation time.
    """

    note: str | None = None
    """
    The users bio / profile text / 'note'.
    """

    url: str | None = None
    """
    A URL pointing to this users profile page (can be remote).
    """

    avatar: str | None = None
    avatar_static: str | None = None
    header: str | None = None
    header_static: str | None = None

    followers_count: int | None = None
    following_count: int | None = None
    statuses_count: int | None = None

    last_status_at: FlexibleDatetime | None = None
    """
    When the most recent status was posted. (nullable)
    """

    noindex: bool | None = None
    suspended: bool | None = None
    limited: bool | None = None

    emojis: list[CustomEmoji] | None = None
    """
    List of custom emoji used in name, bio or fields.
    """

    fields: list[AccountField] | None = None
    """
    List of up to four (by default) AccountFields.
    """

    moved: Account | None = None
    """
    If set, the account this user has set up as their moved-to address.
    """

    source: AccountSource | None = None
    role: Role | None = None
    mute_expires_at: FlexibleDatetime | None = None


class StatusMention(Entity):
    """A mention of a user within the content of a status."""

    id: str
    username: str
    url: str
    acct: str


class TagHistory(Entity):
    """Daily usage of a hashtag. The counts arrive as strings."""

    day: str
    uses: str
    accounts: str


class Tag(Entity):
    """A hashtag.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Tag/
    """

    name: str
    """
    The value of the hashtag after the # sign.
    """

    url: str
    """
    A link to the hashtag on the instance.
    """

    history: list[TagHistory] | None = None
    """
    Usage statistics for given days (typically the past week).
    """

    following: bool | None = None
    """
    Whether the current token's authorized user is following this tag.
    """


class MediaAttachment(Entity):
    """A file or media attachment that can be added to a status."""

    id: str
    type: str
    url: str | None = None
    preview_url: str | None = None
    remote_url: str | None = None
    description: str | None = None
    blurhash: str | None = None
    meta: dict[str, Any] | None = None


class Application(Entity):
    """The application used to post a status."""

    name: str
    website: str | None = None


class Status(Entity):
    """A status / toot.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Status/
    """

    id: str
    """
    Id of the status.
    """

    uri: str
    """
    Descriptor for the status, used by ActivityPub.
    """

    created_at: FlexibleDatetime
    """
    Creation time.
    """

    account: Account
    """
    Account which posted the status.
    """

    content: str
    """
    Content of the status, as HTML.
    """

    visibility: str
    """
    Toot visibility ("public", "unlisted", "private", or "direct").
    """

    url: str | None = None
    in_reply_to_id: str | None = None
    in_reply_to_account_id: str | None = None
    reblog: Status | None = None
    sensitive: bool | None = None
    spoiler_text: str | None = None
    language: str | None = None
    replies_count: int | None = None
    reblogs_count: int | None = None
    favourites_count: int | None = None
    edited_at: FlexibleDatetime | None = None
    favourited: bool | None = None
    reblogged: bool | None = None
    muted: bool | None = None
    bookmarked: bool | None = None
    pinned: bool | None = None
    media_attachments: list[MediaAttachment] | None = None
    mentions: list[StatusMention] | None = None
    tags: list[Tag] | None = None
    emojis: list[CustomEmoji] | None = None
    application: Application | None = None
    card: dict[str, Any] | None = None
    poll: dict[str, Any] | None = None


class Relationship(Entity):
    """Information about the relationship between the authenticated user and \
        another account.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Relationship/
    """

    id: str
    """
    ID of the relationship object.
    """

    following: bool | None = None
    """
    Boolean denoting whether the logged-in user follows the specified user.
    """

    showing_reblogs: bool | None = None
    """
    Boolean denoting whether the logged-in user has chosen to see reblogs from this user.
    """

    notifying: bool | None = None
    """
    Whether the logged-in user is notified when the user posts.
    """

    languages: list[str] | None = None
    """
    Which languages the logged-in user sees from this user's posts. (nullable)
    """

    followed_by: bool | None = None
    blocking: bool | None = None
    blocked_by: bool | None = None
    muting: bool | None = None
    muting_notifications: bool | None = None
    requested: bool | None = None
    requested_by: bool | None = None
    domain_blocking: bool | None = None
    endorsed: bool | None = None
    """
    Whether the logged-in user features this account on their profile.
    """

    note: str | None = None
    """
    The logged-in user's private note on this account.
    """


class FeaturedTag(Entity):
    """A hashtag featured on a user's profile.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/FeaturedTag/
    """

    id: str
    name: str
    url: str
    statuses_count: int
    """
    The number of authored statuses containing this hashtag. Older servers
    send it as a string.
    """

    last_status_at: FlexibleDatetime | None = None
    """
    The date of the last authored status containing this hashtag. (nullable)
    """


class Token(Entity):
    """An OAuth token returned when an account is registered.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Token/
    """

    access_token: str
    token_type: str
    scope: str
    created_at: int
    """
    When the token was generated, as a UNIX timestamp.
    """


class UserList(Entity):
    """A list of users.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/List/
    """

    id: str
    title: str
    replies_policy: str | None = None
    """
    Which replies are shown in the list ("followed", "list" or "none").
    """

    exclusive: bool | None = None


class AccountPreferences(Entity):
    """Preferences defined by the user in their account settings.

    The server's keys contain colons; they are exposed under snake_case names
    and accepted under either.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/Preferences/
    """

    posting_default_visibility: str | None = Field(
        default=None, alias="posting:default:visibility",
    )
    posting_default_sensitive: bool | None = Field(
        default=None, alias="posting:default:sensitive",
    )
    posting_default_language: str | None = Field(
        default=None, alias="posting:default:language",
    )
    reading_expand_media: str | None = Field(
        default=None, alias="reading:expand:media",
    )
    """
    Whether media attachments should be automatically displayed or blurred/hidden \
        ("default", "show_all" or "hide_all").
    """

    reading_expand_spoilers: bool | None = Field(
        default=None, alias="reading:expand:spoilers",
    )


class FamiliarFollower(Entity):
    """Accounts you follow that also follow a given account.

    See also (Mastodon API documentation): https://docs.joinmastodon.org/entities/FamiliarFollowers/
    """

    id: str
    """
    The ID of the account these familiar followers belong to.
    """

    accounts: list[Account]
