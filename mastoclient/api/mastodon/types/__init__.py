"""Mastodon entity types."""

from .api_mastodon_types import (
    Account,
    AccountField,
    AccountPreferences,
    AccountSource,
    Application,
    CustomEmoji,
    FamiliarFollower,
    FeaturedTag,
    MediaAttachment,
    Relationship,
    Role,
    Status,
    StatusMention,
    Tag,
    TagHistory,
    Token,
    UserList,
)

__all__ = [
    "Account",
    "AccountField",
    "AccountPreferences",
    "AccountSource",
    "Application",
    "CustomEmoji",
    "FamiliarFollower",
    "FeaturedTag",
    "MediaAttachment",
    "Relationship",
    "Role",
    "Status",
    "StatusMention",
    "Tag",
    "TagHistory",
    "Token",
    "UserList",
]
