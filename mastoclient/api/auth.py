"""Authentication contexts and the per-endpoint requirement table."""
import logging
from enum import Enum
from typing import NamedTuple

from mastoclient.api.errors import MastodonAuthenticationRequiredError


class UserContext(Enum):
    """Which credentials an endpoint accepts."""

    ANONYMOUS_ONLY = "anonymous-only"
    OAUTH2_ONLY = "oauth2-only"
    OAUTH2_OR_ANONYMOUS = "oauth2-or-anonymous"


class Operation(NamedTuple):
    """An endpoint's name, accepted context and the scope its token needs."""

    name: str
    context: UserContext
    scope: str


def _operations(*entries: tuple[str, UserContext, str]) -> dict[str, Operation]:
    return {name: Operation(name, context, scope) for name, context, scope in entries}


_OAUTH2 = UserContext.OAUTH2_ONLY
_EITHER = UserContext.OAUTH2_OR_ANONYMOUS
_ANONYMOUS = UserContext.ANONYMOUS_ONLY

OPERATIONS: dict[str, Operation] = _operations(
    ("create_account", _OAUTH2, "write:accounts"),
    ("verify_account_credentials", _OAUTH2, "read:accounts"),
    ("update_account", _OAUTH2, "read:accounts"),
    ("update_avatar_image", _OAUTH2, "read:accounts"),
    ("update_header_image", _OAUTH2, "read:accounts"),
    ("lookup_by_id", _EITHER, "read:accounts"),
    ("lookup_statuses", _EITHER, "read:statuses"),
    ("lookup_followers", _OAUTH2, "read:accounts"),
    ("lookup_followings", _OAUTH2, "read:accounts"),
    ("lookup_featured_tags", _ANONYMOUS, "read:accounts"),
    ("lookup_contained_lists", _OAUTH2, "read:lists"),
    ("create_follow", _OAUTH2, "read:lists"),
    ("destroy_follow", _OAUTH2, "write:follows"),
    ("destroy_follower", _OAUTH2, "write:follows"),
    ("create_block", _OAUTH2, "write:blocks"),
    ("destroy_block", _OAUTH2, "write:blocks"),
    ("create_mute", _OAUTH2, "write:mutes"),
    ("destroy_mute", _OAUTH2, "write:mutes"),
    ("create_featured_profile", _OAUTH2, "write:accounts"),
    ("destroy_featured_profile", _OAUTH2, "write:accounts"),
    ("update_private_comment", _OAUTH2, "write:accounts"),
    ("lookup_relationships", _OAUTH2, "read:follows"),
    ("lookup_familiar_followers", _OAUTH2, "read:follows"),
    ("search_accounts", _OAUTH2, "read:accounts"),
    ("lookup_account_from_webfinger_address", _ANONYMOUS, "read:accounts"),
    ("lookup_preferences", _OAUTH2, "read:accounts"),
    ("lookup_owned_featured_tags", _OAUTH2, "read:accounts"),
    ("create_featured_tag", _OAUTH2, "write:accounts"),
    ("destroy_featured_tag", _OAUTH2, "write:accounts"),
    ("lookup_suggested_tags", _OAUTH2, "read:accounts"),
    ("lookup_followed_tags", _OAUTH2, "read:follows"),
    ("destroy_follow_suggestion", _OAUTH2, "read"),
)


def authorization_headers(
    operation: Operation,
    token: str | None,
    bearer_token: str | None = None,
) -> dict[str, str]:
    """Return the Authorization header the operation should be sent with.

    `bearer_token` is a per-call token that takes precedence over the
    client's own `token`.

    Raises
    ------
    MastodonAuthenticationRequiredError: If the operation is OAuth-only and \
        no token is available.
    """
    credential = bearer_token or token
    if operation.context is UserContext.ANONYMOUS_ONLY:
        return {}
    if credential:
        return {"Authorization": f"Bearer {credential}"}
    if operation.context is UserContext.OAUTH2_ONLY:
        logging.debug(f"Refusing {operation.name}: no access token configured")
        raise MastodonAuthenticationRequiredError(operation.name, operation.scope)
    return {}
