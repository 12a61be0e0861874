"""Mastodon API client."""
import logging
import re

import aiohttp

from mastoclient import __version__
from mastoclient.api.client import HttpMethod
from mastoclient.api.mastodon.accounts import Accounts
from mastoclient.api.mastodon.preferences import Preferences
from mastoclient.api.mastodon.relationships import Relationships
from mastoclient.api.mastodon.suggestions import Suggestions
from mastoclient.api.mastodon.tags import Tags

USER_AGENT = f"mastoclient/{__version__}"


def normalize_server(server: str) -> str:
    """Reduce a server given as a URL to its bare host name."""
    return re.sub(r"^(https?://)?([^/]*).*$", r"\2", server.strip())


class Mastodon(Accounts, Relationships, Tags, Preferences, Suggestions):
    """A class representing a Mastodon instance.

    Every endpoint method takes the client to use as its first argument; an
    instance's own client is `self.client`. Instances share nothing, so one
    per account or server can be used side by side.
    """

    def __init__(
        self,
        server: str,
        token: str | None = None,
        timeout: float | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the Mastodon instance."""
        server = normalize_server(server)
        logging.info(f"Creating Mastodon client for {server}")
        if token:
            logging.info("Using provided token")
        if session is None:
            session_options = {"headers": {"User-Agent": USER_AGENT}}
            if timeout:
                session_options["timeout"] = aiohttp.ClientTimeout(total=timeout)
            session = aiohttp.ClientSession(**session_options)
        self.client = HttpMethod(api_base_url=server, session=session, token=token)

    async def cleanup(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.session.close()

    async def __aenter__(self) -> "Mastodon":
        return self

    async def __aexit__(self, *args) -> None:  # noqa: ANN002
        await self.cleanup()
