"""mastoclient - an asyncio client for the Mastodon accounts API."""

__version__ = "0.1.0"
