"""__init__.py for mastodon.

Submodules:
-----------
- api_mastodon: The Mastodon client, composed from the endpoint mixins.
- accounts, relationships, tags, preferences, suggestions: Endpoint mixins.
- params: Structured request parameters.
- types: Entity models for Mastodon API responses.
"""

from .api_mastodon import Mastodon

__all__ = ["Mastodon"]
