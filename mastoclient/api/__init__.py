"""__init__.py for api."""

from .auth import OPERATIONS, Operation, UserContext
from .client import HttpMethod, RawResponse
from .response import MastodonResponse

__all__ = [
    "HttpMethod",
    "MastodonResponse",
    "OPERATIONS",
    "Operation",
    "RawResponse",
    "UserContext",
]
