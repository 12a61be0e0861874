"""Structured request parameters for account updates."""
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Visibility(StrEnum):
    """Default visibility for new posts."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
    DIRECT = "direct"


@dataclass(frozen=True)
class AccountDefaultSettingsParam:
    """Default posting settings, sent as the ``source`` object."""

    privacy: Visibility | str | None = None
    sensitive: bool | None = None
    language: str | None = None

    def to_json(self) -> dict[str, Any]:
        """Return the wire representation."""
        return {
            "privacy": str(self.privacy) if self.privacy is not None else None,
            "sensitive": self.sensitive,
            "language": self.language,
        }


@dataclass(frozen=True)
class AccountProfileMetaParam:
    """One profile metadata field.

    By default servers accept at most 4 fields and 255 characters per value.
    """

    name: str
    value: str

    def to_json(self) -> dict[str, Any]:
        """Return the wire representation."""
        return {"name": self.name, "value": self.value}
