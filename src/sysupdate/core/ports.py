"""Core ports (interfaces) for sysupdate-prefs.

Each protocol is one platform service the preference controller consults:
user role, resource flags, carrier config, broadcasts and the settings
screen. Tests and the CLI satisfy them with plain adapters.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class UserRoleProvider(Protocol):
    """Role of the current user."""

    def is_admin_user(self) -> bool:
        """Whether the current user has administrative privileges."""


@runtime_checkable
class ResourceProvider(Protocol):
    """Build/config-time resource values."""

    def get_boolean(self, name: str) -> bool:
        """Return the boolean resource with the given name."""


@runtime_checkable
class CarrierConfigProvider(Protocol):
    """Carrier configuration for the active carrier profile."""

    def get_config(self) -> Mapping[str, object] | None:
        """Return the config bundle, or None when no carrier config is available."""


@runtime_checkable
class BroadcastSink(Protocol):
    """Fire-and-forget broadcast dispatch."""

    def send(
        self, action: str, extra_key: str | None = None, extra_value: str | None = None
    ) -> None:
        """Broadcast an action with at most one string extra."""


@runtime_checkable
class PreferenceScreen(Protocol):
    """Mutable tree of preference entries on a settings screen."""

    def rebind_to_matching_handler_or_remove(self, key: str, title_from_handler: bool):
        """Point an entry at its matching handler activity, removing it if none exists."""

    def find_preference(self, key: str):
        """Return the entry handle for key, or None."""

    def remove_preference(self, entry) -> None:
        """Remove an entry previously returned by find_preference."""
