"""Preference keys handled by the system update controller."""

from __future__ import annotations

from enum import Enum

# Resource flag gating the additional system update entry
ADDITIONAL_UPDATE_SETTING_FLAG = "config_additional_system_update_setting_enable"


class PreferenceKey(Enum):
    """Entries on the device info screen owned by the controller.

    The value is the preference key used on the screen and in the search index.
    """

    SYSTEM_UPDATE_SETTINGS = "system_update_settings"
    ADDITIONAL_UPDATE_SETTING = "additional_system_update_settings"

    @classmethod
    def from_key(cls, key: str) -> "PreferenceKey | None":
        """Look up a key by its string identifier, None if unknown."""
        try:
            return cls(key)
        except ValueError:
            return None
