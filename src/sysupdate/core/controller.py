"""Visibility and click handling for the system update preferences.

Decides whether the system update entries are shown, which of them are kept
out of the search index, and fires the carrier's client-initiated broadcast
when the system update entry is clicked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .carrier_config import CarrierUpdateConfig
from .ports import BroadcastSink, CarrierConfigProvider, PreferenceScreen, ResourceProvider, UserRoleProvider
from .preference_key import ADDITIONAL_UPDATE_SETTING_FLAG, PreferenceKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlatformContext:
    """Platform services reachable from the hosting screen.

    broadcast is the application-wide sink, not one scoped to the screen.
    """

    resources: ResourceProvider
    carrier_config: CarrierConfigProvider
    broadcast: BroadcastSink


class SystemUpdatePreferenceController:
    """Controls the system update entries of the device info screen."""

    def __init__(self, context: PlatformContext, user_role: UserRoleProvider):
        self._context = context
        self._user_role = user_role

    def display_preference(self, screen: PreferenceScreen) -> None:
        """Show or remove the controlled entries on screen."""
        system_update = PreferenceKey.SYSTEM_UPDATE_SETTINGS
        if self.is_available(system_update):
            screen.rebind_to_matching_handler_or_remove(system_update.value, title_from_handler=True)
        else:
            _remove_preference(screen, system_update.value)

        additional = PreferenceKey.ADDITIONAL_UPDATE_SETTING
        if not self.is_available(additional):
            _remove_preference(screen, additional.value)

    def update_non_indexable_keys(self, keys: list[str]) -> None:
        """Append keys of entries hidden from the user, for the search index."""
        # TODO: admin check is wrong for non-owner users, tracked upstream as b/22760654
        for key in (PreferenceKey.SYSTEM_UPDATE_SETTINGS, PreferenceKey.ADDITIONAL_UPDATE_SETTING):
            if not self.is_available(key):
                keys.append(key.value)

    def handle_preference_tree_click(self, clicked_key: str) -> bool:
        """Handle a click on a preference.

        Returns:
            Always False, so other click handlers still see the event.
        """
        if clicked_key == PreferenceKey.SYSTEM_UPDATE_SETTINGS.value:
            ci_config = CarrierUpdateConfig.from_bundle(self._context.carrier_config.get_config())
            if ci_config is not None and ci_config.action_on_sys_update:
                self._ci_action_on_sys_update(ci_config)
        return False

    def is_available(self, key: PreferenceKey | str) -> bool:
        """Whether the entry for key should be on screen."""
        if isinstance(key, str):
            key = PreferenceKey.from_key(key)
        if key is PreferenceKey.SYSTEM_UPDATE_SETTINGS:
            return self._user_role.is_admin_user()
        if key is PreferenceKey.ADDITIONAL_UPDATE_SETTING:
            return self._context.resources.get_boolean(ADDITIONAL_UPDATE_SETTING_FLAG)
        return False

    def _ci_action_on_sys_update(self, ci_config: CarrierUpdateConfig) -> None:
        """Send the carrier's client-initiated broadcast."""
        if not ci_config.intent:
            return
        extra_key = ci_config.extra_key or None
        extra_value = ci_config.extra_value if extra_key else None
        logger.debug(
            "ci action on sys update: broadcasting %s with extra %s, %s",
            ci_config.intent,
            ci_config.extra_key,
            ci_config.extra_value,
        )
        self._context.broadcast.send(ci_config.intent, extra_key, extra_value)


def _remove_preference(screen: PreferenceScreen, key: str) -> None:
    entry = screen.find_preference(key)
    if entry is not None:
        screen.remove_preference(entry)
