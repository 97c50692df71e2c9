"""Carrier-triggered action on system update, decoded from a config bundle."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

# Carrier config bundle keys
KEY_CI_ACTION_ON_SYS_UPDATE_BOOL = "ci_action_on_sys_update_bool"
KEY_CI_ACTION_ON_SYS_UPDATE_INTENT_STRING = "ci_action_on_sys_update_intent_string"
KEY_CI_ACTION_ON_SYS_UPDATE_EXTRA_STRING = "ci_action_on_sys_update_extra_string"
KEY_CI_ACTION_ON_SYS_UPDATE_EXTRA_VAL_STRING = "ci_action_on_sys_update_extra_val_string"


@dataclass(frozen=True)
class CarrierUpdateConfig:
    """Client-initiated action the carrier wants on a system update click.

    Attributes:
        action_on_sys_update: Whether a broadcast should be sent at all
        intent: Broadcast action string
        extra_key: Optional name of a single string extra
        extra_value: Value for extra_key, passed through as given
    """

    action_on_sys_update: bool = False
    intent: str | None = None
    extra_key: str | None = None
    extra_value: str | None = None

    @classmethod
    def from_bundle(cls, bundle: Mapping[str, object] | None) -> "CarrierUpdateConfig | None":
        """Decode a raw carrier config bundle; None when there is no bundle."""
        if bundle is None:
            return None
        return cls(
            action_on_sys_update=bundle.get(KEY_CI_ACTION_ON_SYS_UPDATE_BOOL) is True,
            intent=_optional_str(bundle.get(KEY_CI_ACTION_ON_SYS_UPDATE_INTENT_STRING)),
            extra_key=_optional_str(bundle.get(KEY_CI_ACTION_ON_SYS_UPDATE_EXTRA_STRING)),
            extra_value=_optional_str(bundle.get(KEY_CI_ACTION_ON_SYS_UPDATE_EXTRA_VAL_STRING)),
        )


def _optional_str(value: object) -> str | None:
    # Wrong-typed values read as absent
    return value if isinstance(value, str) else None
