#!/usr/bin/env python3
"""sysupdate-prefs: lay out the system update entries and simulate a click"""

import argparse
import logging

from .adapters.broadcast import AdbBroadcastAdapter, LoggingBroadcastAdapter
from .adapters.carrier_config import JsonCarrierConfigAdapter
from .adapters.config_env import load_app_config
from .adapters.preference_screen import HandlerActivity, InMemoryPreferenceScreen, PreferenceEntry
from .adapters.resources import MappingResourcesAdapter
from .adapters.user_role import StaticUserRoleAdapter
from .core.config_model import AppConfig
from .core.controller import PlatformContext, SystemUpdatePreferenceController
from .core.preference_key import ADDITIONAL_UPDATE_SETTING_FLAG, PreferenceKey
from .search_index import SearchIndexProvider

logger = logging.getLogger(__name__)

SYSTEM_UPDATE_ACTION = "android.settings.SYSTEM_UPDATE_SETTINGS"


def default_screen() -> InMemoryPreferenceScreen:
    """Device info screen as declared statically, before any controller runs."""
    return InMemoryPreferenceScreen(
        entries=[
            PreferenceEntry(
                key=PreferenceKey.SYSTEM_UPDATE_SETTINGS.value,
                title="System updates",
                intent_action=SYSTEM_UPDATE_ACTION,
            ),
            PreferenceEntry(
                key=PreferenceKey.ADDITIONAL_UPDATE_SETTING.value,
                title="Additional system updates",
            ),
        ],
        handlers=[
            HandlerActivity(
                action=SYSTEM_UPDATE_ACTION,
                package="com.google.android.gms",
                class_name=".update.SystemUpdateActivity",
                label="System update",
                system=True,
            ),
        ],
    )


def build_controller(app_config: AppConfig, broadcast=None) -> SystemUpdatePreferenceController:
    """Wire adapters from configuration into a controller."""
    if broadcast is None:
        broadcast = LoggingBroadcastAdapter()
        if app_config.broadcast_backend == "adb":
            adb = AdbBroadcastAdapter(serial=app_config.adb_serial)
            if adb.is_available():
                broadcast = adb
            else:
                logger.warning("adb not found on PATH, logging broadcasts instead")
    context = PlatformContext(
        resources=MappingResourcesAdapter(
            {ADDITIONAL_UPDATE_SETTING_FLAG: app_config.additional_setting_enabled}
        ),
        carrier_config=JsonCarrierConfigAdapter(app_config.carrier_config_path),
        broadcast=broadcast,
    )
    return SystemUpdatePreferenceController(context, StaticUserRoleAdapter(app_config.admin_user))


def parse_args(argv=None, defaults: AppConfig | None = None) -> argparse.Namespace:
    defaults = defaults or load_app_config()
    parser = argparse.ArgumentParser(
        prog="sysupdate-prefs",
        description="Lay out the system update entries and optionally simulate a click.",
    )
    parser.add_argument(
        "--admin", action=argparse.BooleanOptionalAction, default=defaults.admin_user,
        help="current user is an administrator",
    )
    parser.add_argument(
        "--additional", action=argparse.BooleanOptionalAction,
        default=defaults.additional_setting_enabled,
        help="enable the additional system update entry",
    )
    parser.add_argument(
        "--carrier-config", default=defaults.carrier_config_path,
        help="path to the carrier config JSON bundle",
    )
    parser.add_argument("--click", metavar="KEY", help="preference key to click after layout")
    parser.add_argument(
        "--adb", action=argparse.BooleanOptionalAction,
        default=defaults.broadcast_backend == "adb",
        help="deliver broadcasts with adb instead of logging them",
    )
    parser.add_argument("--serial", default=defaults.adb_serial, help="adb device serial")
    parser.add_argument("--debug", action="store_true", default=defaults.debug)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    app_config = AppConfig(
        admin_user=args.admin,
        additional_setting_enabled=args.additional,
        carrier_config_path=args.carrier_config,
        broadcast_backend="adb" if args.adb else "log",
        adb_serial=args.serial,
        debug=args.debug,
    )
    broadcast = None if args.adb else LoggingBroadcastAdapter()
    controller = build_controller(app_config, broadcast=broadcast)

    screen = default_screen()
    controller.display_preference(screen)

    print("Visible entries:")
    for entry in screen.entries:
        bound = f" -> {entry.component}" if entry.component else ""
        print(f"  {entry.key}: {entry.title}{bound}")
    if not screen.entries:
        print("  (none)")

    non_indexable = SearchIndexProvider(controller).get_non_indexable_keys()
    print(f"Non-indexable keys: {', '.join(non_indexable) or '(none)'}")

    if args.click:
        handled = controller.handle_preference_tree_click(args.click)
        print(f"Click {args.click}: handled={handled}")
        if broadcast is not None:
            for sent in broadcast.sent:
                extra = f" --es {sent.extra_key} {sent.extra_value}" if sent.extra_key else ""
                print(f"Broadcast: {sent.action}{extra}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
