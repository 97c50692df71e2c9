"""Configuration for sysupdate-prefs"""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Settings read from the environment (and .env)"""

    # User role
    ADMIN_USER = _env_bool("SYSUPDATE_ADMIN_USER", "true")

    # Resource flag config_additional_system_update_setting_enable
    ADDITIONAL_SETTING = _env_bool("SYSUPDATE_ADDITIONAL_SETTING", "false")

    # Path to carrier config JSON, empty means no active carrier profile
    CARRIER_CONFIG = os.getenv("SYSUPDATE_CARRIER_CONFIG", "")

    # Broadcast backend: "log" or "adb"
    BROADCAST_BACKEND = os.getenv("SYSUPDATE_BROADCAST_BACKEND", "log")
    ADB_SERIAL = os.getenv("SYSUPDATE_ADB_SERIAL", "")

    DEBUG = _env_bool("DEBUG", "false")


config = Config()
