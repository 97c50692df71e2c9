"""Env configuration adapter producing a structured AppConfig."""

from __future__ import annotations

from ..config import config
from ..core.config_model import AppConfig


def load_app_config() -> AppConfig:
    return AppConfig(
        admin_user=config.ADMIN_USER,
        additional_setting_enabled=config.ADDITIONAL_SETTING,
        carrier_config_path=config.CARRIER_CONFIG or None,
        broadcast_backend=_normalize_backend(config.BROADCAST_BACKEND),
        adb_serial=config.ADB_SERIAL or None,
        debug=config.DEBUG,
    )


def _normalize_backend(value: str) -> str:
    value = value.strip().lower()
    if value in ("log", "adb"):
        return value
    return "log"
