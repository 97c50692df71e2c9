"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    admin_user: bool
    additional_setting_enabled: bool
    carrier_config_path: str | None
    broadcast_backend: str
    adb_serial: str | None
    debug: bool
