"""Carrier config adapter reading a JSON bundle from disk."""

from __future__ import annotations

import json
from pathlib import Path


class CarrierConfigError(ValueError):
    """Raised when the carrier config file cannot be decoded."""


class JsonCarrierConfigAdapter:
    """Reads the carrier config bundle on every call.

    A missing path or file means there is no active carrier profile.
    """

    def __init__(self, path: str | Path | None):
        self._path = Path(path) if path else None

    def get_config(self) -> dict | None:
        if self._path is None or not self._path.is_file():
            return None
        try:
            bundle = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise CarrierConfigError(f"invalid carrier config {self._path}: {e}") from e
        if not isinstance(bundle, dict):
            raise CarrierConfigError(f"carrier config {self._path} is not a JSON object")
        return bundle
