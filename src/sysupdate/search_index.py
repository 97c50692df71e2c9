"""Search index provider for the system update entries."""

from __future__ import annotations

from .core.controller import SystemUpdatePreferenceController


class SearchIndexProvider:
    """Reports which controlled entries must be kept out of settings search."""

    def __init__(self, controller: SystemUpdatePreferenceController):
        self._controller = controller

    def get_non_indexable_keys(self) -> list[str]:
        keys: list[str] = []
        self._controller.update_non_indexable_keys(keys)
        return keys
