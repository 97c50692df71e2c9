"""In-memory preference screen.

Holds an ordered list of entries and the handler activities installed on the
device, enough to resolve an entry's intent to a matching system activity.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class PreferenceEntry:
    """A single row on the screen.

    Attributes:
        key: Preference key
        title: Displayed title
        intent_action: Action of the intent launched on click, if any
        component: "package/class" of the activity the entry is bound to
    """

    key: str
    title: str = ""
    intent_action: str | None = None
    component: str | None = None


@dataclass(frozen=True)
class HandlerActivity:
    """An installed activity able to handle an intent action."""

    action: str
    package: str
    class_name: str
    label: str = ""
    system: bool = False

    @property
    def component(self) -> str:
        return f"{self.package}/{self.class_name}"


class InMemoryPreferenceScreen:
    def __init__(
        self,
        entries: Iterable[PreferenceEntry] = (),
        handlers: Iterable[HandlerActivity] = (),
    ):
        self._entries: list[PreferenceEntry] = list(entries)
        self._handlers: list[HandlerActivity] = list(handlers)

    @property
    def keys(self) -> list[str]:
        return [entry.key for entry in self._entries]

    @property
    def entries(self) -> list[PreferenceEntry]:
        return list(self._entries)

    def find_preference(self, key: str) -> PreferenceEntry | None:
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def remove_preference(self, entry: PreferenceEntry) -> None:
        self._entries = [e for e in self._entries if e is not entry]

    def rebind_to_matching_handler_or_remove(self, key: str, title_from_handler: bool) -> bool:
        """Bind the entry to the first system activity handling its intent.

        Returns:
            True if the entry was bound, False if it was removed or absent.
        """
        entry = self.find_preference(key)
        if entry is None:
            return False

        if entry.intent_action:
            for handler in self._handlers:
                if handler.action == entry.intent_action and handler.system:
                    entry.component = handler.component
                    if title_from_handler:
                        entry.title = handler.label
                    return True

        logger.debug("no system handler for %s, removing", key)
        self.remove_preference(entry)
        return False
