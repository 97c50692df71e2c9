"""Resource flag adapter backed by a plain mapping."""

from __future__ import annotations

from collections.abc import Mapping


class ResourceNotFoundError(LookupError):
    """Raised when a boolean resource is not defined."""


class MappingResourcesAdapter:
    def __init__(self, flags: Mapping[str, bool]):
        self._flags = dict(flags)

    def get_boolean(self, name: str) -> bool:
        try:
            return bool(self._flags[name])
        except KeyError:
            raise ResourceNotFoundError(f"boolean resource not found: {name}") from None
