"""User role adapter."""

from __future__ import annotations


class StaticUserRoleAdapter:
    def __init__(self, is_admin: bool):
        self._is_admin = is_admin

    def is_admin_user(self) -> bool:
        return self._is_admin
