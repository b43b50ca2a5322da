"""Role registry deciding who may trigger issuance."""

from __future__ import annotations

import logging
from typing import Dict, Protocol, Set

from issuance.core.errors import Unauthorized

logger = logging.getLogger(__name__)

MINTER_ROLE = "MINTER_ROLE"
DEFAULT_ADMIN_ROLE = "DEFAULT_ADMIN_ROLE"
ROLES = (MINTER_ROLE, DEFAULT_ADMIN_ROLE)


class AuthorizationGate(Protocol):
    def can_issue(self, caller: str) -> bool: ...


class RoleRegistry:
    """
    Two-role access control. The admin given at creation holds both roles and
    is the only account that can grant or revoke them afterwards.
    """

    def __init__(self, admin: str):
        if not admin:
            raise ValueError("admin account is required")
        self._members: Dict[str, Set[str]] = {role: {admin} for role in ROLES}

    def has_role(self, role: str, account: str) -> bool:
        return account in self._members.get(role, set())

    def can_issue(self, caller: str) -> bool:
        return self.has_role(MINTER_ROLE, caller)

    def grant_role(self, role: str, account: str, caller: str) -> None:
        self._check_admin(caller)
        if not account:
            raise ValueError("account is required")
        self._role_members(role).add(account)
        logger.info("%s granted %s to %s", caller, role, account)

    def revoke_role(self, role: str, account: str, caller: str) -> None:
        self._check_admin(caller)
        self._role_members(role).discard(account)
        logger.info("%s revoked %s from %s", caller, role, account)

    def _role_members(self, role: str) -> Set[str]:
        if role not in self._members:
            raise ValueError(f"unknown role {role!r}")
        return self._members[role]

    def _check_admin(self, caller: str) -> None:
        if not self.has_role(DEFAULT_ADMIN_ROLE, caller):
            logger.warning("role change rejected for %s", caller)
            raise Unauthorized(caller, DEFAULT_ADMIN_ROLE)
