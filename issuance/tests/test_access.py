from __future__ import annotations

import pytest

from issuance.core.errors import Unauthorized
from issuance.domain.access import DEFAULT_ADMIN_ROLE, MINTER_ROLE, RoleRegistry
from issuance.domain.ledger import InMemoryLedger


def test_admin_holds_both_roles():
    roles = RoleRegistry(admin="admin")

    assert roles.has_role(MINTER_ROLE, "admin")
    assert roles.has_role(DEFAULT_ADMIN_ROLE, "admin")
    assert roles.can_issue("admin")
    assert not roles.can_issue("someone")


def test_grant_and_revoke_minter():
    roles = RoleRegistry(admin="admin")

    roles.grant_role(MINTER_ROLE, "minter", caller="admin")
    assert roles.can_issue("minter")

    roles.revoke_role(MINTER_ROLE, "minter", caller="admin")
    assert not roles.can_issue("minter")


def test_non_admin_cannot_change_roles():
    roles = RoleRegistry(admin="admin")

    with pytest.raises(Unauthorized):
        roles.grant_role(MINTER_ROLE, "mallory", caller="mallory")
    assert not roles.can_issue("mallory")


def test_unknown_role_is_rejected():
    roles = RoleRegistry(admin="admin")

    with pytest.raises(ValueError):
        roles.grant_role("BURNER_ROLE", "someone", caller="admin")


def test_ledger_credits_initial_supply_to_treasury():
    ledger = InMemoryLedger(initial_supply=1_000, treasury="treasury")

    assert ledger.total_supply() == 1_000
    assert ledger.balance_of("treasury") == 1_000
    assert ledger.balance_of("nobody") == 0


def test_ledger_mint_increases_total_supply():
    ledger = InMemoryLedger(initial_supply=1_000, treasury="treasury")

    ledger.mint("alice", 250)

    assert ledger.total_supply() == 1_250
    assert ledger.balance_of("alice") == 250


@pytest.mark.parametrize("account, amount", [("", 10), ("alice", 0), ("alice", -5)])
def test_ledger_rejects_invalid_mints(account, amount):
    ledger = InMemoryLedger(initial_supply=1_000, treasury="treasury")

    with pytest.raises(ValueError):
        ledger.mint(account, amount)
    assert ledger.total_supply() == 1_000
