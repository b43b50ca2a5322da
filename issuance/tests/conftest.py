from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from issuance.app import create_app
from issuance.core.controller import IssuanceController
from issuance.core.schedule import YEAR_IN_SECONDS, reference_schedule
from issuance.domain.access import RoleRegistry
from issuance.domain.ledger import InMemoryLedger
from issuance.models import IssuanceConfig

ORIGIN = 1_700_000_000
YEAR = YEAR_IN_SECONDS
S0 = 1_000_000_000 * 10**18


class FakeClock:
    def __init__(self, now: int):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture()
def ledger() -> InMemoryLedger:
    return InMemoryLedger(initial_supply=S0, treasury="treasury")


@pytest.fixture()
def roles() -> RoleRegistry:
    return RoleRegistry(admin="admin")


@pytest.fixture()
def controller(ledger, roles) -> IssuanceController:
    return IssuanceController(reference_schedule(), ledger, roles, origin_time=ORIGIN)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(ORIGIN)


@pytest.fixture()
def app(clock):
    config = IssuanceConfig(originTime=ORIGIN, initialSupply=S0, logLevel="DEBUG")
    return create_app(config, clock=clock)


@pytest.fixture()
def client(app) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
