"""Application factory and app-wide configuration."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from flask import Flask
from flask_cors import CORS

from issuance.app.api.routes import EXTENSION_KEY, api_bp
from issuance.config import load_config
from issuance.core.controller import IssuanceController
from issuance.core.schedule import ScheduleTable
from issuance.domain.access import RoleRegistry
from issuance.domain.ledger import InMemoryLedger
from issuance.models import IssuanceConfig

logger = logging.getLogger(__name__)


def system_clock() -> int:
    return int(time.time())


@dataclass
class IssuanceServices:
    config: IssuanceConfig
    controller: IssuanceController
    ledger: InMemoryLedger
    roles: RoleRegistry
    clock: Callable[[], int]


def build_services(
    config: IssuanceConfig,
    clock: Callable[[], int] = system_clock,
) -> IssuanceServices:
    """Wire the schedule, ledger, role registry and controller together."""
    origin_time = config.originTime if config.originTime is not None else clock()
    schedule = ScheduleTable(config.rates, year_seconds=config.yearSeconds)
    ledger = InMemoryLedger(initial_supply=config.initialSupply, treasury=config.treasury)
    roles = RoleRegistry(admin=config.admin)
    controller = IssuanceController(schedule, ledger, roles, origin_time=origin_time)
    return IssuanceServices(
        config=config,
        controller=controller,
        ledger=ledger,
        roles=roles,
        clock=clock,
    )


def create_app(
    config: Optional[IssuanceConfig] = None,
    clock: Callable[[], int] = system_clock,
) -> Flask:
    """Build the Flask app instance."""
    config = config or load_config()
    logging.basicConfig(
        level=getattr(logging, config.logLevel),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = Flask(__name__)
    CORS(
        app,
        resources={r"/api/*": {"origins": config.corsOrigins}},
        supports_credentials=True,
    )

    services = build_services(config, clock)
    app.extensions[EXTENSION_KEY] = services
    app.register_blueprint(api_bp, url_prefix="/api")

    logger.info(
        "issuance service ready: origin=%d supply=%d rates=%s",
        services.controller.origin_time,
        services.ledger.total_supply(),
        list(services.controller.schedule.rates),
    )
    return app
