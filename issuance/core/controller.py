"""Stateful gate around the accrual calculation: preview and issue."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import List

from issuance.core.accrual import compute_accrual
from issuance.core.errors import InvalidTimeOrdering, Unauthorized
from issuance.core.schedule import ScheduleTable
from issuance.domain.access import MINTER_ROLE, AuthorizationGate
from issuance.domain.ledger import Ledger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuanceEvent:
    beneficiary: str
    amount: int
    timestamp: int


class IssuanceController:
    """
    Owns the origin time and the last issuance time.

    ``preview_accrual`` is a pure read. ``issue`` mints the accrued amount on
    the ledger and then advances ``last_issuance_time``; if the mint fails the
    time is left untouched, so either both happen or neither does.
    """

    def __init__(
        self,
        schedule: ScheduleTable,
        ledger: Ledger,
        gate: AuthorizationGate,
        origin_time: int,
    ):
        if origin_time < 0:
            raise ValueError("origin_time must be non-negative")
        self._schedule = schedule
        self._ledger = ledger
        self._gate = gate
        self._origin_time = origin_time
        self._last_issuance_time = origin_time
        self._events: List[IssuanceEvent] = []
        self._lock = threading.Lock()

    @property
    def origin_time(self) -> int:
        return self._origin_time

    @property
    def last_issuance_time(self) -> int:
        return self._last_issuance_time

    @property
    def schedule(self) -> ScheduleTable:
        return self._schedule

    @property
    def events(self) -> List[IssuanceEvent]:
        return list(self._events)

    def current_rate(self, now: int) -> int:
        """Rate in basis points for the schedule year containing ``now``."""
        return self._schedule.rate_at(self._origin_time, now)

    def preview_accrual(self, now: int) -> int:
        with self._lock:
            return self._preview_locked(now)

    def _preview_locked(self, now: int) -> int:
        # caller holds self._lock, so supply and last issuance time are read together
        return compute_accrual(
            self._origin_time,
            self._last_issuance_time,
            now,
            self._ledger.total_supply(),
            self._schedule,
        )

    def issue(self, now: int, beneficiary: str, caller: str) -> int:
        """Mint everything accrued up to ``now`` to ``beneficiary``; returns the amount."""
        if not self._gate.can_issue(caller):
            logger.warning("issuance rejected: %s lacks %s", caller, MINTER_ROLE)
            raise Unauthorized(caller, MINTER_ROLE)

        with self._lock:
            if now < self._last_issuance_time:
                logger.warning(
                    "issuance rejected: now=%d precedes last issuance %d",
                    now,
                    self._last_issuance_time,
                )
                raise InvalidTimeOrdering("last issuance time", self._last_issuance_time, "now", now)

            amount = self._preview_locked(now)
            if amount == 0:
                logger.debug("nothing accrued at %d, issuance skipped", now)
                return 0

            self._ledger.mint(beneficiary, amount)
            self._last_issuance_time = now
            self._events.append(IssuanceEvent(beneficiary=beneficiary, amount=amount, timestamp=now))

        logger.info("issued %d to %s at %d", amount, beneficiary, now)
        return amount
