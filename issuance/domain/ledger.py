"""In-process token ledger used as the issuance controller's mint target."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Protocol

logger = logging.getLogger(__name__)


class Ledger(Protocol):
    def total_supply(self) -> int: ...

    def mint(self, account: str, amount: int) -> None: ...


@dataclass
class InMemoryLedger:
    """Balances and total supply; the initial supply is credited to ``treasury``."""

    initial_supply: int
    treasury: str
    balances: Dict[str, int] = field(default_factory=dict)
    _total: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.initial_supply < 0:
            raise ValueError("initial_supply must be non-negative")
        if not self.treasury:
            raise ValueError("treasury account is required")
        self._total = sum(self.balances.values())
        if self.initial_supply:
            self._credit(self.treasury, self.initial_supply)

    def total_supply(self) -> int:
        return self._total

    def balance_of(self, account: str) -> int:
        return self.balances.get(account, 0)

    def mint(self, account: str, amount: int) -> None:
        if not account:
            raise ValueError("cannot mint to an empty account")
        if amount <= 0:
            raise ValueError("mint amount must be positive")
        self._credit(account, amount)
        logger.debug("minted %d to %s, total supply %d", amount, account, self._total)

    def _credit(self, account: str, amount: int) -> None:
        self.balances[account] = self.balances.get(account, 0) + amount
        self._total += amount
