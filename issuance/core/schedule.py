"""Yearly inflation rates, expressed in basis points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from issuance.core.errors import EmptySchedule, InvalidTimeOrdering

RATE_DENOMINATOR = 10_000
YEAR_IN_SECONDS = 31_536_000

# ~15% relative decay per year from 9.00% down to the 1.50% floor.
REFERENCE_RATES: Tuple[int, ...] = (900, 765, 650, 552, 469, 398, 338, 287, 243, 206, 175, 150)


@dataclass(frozen=True)
class ScheduleTable:
    """
    Immutable mapping of schedule-year index -> rate in basis points.

    Year 0 starts at the origin time. Any index past the end of the table
    resolves to the last entry (the terminal rate), so lookups never fail.
    """

    rates: Sequence[int]
    year_seconds: int = YEAR_IN_SECONDS

    def __post_init__(self) -> None:
        rates = tuple(int(rate) for rate in self.rates)
        if not rates:
            raise EmptySchedule()
        if any(rate < 0 for rate in rates):
            raise ValueError("inflation rates must be non-negative")
        if self.year_seconds <= 0:
            raise ValueError("year_seconds must be positive")
        object.__setattr__(self, "rates", rates)

    def __len__(self) -> int:
        return len(self.rates)

    @property
    def terminal_rate(self) -> int:
        return self.rates[-1]

    def rate_for_year(self, year_index: int) -> int:
        if year_index < 0:
            raise ValueError("year_index must be non-negative")
        if year_index >= len(self.rates):
            return self.terminal_rate
        return self.rates[year_index]

    def year_index_at(self, origin_time: int, timestamp: int) -> int:
        """Number of full schedule years between origin_time and timestamp."""
        if timestamp < origin_time:
            raise InvalidTimeOrdering("origin time", origin_time, "timestamp", timestamp)
        return (timestamp - origin_time) // self.year_seconds

    def rate_at(self, origin_time: int, timestamp: int) -> int:
        return self.rate_for_year(self.year_index_at(origin_time, timestamp))


def reference_schedule() -> ScheduleTable:
    return ScheduleTable(REFERENCE_RATES)
