"""Exact-integer accrual of new supply over an arbitrary time interval."""

from __future__ import annotations

from issuance.core.errors import ArithmeticOverflow, InvalidTimeOrdering
from issuance.core.schedule import RATE_DENOMINATOR, ScheduleTable

MAX_UINT256 = 2**256 - 1


def _checked(value: int, what: str) -> int:
    if value > MAX_UINT256:
        raise ArithmeticOverflow(f"{what} exceeds the unsigned 256-bit range")
    return value


def yearly_amount(supply: int, rate_bps: int) -> int:
    """One full year's issuance for ``supply`` at ``rate_bps``."""
    return _checked(supply * rate_bps, "supply * rate") // RATE_DENOMINATOR


def prorate(amount: int, seconds: int, year_seconds: int) -> int:
    return _checked(amount * seconds, "yearly amount * seconds") // year_seconds


def compute_accrual(
    origin_time: int,
    last_issuance_time: int,
    now: int,
    base_amount: int,
    schedule: ScheduleTable,
) -> int:
    """
    Amount accrued between ``last_issuance_time`` and ``now``.

    Walks forward one schedule year at a time:
      1) every full year boundary reached pays that year's rate on the current
         supply, pro-rated for the part of the year not yet issued, and the
         full yearly amount is then compounded into the supply;
      2) the trailing partial year is pro-rated by elapsed seconds.

    Multiplication always happens before the floor division, so issuing at a
    year boundary and again later gives the same total as one issuance at the
    later moment.
    """
    if last_issuance_time < origin_time:
        raise InvalidTimeOrdering("origin time", origin_time, "last issuance time", last_issuance_time)
    if now < last_issuance_time:
        raise InvalidTimeOrdering("last issuance time", last_issuance_time, "now", now)
    if base_amount < 0:
        raise ValueError("base_amount must be non-negative")
    _checked(base_amount, "base amount")

    if now == last_issuance_time:
        return 0

    year = schedule.year_seconds
    year_index = schedule.year_index_at(origin_time, last_issuance_time)
    cursor = last_issuance_time
    supply = base_amount
    accrued = 0

    terminal_index = len(schedule) - 1
    boundary = origin_time + (year_index + 1) * year
    while boundary <= now:
        per_year = yearly_amount(supply, schedule.rate_for_year(year_index))
        if per_year == 0 and year_index >= terminal_index:
            # supply no longer grows under the terminal rate, nothing more accrues
            return accrued
        accrued = _checked(accrued + prorate(per_year, boundary - cursor, year), "accrued amount")
        supply = _checked(supply + per_year, "supply")

        cursor = boundary
        year_index += 1
        boundary += year

    per_year = yearly_amount(supply, schedule.rate_for_year(year_index))
    return _checked(accrued + prorate(per_year, now - cursor, year), "accrued amount")
