from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

from issuance.core.accrual import yearly_amount
from issuance.core.schedule import ScheduleTable


class YearIssuanceRow(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    yearIndex: int
    rateBps: int
    startSupply: int
    issued: int
    endSupply: int


def project_yearly_issuance(
    base_amount: int,
    schedule: ScheduleTable,
    years: int,
) -> List[YearIssuanceRow]:
    """
    Build a year-by-year table of the supply when issuance happens exactly on
    every schedule-year boundary, starting from ``base_amount`` at year 0.

    Order of operations (per year):
      1) Look up the rate for the year (terminal rate past the table).
      2) Issue one full year's amount on the supply at the start of the year.
      3) Carry the grown supply into the next year.
    """
    if years < 1:
        raise ValueError("years must be at least 1")
    if base_amount < 0:
        raise ValueError("base_amount must be non-negative")

    rows: List[YearIssuanceRow] = []
    supply = base_amount
    for year_index in range(years):
        rate = schedule.rate_for_year(year_index)
        issued = yearly_amount(supply, rate)
        rows.append(
            YearIssuanceRow(
                yearIndex=year_index,
                rateBps=rate,
                startSupply=supply,
                issued=issued,
                endSupply=supply + issued,
            )
        )
        supply += issued
    return rows


def cumulative_issuance(rows: List[YearIssuanceRow]) -> List[int]:
    """Running total of issued units after each projected year."""
    totals: List[int] = []
    running = 0
    for row in rows:
        running += row.issued
        totals.append(running)
    return totals
