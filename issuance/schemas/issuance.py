"""Data contracts for the issuance HTTP API."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from issuance.core.accrual import MAX_UINT256
from issuance.core.projection import YearIssuanceRow


class PingResponse(BaseModel):
    message: str


class AccrualQuery(BaseModel):
    """Query string for an accrual preview."""

    model_config = ConfigDict(extra="forbid")

    now: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_UINT256,
        description="Unix timestamp in seconds; defaults to the server clock.",
    )


class AccrualResponse(BaseModel):
    now: int
    amount: int = Field(..., ge=0)


class IssueRequest(BaseModel):
    """Inputs required to issue everything accrued so far."""

    model_config = ConfigDict(extra="forbid")

    caller: str = Field(..., min_length=1, description="Account triggering the issuance.")
    beneficiary: str = Field(..., min_length=1, description="Account receiving the new units.")
    now: Optional[int] = Field(
        default=None,
        ge=0,
        le=MAX_UINT256,
        description="Unix timestamp in seconds; defaults to the server clock.",
    )


class IssueResponse(BaseModel):
    now: int
    amount: int = Field(..., ge=0)
    lastIssuanceTime: int
    totalSupply: int = Field(..., ge=0)


class StateResponse(BaseModel):
    originTime: int
    lastIssuanceTime: int
    totalSupply: int = Field(..., ge=0)
    currentRate: int = Field(..., ge=0)


class ScheduleResponse(BaseModel):
    rates: List[int]
    terminalRate: int
    yearSeconds: int
    rateDenominator: int


class YearRateResponse(BaseModel):
    yearIndex: int = Field(..., ge=0)
    rate: int = Field(..., ge=0)


class ProjectionQuery(BaseModel):
    model_config = ConfigDict(extra="forbid")

    years: int = Field(default=12, ge=1, le=200)


class ProjectionResponse(BaseModel):
    """Yearly issuance when every year is issued exactly on its boundary."""

    rows: List[YearIssuanceRow]
    cumulative: List[int]


class RoleChangeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    caller: str = Field(..., min_length=1)
    role: Literal["MINTER_ROLE", "DEFAULT_ADMIN_ROLE"]
    account: str = Field(..., min_length=1)


class RoleChangeResponse(BaseModel):
    role: str
    account: str
    granted: bool


class BalanceResponse(BaseModel):
    account: str
    balance: int = Field(..., ge=0)


class ErrorResponse(BaseModel):
    error: str
    detail: str
