from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from issuance.core.schedule import REFERENCE_RATES, YEAR_IN_SECONDS

# 1,000,000,000 tokens with 18 decimals
DEFAULT_INITIAL_SUPPLY = 1_000_000_000 * 10**18


class IssuanceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    originTime: Optional[int] = Field(default=None, ge=0)
    initialSupply: int = Field(default=DEFAULT_INITIAL_SUPPLY, ge=0)
    rates: List[int] = Field(default_factory=lambda: list(REFERENCE_RATES))
    yearSeconds: int = YEAR_IN_SECONDS

    admin: str = Field(default="admin", min_length=1)
    treasury: str = Field(default="treasury", min_length=1)

    corsOrigins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )
    logLevel: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @model_validator(mode="after")
    def ensure_validity(self) -> "IssuanceConfig":
        if not self.rates:
            raise ValueError("rates must contain at least one entry")
        if any(rate < 0 for rate in self.rates):
            raise ValueError("rates must be non-negative")
        if self.yearSeconds <= 0:
            raise ValueError("yearSeconds must be positive")
        return self
