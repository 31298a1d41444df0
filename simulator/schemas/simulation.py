"""Data contracts for investment projections."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

# product-level limits shared by the form and the numeric endpoint
MAX_PERIODS = 100
MAX_AMOUNT = 1_000_000_000_000.0
MAX_ANNUAL_RATE = 1.0


class InvestmentParams(BaseModel):
    """Validated engine inputs, already in the base currency unit."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    initial_investment: float = Field(..., ge=0, description="Value at period 0.")
    periodic_contribution: float = Field(
        ...,
        ge=0,
        description="Monthly contribution, added twelve times per period.",
    )
    annual_rate: float = Field(
        ...,
        description="Growth per period expressed as a decimal (e.g. 0.05 for 5%).",
    )
    periods: int = Field(..., ge=0, description="Number of yearly periods to simulate.")


class YearlyResult(BaseModel):
    """Account state at the end of one period."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    period: int = Field(..., ge=1)
    cumulative_contribution: float = Field(..., ge=0)
    total_value: float
    gain: float


class SimulationResult(BaseModel):
    """Aggregate totals plus the ordered yearly trajectory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    total_contribution: float = Field(..., ge=0)
    final_value: float
    trajectory: Tuple[YearlyResult, ...] = ()


class ProjectionRequest(InvestmentParams):
    """Numeric engine inputs posted directly, held to the same limits as the form."""

    initial_investment: float = Field(..., ge=0, le=MAX_AMOUNT)
    periodic_contribution: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate: float = Field(..., ge=-1, le=MAX_ANNUAL_RATE)
    periods: int = Field(..., ge=0, le=MAX_PERIODS)
