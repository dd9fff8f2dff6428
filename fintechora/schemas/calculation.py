"""Data contracts for maturity and comparison calculations."""

from typing import List, Literal

from pydantic import BaseModel, Field

# Upper bounds for request bodies; lower bounds are left to the calculator,
# which reports them as InvalidInput.
MAX_PRINCIPAL = 1e12
MAX_RATE_PERCENT = 100
MAX_REQUEST_MONTHS = 600


class MaturityRequest(BaseModel):
    """Inputs required to compute a deposit's maturity."""

    principal: float = Field(..., le=MAX_PRINCIPAL, description="Amount deposited at month 0.")
    annualRatePercent: float = Field(
        ...,
        le=MAX_RATE_PERCENT,
        description="Annual interest rate as a percentage (e.g. 6.5 for 6.5%).",
    )
    durationMonths: int = Field(..., le=MAX_REQUEST_MONTHS, description="Term of the deposit in months.")


class ComparisonRequest(BaseModel):
    """Inputs for the FD / Savings / RD comparison table."""

    principal: float = Field(..., le=MAX_PRINCIPAL)
    durationMonths: int = Field(..., le=MAX_REQUEST_MONTHS)
    fdRate: float = Field(..., le=MAX_RATE_PERCENT, description="Annual FD rate as a percentage.")


class GrowthPoint(BaseModel):
    """Value of the deposit at the end of a month."""

    month: int = Field(..., ge=0)
    value: float


class FinancialCalculation(BaseModel):
    maturityValue: float
    totalInterest: float
    growthData: List[GrowthPoint]


class ComparisonData(BaseModel):
    """One row of the comparison table."""

    type: Literal["FD", "Savings", "RD"]
    label: str
    maturityValue: float
    interestRate: float
