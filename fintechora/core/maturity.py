"""Maturity and comparison calculations for fixed deposits.

Conventions:
  - Interest compounds monthly at annual_rate_percent / 100 / 12.
  - Month 0 is the deposit date; month n is maturity.
  - Values are carried at full precision and rounded to currency precision
    (2 dp) only where they are reported.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import List

from fintechora.schemas.calculation import ComparisonData, FinancialCalculation, GrowthPoint

# Reference annual rates (percent) used by the comparison table.
SAVINGS_RATE_PERCENT = 3.5
RD_RATE_PERCENT = 6.5

CURRENCY_PLACES = 2

# Longest term (100 years) the calculators accept; bounds the size of growthData.
MAX_DURATION_MONTHS = 1200


class InvalidInput(ValueError):
    """Raised when a calculation receives values outside its domain."""


def _monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100.0 / 12.0


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _validate(principal: float, annual_rate_percent: float, duration_months: int) -> None:
    errors: List[str] = []
    if not _is_number(principal):
        errors.append("principal must be a finite number")
    elif principal <= 0:
        errors.append("principal must be greater than 0")

    if not _is_number(annual_rate_percent):
        errors.append("interest rate must be a finite number")
    elif annual_rate_percent < 0:
        errors.append("interest rate must not be negative")

    if isinstance(duration_months, bool) or not isinstance(duration_months, int):
        errors.append("duration must be a whole number of months")
    elif duration_months < 0:
        errors.append("duration must not be negative")
    elif duration_months > MAX_DURATION_MONTHS:
        errors.append(f"duration must not exceed {MAX_DURATION_MONTHS} months")

    if errors:
        raise InvalidInput("; ".join(errors))


def _compound(amount: float, growth: float, months: int) -> float:
    """amount * growth ** months, rejecting results too large to represent."""
    try:
        value = amount * growth ** months
    except OverflowError as exc:
        raise InvalidInput("inputs produce a value too large to represent") from exc
    if not math.isfinite(value):
        raise InvalidInput("inputs produce a value too large to represent")
    return value


def compute_maturity(
    principal: float,
    annual_rate_percent: float,
    duration_months: int,
) -> FinancialCalculation:
    """Compound `principal` monthly for `duration_months` months.

    Returns the maturity value, the interest earned and one growth point per
    month from 0 to `duration_months` inclusive.

    totalInterest is the exact float difference maturityValue - principal and
    is not rounded again, so it can carry float noise (6167.779999999999 for
    100000 at 6% over 12 months); format it to 2 dp for display.
    """
    _validate(principal, annual_rate_percent, duration_months)

    growth = 1.0 + _monthly_rate(annual_rate_percent)
    # the curve is non-decreasing, so checking the last month covers every point
    _compound(principal, growth, duration_months)
    growth_data = [
        GrowthPoint(month=month, value=round(principal * growth ** month, CURRENCY_PLACES))
        for month in range(duration_months + 1)
    ]

    maturity_value = growth_data[-1].value
    return FinancialCalculation(
        maturityValue=maturity_value,
        totalInterest=maturity_value - principal,
        growthData=growth_data,
    )


def recurring_deposit_value(
    total_deposit: float,
    annual_rate_percent: float,
    duration_months: int,
) -> float:
    """Maturity of an RD that spreads `total_deposit` over equal monthly instalments.

    Instalment k (k = 0..n-1) is paid at the start of month k and compounds
    for n - k months. With no months to spread over the deposit is returned
    unchanged.
    """
    _validate(total_deposit, annual_rate_percent, duration_months)
    if duration_months == 0:
        return round(total_deposit, CURRENCY_PLACES)

    instalment = total_deposit / duration_months
    growth = 1.0 + _monthly_rate(annual_rate_percent)
    total = sum(_compound(instalment, growth, duration_months - k) for k in range(duration_months))
    if not math.isfinite(total):
        raise InvalidInput("inputs produce a value too large to represent")
    return round(total, CURRENCY_PLACES)


def compute_comparisons(
    principal: float,
    duration_months: int,
    fd_rate: float,
    *,
    savings_rate: float = SAVINGS_RATE_PERCENT,
    rd_rate: float = RD_RATE_PERCENT,
) -> List[ComparisonData]:
    """Return the [FD, Savings, RD] comparison rows for the same money and term."""
    _validate(principal, fd_rate, duration_months)
    _validate(principal, savings_rate, duration_months)
    _validate(principal, rd_rate, duration_months)

    fd = compute_maturity(principal, fd_rate, duration_months)
    savings = compute_maturity(principal, savings_rate, duration_months)
    rd_value = recurring_deposit_value(principal, rd_rate, duration_months)

    return [
        ComparisonData(
            type="FD",
            label="Fixed Deposit",
            maturityValue=fd.maturityValue,
            interestRate=fd_rate,
        ),
        ComparisonData(
            type="Savings",
            label="Savings Account",
            maturityValue=savings.maturityValue,
            interestRate=savings_rate,
        ),
        ComparisonData(
            type="RD",
            label="Recurring Deposit",
            maturityValue=rd_value,
            interestRate=rd_rate,
        ),
    ]


__all__ = [
    "CURRENCY_PLACES",
    "InvalidInput",
    "MAX_DURATION_MONTHS",
    "RD_RATE_PERCENT",
    "SAVINGS_RATE_PERCENT",
    "compute_comparisons",
    "compute_maturity",
    "recurring_deposit_value",
]
