"""Portfolio totals shown on the dashboard."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from fintechora.core.maturity import CURRENCY_PLACES, compute_maturity
from fintechora.domain.deposits import DepositStatus, FixedDeposit


class PortfolioSummary(BaseModel):
    depositCount: int
    activeCount: int
    maturedCount: int
    totalPrincipal: float
    totalMaturityValue: float
    totalInterest: float
    # principal-weighted, 0 for an empty portfolio
    averageRate: float
    nextMaturity: Optional[FixedDeposit] = None


def summarize_portfolio(deposits: List[FixedDeposit]) -> PortfolioSummary:
    """Aggregate projected maturity figures over a user's deposits.

    Status on each deposit is already derived for the caller's "today", so the
    summary is consistent with whatever list the caller displays.
    """
    total_principal = 0.0
    total_maturity = 0.0
    weighted_rate = 0.0
    active = [d for d in deposits if d.status == DepositStatus.ACTIVE]

    for deposit in deposits:
        calc = compute_maturity(deposit.principal, deposit.interestRate, deposit.durationMonths)
        total_principal += deposit.principal
        total_maturity += calc.maturityValue
        weighted_rate += deposit.principal * deposit.interestRate

    next_maturity = min(active, key=lambda d: (d.maturityDate, d.id)) if active else None

    return PortfolioSummary(
        depositCount=len(deposits),
        activeCount=len(active),
        maturedCount=len(deposits) - len(active),
        totalPrincipal=round(total_principal, CURRENCY_PLACES),
        totalMaturityValue=round(total_maturity, CURRENCY_PLACES),
        totalInterest=round(total_maturity - total_principal, CURRENCY_PLACES),
        averageRate=round(weighted_rate / total_principal, 4) if total_principal else 0.0,
        nextMaturity=next_maturity,
    )
