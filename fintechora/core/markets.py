"""Static market reference data for the Markets view.

The figures are an indicative snapshot, not a live feed.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from fintechora.core.maturity import RD_RATE_PERCENT, SAVINGS_RATE_PERCENT


class IndexQuote(BaseModel):
    name: str
    value: float
    changePercent: float


class BankRate(BaseModel):
    bankName: str
    tenureMonths: int
    ratePercent: float


class ReferenceRates(BaseModel):
    savings: float
    recurringDeposit: float


class MarketSnapshot(BaseModel):
    indices: List[IndexQuote]
    fdRates: List[BankRate]
    referenceRates: ReferenceRates


INDICES = (
    ("NIFTY 50", 24834.85, 0.42),
    ("SENSEX", 81224.75, 0.37),
    ("NIFTY BANK", 51530.50, -0.18),
    ("GOLD (10g)", 76150.00, 0.65),
)

FD_RATES = (
    ("State Bank of India", 12, 6.80),
    ("HDFC Bank", 12, 6.60),
    ("ICICI Bank", 12, 6.70),
    ("Axis Bank", 12, 6.70),
    ("State Bank of India", 36, 6.75),
    ("HDFC Bank", 36, 7.00),
)


def market_snapshot(
    savings_rate: float = SAVINGS_RATE_PERCENT,
    rd_rate: float = RD_RATE_PERCENT,
) -> MarketSnapshot:
    return MarketSnapshot(
        indices=[IndexQuote(name=n, value=v, changePercent=c) for n, v, c in INDICES],
        fdRates=[BankRate(bankName=b, tenureMonths=t, ratePercent=r) for b, t, r in FD_RATES],
        referenceRates=ReferenceRates(savings=savings_rate, recurringDeposit=rd_rate),
    )
