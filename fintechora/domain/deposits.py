from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Mapping

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, ConfigDict, Field, field_validator


class DepositStatus(str, Enum):
    ACTIVE = "ACTIVE"
    MATURED = "MATURED"


def add_months(start: date, months: int) -> date:
    """Calendar month arithmetic; the day is clamped to the end of short months."""
    return start + relativedelta(months=months)


def deposit_status(maturity_date: date, today: date) -> DepositStatus:
    if today < maturity_date:
        return DepositStatus.ACTIVE
    return DepositStatus.MATURED


class DepositCreate(BaseModel):
    """Payload accepted when a user creates or edits a deposit."""

    model_config = ConfigDict(extra="forbid")

    bankName: str = Field(min_length=1, max_length=120)
    principal: float = Field(gt=0)
    interestRate: float = Field(ge=0, le=100)
    durationMonths: int = Field(ge=1, le=600)
    startDate: date

    @field_validator("bankName")
    @classmethod
    def strip_bank_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("bankName must not be blank")
        return value


class FixedDeposit(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    userId: int
    bankName: str
    principal: float
    interestRate: float
    durationMonths: int
    startDate: date
    maturityDate: date
    status: DepositStatus
    daysToMaturity: int
    monthsElapsed: int


def months_elapsed(start: date, today: date, duration_months: int) -> int:
    """Whole months since `start`, clamped to 0..duration_months."""
    if today <= start:
        return 0
    delta = relativedelta(today, start)
    return min(delta.years * 12 + delta.months, duration_months)


def build_deposit(row: Mapping[str, Any], today: date) -> FixedDeposit:
    """Turn a stored deposit row into the view model, deriving dates and status for `today`."""
    start = row["start_date"]
    if isinstance(start, str):
        start = date.fromisoformat(start)
    maturity = add_months(start, row["duration_months"])

    return FixedDeposit(
        id=row["id"],
        userId=row["user_id"],
        bankName=row["bank_name"],
        principal=row["principal"],
        interestRate=row["interest_rate"],
        durationMonths=row["duration_months"],
        startDate=start,
        maturityDate=maturity,
        status=deposit_status(maturity, today),
        daysToMaturity=max((maturity - today).days, 0),
        monthsElapsed=months_elapsed(start, today, row["duration_months"]),
    )
