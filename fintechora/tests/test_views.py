from __future__ import annotations

from datetime import date

from fintechora.config import AppConfig
from fintechora.core.auth import Session, register
from fintechora.core.views import ViewType, select_view
from fintechora.storage.database import Store

TODAY = date(2026, 10, 19)


def signed_in(store: Store) -> Session:
    user = register(store, "Kiran", "kiran@example.com", "long-password")
    store.create_deposit(user.id, "SBI", 100000.0, 6.0, 12, date(2026, 1, 1))
    store.create_deposit(user.id, "HDFC", 20000.0, 7.0, 6, date(2025, 1, 1))
    return Session(user_id=user.id)


def test_dashboard_view_has_user_and_summary(store: Store):
    payload = select_view(ViewType.DASHBOARD, signed_in(store), store, TODAY, AppConfig())

    assert payload["view"] == "dashboard"
    assert payload["user"]["email"] == "kiran@example.com"
    assert payload["summary"]["depositCount"] == 2
    assert payload["summary"]["activeCount"] == 1
    assert [d["bankName"] for d in payload["recentDeposits"]] == ["SBI", "HDFC"]


def test_investments_view_lists_deposits_with_status(store: Store):
    payload = select_view(ViewType.INVESTMENTS, signed_in(store), store, TODAY, AppConfig())

    statuses = {d["bankName"]: d["status"] for d in payload["deposits"]}
    assert statuses == {"SBI": "ACTIVE", "HDFC": "MATURED"}


def test_markets_view_uses_configured_reference_rates(store: Store):
    config = AppConfig(savings_rate=3.0, rd_rate=7.25)
    payload = select_view(ViewType.MARKETS, Session(user_id=1), store, TODAY, config)

    assert payload["view"] == "markets"
    assert payload["markets"]["referenceRates"] == {"savings": 3.0, "recurringDeposit": 7.25}
    assert payload["markets"]["indices"]
