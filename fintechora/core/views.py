"""Payloads for the three top-level screens of the app."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Dict, List

from fintechora.config import AppConfig
from fintechora.core.auth import Session, current_user
from fintechora.core.dashboard import summarize_portfolio
from fintechora.core.markets import market_snapshot
from fintechora.domain.deposits import FixedDeposit, build_deposit
from fintechora.storage.database import Store

RECENT_DEPOSITS = 5


class ViewType(str, Enum):
    DASHBOARD = "dashboard"
    INVESTMENTS = "investments"
    MARKETS = "markets"


def user_deposits(store: Store, session: Session, today: date) -> List[FixedDeposit]:
    return [build_deposit(row, today) for row in store.list_deposits(session.user_id)]


def select_view(
    view: ViewType,
    session: Session,
    store: Store,
    today: date,
    config: AppConfig,
) -> Dict[str, Any]:
    """Build the JSON-ready payload for `view`."""
    if view == ViewType.MARKETS:
        snapshot = market_snapshot(config.savings_rate, config.rd_rate)
        return {"view": view.value, "markets": snapshot.model_dump(mode="json")}

    deposits = user_deposits(store, session, today)
    if view == ViewType.INVESTMENTS:
        return {
            "view": view.value,
            "deposits": [d.model_dump(mode="json") for d in deposits],
        }

    # DASHBOARD
    user = current_user(store, session)
    summary = summarize_portfolio(deposits)
    return {
        "view": view.value,
        "user": user.model_dump(mode="json"),
        "summary": summary.model_dump(mode="json"),
        "recentDeposits": [d.model_dump(mode="json") for d in deposits[:RECENT_DEPOSITS]],
    }
