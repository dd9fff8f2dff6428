"""HTTP routes for the Flask API."""

from datetime import date
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request, session
from pydantic import ValidationError
from werkzeug.exceptions import NotFound

from fintechora.config import AppConfig
from fintechora.core.auth import AuthError, Session, authenticate, current_user, register
from fintechora.core.markets import market_snapshot
from fintechora.core.maturity import InvalidInput, compute_comparisons, compute_maturity
from fintechora.core.ping import SERVICE_NAME, get_ping_message
from fintechora.core.views import ViewType, select_view, user_deposits
from fintechora.domain.deposits import DepositCreate, build_deposit
from fintechora.schemas.calculation import ComparisonRequest, MaturityRequest
from fintechora.schemas.ping import PingResponse
from fintechora.schemas.user import LoginRequest, RegisterRequest
from fintechora.storage.database import DuplicateRecord, Store

api_bp = Blueprint("api", __name__)

SESSION_USER_KEY = "user_id"


def _store() -> Store:
    return current_app.extensions["fintechora.store"]


def _config() -> AppConfig:
    return current_app.config["FINTECHORA"]


def _today() -> date:
    return date.today()


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _require_session() -> Session:
    """Resolve the signed-in user from the session cookie."""
    user_id = session.get(SESSION_USER_KEY)
    if user_id is None:
        raise AuthError("authentication required")
    return Session(user_id=user_id)


def _deposit_or_404(user_session: Session, deposit_id: int):
    row = _store().get_deposit(user_session.user_id, deposit_id)
    if row is None:
        raise NotFound(f"deposit {deposit_id} not found")
    return row


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    # ctx may hold the raised exception object, which is not JSON serialisable
    errors = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": errors}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(InvalidInput)
def _handle_invalid_input(exc: InvalidInput):
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(AuthError)
def _handle_auth_error(exc: AuthError):
    return jsonify({"detail": str(exc)}), HTTPStatus.UNAUTHORIZED


@api_bp.errorhandler(DuplicateRecord)
def _handle_duplicate(exc: DuplicateRecord):
    return jsonify({"detail": str(exc)}), HTTPStatus.CONFLICT


@api_bp.errorhandler(NotFound)
def _handle_not_found(exc: NotFound):
    return jsonify({"detail": exc.description}), HTTPStatus.NOT_FOUND


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message(), service=SERVICE_NAME)
    return jsonify(response.model_dump())


# -----------------------------
# Auth
# -----------------------------


@api_bp.post("/auth/register")
def register_user() -> Any:
    payload = RegisterRequest.model_validate(_payload())
    user = register(_store(), payload.name, payload.email, payload.password)
    session.clear()
    session[SESSION_USER_KEY] = user.id
    return jsonify(user.model_dump(mode="json")), HTTPStatus.CREATED


@api_bp.post("/auth/login")
def login() -> Any:
    payload = LoginRequest.model_validate(_payload())
    user = authenticate(_store(), payload.email, payload.password)
    session.clear()
    session[SESSION_USER_KEY] = user.id
    return jsonify(user.model_dump(mode="json"))


@api_bp.post("/auth/logout")
def logout() -> Any:
    session.clear()
    return "", HTTPStatus.NO_CONTENT


@api_bp.get("/auth/me")
def me() -> Any:
    user = current_user(_store(), _require_session())
    return jsonify(user.model_dump(mode="json"))


# -----------------------------
# Deposits
# -----------------------------


@api_bp.get("/deposits")
def list_deposits() -> Any:
    deposits = user_deposits(_store(), _require_session(), _today())
    return jsonify([d.model_dump(mode="json") for d in deposits])


@api_bp.post("/deposits")
def create_deposit() -> Any:
    user_session = _require_session()
    payload = DepositCreate.model_validate(_payload())
    row = _store().create_deposit(
        user_session.user_id,
        payload.bankName,
        payload.principal,
        payload.interestRate,
        payload.durationMonths,
        payload.startDate,
    )
    return jsonify(build_deposit(row, _today()).model_dump(mode="json")), HTTPStatus.CREATED


@api_bp.get("/deposits/<int:deposit_id>")
def get_deposit(deposit_id: int) -> Any:
    row = _deposit_or_404(_require_session(), deposit_id)
    return jsonify(build_deposit(row, _today()).model_dump(mode="json"))


@api_bp.put("/deposits/<int:deposit_id>")
def update_deposit(deposit_id: int) -> Any:
    user_session = _require_session()
    payload = DepositCreate.model_validate(_payload())
    row = _store().update_deposit(
        user_session.user_id,
        deposit_id,
        payload.bankName,
        payload.principal,
        payload.interestRate,
        payload.durationMonths,
        payload.startDate,
    )
    if row is None:
        raise NotFound(f"deposit {deposit_id} not found")
    return jsonify(build_deposit(row, _today()).model_dump(mode="json"))


@api_bp.delete("/deposits/<int:deposit_id>")
def delete_deposit(deposit_id: int) -> Any:
    user_session = _require_session()
    if not _store().delete_deposit(user_session.user_id, deposit_id):
        raise NotFound(f"deposit {deposit_id} not found")
    return "", HTTPStatus.NO_CONTENT


@api_bp.get("/deposits/<int:deposit_id>/calculation")
def deposit_calculation(deposit_id: int) -> Any:
    """Maturity curve and comparison table for one stored deposit."""
    row = _deposit_or_404(_require_session(), deposit_id)
    deposit = build_deposit(row, _today())
    config = _config()

    calculation = compute_maturity(deposit.principal, deposit.interestRate, deposit.durationMonths)
    comparisons = compute_comparisons(
        deposit.principal,
        deposit.durationMonths,
        deposit.interestRate,
        savings_rate=config.savings_rate,
        rd_rate=config.rd_rate,
    )
    return jsonify(
        {
            "deposit": deposit.model_dump(mode="json"),
            "calculation": calculation.model_dump(),
            "comparisons": [item.model_dump() for item in comparisons],
        }
    )


# -----------------------------
# Stateless calculators
# -----------------------------


@api_bp.post("/calc/maturity")
def maturity() -> Any:
    payload = MaturityRequest.model_validate(_payload())
    result = compute_maturity(payload.principal, payload.annualRatePercent, payload.durationMonths)
    return jsonify(result.model_dump())


@api_bp.post("/calc/comparisons")
def comparisons() -> Any:
    payload = ComparisonRequest.model_validate(_payload())
    config = _config()
    rows = compute_comparisons(
        payload.principal,
        payload.durationMonths,
        payload.fdRate,
        savings_rate=config.savings_rate,
        rd_rate=config.rd_rate,
    )
    return jsonify([row.model_dump() for row in rows])


# -----------------------------
# Markets and views
# -----------------------------


@api_bp.get("/markets")
def markets() -> Any:
    config = _config()
    return jsonify(market_snapshot(config.savings_rate, config.rd_rate).model_dump())


@api_bp.get("/views/<name>")
def view(name: str) -> Any:
    try:
        view_type = ViewType(name)
    except ValueError as exc:
        raise NotFound(f"unknown view {name!r}") from exc
    payload = select_view(view_type, _require_session(), _store(), _today(), _config())
    return jsonify(payload)
