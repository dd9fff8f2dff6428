"""Registration, credential checks and the explicit request session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from werkzeug.security import check_password_hash, generate_password_hash

from fintechora.core.logging import get_logger
from fintechora.schemas.user import User
from fintechora.storage.database import DuplicateRecord, Store

logger = get_logger(__name__)

INVALID_CREDENTIALS = "invalid email or password"


class AuthError(Exception):
    """Raised when credentials are rejected or no user is signed in."""


@dataclass(frozen=True)
class Session:
    """The signed-in user for one request, passed explicitly to whatever needs it."""

    user_id: int


def normalize_email(email: str) -> str:
    return email.strip().lower()


def to_user(row: Mapping[str, Any]) -> User:
    return User(id=row["id"], name=row["name"], email=row["email"], createdAt=row["created_at"])


def register(store: Store, name: str, email: str, password: str) -> User:
    name = name.strip()
    if not name:
        raise ValueError("name must not be blank")
    email = normalize_email(email)
    try:
        row = store.create_user(name, email, generate_password_hash(password))
    except DuplicateRecord as exc:
        logger.info("Registration rejected for existing email")
        raise DuplicateRecord("an account with this email already exists") from exc
    return to_user(row)


def authenticate(store: Store, email: str, password: str) -> User:
    row = store.get_user_by_email(normalize_email(email))
    if row is None or not check_password_hash(row["password_hash"], password):
        logger.info("Failed login attempt")
        raise AuthError(INVALID_CREDENTIALS)
    logger.info("User id=%s signed in", row["id"])
    return to_user(row)


def current_user(store: Store, session: Session) -> User:
    row = store.get_user(session.user_id)
    if row is None:
        raise AuthError("session refers to an unknown user")
    return to_user(row)
