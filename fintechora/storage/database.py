import sqlite3
from datetime import date, datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from fintechora.core.logging import get_logger

logger = get_logger(__name__)


class DuplicateRecord(Exception):
    """Raised when a unique column (e.g. a user's email) already exists."""


class Store:
    """CRUD access to users and fixed deposits in a sqlite file.

    Every call opens and closes its own connection, so one Store can be shared
    by all requests of an app.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("pragma foreign_keys = on")
        return conn

    def init_db(self) -> None:
        conn = self._connect()
        try:
            conn.executescript(
                """
                create table if not exists users (
                    id integer primary key autoincrement,
                    name text not null,
                    email text not null unique,
                    password_hash text not null,
                    created_at text not null
                );

                create table if not exists deposits (
                    id integer primary key autoincrement,
                    user_id integer not null references users(id) on delete cascade,
                    bank_name text not null,
                    principal real not null,
                    interest_rate real not null,
                    duration_months integer not null,
                    start_date text not null,
                    created_at text not null
                );

                create index if not exists deposits_user_idx on deposits (user_id);
                """
            )
            conn.commit()
        finally:
            conn.close()

    # -----------------------------
    # Users
    # -----------------------------

    def create_user(self, name: str, email: str, password_hash: str) -> sqlite3.Row:
        conn = self._connect()
        try:
            try:
                cursor = conn.execute(
                    """
                    insert into users (name, email, password_hash, created_at)
                    values (?, ?, ?, ?)
                    """,
                    (name, email, password_hash, datetime.now(timezone.utc).isoformat(timespec="seconds")),
                )
            except sqlite3.IntegrityError as exc:
                raise DuplicateRecord(f"user with email {email} already exists") from exc
            conn.commit()
            user_id = cursor.lastrowid
        finally:
            conn.close()
        logger.info("Created user id=%s", user_id)
        return self.get_user(user_id)

    def get_user(self, user_id: int) -> Optional[sqlite3.Row]:
        conn = self._connect()
        try:
            return conn.execute("select * from users where id = ?", (user_id,)).fetchone()
        finally:
            conn.close()

    def get_user_by_email(self, email: str) -> Optional[sqlite3.Row]:
        conn = self._connect()
        try:
            return conn.execute("select * from users where email = ?", (email,)).fetchone()
        finally:
            conn.close()

    # -----------------------------
    # Deposits (always scoped by owner)
    # -----------------------------

    def create_deposit(
        self,
        user_id: int,
        bank_name: str,
        principal: float,
        interest_rate: float,
        duration_months: int,
        start_date: date,
    ) -> sqlite3.Row:
        conn = self._connect()
        try:
            cursor = conn.execute(
                """
                insert into deposits
                    (user_id, bank_name, principal, interest_rate, duration_months, start_date, created_at)
                values (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    user_id,
                    bank_name,
                    principal,
                    interest_rate,
                    duration_months,
                    start_date.isoformat(),
                    datetime.now(timezone.utc).isoformat(timespec="seconds"),
                ),
            )
            conn.commit()
            deposit_id = cursor.lastrowid
        finally:
            conn.close()
        logger.info("Created deposit id=%s for user id=%s", deposit_id, user_id)
        return self.get_deposit(user_id, deposit_id)

    def list_deposits(self, user_id: int) -> List[sqlite3.Row]:
        conn = self._connect()
        try:
            return conn.execute(
                """
                select * from deposits
                where user_id = ?
                order by start_date desc, id desc
                """,
                (user_id,),
            ).fetchall()
        finally:
            conn.close()

    def get_deposit(self, user_id: int, deposit_id: int) -> Optional[sqlite3.Row]:
        conn = self._connect()
        try:
            return conn.execute(
                "select * from deposits where id = ? and user_id = ?",
                (deposit_id, user_id),
            ).fetchone()
        finally:
            conn.close()

    def update_deposit(
        self,
        user_id: int,
        deposit_id: int,
        bank_name: str,
        principal: float,
        interest_rate: float,
        duration_months: int,
        start_date: date,
    ) -> Optional[sqlite3.Row]:
        conn = self._connect()
        try:
            cursor = conn.execute(
                """
                update deposits
                set bank_name = ?, principal = ?, interest_rate = ?, duration_months = ?, start_date = ?
                where id = ? and user_id = ?
                """,
                (
                    bank_name,
                    principal,
                    interest_rate,
                    duration_months,
                    start_date.isoformat(),
                    deposit_id,
                    user_id,
                ),
            )
            conn.commit()
            updated = cursor.rowcount
        finally:
            conn.close()
        if not updated:
            return None
        logger.info("Updated deposit id=%s for user id=%s", deposit_id, user_id)
        return self.get_deposit(user_id, deposit_id)

    def delete_deposit(self, user_id: int, deposit_id: int) -> bool:
        conn = self._connect()
        try:
            cursor = conn.execute(
                "delete from deposits where id = ? and user_id = ?",
                (deposit_id, user_id),
            )
            conn.commit()
            deleted = cursor.rowcount > 0
        finally:
            conn.close()
        if deleted:
            logger.info("Deleted deposit id=%s for user id=%s", deposit_id, user_id)
        return deleted
