"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness
----------
The ``users`` table carries ``UNIQUE (email)``. The use case calls
find_by_email() first, but two concurrent registrations can both pass
that check; the constraint makes the second INSERT fail with
UniqueViolation, which is surfaced as the same CONFLICT error the use
case raises.

Driver failures
---------------
Connection loss, pool exhaustion and other driver errors are raised as
RegistrationError(PERSISTENCE) chained to the original exception.
"""

import logging
import uuid
from pathlib import Path
from typing import Any

import psycopg
from psycopg import errors
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool, PoolTimeout

from src.domain.exceptions import RegistrationError
from src.domain.ports import Account, NewAccount

logger = logging.getLogger(__name__)

_COLUMNS = "id::text AS id, name, last_name, email, password_hash"


def _to_account(row: dict) -> Account:
    return Account(
        id=row["id"],
        name=row["name"],
        last_name=row["last_name"],
        email=row["email"],
        password=row["password_hash"],
    )


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def add(self, candidate: NewAccount) -> Account:
        """
        Insert a new account; the database assigns the UUID id.

        Args:
            candidate: Account fields with the password already hashed

        Returns:
            The stored Account

        Raises:
            RegistrationError: CONFLICT on duplicate email,
                PERSISTENCE if the database is unreachable or rejects the write
        """
        sql = f"""
            INSERT INTO users (name, last_name, email, password_hash)
            VALUES (%s, %s, %s, %s)
            RETURNING {_COLUMNS}
        """

        try:
            with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
                cursor.execute(
                    sql,
                    (candidate.name, candidate.last_name, candidate.email, candidate.password),
                )
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation:
            logger.info("Rejected duplicate write for existing email")
            raise RegistrationError.conflict("User already exists") from None
        except (psycopg.Error, PoolTimeout) as e:
            logger.error(f"Failed to insert user: {e.__class__.__name__}")
            raise RegistrationError.persistence("Could not save user") from e

        return _to_account(row)

    def find_by_id(self, account_id: str) -> Account:
        """
        Fetch an account by id.

        Ids that are not valid UUIDs cannot exist and report NOT_FOUND.

        Raises:
            RegistrationError: NOT_FOUND if absent, PERSISTENCE on driver failure
        """
        try:
            key = uuid.UUID(account_id)
        except (TypeError, ValueError):
            raise RegistrationError.not_found("User not found") from None

        sql = f"SELECT {_COLUMNS} FROM users WHERE id = %s"
        row = self._fetch_one(sql, key)
        if row is None:
            raise RegistrationError.not_found("User not found")
        return _to_account(row)

    def find_by_email(self, email: str) -> Account | None:
        """Fetch an account by exact email; None if absent."""
        sql = f"SELECT {_COLUMNS} FROM users WHERE email = %s"
        row = self._fetch_one(sql, email)
        return _to_account(row) if row is not None else None

    def _fetch_one(self, sql: str, value: Any) -> dict | None:
        try:
            with self._pool.connection() as conn, conn.cursor(row_factory=dict_row) as cursor:
                cursor.execute(sql, (value,))
                return cursor.fetchone()
        except (psycopg.Error, PoolTimeout) as e:
            logger.error(f"Failed to query users: {e.__class__.__name__}")
            raise RegistrationError.persistence("Could not read users") from e


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
