"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the registration use case and its adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.hashing import BcryptPasswordHasher
from src.adapters.repository.postgres import PostgresUserRepository
from src.adapters.validation import LibraryEmailValidator
from src.config.settings import get_settings
from src.domain.ports import UserRepository
from src.domain.registration import RegisterUserUseCase

# Module-level singleton - the validator is stateless
_email_validator = LibraryEmailValidator()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> UserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool)


def get_email_validator() -> LibraryEmailValidator:
    """Get email validator (singleton)."""
    return _email_validator


def get_password_hasher() -> BcryptPasswordHasher:
    """Create bcrypt hasher with the configured cost factor."""
    return BcryptPasswordHasher(rounds=get_settings().bcrypt_cost)


def get_register_user_use_case(request: Request) -> RegisterUserUseCase:
    """
    Create the registration use case with injected dependencies.

    Wires together the email validator, password hasher and repository.
    """
    return RegisterUserUseCase(
        email_validator=get_email_validator(),
        password_hasher=get_password_hasher(),
        repository=get_repository(request),
    )
