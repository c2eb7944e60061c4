"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Port test doubles (email validator, password hasher)
- In-memory repository
- A wired RegisterUserUseCase
"""

from unittest.mock import Mock

import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.domain.registration import RegisterUserUseCase


@pytest.fixture
def email_validator() -> Mock:
    """Email validator stub accepting every address."""
    validator = Mock()
    validator.is_valid_email.return_value = True
    return validator


@pytest.fixture
def password_hasher() -> Mock:
    """Password hasher stub returning a fixed hash."""
    hasher = Mock()
    hasher.hash.return_value = "hashed_pas"
    return hasher


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Fresh in-memory repository per test."""
    return InMemoryUserRepository()


@pytest.fixture
def use_case(
    email_validator: Mock, password_hasher: Mock, repository: InMemoryUserRepository
) -> RegisterUserUseCase:
    """Registration use case wired with stubs and the in-memory repository."""
    return RegisterUserUseCase(
        email_validator=email_validator,
        password_hasher=password_hasher,
        repository=repository,
    )
