"""
Shared fixtures for adversarial tests.

Provides a registration use case over the in-memory repository, with a
barrier that lets every racer pass find_by_email before any write lands.
"""

import threading

import pytest

from src.adapters.repository.memory import InMemoryUserRepository
from src.adapters.validation import LibraryEmailValidator
from src.domain.ports import Account
from src.domain.registration import RegisterUserUseCase


class BarrierRepository(InMemoryUserRepository):
    """In-memory repository whose find_by_email waits until all racers have looked up the email."""

    def __init__(self, parties: int) -> None:
        super().__init__()
        self._barrier = threading.Barrier(parties, timeout=5)

    def find_by_email(self, email: str) -> Account | None:
        found = super().find_by_email(email)
        self._barrier.wait()
        return found


class FixedHasher:
    def hash(self, plaintext: str) -> str:
        return "hashed_pas"


@pytest.fixture
def make_racing_use_case():
    """Factory building a use case whose lookups are synchronized across ``parties`` threads."""

    def factory(parties: int) -> tuple[RegisterUserUseCase, BarrierRepository]:
        repository = BarrierRepository(parties)
        use_case = RegisterUserUseCase(
            email_validator=LibraryEmailValidator(),
            password_hasher=FixedHasher(),
            repository=repository,
        )
        return use_case, repository

    return factory
