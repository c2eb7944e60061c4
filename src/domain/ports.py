"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the data shapes exchanged with the registration
use case and the interfaces (ports) it requires from infrastructure.
Adapters implement these protocols structurally.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class RegistrationInput:
    """
    Raw registration input, as received from the caller.

    Every field may be missing (None) or empty; shape validation is
    the use case's job, not the constructor's.
    """

    name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = field(default=None, repr=False)
    password_confirmation: str | None = field(default=None, repr=False)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RegistrationInput":
        """
        Build input from a request-style mapping.

        Accepts camelCase (``lastName``, ``passwordConfirmation``) or
        snake_case keys. Unknown keys are ignored.
        """
        return cls(
            name=data.get("name"),
            last_name=data.get("lastName", data.get("last_name")),
            email=data.get("email"),
            password=data.get("password"),
            password_confirmation=data.get(
                "passwordConfirmation", data.get("password_confirmation")
            ),
        )


@dataclass(frozen=True)
class NewAccount:
    """Account candidate handed to the repository; password is already hashed."""

    name: str
    last_name: str
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class Account:
    """Persisted account record. ``password`` holds the hash only."""

    id: str
    name: str
    last_name: str
    email: str
    password: str = field(repr=False)


class EmailValidator(Protocol):
    """Port interface for email well-formedness checks."""

    def is_valid_email(self, candidate: str) -> bool:
        """
        Decide whether a string is a well-formed email address.

        Never raises; malformed input yields False.
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """
        Convert a plaintext secret into its stored hash representation.

        Args:
            plaintext: Non-empty password

        Returns:
            Hash string safe to persist
        """
        ...


class UserRepository(Protocol):
    """Port interface for account persistence."""

    def add(self, candidate: NewAccount) -> Account:
        """
        Persist a new account and assign its id.

        Raises:
            RegistrationError: CONFLICT if the store already holds the email,
                PERSISTENCE if the store is unreachable or rejects the write
        """
        ...

    def find_by_id(self, account_id: str) -> Account:
        """
        Return the account with the given id.

        Raises:
            RegistrationError: NOT_FOUND if no such account exists
        """
        ...

    def find_by_email(self, email: str) -> Account | None:
        """Return the account registered under ``email``, or None."""
        ...
