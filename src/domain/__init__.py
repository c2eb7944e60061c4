"""
Domain layer - Pure business logic with zero framework imports.

This package contains the user registration use case and the port
interfaces it depends on, so infrastructure can be swapped without
touching the registration rules.
"""

from .exceptions import ErrorKind, RegistrationError
from .ports import (
    Account,
    EmailValidator,
    NewAccount,
    PasswordHasher,
    RegistrationInput,
    UserRepository,
)
from .registration import RegisterUserUseCase

__all__ = [
    "Account",
    "EmailValidator",
    "ErrorKind",
    "NewAccount",
    "PasswordHasher",
    "RegisterUserUseCase",
    "RegistrationError",
    "RegistrationInput",
    "UserRepository",
]
