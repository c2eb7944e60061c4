"""
Registration use case - Account creation pipeline.

Validation runs in a fixed order and stops at the first failure:

    shape -> confirmation -> email format -> uniqueness -> hash -> persist

Every rule violation raises RegistrationError with a fixed message and
status code 400. Uniqueness is checked before hashing so duplicates cost
no bcrypt work; the repository's write-time conflict remains the
authoritative signal when two registrations race past the check.
"""

import logging
from dataclasses import dataclass

from .exceptions import RegistrationError
from .ports import (
    Account,
    EmailValidator,
    NewAccount,
    PasswordHasher,
    RegistrationInput,
    UserRepository,
)

logger = logging.getLogger(__name__)

INVALID_DATA = "Invalid Data"
PASSWORD_MISMATCH = "Password and password confirmation must be equal"
INVALID_EMAIL = "Email is not valid"
USER_ALREADY_EXISTS = "User already exists"


@dataclass
class RegisterUserUseCase:
    """
    Registers a new user account.

    Stateless between calls; safe to share across concurrent callers as
    long as the injected repository is.
    """

    email_validator: EmailValidator
    password_hasher: PasswordHasher
    repository: UserRepository

    def execute(self, data: RegistrationInput) -> Account:
        """
        Validate the input, hash the password and persist the account.

        Args:
            data: Raw registration input

        Returns:
            The persisted Account, carrying the hashed password

        Raises:
            RegistrationError: INVALID_INPUT or CONFLICT on rule violations;
                repository errors propagate unchanged
        """
        try:
            self._validate(data)
        except RegistrationError as exc:
            logger.info("Registration rejected: %s", exc.kind.value)
            raise

        hashed = self.password_hasher.hash(data.password)
        account = self.repository.add(
            NewAccount(
                name=data.name,
                last_name=data.last_name,
                email=data.email,
                password=hashed,
            )
        )

        logger.info("Registered account %s", account.id)
        return account

    def _validate(self, data: RegistrationInput) -> None:
        required = (
            data.name,
            data.last_name,
            data.email,
            data.password,
            data.password_confirmation,
        )
        if not all(required):
            raise RegistrationError.invalid_input(INVALID_DATA)

        if data.password != data.password_confirmation:
            raise RegistrationError.invalid_input(PASSWORD_MISMATCH)

        if not self.email_validator.is_valid_email(data.email):
            raise RegistrationError.invalid_input(INVALID_EMAIL)

        if self.repository.find_by_email(data.email) is not None:
            raise RegistrationError.conflict(USER_ALREADY_EXISTS)
