"""
In-memory repository adapter - Implements UserRepository protocol.

Reference implementation used by tests and local runs without a
database. Email uniqueness is enforced inside add() under a lock, so
concurrent registrations of one address yield exactly one account.
"""

import logging
import threading
import uuid

from src.domain.exceptions import RegistrationError
from src.domain.ports import Account, NewAccount

logger = logging.getLogger(__name__)


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with process-local dicts.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Account] = {}
        self._id_by_email: dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._by_id)

    def add(self, candidate: NewAccount) -> Account:
        """
        Store a new account under a freshly generated UUID.

        Raises:
            RegistrationError: CONFLICT if the email is already stored
        """
        with self._lock:
            if candidate.email in self._id_by_email:
                logger.info("Rejected duplicate write for existing email")
                raise RegistrationError.conflict("User already exists")

            account = Account(
                id=str(uuid.uuid4()),
                name=candidate.name,
                last_name=candidate.last_name,
                email=candidate.email,
                password=candidate.password,
            )
            self._by_id[account.id] = account
            self._id_by_email[account.email] = account.id
            return account

    def find_by_id(self, account_id: str) -> Account:
        account = self._by_id.get(account_id)
        if account is None:
            raise RegistrationError.not_found("User not found")
        return account

    def find_by_email(self, email: str) -> Account | None:
        account_id = self._id_by_email.get(email)
        if account_id is None:
            return None
        return self._by_id[account_id]
