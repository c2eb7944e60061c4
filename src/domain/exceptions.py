"""
Domain exceptions - Tagged error type for registration failures.

A single exception carries the failure kind, a fixed message and a
stable HTTP-style status code. Callers branch on ``kind`` rather than
on subclasses; adapters translate ``status_code`` to transport responses.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """
    Failure kinds raised by the registration core and its repositories.

    - INVALID_INPUT: missing/mismatched fields or malformed email
    - CONFLICT: email already registered
    - NOT_FOUND: lookup by id found nothing
    - PERSISTENCE: store unreachable or rejected the write
    """

    INVALID_INPUT = "invalid_input"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


_STATUS_CODES = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.PERSISTENCE: 503,
}


class RegistrationError(Exception):
    """Registration failure tagged with its kind and status code."""

    def __init__(self, kind: ErrorKind, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = _STATUS_CODES[kind] if status_code is None else status_code

    def __repr__(self) -> str:
        return (
            f"RegistrationError(kind={self.kind.value!r}, "
            f"message={self.message!r}, status_code={self.status_code})"
        )

    @classmethod
    def invalid_input(cls, message: str) -> "RegistrationError":
        return cls(ErrorKind.INVALID_INPUT, message)

    @classmethod
    def conflict(cls, message: str) -> "RegistrationError":
        return cls(ErrorKind.CONFLICT, message)

    @classmethod
    def not_found(cls, message: str) -> "RegistrationError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def persistence(cls, message: str) -> "RegistrationError":
        return cls(ErrorKind.PERSISTENCE, message)
