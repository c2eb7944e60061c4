"""
Email validator adapter - Implements EmailValidator protocol.

Backed by the email-validator library, the same parser pydantic's
EmailStr uses. Only syntax is checked; no DNS lookups are made.
"""

from email_validator import EmailNotValidError, validate_email


class LibraryEmailValidator:
    """
    Implements EmailValidator protocol via email-validator.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def is_valid_email(self, candidate: str) -> bool:
        if not isinstance(candidate, str) or not candidate:
            return False
        try:
            validate_email(candidate, check_deliverability=False)
        except EmailNotValidError:
            return False
        return True
