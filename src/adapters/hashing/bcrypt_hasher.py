"""
bcrypt password hasher - Implements PasswordHasher protocol.

Hashes are salted per call, so hashing the same password twice yields
different strings; use verify() to compare.
"""

import bcrypt

MIN_ROUNDS = 10


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = MIN_ROUNDS) -> None:
        """
        Initialize hasher with a bcrypt cost factor.

        Args:
            rounds: bcrypt work factor, at least 10
        """
        if rounds < MIN_ROUNDS:
            raise ValueError(f"bcrypt cost factor must be >= {MIN_ROUNDS}, got {rounds}")
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, plaintext: str) -> str:
        """Hash password using bcrypt with the configured cost factor."""
        return bcrypt.hashpw(plaintext.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Constant-time check of a plaintext password against a stored hash."""
        return bcrypt.checkpw(plaintext.encode(), hashed.encode())
