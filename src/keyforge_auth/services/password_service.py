"""Password hashing service using bcrypt.

The work factor is fixed at construction so that hashing and verification
always run with the same policy.
"""

import logging

import bcrypt

from keyforge_auth.exceptions import PasswordTooLongError

logger = logging.getLogger(__name__)


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt with a configurable work factor.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> hashed = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hashed)
    True
    >>> service.verify("wrong_password", hashed)
    False
    """

    DEFAULT_ROUNDS = 12
    MIN_ROUNDS = 4
    MAX_ROUNDS = 31
    # bcrypt input limit, counted in UTF-8 bytes
    MAX_PASSWORD_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests should use the minimum of 4.
        """
        if not self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS:
            msg = (
                f"bcrypt rounds must be between {self.MIN_ROUNDS} "
                f"and {self.MAX_ROUNDS}, got {rounds}"
            )
            raise ValueError(msg)
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> bytes:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as bytes

        Raises
        ------
        PasswordTooLongError
            If the UTF-8 encoded password exceeds 72 bytes
        """
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(self.MAX_PASSWORD_BYTES)
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(encoded, salt)

    def verify(self, password: str, password_hash: bytes) -> bool:
        """Verify a password against a hash.

        Never raises. A malformed hash is logged and treated as a mismatch.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        if not self.is_well_formed(password_hash):
            logger.warning("Refusing to verify against a malformed password hash")
            return False
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_PASSWORD_BYTES:
            # hash() never accepts such a password, so it cannot match
            logger.debug("Candidate password exceeds %d bytes", self.MAX_PASSWORD_BYTES)
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash)
        except (ValueError, TypeError):
            logger.warning("Refusing to verify against a malformed password hash")
            return False

    @staticmethod
    def is_well_formed(password_hash: bytes) -> bool:
        """Check whether ``password_hash`` looks like a bcrypt hash.

        bcrypt format: ``$2b$<cost>$<22 char salt><31 char digest>``.
        """
        if not isinstance(password_hash, bytes) or len(password_hash) != 60:
            return False
        parts = password_hash.split(b"$")
        if len(parts) != 4 or parts[0] != b"":
            return False
        return parts[1] in (b"2a", b"2b", b"2y") and parts[2].isdigit()
