"""Auth schemas and data structures.

These are simple data classes used for transferring user, token and
credential data between the provider and its collaborators.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

# The only token kind the password-reset flow will consume
RESET_TOKEN_KIND = "reset"


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes
    ----------
    email
        Unique, case-sensitive identifier of the user
    password_hash
        Opaque bcrypt hash; only ever checked through the hashing service
    claims
        Arbitrary JSON-serializable data embedded into issued credentials
    """

    email: str
    password_hash: bytes
    claims: dict[str, Any] = field(default_factory=dict)

    def with_password_hash(self, password_hash: bytes) -> "User":
        """Return a copy of this user carrying a replaced password hash."""
        return replace(self, password_hash=password_hash)

    def __repr__(self) -> str:
        return f"User(email={self.email!r})"


@dataclass(frozen=True)
class ResetToken:
    """A token proving the holder received a message for ``owner``.

    ``id`` is assigned by the repository and is ``None`` until persisted.
    """

    value: str
    owner: str
    created_at: datetime
    kind: str = RESET_TOKEN_KIND
    id: int | None = None

    def is_reset_token(self) -> bool:
        """Check if this token may authorize a password reset."""
        return self.kind == RESET_TOKEN_KIND

    def __repr__(self) -> str:
        # value is a secret and stays out of reprs and logs
        return f"ResetToken(id={self.id}, kind={self.kind!r}, owner={self.owner!r})"


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT payload.

    Attributes
    ----------
    email
        The email the credential was issued for
    exp
        Token expiration timestamp
    claims
        The user claims embedded into the token, registered claims removed
    """

    email: str
    exp: datetime
    claims: dict[str, Any]

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
