"""In-memory collaborators for credential provider tests.

These keep state in plain dicts/lists so a test can inspect exactly what
the provider stored, sent or deleted.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from keyforge_auth import (
    CredentialSigner,
    EmailAlreadyExistsError,
    PasswordResetNotifier,
    ResetToken,
    ResetTokenRepository,
    User,
    UserNotFoundError,
    UserRepository,
)


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: list[User] | None = None):
        self.users: dict[str, User] = {u.email: u for u in users or []}

    async def find_by_email(self, email: str) -> User | None:
        return self.users.get(email)

    async def add(self, user: User) -> None:
        if user.email in self.users:
            raise EmailAlreadyExistsError(user.email)
        self.users[user.email] = user

    async def update(self, user: User) -> None:
        if user.email not in self.users:
            raise UserNotFoundError(user.email)
        self.users[user.email] = user


class InMemoryResetTokenRepository(ResetTokenRepository):
    def __init__(self):
        self.tokens: dict[int, ResetToken] = {}
        self._next_id = 1

    async def create(self, token: ResetToken) -> int:
        token_id = self._next_id
        self._next_id += 1
        self.tokens[token_id] = replace(token, id=token_id)
        return token_id

    async def find_by_email_and_value(
        self,
        email: str,
        value: str,
    ) -> list[ResetToken]:
        return [
            t for t in self.tokens.values() if t.owner == email and t.value == value
        ]

    async def delete(self, token_id: int) -> None:
        self.tokens.pop(token_id, None)


@dataclass
class SentMessage:
    recipient: str
    reset_token: str
    claims: dict[str, Any] = field(default_factory=dict)


class RecordingNotifier(PasswordResetNotifier):
    """Notifier that remembers every message instead of delivering it."""

    def __init__(self):
        self.sent: list[SentMessage] = []

    async def send_password_reset_message(
        self,
        recipient: str,
        reset_token: str,
        claims: dict[str, Any],
    ) -> None:
        self.sent.append(SentMessage(recipient, reset_token, dict(claims)))

    @property
    def last_token(self) -> str:
        return self.sent[-1].reset_token


class StaticSigner(CredentialSigner):
    """Signer returning a readable, deterministic credential."""

    def issue(self, email: str, claims: dict[str, Any]) -> str:
        return f"credential:{email}:{sorted(claims.items())}"
