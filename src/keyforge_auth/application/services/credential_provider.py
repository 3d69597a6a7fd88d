"""Credential provider orchestrating login and the password reset flow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from keyforge_auth.exceptions import (
    IncorrectPasswordError,
    NoValidTokenFoundError,
    ProviderError,
    UserNotFoundError,
)
from keyforge_auth.schemas import ResetToken, User
from keyforge_auth.services.reset_token_generator import ResetTokenGenerator
from keyforge_auth.shared.time import utc_now

if TYPE_CHECKING:
    from keyforge_auth.application.ports import (
        CredentialSigner,
        PasswordResetNotifier,
    )
    from keyforge_auth.repositories import ResetTokenRepository, UserRepository
    from keyforge_auth.services.password_service import PasswordHashingService

logger = logging.getLogger(__name__)


class CredentialProvider:
    """
    Application service for authentication and password resets.

    Orchestrates the repositories, the password hasher, the credential
    signer and the reset notifier to provide:
    - Login with password, returning a signed credential
    - Password reset initiation (token creation + notification)
    - Password reset completion (token consumption + password replacement)

    The provider holds no per-call state. Collaborator failures are never
    retried; they surface as ``ProviderError`` naming the failed step, except
    for signer failures which propagate unchanged.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        token_repository: ResetTokenRepository,
        password_service: PasswordHashingService,
        signer: CredentialSigner,
        notifier: PasswordResetNotifier,
        token_generator: ResetTokenGenerator | None = None,
    ):
        self._user_repo = user_repository
        self._token_repo = token_repository
        self._password_service = password_service
        self._signer = signer
        self._notifier = notifier
        self._token_generator = token_generator or ResetTokenGenerator()

    async def _find_user(self, email: str) -> User:
        try:
            user = await self._user_repo.find_by_email(email)
        except Exception as e:
            raise ProviderError(f'failed to query user with email "{email}"', e) from e

        if user is None:
            raise UserNotFoundError(email)
        return user

    async def authenticate(self, email: str, password: str) -> str:
        user = await self._find_user(email)

        if not self._password_service.verify(password, user.password_hash):
            raise IncorrectPasswordError

        credential = self._signer.issue(email, user.claims)
        logger.info("Issued credential for user: %s", email)
        return credential

    async def initiate_password_reset(self, email: str) -> None:
        user = await self._find_user(email)

        token = ResetToken(
            value=self._token_generator.generate(),
            owner=email,
            created_at=utc_now(),
        )
        try:
            await self._token_repo.create(token)
        except Exception as e:
            msg = f'failed to create password-reset-token for email "{email}"'
            raise ProviderError(msg, e) from e

        # A token stays valid even if the message cannot be delivered
        try:
            await self._notifier.send_password_reset_message(
                email,
                token.value,
                user.claims,
            )
        except Exception as e:
            raise ProviderError("failed to send password-reset-email", e) from e

        logger.info("Password reset initiated for user: %s", email)

    async def complete_password_reset(
        self,
        email: str,
        reset_token: str,
        new_password: str,
    ) -> None:
        try:
            tokens = await self._token_repo.find_by_email_and_value(email, reset_token)
        except Exception as e:
            raise ProviderError("failed to find all available tokens", e) from e

        # Tokens of other kinds never authorize a reset
        reset_tokens = [token for token in tokens if token.is_reset_token()]
        if not reset_tokens:
            raise NoValidTokenFoundError

        try:
            user = await self._user_repo.find_by_email(email)
        except Exception as e:
            raise ProviderError("failed to find user", e) from e
        if user is None:
            cause = UserNotFoundError(email)
            raise ProviderError("failed to find user", cause) from cause

        try:
            new_hash = self._password_service.hash(new_password)
        except Exception as e:
            raise ProviderError("failed to hash new password", e) from e

        try:
            await self._user_repo.update(user.with_password_hash(new_hash))
        except Exception as e:
            raise ProviderError("failed to update user", e) from e

        # Every matching reset token is consumed so no duplicate can be replayed
        for token in reset_tokens:
            try:
                await self._token_repo.delete(token.id)
            except Exception as e:
                raise ProviderError("failed to delete token", e) from e

        logger.info("Password reset completed for user: %s", email)
