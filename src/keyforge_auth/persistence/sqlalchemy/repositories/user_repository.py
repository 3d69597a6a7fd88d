"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from keyforge_auth.exceptions import EmailAlreadyExistsError, UserNotFoundError
from keyforge_auth.persistence.sqlalchemy.models import UserModel
from keyforge_auth.repositories import UserRepository
from keyforge_auth.schemas import User
from keyforge_auth.shared.time import utc_now

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Changes are flushed, never committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> User | None:
        model = await self._find_model_by_email(email)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def add(self, user: User) -> None:
        model = UserModel(
            email=user.email,
            password_hash=user.password_hash,
            claims=dict(user.claims),
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise EmailAlreadyExistsError(user.email) from e
        logger.info("Created user: %s", user.email)

    async def update(self, user: User) -> None:
        model = await self._find_model_by_email(user.email)
        if model is None:
            raise UserNotFoundError(user.email)

        model.password_hash = user.password_hash
        model.claims = dict(user.claims)
        model.updated_at = utc_now()
        await self._session.flush()
        logger.debug("Updated user: %s", user.email)

    async def _find_model_by_email(self, email: str) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            email=model.email,
            password_hash=bytes(model.password_hash),
            claims=dict(model.claims or {}),
        )
