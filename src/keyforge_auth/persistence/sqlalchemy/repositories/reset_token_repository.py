"""SQLAlchemy implementation of ResetTokenRepository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from keyforge_auth.persistence.sqlalchemy.models import ResetTokenModel
from keyforge_auth.repositories import ResetTokenRepository
from keyforge_auth.schemas import ResetToken
from keyforge_auth.shared.time import ensure_tz_aware


class ResetTokenRepositorySQLAlchemy(ResetTokenRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, token: ResetToken) -> int:
        model = ResetTokenModel(
            value=token.value,
            kind=token.kind,
            owner=token.owner,
            created_at=token.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return model.id

    async def find_by_email_and_value(
        self,
        email: str,
        value: str,
    ) -> list[ResetToken]:
        stmt = (
            select(ResetTokenModel)
            .where(
                ResetTokenModel.owner == email,
                ResetTokenModel.value == value,
            )
            .order_by(ResetTokenModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def delete(self, token_id: int) -> None:
        stmt = delete(ResetTokenModel).where(ResetTokenModel.id == token_id)
        await self._session.execute(stmt)
        await self._session.flush()

    def _map_to_domain(self, model: ResetTokenModel) -> ResetToken:
        return ResetToken(
            id=model.id,
            value=model.value,
            kind=model.kind,
            owner=model.owner,
            created_at=ensure_tz_aware(model.created_at),
        )
