from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from keyforge_auth.persistence.sqlalchemy.base import AuthBase
from keyforge_auth.shared.time import utc_now


class ResetTokenModel(AuthBase):
    __tablename__ = "tokens"
    __table_args__ = (Index("ix_tokens_owner_value", "owner", "value"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    value: Mapped[str] = mapped_column(String(64), nullable=False)
    kind: Mapped[str] = mapped_column(String(32), nullable=False)
    # No FK to users so tokens never block user administration
    owner: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:
        return f"<ResetTokenModel(id={self.id}, kind={self.kind}, owner={self.owner})>"
