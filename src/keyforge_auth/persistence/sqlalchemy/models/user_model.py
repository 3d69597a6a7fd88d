"""SQLAlchemy model for registered users."""

from typing import Any

from sqlalchemy import JSON, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from keyforge_auth.persistence.sqlalchemy.base import AuthBase, TimestampMixin


class UserModel(AuthBase, TimestampMixin):
    """
    SQLAlchemy model for registered users.

    The email is the primary key and is compared case-sensitively.

    Table: users
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)

    # bcrypt hash, 60 bytes
    password_hash: Mapped[bytes] = mapped_column(LargeBinary(255), nullable=False)

    claims: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    def __repr__(self) -> str:
        return f"<UserModel(email={self.email})>"
