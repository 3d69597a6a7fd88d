"""SQLAlchemy models for keyforge_auth."""

from keyforge_auth.persistence.sqlalchemy.models.reset_token_model import (
    ResetTokenModel,
)
from keyforge_auth.persistence.sqlalchemy.models.user_model import UserModel

__all__ = ["ResetTokenModel", "UserModel"]
