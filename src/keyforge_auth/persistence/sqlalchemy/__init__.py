"""SQLAlchemy implementation for keyforge_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- UserModel / ResetTokenModel: SQLAlchemy models
- UserRepositorySQLAlchemy / ResetTokenRepositorySQLAlchemy: Repository
  implementations working on an AsyncSession

Examples
--------
# Create the tables on startup:
from keyforge_auth.persistence.sqlalchemy import AuthBase
async with engine.begin() as conn:
    await conn.run_sync(AuthBase.metadata.create_all)
"""

from keyforge_auth.persistence.sqlalchemy.base import AuthBase
from keyforge_auth.persistence.sqlalchemy.models import ResetTokenModel, UserModel
from keyforge_auth.persistence.sqlalchemy.repositories import (
    ResetTokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "ResetTokenModel",
    "ResetTokenRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
