# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for keyforge_auth."""

from keyforge_auth.persistence.sqlalchemy.repositories.reset_token_repository import (
    ResetTokenRepositorySQLAlchemy,
)
from keyforge_auth.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = ["ResetTokenRepositorySQLAlchemy", "UserRepositorySQLAlchemy"]
