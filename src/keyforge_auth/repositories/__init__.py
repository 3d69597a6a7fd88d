"""Repository interfaces for keyforge_auth.

This package defines abstract repository interfaces that can be implemented
by different persistence technologies. The SQLAlchemy implementation lives
in keyforge_auth.persistence.sqlalchemy.
"""

from keyforge_auth.repositories.reset_token_repository import ResetTokenRepository
from keyforge_auth.repositories.user_repository import UserRepository

__all__ = ["ResetTokenRepository", "UserRepository"]
