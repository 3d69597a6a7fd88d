"""Authentication services.

Provides password hashing, reset token generation and JWT management.
"""

from keyforge_auth.services.jwt_service import JWTService
from keyforge_auth.services.password_service import PasswordHashingService
from keyforge_auth.services.reset_token_generator import ResetTokenGenerator

__all__ = [
    "JWTService",
    "PasswordHashingService",
    "ResetTokenGenerator",
]
