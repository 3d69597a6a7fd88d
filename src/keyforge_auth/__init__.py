"""keyforge auth - credential issuing and self-service password resets.

This package handles:
- Password hashing (bcrypt, cost injected at construction)
- Reset token generation and lifecycle
- JWT credential issuing and verification (ES512)
- Password reset notification (SMTP)
- User and token storage (with pluggable persistence)

Architecture:
    keyforge_auth/
    ├── application/        # CredentialProvider and the ports it needs
    ├── services/           # Pure logic (hashing, token generation, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── infrastructure/     # Outbound email
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from keyforge_auth import CredentialProvider, JWTService, PasswordHashingService
    from keyforge_auth.persistence.sqlalchemy import (
        ResetTokenRepositorySQLAlchemy,
        UserRepositorySQLAlchemy,
    )
"""

from keyforge_auth.application.ports import CredentialSigner, PasswordResetNotifier
from keyforge_auth.application.services import CredentialProvider
from keyforge_auth.exceptions import (
    AuthError,
    EmailAlreadyExistsError,
    IncorrectPasswordError,
    InvalidTokenError,
    NoValidTokenFoundError,
    PasswordTooLongError,
    ProviderError,
    UserNotFoundError,
)
from keyforge_auth.repositories import ResetTokenRepository, UserRepository
from keyforge_auth.schemas import RESET_TOKEN_KIND, ResetToken, TokenPayload, User
from keyforge_auth.services import (
    JWTService,
    PasswordHashingService,
    ResetTokenGenerator,
)

__all__ = [
    # Application
    "CredentialProvider",
    "CredentialSigner",
    "PasswordResetNotifier",
    # Services
    "JWTService",
    "PasswordHashingService",
    "ResetTokenGenerator",
    # Repositories (interfaces)
    "ResetTokenRepository",
    "UserRepository",
    # Schemas
    "RESET_TOKEN_KIND",
    "ResetToken",
    "TokenPayload",
    "User",
    # Exceptions
    "AuthError",
    "EmailAlreadyExistsError",
    "IncorrectPasswordError",
    "InvalidTokenError",
    "NoValidTokenFoundError",
    "PasswordTooLongError",
    "ProviderError",
    "UserNotFoundError",
]
