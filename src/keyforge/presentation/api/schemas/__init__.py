"""Request and response schemas of the keyforge API."""

from keyforge.presentation.api.schemas.auth import (
    AccessTokenResponse,
    LoginRequest,
    PasswordResetRequest,
    PasswordResetRequestRequest,
    PublicKeyResponse,
)

__all__ = [
    "AccessTokenResponse",
    "LoginRequest",
    "PasswordResetRequest",
    "PasswordResetRequestRequest",
    "PublicKeyResponse",
]
