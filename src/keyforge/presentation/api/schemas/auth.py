"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from keyforge_auth.services import PasswordHashingService


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: str = Field(..., min_length=1, description="User's email address")
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class PasswordResetRequestRequest(BaseModel):
    """Request schema for requesting a password reset email."""

    email: str = Field(..., min_length=1)


class PasswordResetRequest(BaseModel):
    """Request schema for resetting a password with a token."""

    email: str = Field(..., min_length=1)
    reset_token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def _validate_password_bytes(cls, v: str) -> str:
        # bcrypt rejects inputs over 72 bytes, counted after UTF-8 encoding
        max_bytes = PasswordHashingService.MAX_PASSWORD_BYTES
        if len(v.encode("utf-8")) > max_bytes:
            msg = f"password cannot be longer than {max_bytes} bytes"
            raise ValueError(msg)
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "reset_token": "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08",
                "password": "newsecurepassword123",
            },
        },
    )


class AccessTokenResponse(BaseModel):
    """Response schema for a successful login."""

    access_token: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJFUzUxMiIsInR5cCI6IkpXVCJ9...",
            },
        },
    )


class PublicKeyResponse(BaseModel):
    """Response schema carrying the credential verification key."""

    algorithm: str
    public_key: str
