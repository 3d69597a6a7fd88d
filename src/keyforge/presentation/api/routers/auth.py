"""Authentication router for login, password resets and key discovery."""

import logging

from fastapi import APIRouter, HTTPException, status

from keyforge.presentation.api.dependencies import DBSession, JWTServiceDep, Provider
from keyforge.presentation.api.schemas.auth import (
    AccessTokenResponse,
    LoginRequest,
    PasswordResetRequest,
    PasswordResetRequestRequest,
    PublicKeyResponse,
)
from keyforge_auth import (
    IncorrectPasswordError,
    NoValidTokenFoundError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS_DETAIL = "invalid credentials"
INVALID_RESET_TOKEN_DETAIL = (
    "reset-token is invalid or token email combination is not correct"
)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    provider: Provider,
    session: DBSession,
) -> AccessTokenResponse:
    """
    Authenticate with email and password.

    Returns a signed access token carrying the user's claims.
    """
    try:
        access_token = await provider.authenticate(
            email=request.email,
            password=request.password,
        )
        await session.commit()
        return AccessTokenResponse(access_token=access_token)

    except (UserNotFoundError, IncorrectPasswordError) as e:
        await session.rollback()
        logger.warning("Login failed for %s: %s", request.email, e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS_DETAIL,
        ) from e
    except Exception as e:
        await session.rollback()
        logger.exception("Login failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Login failed",
        ) from e


@router.post(
    "/password-reset-request",
    status_code=status.HTTP_201_CREATED,
    summary="Request password reset",
    responses={
        201: {"description": "If the email exists, a reset token has been sent"},
    },
)
async def request_password_reset(
    request: PasswordResetRequestRequest,
    provider: Provider,
    session: DBSession,
) -> None:
    """Request a password reset message.

    Unknown emails answer the same way as known ones.
    """
    try:
        await provider.initiate_password_reset(request.email)
        await session.commit()

    except UserNotFoundError:
        await session.rollback()
        logger.warning("Password reset requested for unknown user %s", request.email)
    except Exception as e:
        await session.rollback()
        logger.exception("Password reset request failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Password reset request failed",
        ) from e


@router.post(
    "/password-reset",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Reset password with token",
    responses={
        204: {"description": "Password reset successfully"},
        400: {"description": "Invalid token or token/email mismatch"},
    },
)
async def reset_password(
    request: PasswordResetRequest,
    provider: Provider,
    session: DBSession,
) -> None:
    """Reset password with a token."""
    try:
        await provider.complete_password_reset(
            email=request.email,
            reset_token=request.reset_token,
            new_password=request.password,
        )
        await session.commit()

    except NoValidTokenFoundError as e:
        await session.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_RESET_TOKEN_DETAIL,
        ) from e
    except Exception as e:
        await session.rollback()
        logger.exception("Password reset failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Password reset failed",
        ) from e


@router.get(
    "/public-key",
    summary="Get credential verification key",
)
async def get_public_key(jwt_service: JWTServiceDep) -> PublicKeyResponse:
    """Return the PEM public key relying parties use to verify credentials."""
    return PublicKeyResponse(
        algorithm=jwt_service.ALGORITHM,
        public_key=jwt_service.public_key_pem(),
    )
