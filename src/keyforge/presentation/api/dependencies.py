"""FastAPI dependency injection for the keyforge API.

Provides dependencies for:
- Database sessions
- Password hashing, JWT signing and email delivery
- The credential provider bound to the request's session
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from keyforge_auth import CredentialProvider, JWTService, PasswordHashingService
from keyforge_auth.infrastructure.email import EmailService
from keyforge_auth.persistence.sqlalchemy import (
    ResetTokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from keyforge_config.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Services (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=get_settings().bcrypt_rounds)


@lru_cache(maxsize=1)
def get_jwt_service() -> JWTService:
    settings = get_settings()
    return JWTService(
        private_key_pem=settings.jwt_private_key.get_secret_value(),
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


@lru_cache(maxsize=1)
def get_email_service() -> EmailService:
    return EmailService(get_settings())


def get_credential_provider(
    session: DBSession,
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
    email_service: Annotated[EmailService, Depends(get_email_service)],
) -> CredentialProvider:
    """Build a credential provider working on the request's session."""
    return CredentialProvider(
        user_repository=UserRepositorySQLAlchemy(session),
        token_repository=ResetTokenRepositorySQLAlchemy(session),
        password_service=password_service,
        signer=jwt_service,
        notifier=email_service,
    )


Provider = Annotated[CredentialProvider, Depends(get_credential_provider)]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


def clear_dependency_caches() -> None:
    """Drop cached engine and services (useful for tests)."""
    get_database_url.cache_clear()
    get_engine.cache_clear()
    get_session_maker.cache_clear()
    get_password_service.cache_clear()
    get_jwt_service.cache_clear()
    get_email_service.cache_clear()
