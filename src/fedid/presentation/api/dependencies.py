"""FastAPI dependency injection for the fedid API.

Provides dependencies for:
- Database sessions
- Hashing and token services
- Login and registration protocols
- Authentication (current user from JWT)
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from fedid.application.services import LoginService, RegistrationService
from fedid.domain.user import User
from fedid.exceptions import InvalidTokenError
from fedid.infrastructure.persistence.sqlalchemy import (
    CredentialRepositorySQLAlchemy,
    UserRegistrationRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from fedid.presentation.api.config import get_api_settings
from fedid.services import Argon2PasswordHasher, JWTService
from fedid_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session
# -----------------------------------------------------------------------------


@lru_cache()
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async engine for a database URL.

    The engine manages the connection pool and is reused across all requests.

    Parameters
    ----------
    database_url
        SQLAlchemy async URL (postgresql+asyncpg://... or sqlite+aiosqlite://...)

    Returns
    -------
    AsyncEngine instance
    """
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache()
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker for a database URL."""
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(
    request: Request,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields one session per request. Routers commit on success and roll back
    on failure.
    """
    settings = get_api_settings(request)
    async with get_session_maker(settings.database_url)() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_password_hasher(settings: SettingsDep) -> Argon2PasswordHasher:
    """Get the Argon2id password hasher with configured costs."""
    return Argon2PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordHasherDep = Annotated[Argon2PasswordHasher, Depends(get_password_hasher)]


async def get_login_service(
    session: DBSession,
    settings: SettingsDep,
    password_hasher: PasswordHasherDep,
    jwt_service: JWTServiceDep,
) -> LoginService:
    """Get the login protocol wired to SQLAlchemy repositories."""
    return LoginService(
        credential_repository=CredentialRepositorySQLAlchemy(session),
        user_repository=UserRepositorySQLAlchemy(session),
        password_hasher=password_hasher,
        token_issuer=jwt_service,
        instance_host=settings.instance_host,
    )


async def get_registration_service(
    session: DBSession,
    settings: SettingsDep,
    password_hasher: PasswordHasherDep,
    jwt_service: JWTServiceDep,
) -> RegistrationService:
    """Get the registration protocol wired to SQLAlchemy repositories."""
    return RegistrationService(
        registration_repository=UserRegistrationRepositorySQLAlchemy(session),
        password_hasher=password_hasher,
        token_issuer=jwt_service,
        instance_host=settings.instance_host,
    )


LoginServiceDep = Annotated[LoginService, Depends(get_login_service)]
RegistrationServiceDep = Annotated[
    RegistrationService,
    Depends(get_registration_service),
]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    session: DBSession,
    jwt_service: JWTServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    """
    FastAPI dependency to get the current authenticated user from JWT.

    Parameters
    ----------
    session
        Database session
    jwt_service
        JWT service for token verification
    credentials
        Bearer token from Authorization header

    Returns
    -------
    The authenticated User

    Raises
    ------
    HTTPException
        401 if token is missing, invalid, or user not found
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    user = await UserRepositorySQLAlchemy(session).find_by_id(payload.user_id)

    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]
