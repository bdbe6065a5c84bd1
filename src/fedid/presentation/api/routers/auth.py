"""Authentication router for registration, login and the current user."""

import logging

from fastapi import APIRouter, status

from fedid.application.services import AuthResult
from fedid.presentation.api.dependencies import (
    CurrentUser,
    DBSession,
    LoginServiceDep,
    RegistrationServiceDep,
    SettingsDep,
)
from fedid.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _create_auth_response(result: AuthResult, instance_host: str) -> AuthResponse:
    return AuthResponse(
        token=result.token.value,
        expires_in=result.token.expires_in,
        user=UserResponse.from_user(result.user, instance_host),
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"description": "Invalid input (weak password, empty display name)"},
        409: {"description": "User id or email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    registration_service: RegistrationServiceDep,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Register a local user and return a token for it.

    The user gets the activity id ``https://{instance_host}/users/{user_id}``.
    """
    try:
        result = await registration_service.register(
            login_id=request.user_id,
            display_name=request.display_name,
            password=request.password,
            email=str(request.mail_address),
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(result, settings.instance_host)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid user id or password"},
    },
)
async def login(
    request: LoginRequest,
    login_service: LoginServiceDep,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Authenticate with a user id and password.

    Unknown user ids and wrong passwords produce the same 401 response.
    """
    result = await login_service.login(request.user_id, request.password)
    return _create_auth_response(result, settings.instance_host)


@router.get(
    "/me",
    summary="Get the current user",
    responses={
        200: {"description": "Authenticated user"},
        401: {"description": "Missing or invalid token"},
    },
)
async def get_me(current_user: CurrentUser, settings: SettingsDep) -> UserResponse:
    return UserResponse.from_user(current_user, settings.instance_host)
