"""Authentication schemas for request/response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from fedid.domain.user import User


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    Password strength and display name checks happen in the domain layer
    and are reported as 400 responses.
    """

    user_id: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9_]+$",
        description="Local username, becomes https://{host}/users/{user_id}",
    )
    password: str = Field(..., max_length=1024, description="At least 8 characters")
    mail_address: EmailStr = Field(..., description="Contact email address")
    display_name: str = Field(..., max_length=255)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "alice",
                "password": "longenough1",
                "mail_address": "alice@example.com",
                "display_name": "Alice",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login.

    ``user_id`` is a local username or a full activity id.
    """

    user_id: str = Field(..., max_length=512)
    password: str = Field(..., max_length=1024)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user_id": "alice",
                "password": "longenough1",
            },
        },
    )


class UserResponse(BaseModel):
    """Response schema for user data."""

    id: UUID
    acct: str
    display_name: str
    activity_id: str
    icon_url: str | None = None

    @classmethod
    def from_user(cls, user: User, instance_host: str) -> "UserResponse":
        return cls(
            id=user.id,
            acct=user.activity_id.to_acct(instance_host),
            display_name=user.display_name,
            activity_id=user.activity_id.value,
            icon_url=user.icon_url,
        )


class AuthResponse(BaseModel):
    """Response schema for successful login or registration."""

    token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 86400,
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "acct": "alice",
                    "display_name": "Alice",
                    "activity_id": "https://example.com/users/alice",
                    "icon_url": None,
                },
            },
        },
    )
