"""Authentication schemas."""

from pydantic import EmailStr, Field, field_validator

from giftlist.schemas.base import CamelModel


class UserRegister(CamelModel):
    """User registration request.

    ``email`` may be omitted for child accounts joining with ``invite_code``.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr | None = None
    password: str = Field(..., min_length=4, max_length=128)
    invite_code: str | None = Field(None, max_length=32)

    @field_validator("email", "invite_code", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UserLogin(CamelModel):
    """User login request."""

    email: str | None = Field(None, max_length=255)
    password: str = Field("", max_length=128)


class ChildLogin(CamelModel):
    """Login by family invite code and member name."""

    family_code: str | None = Field(None, max_length=32)
    name: str | None = Field(None, max_length=255)
    password: str = Field("", max_length=128)


class UserResponse(CamelModel):
    """User information response."""

    id: int
    name: str
    email: str | None
    family_group_id: int | None


class AuthResponse(CamelModel):
    """Authentication response with session token and user info."""

    user: UserResponse
    session_id: str


class MeResponse(CamelModel):
    user: UserResponse


class MessageResponse(CamelModel):
    message: str
