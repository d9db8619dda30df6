"""Wishlist item schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from giftlist.models.enums import Priority
from giftlist.schemas.auth import UserResponse
from giftlist.schemas.base import CamelModel


class WishlistItemCreate(CamelModel):
    """Create a new wishlist item."""

    model_config = ConfigDict(use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    price: int | None = Field(None, ge=0)
    category: str | None = Field(None, max_length=100)
    priority: Priority = Field(Priority.MEDIUM, validate_default=True)
    store_link: str | None = Field(None, max_length=2000)
    image_url: str | None = Field(None, max_length=2000)


class WishlistItemUpdate(CamelModel):
    """Update a wishlist item; reservation fields are not editable here."""

    model_config = ConfigDict(use_enum_values=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    price: int | None = Field(None, ge=0)
    category: str | None = Field(None, max_length=100)
    priority: Priority | None = None
    store_link: str | None = Field(None, max_length=2000)
    image_url: str | None = Field(None, max_length=2000)

    @field_validator("name", "priority")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class WishlistItemResponse(CamelModel):
    """Wishlist item response."""

    id: int
    user_id: int
    name: str
    description: str | None
    price: int | None
    category: str | None
    priority: str
    store_link: str | None
    image_url: str | None
    is_reserved: bool
    reserved_by_user_id: int | None
    created_at: datetime
    can_edit: bool | None = None


class MemberWishlist(CamelModel):
    """One member's wishlist as seen by the requester."""

    user: UserResponse
    items: list[WishlistItemResponse]
