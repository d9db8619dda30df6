"""Pydantic schemas for API requests and responses."""

from giftlist.schemas.activity import ActivityResponse
from giftlist.schemas.auth import AuthResponse, ChildLogin, UserLogin, UserRegister, UserResponse
from giftlist.schemas.family_group import (
    FamilyGroupCreate,
    FamilyGroupJoin,
    FamilyGroupResponse,
    FamilyGroupWithMembers,
    InvitePreview,
)
from giftlist.schemas.secret_note import SecretNoteCreate, SecretNoteResponse
from giftlist.schemas.wishlist import (
    MemberWishlist,
    WishlistItemCreate,
    WishlistItemResponse,
    WishlistItemUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "ChildLogin",
    "UserResponse",
    "AuthResponse",
    "FamilyGroupCreate",
    "FamilyGroupJoin",
    "FamilyGroupResponse",
    "FamilyGroupWithMembers",
    "InvitePreview",
    "WishlistItemCreate",
    "WishlistItemUpdate",
    "WishlistItemResponse",
    "MemberWishlist",
    "ActivityResponse",
    "SecretNoteCreate",
    "SecretNoteResponse",
]
