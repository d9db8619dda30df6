"""SQLAlchemy models."""

from giftlist.models.activity import Activity
from giftlist.models.family_group import FamilyGroup
from giftlist.models.secret_note import SecretNote
from giftlist.models.user import User
from giftlist.models.user_session import UserSession
from giftlist.models.wishlist_item import WishlistItem

__all__ = [
    "User",
    "FamilyGroup",
    "WishlistItem",
    "Activity",
    "SecretNote",
    "UserSession",
]
