"""Wishlist item model."""

from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Integer, String, Text

from giftlist.database import Base
from giftlist.models.mixins import CreatedAtMixin


class WishlistItem(Base, CreatedAtMixin):
    """Something a user wishes for, optionally reserved by another user."""

    __tablename__ = "wishlist_items"
    __table_args__ = (
        CheckConstraint(
            "(is_reserved AND reserved_by_user_id IS NOT NULL)"
            " OR (NOT is_reserved AND reserved_by_user_id IS NULL)",
            name="ck_wishlist_items_reservation_state",
        ),
        CheckConstraint(
            "reserved_by_user_id IS NULL OR reserved_by_user_id != user_id",
            name="ck_wishlist_items_no_self_reservation",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Integer, nullable=True)
    category = Column(String(100), nullable=True)
    priority = Column(String(20), nullable=False, default="medium")
    store_link = Column(String(2000), nullable=True)
    image_url = Column(String(2000), nullable=True)
    is_reserved = Column(Boolean, nullable=False, default=False)
    reserved_by_user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
