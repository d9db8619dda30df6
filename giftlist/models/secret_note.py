"""Secret note model."""

from sqlalchemy import Column, ForeignKey, Integer, Text

from giftlist.database import Base
from giftlist.models.mixins import CreatedAtMixin


class SecretNote(Base, CreatedAtMixin):
    """Private annotation a non-owner attaches to someone else's wishlist item."""

    __tablename__ = "secret_notes"

    id = Column(Integer, primary_key=True, index=True)
    # No FK: notes outlive a deleted item like activities do.
    wishlist_item_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    note = Column(Text, nullable=False)
