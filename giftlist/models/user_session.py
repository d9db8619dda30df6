"""User session model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from giftlist.database import Base
from giftlist.models.mixins import CreatedAtMixin


class UserSession(Base, CreatedAtMixin):
    """Bearer token mapped to a snapshot of the user's public fields."""

    __tablename__ = "sessions"

    token = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    family_group_id = Column(Integer, nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
