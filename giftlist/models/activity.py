"""Activity model."""

from sqlalchemy import Column, ForeignKey, Integer, String

from giftlist.database import Base
from giftlist.models.mixins import CreatedAtMixin


class Activity(Base, CreatedAtMixin):
    """Append-only entry in a family group's activity feed."""

    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    family_group_id = Column(Integer, ForeignKey("family_groups.id"), nullable=False, index=True)
    action = Column(String(50), nullable=False)  # see ActivityAction
    item_name = Column(String(255), nullable=True)
    target_user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
