"""Family group model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from giftlist.database import Base
from giftlist.models.mixins import CreatedAtMixin


class FamilyGroup(Base, CreatedAtMixin):
    """A named set of users sharing wishlist visibility, joined by invite code."""

    __tablename__ = "family_groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    invite_code = Column(String(32), unique=True, nullable=False, index=True)

    # Relationships
    members = relationship("User", back_populates="family_group")
