"""User model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from giftlist.database import Base


class User(Base):
    """User model for authentication, ownership and group membership.

    Child accounts have no email; uniqueness is enforced only when present.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=True, index=True)
    password_hash = Column(String(255), nullable=False)
    family_group_id = Column(Integer, ForeignKey("family_groups.id"), nullable=True, index=True)

    # Relationships
    family_group = relationship("FamilyGroup", back_populates="members")
