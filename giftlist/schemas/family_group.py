"""Family group schemas."""

from datetime import datetime

from pydantic import Field

from giftlist.schemas.auth import UserResponse
from giftlist.schemas.base import CamelModel


class FamilyGroupCreate(CamelModel):
    """Create a new family group."""

    name: str = Field(..., min_length=1, max_length=255)


class FamilyGroupJoin(CamelModel):
    """Join a family group by invite code."""

    invite_code: str = Field(..., min_length=1, max_length=32)


class FamilyGroupResponse(CamelModel):
    """Family group response."""

    id: int
    name: str
    invite_code: str
    created_at: datetime


class FamilyGroupWithMembers(FamilyGroupResponse):
    members: list[UserResponse]


class InvitePreview(CamelModel):
    """What an invite link shows before joining."""

    id: int
    name: str
    invite_code: str
    member_count: int
