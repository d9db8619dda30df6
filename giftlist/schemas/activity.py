"""Activity feed schemas."""

from datetime import datetime

from giftlist.schemas.base import CamelModel


class UserRef(CamelModel):
    id: int
    name: str


class ActivityResponse(CamelModel):
    """Activity with actor and target names attached."""

    id: int
    user_id: int
    family_group_id: int
    action: str
    item_name: str | None
    target_user_id: int | None
    created_at: datetime
    user: UserRef | None
    target_user: UserRef | None
