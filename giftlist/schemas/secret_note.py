"""Secret note schemas."""

from datetime import datetime

from pydantic import Field

from giftlist.schemas.base import CamelModel


class SecretNoteCreate(CamelModel):
    """Attach a note to someone else's wishlist item."""

    wishlist_item_id: int
    note: str = Field(..., min_length=1, max_length=2000)


class SecretNoteResponse(CamelModel):
    id: int
    wishlist_item_id: int
    user_id: int
    note: str
    created_at: datetime
