"""Secret note API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from giftlist.api.dependencies import get_current_user, get_wishlist_service
from giftlist.schemas.secret_note import SecretNoteCreate, SecretNoteResponse
from giftlist.services.sessions import SessionUser
from giftlist.services.wishlist_service import WishlistService

router = APIRouter(prefix="/api/secret-notes", tags=["secret-notes"])


@router.post("", response_model=SecretNoteResponse)
def create_secret_note(
    note_data: SecretNoteCreate,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Attach a private note to someone else's item."""
    return wishlists.add_secret_note(current_user, note_data.wishlist_item_id, note_data.note)


@router.get("/{item_id}", response_model=list[SecretNoteResponse])
def get_secret_notes(
    item_id: int,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Get the requester's notes on an item."""
    return wishlists.get_secret_notes(current_user, item_id)
