"""Wishlist API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from giftlist.api.dependencies import get_current_user, get_wishlist_service
from giftlist.schemas.auth import MessageResponse
from giftlist.schemas.wishlist import (
    MemberWishlist,
    WishlistItemCreate,
    WishlistItemResponse,
    WishlistItemUpdate,
)
from giftlist.services.sessions import SessionUser
from giftlist.services.wishlist_service import WishlistService

router = APIRouter(prefix="/api", tags=["wishlists"])


@router.get("/wishlists/my", response_model=list[WishlistItemResponse])
def get_my_wishlist(
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Get the requester's own items, newest first."""
    return wishlists.list_my_items(current_user)


@router.get("/wishlists/family", response_model=list[MemberWishlist])
def get_family_wishlists(
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Get every family member's wishlist."""
    return wishlists.list_family_wishlists(current_user)


@router.post("/wishlist-items", response_model=WishlistItemResponse)
def create_wishlist_item(
    item_data: WishlistItemCreate,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Add an item to the requester's wishlist."""
    item = wishlists.create_item(current_user, item_data.model_dump())
    return wishlists.present_item(item, current_user.id)


@router.put("/wishlist-items/{item_id}", response_model=WishlistItemResponse)
def update_wishlist_item(
    item_id: int,
    item_data: WishlistItemUpdate,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Update an item (owner only)."""
    item = wishlists.update_item(current_user, item_id, item_data.model_dump(exclude_unset=True))
    return wishlists.present_item(item, current_user.id)


@router.delete("/wishlist-items/{item_id}", response_model=MessageResponse)
def delete_wishlist_item(
    item_id: int,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Delete an item (owner only)."""
    wishlists.delete_item(current_user, item_id)
    return MessageResponse(message="Item deleted")


@router.post("/wishlist-items/{item_id}/reserve", response_model=WishlistItemResponse)
def reserve_wishlist_item(
    item_id: int,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Reserve someone else's item."""
    item = wishlists.reserve(current_user, item_id)
    return wishlists.present_item(item, current_user.id)


@router.post("/wishlist-items/{item_id}/unreserve", response_model=WishlistItemResponse)
def unreserve_wishlist_item(
    item_id: int,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    wishlists: Annotated[WishlistService, Depends(get_wishlist_service)],
):
    """Release a reservation the requester holds."""
    item = wishlists.unreserve(current_user, item_id)
    return wishlists.present_item(item, current_user.id)
