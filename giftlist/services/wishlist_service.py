"""Wishlist service: item ownership, the reservation state machine and secret notes.

An item is either open (``is_reserved`` false, no reserver) or reserved by
exactly one member who is not its owner. Only the owner edits or deletes an
item; only the reserver reopens it.
"""

import logging
from typing import Any

from giftlist.config import Settings, get_settings
from giftlist.models import SecretNote, WishlistItem
from giftlist.models.enums import ActivityAction
from giftlist.services.errors import (
    AlreadyReservedError,
    NotFoundError,
    NotOwnerError,
    NotReservationOwnerError,
    SelfActionError,
    SelfReservationError,
)
from giftlist.services.sessions import SessionUser
from giftlist.services.store import RecordStore

logger = logging.getLogger(__name__)

ITEM_FIELDS = (
    "id",
    "user_id",
    "name",
    "description",
    "price",
    "category",
    "priority",
    "store_link",
    "image_url",
    "is_reserved",
    "reserved_by_user_id",
    "created_at",
)


class WishlistService:
    """Service for wishlist items as seen by one requesting user."""

    def __init__(self, store: RecordStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings or get_settings()

    def present_item(self, item: WishlistItem, viewer_id: int) -> dict[str, Any]:
        """Render an item for ``viewer_id`` with its ``can_edit`` flag.

        With ``hide_reservations_from_owner`` set, owners see their own items
        as open.
        """
        data = {field: getattr(item, field) for field in ITEM_FIELDS}
        data["is_reserved"] = bool(data["is_reserved"])
        data["can_edit"] = item.user_id == viewer_id
        if data["can_edit"] and self.settings.hide_reservations_from_owner:
            data["is_reserved"] = False
            data["reserved_by_user_id"] = None
        return data

    def get_item(self, item_id: int) -> WishlistItem:
        item = self.store.get_wishlist_item(item_id)
        if item is None:
            raise NotFoundError("Item not found")
        return item

    def get_owned_item(self, item_id: int, user: SessionUser) -> WishlistItem:
        item = self.get_item(item_id)
        if item.user_id != user.id:
            raise NotOwnerError()
        return item

    # Read paths

    def list_my_items(self, user: SessionUser) -> list[dict[str, Any]]:
        return [self.present_item(item, user.id) for item in self.store.get_wishlist_items(user.id)]

    def list_family_wishlists(self, user: SessionUser) -> list[dict[str, Any]]:
        """Every member's wishlist in the requester's group."""
        if user.family_group_id is None:
            raise NotFoundError("No family group")

        wishlists = []
        for member in self.store.get_family_members(user.family_group_id):
            items = self.store.get_wishlist_items(member.id)
            wishlists.append(
                {
                    "user": member,
                    "items": [self.present_item(item, user.id) for item in items],
                }
            )
        return wishlists

    # Owner operations

    def create_item(self, user: SessionUser, fields: dict[str, Any]) -> WishlistItem:
        item = self.store.create_wishlist_item(user.id, fields)
        if user.family_group_id is not None:
            self.store.create_activity(
                user_id=user.id,
                family_group_id=user.family_group_id,
                action=ActivityAction.ADDED_ITEM.value,
                item_name=item.name,
            )
        return item

    def update_item(self, user: SessionUser, item_id: int, updates: dict[str, Any]) -> WishlistItem:
        self.get_owned_item(item_id, user)
        item = self.store.update_wishlist_item(item_id, updates)
        if item is None:
            raise NotFoundError("Item not found")
        return item

    def delete_item(self, user: SessionUser, item_id: int) -> None:
        self.get_owned_item(item_id, user)
        if not self.store.delete_wishlist_item(item_id):
            raise NotFoundError("Item not found")
        logger.info(f"User {user.id} deleted wishlist item {item_id}")

    # Reservation state machine

    def reserve(self, user: SessionUser, item_id: int) -> WishlistItem:
        """Open -> Reserved(user)."""
        item = self.get_item(item_id)
        if item.user_id == user.id:
            logger.warning(f"User {user.id} tried to reserve own wishlist item {item_id}")
            raise SelfReservationError()
        if item.is_reserved:
            logger.warning(f"Reservation of already reserved item {item_id} rejected for user {user.id}")
            raise AlreadyReservedError()

        reserved = self.store.reserve_wishlist_item(item_id, user.id)
        if reserved is None:
            # Lost the race against a concurrent reservation, or the item vanished.
            if self.store.get_wishlist_item(item_id) is None:
                raise NotFoundError("Item not found")
            logger.warning(f"Concurrent reservation of item {item_id} rejected for user {user.id}")
            raise AlreadyReservedError()

        owner = self.store.get_user(reserved.user_id)
        if owner is not None and owner.family_group_id is not None:
            self.store.create_activity(
                user_id=user.id,
                family_group_id=owner.family_group_id,
                action=ActivityAction.RESERVED_ITEM.value,
                item_name=reserved.name,
                target_user_id=owner.id,
            )
        logger.info(f"User {user.id} reserved wishlist item {item_id}")
        return reserved

    def unreserve(self, user: SessionUser, item_id: int) -> WishlistItem:
        """Reserved(user) -> Open."""
        item = self.get_item(item_id)
        if not item.is_reserved or item.reserved_by_user_id != user.id:
            raise NotReservationOwnerError()

        reopened = self.store.unreserve_wishlist_item(item_id, user.id)
        if reopened is None:
            if self.store.get_wishlist_item(item_id) is None:
                raise NotFoundError("Item not found")
            raise NotReservationOwnerError()
        logger.info(f"User {user.id} unreserved wishlist item {item_id}")
        return reopened

    # Secret notes

    def add_secret_note(self, user: SessionUser, item_id: int, note: str) -> SecretNote:
        item = self.get_item(item_id)
        if item.user_id == user.id:
            raise SelfActionError("Cannot add notes to your own items")
        return self.store.create_secret_note(user_id=user.id, wishlist_item_id=item_id, note=note)

    def get_secret_notes(self, user: SessionUser, item_id: int) -> list[SecretNote]:
        """The requester's own notes on someone else's item."""
        item = self.get_item(item_id)
        if item.user_id == user.id:
            raise SelfActionError("Cannot view notes on your own items")
        return self.store.get_secret_notes(item_id, user.id)
