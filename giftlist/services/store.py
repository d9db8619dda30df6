"""Record store: the persistence interface behind the route layer.

``RecordStore`` names every capability the API needs. ``SqlRecordStore`` is
the production implementation over a SQLAlchemy session; tests also run the
same contract against an in-memory fake.

Lookups return ``None`` (or ``False``/``[]``) for missing records and never
raise. Creation methods trust the caller to have validated the input.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from giftlist.models import Activity, FamilyGroup, SecretNote, User, WishlistItem
from giftlist.models.enums import ActivityAction
from giftlist.services.errors import DuplicateInviteCodeError

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_LIMIT = 10

# Fields an owner may change through update_wishlist_item.
EDITABLE_ITEM_FIELDS = frozenset(
    {"name", "description", "price", "category", "priority", "store_link", "image_url"}
)


class RecordStore(ABC):
    """Users, family groups, wishlist items, activities and secret notes."""

    # Users

    @abstractmethod
    def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    def get_user_by_family_code(self, family_code: str, name: str) -> User | None:
        """Find the member called ``name`` in the group whose invite code is ``family_code``."""

    @abstractmethod
    def create_user(self, name: str, email: str | None, password_hash: str) -> User: ...

    @abstractmethod
    def update_user_family_group(self, user_id: int, family_group_id: int) -> User | None: ...

    # Family groups

    @abstractmethod
    def get_family_group(self, family_group_id: int) -> FamilyGroup | None: ...

    @abstractmethod
    def get_family_group_by_invite_code(self, invite_code: str) -> FamilyGroup | None: ...

    @abstractmethod
    def create_family_group(self, name: str, invite_code: str) -> FamilyGroup:
        """Create a group.

        Raises:
            DuplicateInviteCodeError: another group already uses ``invite_code``.
        """

    @abstractmethod
    def get_family_members(self, family_group_id: int) -> list[User]: ...

    # Wishlist items

    @abstractmethod
    def get_wishlist_items(self, user_id: int) -> list[WishlistItem]:
        """Items owned by ``user_id``, newest first."""

    @abstractmethod
    def get_wishlist_item(self, item_id: int) -> WishlistItem | None: ...

    @abstractmethod
    def create_wishlist_item(self, user_id: int, fields: dict[str, Any]) -> WishlistItem: ...

    @abstractmethod
    def update_wishlist_item(self, item_id: int, updates: dict[str, Any]) -> WishlistItem | None:
        """Apply ``updates`` restricted to ``EDITABLE_ITEM_FIELDS``."""

    @abstractmethod
    def delete_wishlist_item(self, item_id: int) -> bool: ...

    @abstractmethod
    def reserve_wishlist_item(self, item_id: int, user_id: int) -> WishlistItem | None:
        """Atomically move an open item to reserved-by ``user_id``.

        Returns None when the item is missing, already reserved, or owned by
        ``user_id``. Of two concurrent callers at most one gets the item.
        """

    @abstractmethod
    def unreserve_wishlist_item(self, item_id: int, user_id: int) -> WishlistItem | None:
        """Atomically reopen an item reserved by ``user_id``; None otherwise."""

    # Activities

    @abstractmethod
    def create_activity(
        self,
        user_id: int,
        family_group_id: int,
        action: str,
        item_name: str | None = None,
        target_user_id: int | None = None,
    ) -> Activity: ...

    @abstractmethod
    def get_family_activities(
        self,
        family_group_id: int,
        limit: int = DEFAULT_ACTIVITY_LIMIT,
        hide_reserved_for: int | None = None,
    ) -> list[Activity]:
        """Newest ``limit`` activities of the group.

        With ``hide_reserved_for`` set, ``reserved_item`` entries targeting that
        user are left out before the limit applies.
        """

    # Secret notes

    @abstractmethod
    def create_secret_note(self, user_id: int, wishlist_item_id: int, note: str) -> SecretNote: ...

    @abstractmethod
    def get_secret_notes(self, wishlist_item_id: int, user_id: int) -> list[SecretNote]:
        """Notes ``user_id`` wrote on the item, oldest first."""


class SqlRecordStore(RecordStore):
    """RecordStore backed by the relational database."""

    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def get_user_by_family_code(self, family_code: str, name: str) -> User | None:
        return (
            self.db.query(User)
            .join(FamilyGroup, User.family_group_id == FamilyGroup.id)
            .filter(FamilyGroup.invite_code == family_code, User.name == name)
            .order_by(User.id)
            .first()
        )

    def create_user(self, name: str, email: str | None, password_hash: str) -> User:
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_user_family_group(self, user_id: int, family_group_id: int) -> User | None:
        user = self.get_user(user_id)
        if user is None:
            return None
        user.family_group_id = family_group_id
        self.db.commit()
        self.db.refresh(user)
        return user

    def get_family_group(self, family_group_id: int) -> FamilyGroup | None:
        return self.db.query(FamilyGroup).filter(FamilyGroup.id == family_group_id).first()

    def get_family_group_by_invite_code(self, invite_code: str) -> FamilyGroup | None:
        return self.db.query(FamilyGroup).filter(FamilyGroup.invite_code == invite_code).first()

    def create_family_group(self, name: str, invite_code: str) -> FamilyGroup:
        group = FamilyGroup(name=name, invite_code=invite_code)
        self.db.add(group)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Invite code collision on insert")
            raise DuplicateInviteCodeError(invite_code) from e
        self.db.refresh(group)
        return group

    def get_family_members(self, family_group_id: int) -> list[User]:
        return (
            self.db.query(User)
            .filter(User.family_group_id == family_group_id)
            .order_by(User.id)
            .all()
        )

    def get_wishlist_items(self, user_id: int) -> list[WishlistItem]:
        return (
            self.db.query(WishlistItem)
            .filter(WishlistItem.user_id == user_id)
            .order_by(WishlistItem.created_at.desc(), WishlistItem.id.desc())
            .all()
        )

    def get_wishlist_item(self, item_id: int) -> WishlistItem | None:
        return self.db.query(WishlistItem).filter(WishlistItem.id == item_id).first()

    def create_wishlist_item(self, user_id: int, fields: dict[str, Any]) -> WishlistItem:
        values = {k: v for k, v in fields.items() if k in EDITABLE_ITEM_FIELDS}
        item = WishlistItem(user_id=user_id, is_reserved=False, reserved_by_user_id=None, **values)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def update_wishlist_item(self, item_id: int, updates: dict[str, Any]) -> WishlistItem | None:
        item = self.get_wishlist_item(item_id)
        if item is None:
            return None
        for field, value in updates.items():
            if field in EDITABLE_ITEM_FIELDS:
                setattr(item, field, value)
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete_wishlist_item(self, item_id: int) -> bool:
        deleted = (
            self.db.query(WishlistItem)
            .filter(WishlistItem.id == item_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    def reserve_wishlist_item(self, item_id: int, user_id: int) -> WishlistItem | None:
        # Conditional write: only an open item not owned by the actor matches.
        updated = (
            self.db.query(WishlistItem)
            .filter(
                WishlistItem.id == item_id,
                WishlistItem.is_reserved.is_(False),
                WishlistItem.user_id != user_id,
            )
            .update(
                {WishlistItem.is_reserved: True, WishlistItem.reserved_by_user_id: user_id},
                synchronize_session=False,
            )
        )
        self.db.commit()
        if not updated:
            return None
        return self.get_wishlist_item(item_id)

    def unreserve_wishlist_item(self, item_id: int, user_id: int) -> WishlistItem | None:
        updated = (
            self.db.query(WishlistItem)
            .filter(
                WishlistItem.id == item_id,
                WishlistItem.is_reserved.is_(True),
                WishlistItem.reserved_by_user_id == user_id,
            )
            .update(
                {WishlistItem.is_reserved: False, WishlistItem.reserved_by_user_id: None},
                synchronize_session=False,
            )
        )
        self.db.commit()
        if not updated:
            return None
        return self.get_wishlist_item(item_id)

    def create_activity(
        self,
        user_id: int,
        family_group_id: int,
        action: str,
        item_name: str | None = None,
        target_user_id: int | None = None,
    ) -> Activity:
        activity = Activity(
            user_id=user_id,
            family_group_id=family_group_id,
            action=action,
            item_name=item_name,
            target_user_id=target_user_id,
        )
        self.db.add(activity)
        self.db.commit()
        self.db.refresh(activity)
        return activity

    def get_family_activities(
        self,
        family_group_id: int,
        limit: int = DEFAULT_ACTIVITY_LIMIT,
        hide_reserved_for: int | None = None,
    ) -> list[Activity]:
        query = self.db.query(Activity).filter(Activity.family_group_id == family_group_id)
        if hide_reserved_for is not None:
            query = query.filter(
                or_(
                    Activity.action != ActivityAction.RESERVED_ITEM.value,
                    Activity.target_user_id.is_(None),
                    Activity.target_user_id != hide_reserved_for,
                )
            )
        return (
            query.order_by(Activity.created_at.desc(), Activity.id.desc())
            .limit(limit)
            .all()
        )

    def create_secret_note(self, user_id: int, wishlist_item_id: int, note: str) -> SecretNote:
        secret_note = SecretNote(user_id=user_id, wishlist_item_id=wishlist_item_id, note=note)
        self.db.add(secret_note)
        self.db.commit()
        self.db.refresh(secret_note)
        return secret_note

    def get_secret_notes(self, wishlist_item_id: int, user_id: int) -> list[SecretNote]:
        return (
            self.db.query(SecretNote)
            .filter(SecretNote.wishlist_item_id == wishlist_item_id, SecretNote.user_id == user_id)
            .order_by(SecretNote.created_at, SecretNote.id)
            .all()
        )
