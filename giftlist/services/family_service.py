"""Family group service: invite codes, membership and the activity feed."""

import logging
import secrets
import string
from typing import Any

from giftlist.config import Settings, get_settings
from giftlist.models import FamilyGroup, User
from giftlist.models.enums import ActivityAction
from giftlist.services.errors import (
    ConflictError,
    DuplicateInviteCodeError,
    InvalidInviteCodeError,
    NotFoundError,
)
from giftlist.services.store import RecordStore

logger = logging.getLogger(__name__)

INVITE_CODE_ALPHABET = string.ascii_uppercase + string.digits


def generate_invite_code(length: int = 6) -> str:
    """Random uppercase alphanumeric invite code."""
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(length))


class FamilyService:
    """Service for family group operations."""

    def __init__(self, store: RecordStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings or get_settings()

    def create_group(self, user_id: int, name: str) -> FamilyGroup:
        """Create a group with a fresh invite code and make ``user_id`` its first member."""
        group = None
        for _ in range(self.settings.invite_code_max_attempts):
            code = generate_invite_code(self.settings.invite_code_length)
            if self.store.get_family_group_by_invite_code(code) is not None:
                logger.warning("Generated invite code already in use, regenerating")
                continue
            try:
                group = self.store.create_family_group(name=name, invite_code=code)
            except DuplicateInviteCodeError:
                continue
            break

        if group is None:
            raise ConflictError("Could not allocate a unique invite code")

        self.store.update_user_family_group(user_id, group.id)
        self.store.create_activity(
            user_id=user_id,
            family_group_id=group.id,
            action=ActivityAction.CREATED_GROUP.value,
        )
        logger.info(f"User {user_id} created family group {group.id}")
        return group

    def get_group_by_invite_code(self, invite_code: str) -> FamilyGroup:
        group = self.store.get_family_group_by_invite_code(invite_code.strip().upper())
        if group is None:
            raise InvalidInviteCodeError()
        return group

    def join_group(self, user_id: int, invite_code: str) -> FamilyGroup:
        """Attach ``user_id`` to the group behind ``invite_code``.

        Membership is single-valued: joining replaces any previous group.
        """
        group = self.get_group_by_invite_code(invite_code)
        self.store.update_user_family_group(user_id, group.id)
        self.store.create_activity(
            user_id=user_id,
            family_group_id=group.id,
            action=ActivityAction.JOINED_GROUP.value,
        )
        logger.info(f"User {user_id} joined family group {group.id}")
        return group

    def get_group_with_members(self, family_group_id: int | None) -> tuple[FamilyGroup, list[User]]:
        if family_group_id is None:
            raise NotFoundError("No family group")
        group = self.store.get_family_group(family_group_id)
        if group is None:
            raise NotFoundError("Family group not found")
        return group, self.store.get_family_members(group.id)

    def get_invite_preview(self, invite_code: str) -> dict[str, Any]:
        """Public summary of a group for the invite landing page."""
        group = self.get_group_by_invite_code(invite_code)
        return {
            "id": group.id,
            "name": group.name,
            "invite_code": group.invite_code,
            "member_count": len(self.store.get_family_members(group.id)),
        }

    def get_activity_feed(
        self, family_group_id: int | None, limit: int, viewer_id: int | None = None
    ) -> list[dict[str, Any]]:
        """Newest activities of the group with actor and target names attached.

        When reservations are hidden from owners, the viewer does not see
        reservations of their own items.
        """
        if family_group_id is None:
            return []

        hidden = viewer_id if self.settings.hide_reservations_from_owner else None
        activities = self.store.get_family_activities(
            family_group_id, limit=limit, hide_reserved_for=hidden
        )
        names: dict[int, User | None] = {}

        def lookup(user_id: int | None) -> dict[str, Any] | None:
            if user_id is None:
                return None
            if user_id not in names:
                names[user_id] = self.store.get_user(user_id)
            user = names[user_id]
            return {"id": user.id, "name": user.name} if user else None

        return [
            {
                "id": activity.id,
                "user_id": activity.user_id,
                "family_group_id": activity.family_group_id,
                "action": activity.action,
                "item_name": activity.item_name,
                "target_user_id": activity.target_user_id,
                "created_at": activity.created_at,
                "user": lookup(activity.user_id),
                "target_user": lookup(activity.target_user_id),
            }
            for activity in activities
        ]
