"""Activity feed API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from giftlist.api.dependencies import get_current_user, get_family_service
from giftlist.schemas.activity import ActivityResponse
from giftlist.services.family_service import FamilyService
from giftlist.services.sessions import SessionUser

router = APIRouter(prefix="/api/activities", tags=["activities"])


@router.get("", response_model=list[ActivityResponse])
def get_activities(
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    family: Annotated[FamilyService, Depends(get_family_service)],
    limit: int | None = Query(default=None, ge=1, le=100, description="Max entries"),
):
    """Recent activity in the requester's family group, newest first."""
    return family.get_activity_feed(
        current_user.family_group_id,
        limit=limit or family.settings.activity_feed_limit,
        viewer_id=current_user.id,
    )
