"""Family group API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from giftlist.api.dependencies import (
    get_current_user,
    get_family_service,
    get_session_table,
    get_session_token,
    get_store,
)
from giftlist.schemas.auth import UserResponse
from giftlist.schemas.family_group import (
    FamilyGroupCreate,
    FamilyGroupJoin,
    FamilyGroupResponse,
    FamilyGroupWithMembers,
    InvitePreview,
)
from giftlist.services.family_service import FamilyService
from giftlist.services.sessions import SessionTable, SessionUser
from giftlist.services.store import RecordStore

router = APIRouter(prefix="/api/family-groups", tags=["family-groups"])


def sync_session(
    store: RecordStore, sessions: SessionTable, token: str | None, user: SessionUser
) -> None:
    """Copy the user's new group membership into their session."""
    if not token:
        return
    refreshed = store.get_user(user.id)
    if refreshed is not None:
        sessions.refresh_user(token, refreshed)


@router.post("", response_model=FamilyGroupResponse)
def create_family_group(
    group_data: FamilyGroupCreate,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    family: Annotated[FamilyService, Depends(get_family_service)],
    store: Annotated[RecordStore, Depends(get_store)],
    sessions: Annotated[SessionTable, Depends(get_session_table)],
    token: Annotated[str | None, Depends(get_session_token)],
):
    """Create a family group and join it."""
    group = family.create_group(current_user.id, group_data.name)
    sync_session(store, sessions, token, current_user)
    return group


@router.post("/join", response_model=FamilyGroupResponse)
def join_family_group(
    join_data: FamilyGroupJoin,
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    family: Annotated[FamilyService, Depends(get_family_service)],
    store: Annotated[RecordStore, Depends(get_store)],
    sessions: Annotated[SessionTable, Depends(get_session_table)],
    token: Annotated[str | None, Depends(get_session_token)],
):
    """Join a family group by invite code, leaving any previous group."""
    group = family.join_group(current_user.id, join_data.invite_code)
    sync_session(store, sessions, token, current_user)
    return group


@router.get("/current", response_model=FamilyGroupWithMembers)
def get_current_family_group(
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    family: Annotated[FamilyService, Depends(get_family_service)],
):
    """Get the requester's family group with its members."""
    group, members = family.get_group_with_members(current_user.family_group_id)
    response = FamilyGroupResponse.model_validate(group)
    return FamilyGroupWithMembers(
        **response.model_dump(),
        members=[UserResponse.model_validate(member) for member in members],
    )


@router.get("/invite/{invite_code}", response_model=InvitePreview)
def preview_invite(
    invite_code: str,
    family: Annotated[FamilyService, Depends(get_family_service)],
):
    """Public summary of the group behind an invite code."""
    return family.get_invite_preview(invite_code)
