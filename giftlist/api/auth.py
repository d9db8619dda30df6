"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from giftlist.api.dependencies import (
    get_current_user,
    get_session_table,
    get_session_token,
    get_store,
)
from giftlist.schemas.auth import (
    AuthResponse,
    ChildLogin,
    MeResponse,
    MessageResponse,
    UserLogin,
    UserRegister,
    UserResponse,
)
from giftlist.services.auth import authenticate_child, authenticate_user, register_user
from giftlist.services.errors import ValidationError
from giftlist.services.sessions import SessionTable, SessionUser
from giftlist.services.store import RecordStore

router = APIRouter(prefix="/api/auth", tags=["auth"])


def start_session(sessions: SessionTable, user) -> AuthResponse:
    session_id = sessions.issue(user)
    return AuthResponse(user=UserResponse.model_validate(user), session_id=session_id)


@router.post("/register", response_model=AuthResponse)
def register(
    user_data: UserRegister,
    store: Annotated[RecordStore, Depends(get_store)],
    sessions: Annotated[SessionTable, Depends(get_session_table)],
):
    """Register a new user, joining a family group when an invite code is given."""
    user = register_user(
        store,
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        invite_code=user_data.invite_code,
    )
    return start_session(sessions, user)


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    store: Annotated[RecordStore, Depends(get_store)],
    sessions: Annotated[SessionTable, Depends(get_session_table)],
):
    """Login with email and password."""
    if not credentials.email:
        raise ValidationError("Email is required")
    user = authenticate_user(store, credentials.email, credentials.password)
    return start_session(sessions, user)


@router.post("/login-child", response_model=AuthResponse)
def login_child(
    credentials: ChildLogin,
    store: Annotated[RecordStore, Depends(get_store)],
    sessions: Annotated[SessionTable, Depends(get_session_table)],
):
    """Login with the family invite code, member name and password."""
    if not credentials.family_code or not credentials.name:
        raise ValidationError("Family code and name are required")
    user = authenticate_child(
        store,
        credentials.family_code.strip().upper(),
        credentials.name,
        credentials.password,
    )
    return start_session(sessions, user)


@router.post("/logout", response_model=MessageResponse)
def logout(
    current_user: Annotated[SessionUser, Depends(get_current_user)],
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionTable, Depends(get_session_table)],
):
    """Logout by removing the session."""
    if token:
        sessions.revoke(token)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=MeResponse)
def get_me(
    current_user: Annotated[SessionUser, Depends(get_current_user)],
):
    """Get current user information."""
    return MeResponse(user=UserResponse.model_validate(current_user))
