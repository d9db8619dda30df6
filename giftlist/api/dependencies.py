"""FastAPI dependencies for authentication, storage and services."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from giftlist.config import Settings, get_settings
from giftlist.database import get_db
from giftlist.services.errors import AuthRequiredError
from giftlist.services.family_service import FamilyService
from giftlist.services.sessions import SessionTable, SessionUser
from giftlist.services.store import RecordStore, SqlRecordStore
from giftlist.services.wishlist_service import WishlistService

session_header = APIKeyHeader(name="X-Session-Id", auto_error=False)


def get_store(db: Annotated[Session, Depends(get_db)]) -> RecordStore:
    """Get the record store for this request."""
    return SqlRecordStore(db)


def get_session_table(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionTable:
    """Get the session table for this request."""
    return SessionTable(db, settings)


def get_session_token(token: Annotated[str | None, Depends(session_header)]) -> str | None:
    """Raw ``X-Session-Id`` header, if any."""
    return token


def get_optional_user(
    token: Annotated[str | None, Depends(get_session_token)],
    sessions: Annotated[SessionTable, Depends(get_session_table)],
) -> SessionUser | None:
    """Session user for the token, or None for anonymous requests."""
    return sessions.resolve(token)


def get_current_user(
    user: Annotated[SessionUser | None, Depends(get_optional_user)],
) -> SessionUser:
    """Get the authenticated user or fail with 401."""
    if user is None:
        raise AuthRequiredError()
    return user


def get_family_service(
    store: Annotated[RecordStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> FamilyService:
    """Get family service with dependencies."""
    return FamilyService(store, settings)


def get_wishlist_service(
    store: Annotated[RecordStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> WishlistService:
    """Get wishlist service with dependencies."""
    return WishlistService(store, settings)
