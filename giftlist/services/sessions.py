"""Session table: opaque bearer tokens mapped to a cached user snapshot."""

import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from giftlist.config import Settings, get_settings
from giftlist.models.user import User
from giftlist.models.user_session import UserSession

logger = logging.getLogger(__name__)


@dataclass
class SessionUser:
    """Public fields of the authenticated user as cached at login."""

    id: int
    name: str
    email: str | None
    family_group_id: int | None


def new_session_token() -> str:
    """Random URL-safe token with 32 bytes of entropy."""
    return secrets.token_urlsafe(32)


class SessionTable:
    """Durable session storage with a fixed lifetime per token.

    Resolving an unknown, expired or missing token yields ``None``; callers
    treat that as an anonymous request.
    """

    def __init__(self, db: Session, settings: Settings | None = None):
        self.db = db
        self.settings = settings or get_settings()

    def issue(self, user: User) -> str:
        now = datetime.now(UTC)
        token = new_session_token()
        record = UserSession(
            token=token,
            user_id=user.id,
            name=user.name,
            email=user.email,
            family_group_id=user.family_group_id,
            created_at=now,
            expires_at=now + timedelta(minutes=self.settings.session_ttl_minutes),
        )
        self.db.add(record)
        self.db.commit()
        logger.info(f"Issued session for user {record.user_id}")
        return token

    def resolve(self, token: str | None) -> SessionUser | None:
        if not token:
            return None
        record = (
            self.db.query(UserSession)
            .filter(UserSession.token == token, UserSession.expires_at > datetime.now(UTC))
            .first()
        )
        if record is None:
            return None
        return SessionUser(
            id=record.user_id,
            name=record.name,
            email=record.email,
            family_group_id=record.family_group_id,
        )

    def refresh_user(self, token: str, user: User) -> SessionUser | None:
        """Re-copy the user's public fields into the session.

        Must run in the same request as any change to the user's family
        group, otherwise later requests on this token see stale membership.
        """
        record = self.db.query(UserSession).filter(UserSession.token == token).first()
        if record is None:
            return None
        record.name = user.name
        record.email = user.email
        record.family_group_id = user.family_group_id
        self.db.commit()
        return self.resolve(token)

    def revoke(self, token: str) -> bool:
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.token == token)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    def sweep_expired(self) -> int:
        """Delete expired sessions and return how many were removed."""
        deleted = (
            self.db.query(UserSession)
            .filter(UserSession.expires_at <= datetime.now(UTC))
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted
