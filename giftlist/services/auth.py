"""Authentication service for password handling and account creation."""

import logging

from passlib.context import CryptContext

from giftlist.models.user import User
from giftlist.services.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    ValidationError,
)
from giftlist.services.family_service import FamilyService
from giftlist.services.store import RecordStore

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def authenticate_user(store: RecordStore, email: str, password: str) -> User:
    """Authenticate a user by email and password."""
    user = store.get_user_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError("Invalid login")
    return user


def authenticate_child(store: RecordStore, family_code: str, name: str, password: str) -> User:
    """Authenticate a member by their group's invite code and their name."""
    user = store.get_user_by_family_code(family_code, name)
    if not user or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError("Invalid family code, name or password")
    return user


def register_user(
    store: RecordStore,
    name: str,
    email: str | None,
    password: str,
    invite_code: str | None = None,
) -> User:
    """Create an account, optionally joining a family group right away.

    Accounts without an email (child accounts) must come with an invite code,
    otherwise they could never log in again.
    """
    if email:
        if store.get_user_by_email(email):
            raise DuplicateEmailError()
    elif not invite_code:
        raise ValidationError("Email is required unless joining with an invite code")

    family = FamilyService(store)
    group = None
    if invite_code:
        # Resolve the code first so a bad code leaves no orphan account behind.
        group = family.get_group_by_invite_code(invite_code)

    user = store.create_user(name=name, email=email or None, password_hash=get_password_hash(password))
    logger.info(f"Registered user {user.id}")

    if group is not None:
        family.join_group(user.id, group.invite_code)
        user = store.get_user(user.id)
    return user
