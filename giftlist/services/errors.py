"""Domain errors raised by the service layer.

Each error carries the HTTP status the API reports it with; the mapping to a
response lives in ``giftlist.main``.
"""

from fastapi import status


class GiftListError(Exception):
    """Base class for errors that end a request."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    message: str = "Request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(GiftListError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid data"


class AuthRequiredError(GiftListError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class InvalidCredentialsError(GiftListError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid login"


class NotFoundError(GiftListError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class InvalidInviteCodeError(NotFoundError):
    message = "Invalid invite code"


class AuthorizationError(GiftListError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Not authorized"


class NotOwnerError(AuthorizationError):
    message = "Not authorized"


class SelfActionError(AuthorizationError):
    """Acting on your own item where only other members may."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Cannot do this on your own item"


class SelfReservationError(SelfActionError):
    message = "Cannot reserve your own item"


class NotReservationOwnerError(AuthorizationError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Cannot unreserve this item"


class ConflictError(GiftListError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Conflict"


class AlreadyReservedError(ConflictError):
    message = "Item already reserved"


class DuplicateEmailError(ConflictError):
    message = "A user with this email already exists"


class DuplicateInviteCodeError(Exception):
    """Invite code collided with an existing group on insert."""
