"""Enums for model fields."""

from enum import Enum


class Priority(str, Enum):
    """How much the owner wants a wishlist item."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ActivityAction(str, Enum):
    """Actions recorded in a family group's activity feed."""

    ADDED_ITEM = "added_item"
    RESERVED_ITEM = "reserved_item"
    CREATED_GROUP = "created_group"
    JOINED_GROUP = "joined_group"
