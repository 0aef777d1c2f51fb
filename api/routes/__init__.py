"""API routes package"""

from . import (
    health,
    recipes,
    votes,
    categories,
    users,
    profiles,
    newsletter,
    uploads,
)

__all__ = [
    "health",
    "recipes",
    "votes",
    "categories",
    "users",
    "profiles",
    "newsletter",
    "uploads",
]
