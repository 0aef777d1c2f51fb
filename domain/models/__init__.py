"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.recipe import (
    Recipe,
    Ingredient,
    Instruction,
    Category,
    RecipeCategory,
    RecipeVote,
)
from domain.models.profile import Profile, Subscriber

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Recipe models
    "Recipe",
    "Ingredient",
    "Instruction",
    "Category",
    "RecipeCategory",
    "RecipeVote",
    # Profile models
    "Profile",
    "Subscriber",
]
