"""
Domain enums for RecipeShare.
Contains the enumeration types used across the domain models.
"""

import enum


class VoteKind(str, enum.Enum):
    """Mutually exclusive reactions a user may register against a recipe"""

    LIKE = "like"
    THUMBS_UP = "thumbs_up"
    THUMBS_DOWN = "thumbs_down"


class ReservedCategory(str, enum.Enum):
    """Category names that drive the curated home-page sections"""

    FEATURED = "featured"
    POPULAR = "popular"
    SEASONAL = "seasonal"
