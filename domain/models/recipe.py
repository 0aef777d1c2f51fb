"""
Recipe-related database models.
"""

from datetime import datetime, timezone
import uuid

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Integer,
    UniqueConstraint,
    UUID as SQLUUID,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base
from domain.enums import VoteKind


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Recipe(Base):
    """A user-authored dish entry"""

    __tablename__ = "recipes"

    id = Column(SQLUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(SQLUUID(as_uuid=True), nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    image_url = Column(Text)
    created_at = Column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
        index=True,
    )

    # Relationships
    ingredients = relationship(
        "Ingredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Ingredient.position",
    )
    instructions = relationship(
        "Instruction",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Instruction.step_number",
    )
    category_links = relationship(
        "RecipeCategory", back_populates="recipe", cascade="all, delete-orphan"
    )
    votes = relationship(
        "RecipeVote", back_populates="recipe", cascade="all, delete-orphan"
    )


class Ingredient(Base):
    """Ingredient row of a recipe; position only preserves insertion order"""

    __tablename__ = "ingredients"

    id = Column(SQLUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    recipe_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    quantity = Column(Text, nullable=False, default="")
    position = Column(Integer, nullable=False, default=0)

    recipe = relationship("Recipe", back_populates="ingredients")


class Instruction(Base):
    """Numbered preparation step; step numbers are dense 1..N per recipe"""

    __tablename__ = "instructions"

    id = Column(SQLUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    recipe_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    step_number = Column(Integer, nullable=False)
    description = Column(Text, nullable=False)

    recipe = relationship("Recipe", back_populates="instructions")


class Category(Base):
    """Global, de-duplicated label keyed by its lower-cased name"""

    __tablename__ = "categories"

    id = Column(SQLUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False, unique=True)

    recipe_links = relationship("RecipeCategory", back_populates="category")


class RecipeCategory(Base):
    """Many-to-many join between recipes and categories"""

    __tablename__ = "recipe_categories"

    recipe_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("recipes.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    )

    recipe = relationship("Recipe", back_populates="category_links")
    category = relationship("Category", back_populates="recipe_links")


class RecipeVote(Base):
    """A user's single reaction to a recipe"""

    __tablename__ = "recipe_votes"
    __table_args__ = (
        UniqueConstraint("recipe_id", "user_id", name="uq_recipe_votes_recipe_user"),
    )

    id = Column(SQLUUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    recipe_id = Column(
        SQLUUID(as_uuid=True),
        ForeignKey("recipes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(SQLUUID(as_uuid=True), nullable=False)
    vote_type = Column(
        SQLEnum(VoteKind, values_callable=lambda kinds: [k.value for k in kinds]),
        nullable=False,
    )
    created_at = Column(
        TIMESTAMP(timezone=True), default=utcnow, server_default=func.now()
    )

    recipe = relationship("Recipe", back_populates="votes")
