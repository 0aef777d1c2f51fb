"""
Recipe write operations: create, edit and delete a recipe with its
ingredients, instructions and category assignments.

Children are never diffed: every save deletes the recipe's child rows and
inserts them again from the submitted draft. All steps of one save run in a
single session transaction, so a failing step leaves no partial record.
"""

from typing import Iterable, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from domain.models import Recipe
from domain.editors import RecipeDraft
from repositories import (
    RecipeRepository,
    IngredientRepository,
    InstructionRepository,
    CategoryRepository,
    RecipeCategoryRepository,
)
from app.exceptions import (
    BackendWriteError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger("recipeshare.recipe")


class RecipeService:
    """Business logic for recipe writes"""

    @staticmethod
    def create_recipe(
        db: Session, draft: RecipeDraft, user_id: Optional[UUID]
    ) -> Recipe:
        """Insert the recipe row, then its children, in one transaction."""
        if user_id is None:
            raise UnauthorizedError("Please log in to add a recipe")

        with draft.begin_submit():
            draft.validate()
            try:
                recipe = RecipeRepository(db).add(
                    Recipe(
                        user_id=user_id,
                        title=draft.title.strip(),
                        description=draft.description or "",
                        image_url=draft.image_url,
                    )
                )
                RecipeService._write_children(db, recipe.id, draft)
                db.commit()
                db.refresh(recipe)
            except SQLAlchemyError as e:
                db.rollback()
                logger.exception(f"recipe_create_failed user_id={user_id}")
                raise BackendWriteError("Failed to add recipe") from e

        logger.info(
            f"recipe_created recipe_id={recipe.id} user_id={user_id} "
            f"tags_count={len(draft.tags)}"
        )
        return recipe

    @staticmethod
    def update_recipe(
        db: Session, recipe_id: UUID, draft: RecipeDraft, user_id: Optional[UUID]
    ) -> Recipe:
        """Update scalar fields and replace every child row of the recipe."""
        recipe = RecipeService.get_owned_recipe(db, recipe_id, user_id)

        with draft.begin_submit():
            draft.validate()
            try:
                recipe.title = draft.title.strip()
                recipe.description = draft.description or ""
                recipe.image_url = draft.image_url
                db.flush()
                RecipeService._write_children(db, recipe.id, draft)
                db.commit()
                db.refresh(recipe)
            except SQLAlchemyError as e:
                db.rollback()
                logger.exception(f"recipe_update_failed recipe_id={recipe_id}")
                raise BackendWriteError("Failed to update recipe") from e

        logger.info(f"recipe_updated recipe_id={recipe_id} user_id={user_id}")
        return recipe

    @staticmethod
    def delete_recipe(db: Session, recipe_id: UUID, user_id: Optional[UUID]) -> bool:
        """Delete an owned recipe; children and votes cascade."""
        recipe = RecipeService.get_owned_recipe(db, recipe_id, user_id)
        try:
            RecipeRepository(db).delete(recipe.id)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception(f"recipe_delete_failed recipe_id={recipe_id}")
            raise BackendWriteError("Failed to delete recipe") from e

        logger.info(f"recipe_deleted recipe_id={recipe_id} user_id={user_id}")
        return True

    @staticmethod
    def get_owned_recipe(
        db: Session, recipe_id: UUID, user_id: Optional[UUID]
    ) -> Recipe:
        if user_id is None:
            raise UnauthorizedError("Please log in to manage your recipes")
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if not recipe:
            raise NotFoundError(f"Recipe {recipe_id} not found")
        if recipe.user_id != user_id:
            logger.warning(
                f"recipe_access_denied recipe_id={recipe_id} user_id={user_id}"
            )
            raise ForbiddenError("You can only change your own recipes")
        return recipe

    @staticmethod
    def _write_children(db: Session, recipe_id: UUID, draft: RecipeDraft) -> None:
        IngredientRepository(db).replace_for_recipe(
            recipe_id, draft.ingredients.submission_rows()
        )
        InstructionRepository(db).replace_for_recipe(
            recipe_id, draft.instructions.submission_rows()
        )
        RecipeService._assign_categories(db, recipe_id, draft.tags)

    @staticmethod
    def _assign_categories(db: Session, recipe_id: UUID, tags: Iterable[str]) -> None:
        """Clear the recipe's assignments, then link one category row per tag."""
        categories = CategoryRepository(db)
        links = RecipeCategoryRepository(db)

        links.delete_for_recipe(recipe_id)
        for tag in tags:
            category = categories.get_or_create(tag)
            links.ensure(recipe_id, category.id)
