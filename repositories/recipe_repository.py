"""
Recipe Repository - Data access layer for recipes and their child rows
"""

from typing import List, Optional, Sequence
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Recipe, Ingredient, Instruction
from domain.schemas.recipe_schemas import IngredientRow, InstructionStep


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe rows"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def _newest_first(self):
        return self.db.query(Recipe).order_by(
            Recipe.created_at.desc(), Recipe.id.desc()
        )

    def list_recent(self, limit: int, offset: int = 0) -> List[Recipe]:
        """Most recent recipes site-wide"""
        return self._newest_first().offset(offset).limit(limit).all()

    def list_by_owner(
        self, owner_id: UUID, offset: int = 0, limit: Optional[int] = None
    ) -> List[Recipe]:
        """Recipes of one owner, newest first, range-limited when limit is given"""
        query = self._newest_first().filter(Recipe.user_id == owner_id)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient rows"""

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def list_for_recipe(self, recipe_id: UUID) -> List[Ingredient]:
        """Ingredients in insertion order"""
        return (
            self.db.query(Ingredient)
            .filter(Ingredient.recipe_id == recipe_id)
            .order_by(Ingredient.position)
            .all()
        )

    def delete_for_recipe(self, recipe_id: UUID) -> int:
        count = (
            self.db.query(Ingredient)
            .filter(Ingredient.recipe_id == recipe_id)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return count

    def replace_for_recipe(
        self, recipe_id: UUID, rows: Sequence[IngredientRow]
    ) -> List[Ingredient]:
        """Delete every ingredient of the recipe, then insert ``rows`` in order"""
        self.delete_for_recipe(recipe_id)
        objs = [
            Ingredient(
                recipe_id=recipe_id,
                name=row.name,
                quantity=row.quantity,
                position=position,
            )
            for position, row in enumerate(rows)
        ]
        self.db.add_all(objs)
        self.db.flush()
        return objs


class InstructionRepository(BaseRepository[Instruction]):
    """Repository for instruction rows"""

    def __init__(self, db: Session):
        super().__init__(db, Instruction)

    def list_for_recipe(self, recipe_id: UUID) -> List[Instruction]:
        """Instructions ordered by step number"""
        return (
            self.db.query(Instruction)
            .filter(Instruction.recipe_id == recipe_id)
            .order_by(Instruction.step_number)
            .all()
        )

    def delete_for_recipe(self, recipe_id: UUID) -> int:
        count = (
            self.db.query(Instruction)
            .filter(Instruction.recipe_id == recipe_id)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return count

    def replace_for_recipe(
        self, recipe_id: UUID, steps: Sequence[InstructionStep]
    ) -> List[Instruction]:
        """Delete every instruction of the recipe, then insert the numbered ``steps``"""
        self.delete_for_recipe(recipe_id)
        objs = [
            Instruction(
                recipe_id=recipe_id,
                step_number=step.step_number,
                description=step.description,
            )
            for step in steps
        ]
        self.db.add_all(objs)
        self.db.flush()
        return objs
