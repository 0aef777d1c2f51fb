"""
Vote Repository - Data access layer for recipe votes
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.enums import VoteKind
from domain.models import RecipeVote


class VoteRepository(BaseRepository[RecipeVote]):
    """Repository for recipe_votes rows"""

    def __init__(self, db: Session):
        super().__init__(db, RecipeVote)

    def kinds_for_recipe(self, recipe_id: UUID) -> List[VoteKind]:
        return [
            kind
            for (kind,) in self.db.query(RecipeVote.vote_type).filter(
                RecipeVote.recipe_id == recipe_id
            )
        ]

    def get_for_user(self, recipe_id: UUID, user_id: UUID) -> Optional[RecipeVote]:
        return (
            self.db.query(RecipeVote)
            .filter(RecipeVote.recipe_id == recipe_id, RecipeVote.user_id == user_id)
            .first()
        )

    def delete_for_user(self, recipe_id: UUID, user_id: UUID) -> int:
        """Remove every vote the user holds on the recipe"""
        count = (
            self.db.query(RecipeVote)
            .filter(RecipeVote.recipe_id == recipe_id, RecipeVote.user_id == user_id)
            .delete(synchronize_session="fetch")
        )
        self.db.flush()
        return count

    def create_vote(self, recipe_id: UUID, user_id: UUID, kind: VoteKind) -> RecipeVote:
        return self.add(RecipeVote(recipe_id=recipe_id, user_id=user_id, vote_type=kind))
