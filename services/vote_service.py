from typing import Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from domain.enums import VoteKind
from domain.votes import VoteChange, VoteState, transition
from domain.schemas.vote_schemas import VoteCountsResponse, VoteStateResponse
from repositories import RecipeRepository, VoteRepository
from app.exceptions import BackendWriteError, NotFoundError, UnauthorizedError

logger = logging.getLogger("recipeshare.votes")


class VoteService:
    """Vote tallies and mutually exclusive vote transitions"""

    @staticmethod
    def get_vote_state(
        db: Session, recipe_id: UUID, user_id: Optional[UUID] = None
    ) -> VoteState:
        """Counts per kind plus the acting user's current kind, if any."""
        votes = VoteRepository(db)
        user_kind = None
        if user_id is not None:
            own = votes.get_for_user(recipe_id, user_id)
            user_kind = VoteKind(own.vote_type) if own else None
        return VoteState.from_rows(votes.kinds_for_recipe(recipe_id), user_kind)

    @staticmethod
    def cast_vote(
        db: Session, recipe_id: UUID, kind: VoteKind, user_id: Optional[UUID]
    ) -> VoteState:
        """
        Apply one vote transition for the acting user.

        The returned state is computed from the pre-transition snapshot, not
        re-read after the write.
        """
        if user_id is None:
            raise UnauthorizedError("Please log in to vote")
        if not RecipeRepository(db).exists(recipe_id):
            raise NotFoundError(f"Recipe {recipe_id} not found")

        current = VoteService.get_vote_state(db, recipe_id, user_id)
        new_state, change = transition(current, kind)

        votes = VoteRepository(db)
        try:
            # delete-then-insert runs inside one transaction
            votes.delete_for_user(recipe_id, user_id)
            if change in (VoteChange.CREATE, VoteChange.REPLACE):
                votes.create_vote(recipe_id, user_id, new_state.user_kind)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception(f"vote_failed recipe_id={recipe_id} user_id={user_id}")
            raise BackendWriteError("Failed to register vote") from e

        logger.info(
            f"vote_cast recipe_id={recipe_id} user_id={user_id} "
            f"kind={VoteKind(kind).value} change={change.value}"
        )
        return new_state

    @staticmethod
    def to_response(recipe_id: UUID, state: VoteState) -> VoteStateResponse:
        return VoteStateResponse(
            recipe_id=recipe_id,
            counts=VoteCountsResponse(
                like=state.count(VoteKind.LIKE),
                thumbs_up=state.count(VoteKind.THUMBS_UP),
                thumbs_down=state.count(VoteKind.THUMBS_DOWN),
            ),
            user_vote=state.user_kind,
        )
