"""Vote routes - per-recipe tallies and vote casting"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID

from api.dependencies import AuthContext, get_auth_context, get_db
from domain.schemas.vote_schemas import VoteRequest, VoteStateResponse
from services.vote_service import VoteService

router = APIRouter(prefix="/recipes", tags=["Votes"])


@router.get("/{recipe_id}/votes", response_model=VoteStateResponse)
def get_votes(
    recipe_id: UUID,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """Counts per vote kind and the acting user's own vote (anonymous readers allowed)."""
    state = VoteService.get_vote_state(db, recipe_id, auth.user_id)
    return VoteService.to_response(recipe_id, state)


@router.post("/{recipe_id}/votes", response_model=VoteStateResponse)
def cast_vote(
    recipe_id: UUID,
    vote: VoteRequest,
    auth: AuthContext = Depends(get_auth_context),
    db: Session = Depends(get_db),
):
    """Cast, toggle off, or switch the acting user's vote."""
    state = VoteService.cast_vote(db, recipe_id, vote.kind, auth.user_id)
    return VoteService.to_response(recipe_id, state)
