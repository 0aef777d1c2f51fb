"""Pydantic schemas for recipe votes."""

from pydantic import BaseModel
from typing import Optional
from uuid import UUID

from domain.enums import VoteKind


class VoteRequest(BaseModel):
    kind: VoteKind


class VoteCountsResponse(BaseModel):
    like: int = 0
    thumbs_up: int = 0
    thumbs_down: int = 0


class VoteStateResponse(BaseModel):
    recipe_id: UUID
    counts: VoteCountsResponse
    user_vote: Optional[VoteKind] = None
