"""
Tests for the vote state machine and VoteService with a real session.
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, UnauthorizedError
from domain.enums import VoteKind
from domain.models import RecipeVote
from domain.votes import VoteChange, VoteState, empty_counts, transition
from services.vote_service import VoteService
from test_fixtures import db_session, make_recipe, make_vote


def counts(like=0, up=0, down=0):
    return {VoteKind.LIKE: like, VoteKind.THUMBS_UP: up, VoteKind.THUMBS_DOWN: down}


# =============================================================================
# STATE MACHINE
# =============================================================================


def test_first_vote_creates():
    state, change = transition(VoteState(), VoteKind.LIKE)
    assert change is VoteChange.CREATE
    assert state.user_kind is VoteKind.LIKE
    assert state.counts == counts(like=1)


def test_same_kind_again_toggles_off():
    current = VoteState(counts=counts(like=3), user_kind=VoteKind.LIKE)
    state, change = transition(current, VoteKind.LIKE)
    assert change is VoteChange.DELETE
    assert state.user_kind is None
    assert state.counts == counts(like=2)


def test_other_kind_replaces():
    current = VoteState(counts=counts(up=5, down=1), user_kind=VoteKind.THUMBS_UP)
    state, change = transition(current, VoteKind.THUMBS_DOWN)
    assert change is VoteChange.REPLACE
    assert state.user_kind is VoteKind.THUMBS_DOWN
    assert state.counts == counts(up=4, down=2)


def test_counts_never_go_negative():
    current = VoteState(counts=empty_counts(), user_kind=VoteKind.THUMBS_DOWN)
    state, _ = transition(current, VoteKind.THUMBS_DOWN)
    assert state.count(VoteKind.THUMBS_DOWN) == 0


def test_transition_does_not_mutate_previous_state():
    current = VoteState(counts=counts(like=1), user_kind=None)
    transition(current, VoteKind.LIKE)
    assert current.counts == counts(like=1)


def test_state_from_rows_tallies_kinds():
    state = VoteState.from_rows(
        [VoteKind.LIKE, VoteKind.LIKE, "thumbs_down"], user_kind=VoteKind.LIKE
    )
    assert state.counts == counts(like=2, down=1)


# =============================================================================
# VOTE SERVICE
# =============================================================================


def test_vote_state_for_anonymous_reader(db_session: Session):
    recipe = make_recipe(db_session)
    make_vote(db_session, recipe.id, kind=VoteKind.LIKE)
    make_vote(db_session, recipe.id, kind=VoteKind.THUMBS_UP)

    state = VoteService.get_vote_state(db_session, recipe.id)
    assert state.user_kind is None
    assert state.counts == counts(like=1, up=1)


def test_cast_vote_requires_login(db_session: Session):
    recipe = make_recipe(db_session)
    with pytest.raises(UnauthorizedError) as exc:
        VoteService.cast_vote(db_session, recipe.id, VoteKind.LIKE, None)
    assert exc.value.message == "Please log in to vote"


def test_cast_vote_on_missing_recipe(db_session: Session):
    with pytest.raises(NotFoundError):
        VoteService.cast_vote(db_session, uuid.uuid4(), VoteKind.LIKE, uuid.uuid4())


def test_cast_toggle_and_switch_persist_one_row(db_session: Session):
    recipe = make_recipe(db_session)
    voter = uuid.uuid4()

    state = VoteService.cast_vote(db_session, recipe.id, VoteKind.THUMBS_UP, voter)
    assert state.user_kind is VoteKind.THUMBS_UP

    state = VoteService.cast_vote(db_session, recipe.id, VoteKind.THUMBS_DOWN, voter)
    assert state.counts == counts(down=1)
    rows = db_session.query(RecipeVote).filter_by(recipe_id=recipe.id).all()
    assert [r.vote_type for r in rows] == [VoteKind.THUMBS_DOWN]

    state = VoteService.cast_vote(db_session, recipe.id, VoteKind.THUMBS_DOWN, voter)
    assert state.user_kind is None
    assert db_session.query(RecipeVote).filter_by(recipe_id=recipe.id).count() == 0


def test_returned_state_matches_persisted_tallies(db_session: Session):
    recipe = make_recipe(db_session)
    make_vote(db_session, recipe.id, kind=VoteKind.LIKE)
    voter = uuid.uuid4()

    returned = VoteService.cast_vote(db_session, recipe.id, VoteKind.LIKE, voter)
    reread = VoteService.get_vote_state(db_session, recipe.id, voter)
    assert returned == reread


def test_anonymous_vote_leaves_tallies_untouched(db_session: Session):
    recipe = make_recipe(db_session)
    make_vote(db_session, recipe.id, kind=VoteKind.LIKE)
    make_vote(db_session, recipe.id, kind=VoteKind.THUMBS_DOWN)
    before = VoteService.get_vote_state(db_session, recipe.id)

    with pytest.raises(UnauthorizedError):
        VoteService.cast_vote(db_session, recipe.id, VoteKind.THUMBS_DOWN, None)

    assert VoteService.get_vote_state(db_session, recipe.id) == before
    assert db_session.query(RecipeVote).filter_by(recipe_id=recipe.id).count() == 2
