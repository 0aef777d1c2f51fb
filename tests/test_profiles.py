"""
Tests for ProfileService: lookup, own-profile upsert and the public user page.
"""

import uuid

import pytest
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError, UnauthorizedError
from domain.models import Profile
from domain.schemas.profile_schemas import ProfileUpdateRequest
from services.profile_service import ProfileService
from test_fixtures import db_session, make_profile, make_recipe


def test_get_profile(db_session: Session):
    profile = make_profile(db_session, profile_type="chef")
    found = ProfileService.get_profile(db_session, profile.id)
    assert found.full_name == "Michael Chen"


def test_get_missing_profile(db_session: Session):
    with pytest.raises(NotFoundError) as exc:
        ProfileService.get_profile(db_session, uuid.uuid4())
    assert exc.value.message == "User not found"


def test_upsert_creates_then_updates(db_session: Session):
    user_id = uuid.uuid4()
    created = ProfileService.upsert_own_profile(
        db_session,
        user_id,
        ProfileUpdateRequest(full_name="  Emma Johnson ", hobbies="gardening"),
    )
    assert created.id == user_id
    assert created.full_name == "Emma Johnson"

    ProfileService.upsert_own_profile(
        db_session,
        user_id,
        ProfileUpdateRequest(
            full_name="Emma J.", profile_pic="/profile-images/1-me.png"
        ),
    )
    assert db_session.query(Profile).count() == 1
    stored = db_session.get(Profile, user_id)
    assert stored.full_name == "Emma J."
    assert stored.hobbies == ""
    assert stored.profile_pic == "/profile-images/1-me.png"


def test_upsert_requires_login(db_session: Session):
    with pytest.raises(UnauthorizedError):
        ProfileService.upsert_own_profile(
            db_session, None, ProfileUpdateRequest(full_name="Nobody")
        )


def test_upsert_requires_full_name(db_session: Session):
    with pytest.raises(ServiceValidationError) as exc:
        ProfileService.upsert_own_profile(
            db_session, uuid.uuid4(), ProfileUpdateRequest(full_name="   ")
        )
    assert exc.value.details == {"field": "full_name"}


def test_user_page_lists_all_recipes_newest_first(db_session: Session):
    profile = make_profile(db_session)
    for i in range(8):
        make_recipe(db_session, user_id=profile.id, title=f"Dish {i}", minutes_ago=i)

    page = ProfileService.user_page(db_session, profile.id)
    assert page.profile.full_name == "Sarah Martinez"
    assert [r.title for r in page.recipes] == [f"Dish {i}" for i in range(8)]
    assert {r.username for r in page.recipes} == {"Sarah Martinez"}
