"""
Shared test fixtures and utilities for the RecipeShare test suite.

This module contains the test client, a database session fixture backed by
in-memory SQLite, and factory helpers that insert realistic rows.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Generator, Iterable, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from api.dependencies import get_db
from domain.models import (
    Base,
    Category,
    Ingredient,
    Instruction,
    Profile,
    Recipe,
    RecipeCategory,
    RecipeVote,
)
from domain.enums import VoteKind
from main import app

client = TestClient(app)

# Realistic default users
REALISTIC_USERS = {
    "default": {"full_name": "Sarah Martinez", "hobbies": "baking, hiking"},
    "chef": {"full_name": "Michael Chen", "hobbies": "wok cooking"},
    "casual": {"full_name": "Emma Johnson", "hobbies": "gardening"},
}

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def unique_email(prefix: str = "test") -> str:
    """Generate unique email address using UUID to avoid conflicts"""
    return f"{prefix}-{uuid.uuid4()}@example.com"


def auth_headers(user_id) -> dict:
    """Headers the auth gateway forwards for a logged-in user"""
    return {"X-User-Id": str(user_id)}


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """
    Create a fresh in-memory database for one test.

    The session is also wired into the app through ``get_db`` so endpoint
    tests and direct service calls see the same rows.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False)
    session = TestingSession()

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield session
    finally:
        app.dependency_overrides.pop(get_db, None)
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


def make_profile(
    db: Session, user_id=None, full_name=None, profile_type: str = "default"
) -> Profile:
    """
    Insert a profile with realistic defaults.

    Example:
        >>> sarah = make_profile(db)
        >>> sarah.full_name
        'Sarah Martinez'
    """
    persona = REALISTIC_USERS.get(profile_type, REALISTIC_USERS["default"])
    profile = Profile(
        id=user_id or uuid.uuid4(),
        full_name=full_name if full_name is not None else persona["full_name"],
        hobbies=persona["hobbies"],
    )
    db.add(profile)
    db.commit()
    return profile


def make_recipe(
    db: Session,
    user_id=None,
    title: str = "Lemon Garlic Chicken",
    description: str = "Pan-seared chicken thighs with lemon and garlic",
    categories: Iterable[str] = (),
    ingredients: Iterable[tuple] = (("chicken thighs", "4"), ("lemon", "1")),
    instructions: Iterable[str] = ("Season the chicken", "Sear until golden"),
    minutes_ago: Optional[int] = None,
) -> Recipe:
    """
    Insert a recipe with children and category links.

    ``minutes_ago`` pins ``created_at`` relative to a fixed base time so
    ordering assertions stay deterministic.
    """
    recipe = Recipe(
        user_id=user_id or uuid.uuid4(),
        title=title,
        description=description,
    )
    if minutes_ago is not None:
        recipe.created_at = BASE_TIME - timedelta(minutes=minutes_ago)
    db.add(recipe)
    db.flush()

    for position, (name, quantity) in enumerate(ingredients):
        db.add(
            Ingredient(
                recipe_id=recipe.id, name=name, quantity=quantity, position=position
            )
        )
    for number, text in enumerate(instructions, start=1):
        db.add(Instruction(recipe_id=recipe.id, step_number=number, description=text))
    for name in categories:
        category = db.query(Category).filter(Category.name == name).first()
        if category is None:
            category = Category(name=name)
            db.add(category)
            db.flush()
        db.add(RecipeCategory(recipe_id=recipe.id, category_id=category.id))

    db.commit()
    return recipe


def make_vote(db: Session, recipe_id, user_id=None, kind=VoteKind.LIKE) -> RecipeVote:
    vote = RecipeVote(recipe_id=recipe_id, user_id=user_id or uuid.uuid4(), vote_type=kind)
    db.add(vote)
    db.commit()
    return vote


def submit_payload(**overrides) -> dict:
    """JSON body of the add/edit recipe form"""
    payload = {
        "title": "Tomato Basil Pasta",
        "description": "Quick weeknight pasta",
        "image_url": None,
        "ingredients": [
            {"name": "spaghetti", "quantity": "400g"},
            {"name": "cherry tomatoes", "quantity": "250g"},
        ],
        "instructions": [
            {"description": "Boil the pasta"},
            {"description": "Toss with tomatoes and basil"},
        ],
        "tags": ["Italian", "quick"],
    }
    payload.update(overrides)
    return payload
