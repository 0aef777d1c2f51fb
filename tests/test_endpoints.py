"""
Endpoint tests through the FastAPI TestClient.

Each test gets a fresh in-memory database via the ``db_session`` fixture,
which also overrides the app's ``get_db`` dependency.
"""

import uuid

from sqlalchemy.orm import Session

from domain.enums import VoteKind
from domain.models import Recipe, RecipeVote, Subscriber
from test_fixtures import (
    auth_headers,
    client,
    db_session,
    make_profile,
    make_recipe,
    make_vote,
    submit_payload,
    unique_email,
)


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "RecipeShare"


# =============================================================================
# RECIPES
# =============================================================================


def test_create_recipe_and_read_it_back(db_session: Session):
    owner = make_profile(db_session)
    r = client.post("/recipes", json=submit_payload(), headers=auth_headers(owner.id))
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Recipe added successfully!"
    recipe_id = body["data"]["id"]

    r2 = client.get(f"/recipes/{recipe_id}")
    assert r2.status_code == 200
    view = r2.json()
    assert view["owner_name"] == "Sarah Martinez"
    assert view["tags"] == ["italian", "quick"]
    assert [s["step_number"] for s in view["instructions"]] == [1, 2]


def test_create_recipe_anonymous_is_unauthorized(db_session: Session):
    r = client.post("/recipes", json=submit_payload())
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "UNAUTHENTICATED"


def test_create_recipe_blank_title(db_session: Session):
    r = client.post(
        "/recipes", json=submit_payload(title="  "), headers=auth_headers(uuid.uuid4())
    )
    assert r.status_code == 400
    assert r.json()["error"]["details"] == {"field": "title"}


def test_edit_flow(db_session: Session):
    owner = uuid.uuid4()
    recipe = make_recipe(db_session, user_id=owner, categories=["dinner"])

    draft = client.get(f"/recipes/{recipe.id}/draft", headers=auth_headers(owner))
    assert draft.status_code == 200
    assert draft.json()["tags"] == ["dinner"]
    assert draft.json()["instructions"][0] == {"description": "Season the chicken"}

    r = client.put(
        f"/recipes/{recipe.id}",
        json=submit_payload(title="Renamed", tags=[]),
        headers=auth_headers(owner),
    )
    assert r.status_code == 200
    assert r.json()["message"] == "Recipe updated successfully!"
    assert r.json()["data"]["title"] == "Renamed"
    assert r.json()["data"]["tags"] == []


def test_edit_someone_elses_recipe_is_forbidden(db_session: Session):
    recipe = make_recipe(db_session)
    r = client.put(
        f"/recipes/{recipe.id}",
        json=submit_payload(),
        headers=auth_headers(uuid.uuid4()),
    )
    assert r.status_code == 403


def test_delete_recipe(db_session: Session):
    owner = uuid.uuid4()
    recipe = make_recipe(db_session, user_id=owner)
    r = client.delete(f"/recipes/{recipe.id}", headers=auth_headers(owner))
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Recipe deleted"
    assert body["data"] == {"id": str(recipe.id)}
    assert db_session.query(Recipe).count() == 0
    assert client.get(f"/recipes/{recipe.id}").status_code == 404


def test_my_recipes_paginates(db_session: Session):
    owner = uuid.uuid4()
    for i in range(8):
        make_recipe(db_session, user_id=owner, title=f"Mine {i}", minutes_ago=i)

    first = client.get("/recipes/mine", headers=auth_headers(owner)).json()
    assert len(first["items"]) == 6
    assert first["has_more"] is True

    second = client.get(
        "/recipes/mine",
        params={"offset": first["next_offset"]},
        headers=auth_headers(owner),
    ).json()
    assert [c["title"] for c in second["items"]] == ["Mine 6", "Mine 7"]
    assert second["has_more"] is False


def test_my_recipes_requires_login(db_session: Session):
    assert client.get("/recipes/mine").status_code == 401


def test_latest_search_and_category(db_session: Session):
    make_recipe(db_session, title="Pumpkin Soup", categories=["seasonal"], minutes_ago=1)
    make_recipe(db_session, title="Pumpkin Pie", categories=["dessert"], minutes_ago=2)

    latest = client.get("/recipes/latest").json()
    assert [c["title"] for c in latest] == ["Pumpkin Soup", "Pumpkin Pie"]

    hits = client.get("/recipes/search", params={"q": "PUMPKIN"}).json()
    assert len(hits) == 2
    assert hits[0]["matched_on"] == ["title"]

    page = client.get("/recipes/category/seasonal").json()
    assert page["heading"] == "Seasonal Recipes"
    assert [c["title"] for c in page["recipes"]] == ["Pumpkin Soup"]


def test_home_sections(db_session: Session):
    make_recipe(db_session, title="Cake", categories=["featured"])
    r = client.get("/home")
    assert r.status_code == 200
    body = r.json()
    assert [c["title"] for c in body["featured"]] == ["Cake"]
    assert body["popular"] == []


# =============================================================================
# VOTES
# =============================================================================


def test_vote_endpoints(db_session: Session):
    recipe = make_recipe(db_session)
    make_vote(db_session, recipe.id, kind=VoteKind.THUMBS_UP)
    voter = uuid.uuid4()

    r = client.post(
        f"/recipes/{recipe.id}/votes",
        json={"kind": "thumbs_up"},
        headers=auth_headers(voter),
    )
    assert r.status_code == 200
    assert r.json()["counts"] == {"like": 0, "thumbs_up": 2, "thumbs_down": 0}
    assert r.json()["user_vote"] == "thumbs_up"

    r2 = client.get(f"/recipes/{recipe.id}/votes")
    assert r2.json()["user_vote"] is None
    assert r2.json()["counts"]["thumbs_up"] == 2


def test_anonymous_vote_is_rejected(db_session: Session):
    recipe = make_recipe(db_session)
    make_vote(db_session, recipe.id, kind=VoteKind.LIKE)
    make_vote(db_session, recipe.id, kind=VoteKind.THUMBS_UP)
    before = client.get(f"/recipes/{recipe.id}/votes").json()["counts"]

    r = client.post(f"/recipes/{recipe.id}/votes", json={"kind": "like"})
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Please log in to vote"

    after = client.get(f"/recipes/{recipe.id}/votes").json()["counts"]
    assert after == before == {"like": 1, "thumbs_up": 1, "thumbs_down": 0}
    assert db_session.query(RecipeVote).filter_by(recipe_id=recipe.id).count() == 2


def test_unknown_vote_kind_is_a_validation_error(db_session: Session):
    recipe = make_recipe(db_session)
    r = client.post(
        f"/recipes/{recipe.id}/votes",
        json={"kind": "love"},
        headers=auth_headers(uuid.uuid4()),
    )
    assert r.status_code == 422


# =============================================================================
# CATEGORIES, USERS, PROFILES, NEWSLETTER
# =============================================================================


def test_categories_and_suggestions(db_session: Session):
    make_recipe(db_session, categories=["dessert", "dinner", "soup"])
    assert client.get("/categories").json() == ["dessert", "dinner", "soup"]

    r = client.get(
        "/categories/suggestions", params={"q": "d", "selected": ["dinner"]}
    )
    assert r.json()["suggestions"] == ["dessert"]


def test_user_page_and_recipes(db_session: Session):
    profile = make_profile(db_session, profile_type="casual")
    make_recipe(db_session, user_id=profile.id, title="Garden Salad")

    r = client.get(f"/users/{profile.id}")
    assert r.status_code == 200
    assert r.json()["profile"]["full_name"] == "Emma Johnson"
    assert [c["title"] for c in r.json()["recipes"]] == ["Garden Salad"]

    r2 = client.get(f"/users/{profile.id}/recipes")
    assert r2.json()["has_more"] is False


def test_unknown_user_page(db_session: Session):
    r = client.get(f"/users/{uuid.uuid4()}")
    assert r.status_code == 404
    assert r.json()["error"]["message"] == "User not found"


def test_save_and_get_profile(db_session: Session):
    user_id = uuid.uuid4()
    r = client.put(
        "/profiles/me",
        json={"full_name": "Raj Patel", "hobbies": "spices"},
        headers=auth_headers(user_id),
    )
    assert r.status_code == 200
    assert r.json()["data"]["full_name"] == "Raj Patel"

    r2 = client.get(f"/profiles/{user_id}")
    assert r2.json()["hobbies"] == "spices"


def test_newsletter_subscribe(db_session: Session):
    email = unique_email("reader")
    r = client.post("/newsletter/subscribe", json={"email": email})
    assert r.status_code == 201
    assert r.json()["message"] == "Thanks for subscribing!"
    assert db_session.query(Subscriber).count() == 1

    dup = client.post("/newsletter/subscribe", json={"email": email})
    assert dup.status_code == 409
    assert dup.json()["error"]["code"] == "ALREADY_SUBSCRIBED"
