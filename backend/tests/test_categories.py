import pytest

from app.errors import CategoryCycleError, ValidationError
from app.schemas.category import CategoryCreate, CategoryUpdate
from app.services.categories import ancestor_ids, build_category_tree, create_category, get_categories, update_category
from factories import auth_headers, make_category, make_household


def _chain(db, household):
    food = make_category(db, household, name="Food")
    groceries = make_category(db, household, name="Groceries", parent_id=food.id)
    produce = make_category(db, household, name="Produce", parent_id=groceries.id)
    return food, groceries, produce


def test_build_tree_nests_children(db, household):
    food, groceries, produce = _chain(db, household)
    housing = make_category(db, household, name="Housing")

    roots = build_category_tree(get_categories(db, household.id))

    assert [r.name for r in roots] == ["Food", "Housing"]
    assert [c.name for c in roots[0].children] == ["Groceries"]
    assert [c.name for c in roots[0].children[0].children] == ["Produce"]
    assert roots[1].children == []


def test_ancestor_ids_walks_to_root():
    parents = {"c": "b", "b": "a", "a": None}

    assert ancestor_ids(parents, "c") == ["b", "a"]
    assert ancestor_ids(parents, "a") == []


def test_ancestor_ids_stops_on_existing_loop():
    parents = {"a": "b", "b": "a"}

    assert ancestor_ids(parents, "a") == ["b"]


def test_create_category_under_parent(db, household):
    food = make_category(db, household, name="Food")

    created = create_category(db, household.id, CategoryCreate(name="Dining Out", parent_id=food.id, color="#c2410c"))

    assert created.parent_id == food.id
    assert created.household_id == household.id


def test_create_category_with_foreign_parent_fails(db, household):
    other = make_household(db, name="Neighbors")
    foreign = make_category(db, other, name="Their Food")

    with pytest.raises(ValidationError):
        create_category(db, household.id, CategoryCreate(name="Mine", parent_id=foreign.id))


def test_reparent_to_self_is_a_cycle(db, household):
    food, _, _ = _chain(db, household)

    with pytest.raises(CategoryCycleError):
        update_category(db, household.id, food, CategoryUpdate(parent_id=food.id))


def test_reparent_under_descendant_is_a_cycle(db, household):
    food, _, produce = _chain(db, household)

    with pytest.raises(CategoryCycleError) as exc_info:
        update_category(db, household.id, food, CategoryUpdate(parent_id=produce.id))

    assert exc_info.value.violations[0].constraint == "cycle"


def test_reparent_sideways_and_to_root(db, household):
    food, groceries, produce = _chain(db, household)
    housing = make_category(db, household, name="Housing")

    moved = update_category(db, household.id, produce, CategoryUpdate(parent_id=housing.id))
    assert moved.parent_id == housing.id

    detached = update_category(db, household.id, groceries, CategoryUpdate(parent_id=None))
    assert detached.parent_id is None


def test_categories_api(client, db, household, user):
    food, groceries, _ = _chain(db, household)
    headers = auth_headers(user)

    flat = client.get("/api/categories", headers=headers)
    assert [c["name"] for c in flat.json()] == ["Food", "Groceries", "Produce"]

    tree = client.get("/api/categories/tree", headers=headers)
    assert tree.json()[0]["children"][0]["name"] == "Groceries"

    created = client.post("/api/categories", json={"name": "Snacks", "parent_id": groceries.id}, headers=headers)
    assert created.status_code == 201

    cycle = client.patch(f"/api/categories/{food.id}", json={"parent_id": groceries.id}, headers=headers)
    assert cycle.status_code == 422
    assert cycle.json()["errors"][0]["constraint"] == "cycle"

    renamed = client.patch(f"/api/categories/{food.id}", json={"name": "Food & Drink"}, headers=headers)
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Food & Drink"

    missing = client.patch("/api/categories/does-not-exist", json={"name": "x"}, headers=headers)
    assert missing.status_code == 404
