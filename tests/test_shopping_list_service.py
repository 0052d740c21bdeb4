"""Tests for the shopping list service."""

import asyncio
import json
from dataclasses import replace

from recipe_finder.domain.recipes import Ingredient, recipe_from_payload
from recipe_finder.services.recipes import RecipeService
from recipe_finder.services.shopping_list import SHOPPING_LIST_KEY, ShoppingListService
from tests.conftest import FakeMealDbClient, InMemoryKeyValueStore, meal_payload


def test_add_ingredient_is_case_insensitive(store: InMemoryKeyValueStore) -> None:
    service = ShoppingListService.load(store)

    first = service.add_ingredient("52772", "Casserole", "Salt", "1 tsp")
    second = service.add_ingredient("52772", "Casserole", "salt", "2 tsp")

    assert first is not None
    assert second is None
    assert len(service.items) == 1
    assert service.is_in_shopping_list("52772", "SALT")


def test_same_ingredient_for_different_recipes_is_kept(
    store: InMemoryKeyValueStore,
) -> None:
    service = ShoppingListService.load(store)

    service.add_ingredient("1", "Soup", "Salt", "")
    service.add_ingredient("2", "Stew", "Salt", "")

    assert len(service.items) == 2


def test_add_all_ingredients_is_idempotent(store: InMemoryKeyValueStore) -> None:
    service = ShoppingListService.load(store)
    recipe = recipe_from_payload(meal_payload())

    first = service.add_all_ingredients(recipe)
    snapshot = service.items
    second = service.add_all_ingredients(recipe)

    assert len(first) == 4
    assert second == []
    assert service.items == snapshot
    assert service.is_recipe_in_shopping_list("52772")


def test_add_all_ingredients_skips_existing_and_repeated(
    store: InMemoryKeyValueStore,
) -> None:
    service = ShoppingListService.load(store)
    service.add_ingredient("52772", "Casserole", "WATER", "1 l")
    recipe = recipe_from_payload(meal_payload())
    recipe = replace(
        recipe,
        ingredients=(*recipe.ingredients, Ingredient("Soy Sauce", "1 tbsp")),
    )

    added = service.add_all_ingredients(recipe)

    assert [item.ingredient for item in added] == [
        "soy sauce",
        "brown sugar",
        "chicken breasts",
    ]
    assert [item.measure for item in service.items if item.ingredient == "WATER"] == [
        "1 l"
    ]


def test_item_ids_are_unique_and_prefixed(store: InMemoryKeyValueStore) -> None:
    service = ShoppingListService.load(store)
    service.add_all_ingredients(recipe_from_payload(meal_payload()))

    ids = [item.id for item in service.items]

    assert len(set(ids)) == len(ids)
    assert all(item_id.startswith("52772-") for item_id in ids)


def test_toggle_remove_and_clear(store: InMemoryKeyValueStore) -> None:
    service = ShoppingListService.load(store)
    service.add_all_ingredients(recipe_from_payload(meal_payload()))
    service.add_ingredient("99", "Toast", "Bread", "2 slices")
    first_id = service.items[0].id

    service.toggle_checked(first_id)
    assert service.items[0].checked is True
    service.toggle_checked(first_id)
    assert service.items[0].checked is False

    service.remove_ingredient(first_id)
    assert first_id not in [item.id for item in service.items]

    service.remove_all_from_recipe("52772")
    assert not service.is_recipe_in_shopping_list("52772")
    assert service.is_recipe_in_shopping_list("99")

    service.clear_list()
    assert service.items == []
    assert json.loads(store.slots[SHOPPING_LIST_KEY]) == []


def test_every_mutation_is_persisted(store: InMemoryKeyValueStore) -> None:
    service = ShoppingListService.load(store)

    item = service.add_ingredient("1", "Soup", "Leek", "1")
    assert item is not None
    service.toggle_checked(item.id)
    service.remove_ingredient(item.id)
    service.clear_list()

    assert store.writes == 4


def test_round_trip_preserves_items(store: InMemoryKeyValueStore) -> None:
    service = ShoppingListService.load(store)
    service.add_all_ingredients(recipe_from_payload(meal_payload()))
    service.toggle_checked(service.items[1].id)

    restored = ShoppingListService.load(store)

    assert restored.items == service.items
    assert restored.items[1].checked is True


def test_load_ignores_unparseable_snapshot() -> None:
    store = InMemoryKeyValueStore(slots={SHOPPING_LIST_KEY: "{broken"})

    service = ShoppingListService.load(store)

    assert service.items == []


def test_add_ingredients_by_recipe_id_fetches_recipe(
    store: InMemoryKeyValueStore, mealdb_client: FakeMealDbClient
) -> None:
    service = ShoppingListService.load(store)

    added = asyncio.run(
        service.add_ingredients_by_recipe_id("52772", RecipeService(mealdb_client))
    )

    assert len(added) == 4
    assert mealdb_client.calls == [("lookup", "52772")]


def test_add_ingredients_by_unknown_recipe_id_adds_nothing(
    store: InMemoryKeyValueStore,
) -> None:
    client = FakeMealDbClient(lookup_payloads={"0": {"meals": None}})
    service = ShoppingListService.load(store)

    added = asyncio.run(
        service.add_ingredients_by_recipe_id("0", RecipeService(client))
    )

    assert added == []
    assert service.items == []
