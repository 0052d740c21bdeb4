"""Shopping list kept in memory and mirrored to a key-value store."""

import logging
import time
import uuid
from dataclasses import dataclass, field, replace
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from recipe_finder.domain.recipes import Recipe
from recipe_finder.domain.shopping import ShoppingListItem
from recipe_finder.services.recipes import RecipeService

SHOPPING_LIST_KEY = "shoppingList"

_ITEMS_ADAPTER = TypeAdapter(list[ShoppingListItem])

_logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Persistence interface for string slots."""

    def get(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""


def new_item_id(recipe_id: str) -> str:
    """Return a unique item id derived from the recipe id and creation time."""
    return f"{recipe_id}-{time.time_ns() // 1_000_000}-{uuid.uuid4().hex[:9]}"


@dataclass
class ShoppingListService:
    """Shopping list operations; every mutation is persisted."""

    store: KeyValueStore
    _items: list[ShoppingListItem] = field(default_factory=list)

    @classmethod
    def load(cls, store: KeyValueStore) -> "ShoppingListService":
        """Rehydrate the list from the store, empty if missing or unreadable."""
        raw = store.get(SHOPPING_LIST_KEY)
        if not raw:
            return cls(store=store)
        try:
            items = _ITEMS_ADAPTER.validate_json(raw)
        except ValidationError:
            _logger.warning("Discarding unreadable shopping list snapshot")
            items = []
        return cls(store=store, _items=items)

    @property
    def items(self) -> list[ShoppingListItem]:
        """Return a snapshot of the current items."""
        return list(self._items)

    def add_ingredient(
        self, recipe_id: str, recipe_name: str, ingredient: str, measure: str
    ) -> ShoppingListItem | None:
        """Add one ingredient unless the recipe already lists it."""
        if self.is_in_shopping_list(recipe_id, ingredient):
            return None
        item = ShoppingListItem(
            id=new_item_id(recipe_id),
            recipe_id=recipe_id,
            recipe_name=recipe_name,
            ingredient=ingredient,
            measure=measure,
        )
        self._items.append(item)
        self._persist()
        return item

    def add_all_ingredients(self, recipe: Recipe) -> list[ShoppingListItem]:
        """Add every ingredient of a recipe that is not listed yet."""
        added: list[ShoppingListItem] = []
        for ingredient in recipe.ingredients:
            if self.is_in_shopping_list(recipe.id, ingredient.name) or any(
                item.matches(recipe.id, ingredient.name) for item in added
            ):
                continue
            added.append(
                ShoppingListItem(
                    id=new_item_id(recipe.id),
                    recipe_id=recipe.id,
                    recipe_name=recipe.name,
                    ingredient=ingredient.name,
                    measure=ingredient.measure,
                )
            )
        self._items.extend(added)
        self._persist()
        return added

    async def add_ingredients_by_recipe_id(
        self, recipe_id: str, recipe_service: RecipeService
    ) -> list[ShoppingListItem]:
        """Fetch a recipe by id and add all of its ingredients."""
        recipe = await recipe_service.get_recipe(recipe_id)
        if recipe is None:
            _logger.warning("Recipe not found for shopping list: id=%s", recipe_id)
            return []
        return self.add_all_ingredients(recipe)

    def remove_ingredient(self, item_id: str) -> None:
        """Remove one item by id."""
        self._items = [item for item in self._items if item.id != item_id]
        self._persist()

    def remove_all_from_recipe(self, recipe_id: str) -> None:
        """Remove every item that came from a recipe."""
        self._items = [item for item in self._items if item.recipe_id != recipe_id]
        self._persist()

    def toggle_checked(self, item_id: str) -> None:
        """Flip the checked flag of one item."""
        self._items = [
            replace(item, checked=not item.checked) if item.id == item_id else item
            for item in self._items
        ]
        self._persist()

    def clear_list(self) -> None:
        """Remove all items."""
        self._items = []
        self._persist()

    def is_in_shopping_list(self, recipe_id: str, ingredient: str) -> bool:
        """Return true when the recipe's ingredient is listed, ignoring case."""
        return any(item.matches(recipe_id, ingredient) for item in self._items)

    def is_recipe_in_shopping_list(self, recipe_id: str) -> bool:
        """Return true when any item comes from the recipe."""
        return any(item.recipe_id == recipe_id for item in self._items)

    def _persist(self) -> None:
        payload = _ITEMS_ADAPTER.dump_json(self._items).decode()
        self.store.set(SHOPPING_LIST_KEY, payload)
