"""Recipe lookups against TheMealDB with failures normalized to empty results."""

import asyncio
import logging
from dataclasses import dataclass

from recipe_finder.adapters.mealdb_client import MealDbClient
from recipe_finder.domain.recipes import (
    Category,
    Recipe,
    RecipeSummary,
    category_from_payload,
    recipe_from_payload,
    summary_from_payload,
)

_logger = logging.getLogger(__name__)


@dataclass
class RecipeService:
    """Read-only recipe catalog service."""

    client: MealDbClient

    async def random_recipe(self) -> Recipe | None:
        """Return one random recipe, or None on failure."""
        try:
            payload = await self.client.random_meal()
            return _first_recipe(payload)
        except Exception as exc:
            _logger.warning("Random recipe lookup failed: %s", exc)
            return None

    async def search_by_name(self, name: str) -> list[Recipe]:
        """Search recipes by name; empty on no match or failure."""
        try:
            payload = await self.client.search_meals(name)
            return [recipe_from_payload(meal) for meal in _meals(payload)]
        except Exception as exc:
            _logger.warning("Recipe search failed: query=%s error=%s", name, exc)
            return []

    async def list_categories(self) -> list[Category]:
        """Return all categories; empty on failure."""
        try:
            payload = await self.client.list_categories()
            categories = payload.get("categories") or []
            return [category_from_payload(category) for category in categories]
        except Exception as exc:
            _logger.warning("Category listing failed: %s", exc)
            return []

    async def filter_by_category(self, category: str) -> list[RecipeSummary]:
        """Return abbreviated recipes in a category; empty on failure."""
        try:
            payload = await self.client.filter_by_category(category)
            return [summary_from_payload(meal) for meal in _meals(payload)]
        except Exception as exc:
            _logger.warning(
                "Category filter failed: category=%s error=%s", category, exc
            )
            return []

    async def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return the full recipe for an id, or None."""
        try:
            payload = await self.client.lookup_meal(recipe_id)
            return _first_recipe(payload)
        except Exception as exc:
            _logger.warning("Recipe lookup failed: id=%s error=%s", recipe_id, exc)
            return None

    async def home_feed(self, limit: int = 8) -> tuple[Recipe | None, list[Category]]:
        """Fetch a featured recipe and the first categories concurrently."""
        featured, categories = await asyncio.gather(
            self.random_recipe(), self.list_categories()
        )
        return featured, categories[:limit]


def _meals(payload: dict[str, object]) -> list[dict[str, object]]:
    """Return the meals list, treating null as no results."""
    meals = payload.get("meals")
    return meals if isinstance(meals, list) else []


def _first_recipe(payload: dict[str, object]) -> Recipe | None:
    meals = _meals(payload)
    if not meals:
        return None
    return recipe_from_payload(meals[0])
