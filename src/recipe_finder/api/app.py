"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import TypeVar

from fastapi import FastAPI, HTTPException, Request, status

from recipe_finder.api.models import (
    AddIngredientRequest,
    EnhanceRecipeRequest,
    MealPlanRequest,
    QueryRequest,
)
from recipe_finder.app_logging import configure_logging
from recipe_finder.containers import AppContainer
from recipe_finder.domain.suggestions import PlanResult, RecipeResult, Suggestion
from recipe_finder.services.assistant import AssistantUnavailableError
from recipe_finder.services.suggestions import NOT_FOUND_MESSAGE

T = TypeVar("T")


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if not app.state.container.assistant_service.enabled:
            logger.info("Assistant disabled, using keyword heuristics")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    async def _call_assistant(operation: Awaitable[T], action: str) -> T:
        try:
            return await operation
        except AssistantUnavailableError as exc:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Assistant is disabled",
            ) from exc
        except Exception as exc:
            logger.exception("Assistant %s failed", action)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"Failed to {action}",
            ) from exc

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/home")
    async def home(request: Request) -> dict[str, object]:
        """Return a featured recipe and the first categories."""
        featured, categories = await _container(request).recipe_service.home_feed()
        return {
            "featured": asdict(featured) if featured else None,
            "categories": [asdict(category) for category in categories],
        }

    @app.get("/api/recipes/random")
    async def random_recipe(request: Request) -> dict[str, object]:
        """Return one random recipe."""
        recipe = await _container(request).recipe_service.random_recipe()
        return {"recipe": asdict(recipe) if recipe else None}

    @app.get("/api/recipes/search")
    async def search_recipes(request: Request, name: str) -> dict[str, object]:
        """Search recipes by name."""
        recipes = await _container(request).recipe_service.search_by_name(name)
        return {"recipes": [asdict(recipe) for recipe in recipes]}

    @app.get("/api/recipes/{recipe_id}")
    async def recipe_detail(recipe_id: str, request: Request) -> dict[str, object]:
        """Return the full recipe for an id."""
        recipe = await _container(request).recipe_service.get_recipe(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"recipe": asdict(recipe)}

    @app.get("/api/categories")
    async def categories(request: Request) -> dict[str, object]:
        """List recipe categories."""
        items = await _container(request).recipe_service.list_categories()
        return {"categories": [asdict(category) for category in items]}

    @app.get("/api/categories/{category}/recipes")
    async def category_recipes(category: str, request: Request) -> dict[str, object]:
        """List abbreviated recipes in a category."""
        summaries = await _container(request).recipe_service.filter_by_category(
            category
        )
        return {"recipes": [asdict(summary) for summary in summaries]}

    @app.post("/api/assistant/suggest")
    async def suggest(body: QueryRequest, request: Request) -> dict[str, object]:
        """Suggest a recipe or a meal plan for a free-text query."""
        result = await _container(request).suggestion_service.get_suggestion(
            body.query
        )
        return _suggestion_payload(result)

    @app.post("/api/analyze-intent")
    async def analyze_intent(body: QueryRequest, request: Request) -> dict[str, object]:
        """Classify a query with the assistant."""
        assistant = _container(request).assistant_service
        intent = await _call_assistant(
            assistant.classify_intent(body.query), "analyze intent"
        )
        return intent.model_dump()

    @app.post("/api/enhance-recipe")
    async def enhance_recipe(
        body: EnhanceRecipeRequest, request: Request
    ) -> dict[str, object]:
        """Enhance a recipe with the assistant."""
        assistant = _container(request).assistant_service
        enhancement = await _call_assistant(
            assistant.enhance_recipe(
                body.recipe_name, body.ingredients, body.instructions
            ),
            "enhance recipe",
        )
        return enhancement.model_dump()

    @app.post("/api/generate-meal-plan")
    async def generate_meal_plan(
        body: MealPlanRequest, request: Request
    ) -> dict[str, object]:
        """Generate a seven-day meal plan with the assistant."""
        assistant = _container(request).assistant_service
        plan = await _call_assistant(
            assistant.generate_meal_plan(body.preferences), "generate meal plan"
        )
        return plan.model_dump()

    @app.get("/api/shopping-list")
    async def shopping_list(request: Request) -> dict[str, object]:
        """Return the shopping list."""
        service = _container(request).shopping_list_service
        return {"items": [asdict(item) for item in service.items]}

    @app.get("/api/shopping-list/contains")
    async def shopping_list_contains(
        request: Request, recipe_id: str, ingredient: str | None = None
    ) -> dict[str, bool]:
        """Check whether a recipe or one of its ingredients is listed."""
        service = _container(request).shopping_list_service
        if ingredient is None:
            return {"in_list": service.is_recipe_in_shopping_list(recipe_id)}
        return {"in_list": service.is_in_shopping_list(recipe_id, ingredient)}

    @app.post("/api/shopping-list/items")
    async def add_ingredient(
        body: AddIngredientRequest, request: Request
    ) -> dict[str, object]:
        """Add one ingredient to the shopping list."""
        service = _container(request).shopping_list_service
        item = service.add_ingredient(
            body.recipe_id, body.recipe_name, body.ingredient, body.measure
        )
        return {"added": [asdict(item)] if item else []}

    @app.post("/api/shopping-list/recipes/{recipe_id}")
    async def add_recipe_ingredients(
        recipe_id: str, request: Request
    ) -> dict[str, object]:
        """Add all ingredients of a recipe to the shopping list."""
        state_container = _container(request)
        service = state_container.shopping_list_service
        added = await service.add_ingredients_by_recipe_id(
            recipe_id, state_container.recipe_service
        )
        return {"added": [asdict(item) for item in added]}

    @app.post("/api/shopping-list/items/{item_id}/toggle")
    async def toggle_item(item_id: str, request: Request) -> dict[str, str]:
        """Toggle the checked flag of an item."""
        _container(request).shopping_list_service.toggle_checked(item_id)
        return {"status": "ok"}

    @app.delete("/api/shopping-list/items/{item_id}")
    async def remove_item(item_id: str, request: Request) -> dict[str, str]:
        """Remove one item from the shopping list."""
        _container(request).shopping_list_service.remove_ingredient(item_id)
        return {"status": "ok"}

    @app.delete("/api/shopping-list/recipes/{recipe_id}")
    async def remove_recipe_items(recipe_id: str, request: Request) -> dict[str, str]:
        """Remove every item that came from a recipe."""
        _container(request).shopping_list_service.remove_all_from_recipe(recipe_id)
        return {"status": "ok"}

    @app.delete("/api/shopping-list")
    async def clear_shopping_list(request: Request) -> dict[str, str]:
        """Clear the shopping list."""
        _container(request).shopping_list_service.clear_list()
        return {"status": "ok"}

    return app


def _suggestion_payload(result: Suggestion | None) -> dict[str, object]:
    """Render a suggestion result as a tagged JSON object."""
    if isinstance(result, RecipeResult):
        return {"kind": result.kind, "suggestion": result.suggestion.model_dump()}
    if isinstance(result, PlanResult):
        return {"kind": result.kind, "plan": result.plan.model_dump()}
    return {"kind": "none", "message": NOT_FOUND_MESSAGE}
