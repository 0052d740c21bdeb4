"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from recipe_finder.adapters.json_file_store import JsonFileKeyValueStore
from recipe_finder.adapters.mealdb_client import HttpxMealDbClient
from recipe_finder.adapters.openai_assistant_client import OpenAIAssistantClient
from recipe_finder.config import Settings
from recipe_finder.services.assistant import AssistantService
from recipe_finder.services.intents import IntentResolver
from recipe_finder.services.recipes import RecipeService
from recipe_finder.services.shopping_list import ShoppingListService
from recipe_finder.services.suggestions import SuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_service: RecipeService
    assistant_service: AssistantService
    intent_resolver: IntentResolver
    suggestion_service: SuggestionService
    shopping_list_service: ShoppingListService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mealdb_client = HttpxMealDbClient.create(
        base_url=resolved_settings.mealdb_base_url,
        timeout=resolved_settings.mealdb_timeout_seconds,
    )
    recipe_service = RecipeService(mealdb_client)

    assistant_client: OpenAIAssistantClient | None = None
    if resolved_settings.assistant_is_available:
        assistant_client = OpenAIAssistantClient.create(
            api_key=resolved_settings.openai_api_key,
            base_url=resolved_settings.openai_base_url,
        )
    assistant_service = AssistantService(
        client=assistant_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    intent_resolver = IntentResolver(assistant_service)
    suggestion_service = SuggestionService(
        intent_resolver=intent_resolver,
        recipe_service=recipe_service,
        assistant=assistant_service,
    )
    shopping_list_service = ShoppingListService.load(
        JsonFileKeyValueStore(Path(resolved_settings.shopping_list_path))
    )

    async def close_resources() -> None:
        await mealdb_client.close()
        if assistant_client is not None:
            await assistant_client.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_service=recipe_service,
        assistant_service=assistant_service,
        intent_resolver=intent_resolver,
        suggestion_service=suggestion_service,
        shopping_list_service=shopping_list_service,
        close_resources=close_resources,
    )
