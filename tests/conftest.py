"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from recipe_finder.adapters.mealdb_client import MealDbClient
from recipe_finder.config import Settings
from recipe_finder.containers import AppContainer
from recipe_finder.services.assistant import AssistantClient, AssistantService
from recipe_finder.services.intents import IntentResolver
from recipe_finder.services.recipes import RecipeService
from recipe_finder.services.shopping_list import KeyValueStore, ShoppingListService
from recipe_finder.services.suggestions import SuggestionService


def meal_payload(meal_id: str = "52772", name: str = "Teriyaki Chicken Casserole"):
    """Return a full TheMealDB meal object."""
    payload: dict[str, object] = {
        "idMeal": meal_id,
        "strMeal": name,
        "strCategory": "Chicken",
        "strArea": "Japanese",
        "strInstructions": (
            "Preheat oven to 350F.\r\n\r\nCombine soy sauce and water.\r\nBake."
        ),
        "strMealThumb": "wvpsxx1468256321.jpg",
        "strTags": "Meat,Casserole",
        "strYoutube": "https://www.youtube.com/watch?v=4aZr5hZXP_s",
    }
    slots = [
        ("soy sauce", "3/4 cup"),
        ("water", "1/2 cup"),
        ("brown sugar", "1/4 cup"),
        ("chicken breasts", "2"),
    ]
    for index in range(1, 21):
        ingredient, measure = slots[index - 1] if index <= len(slots) else ("", " ")
        payload[f"strIngredient{index}"] = ingredient
        payload[f"strMeasure{index}"] = measure
    return payload


@dataclass
class FakeMealDbClient(MealDbClient):
    """Fake TheMealDB client with in-memory responses that records calls."""

    random_payload: dict[str, object] = field(
        default_factory=lambda: {"meals": [meal_payload()]}
    )
    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "meals": [meal_payload(), meal_payload("52773", "Honey Teriyaki Salmon")]
        }
    )
    categories_payload: dict[str, object] = field(
        default_factory=lambda: {
            "categories": [
                {
                    "idCategory": "1",
                    "strCategory": "Beef",
                    "strCategoryThumb": "beef.png",
                    "strCategoryDescription": "Beef is the culinary name for meat.",
                },
                {
                    "idCategory": "3",
                    "strCategory": "Seafood",
                    "strCategoryThumb": "seafood.png",
                    "strCategoryDescription": "Seafood is any form of sea life.",
                },
            ]
        }
    )
    filter_payload: dict[str, object] = field(
        default_factory=lambda: {
            "meals": [
                {"idMeal": "52959", "strMeal": "Baked salmon", "strMealThumb": "a.jpg"},
                {"idMeal": "52819", "strMeal": "Cajun prawns", "strMealThumb": "b.jpg"},
                {"idMeal": "52944", "strMeal": "Escovitch", "strMealThumb": "c.jpg"},
            ]
        }
    )
    lookup_payloads: dict[str, dict[str, object]] = field(default_factory=dict)
    error: Exception | None = None
    calls: list[tuple[str, str | None]] = field(default_factory=list)

    async def random_meal(self) -> dict[str, object]:
        return self._respond("random", None, self.random_payload)

    async def search_meals(self, name: str) -> dict[str, object]:
        return self._respond("search", name, self.search_payload)

    async def list_categories(self) -> dict[str, object]:
        return self._respond("categories", None, self.categories_payload)

    async def filter_by_category(self, category: str) -> dict[str, object]:
        return self._respond("filter", category, self.filter_payload)

    async def lookup_meal(self, meal_id: str) -> dict[str, object]:
        payload = self.lookup_payloads.get(meal_id, {"meals": [meal_payload(meal_id)]})
        return self._respond("lookup", meal_id, payload)

    def _respond(
        self, action: str, argument: str | None, payload: dict[str, object]
    ) -> dict[str, object]:
        self.calls.append((action, argument))
        if self.error is not None:
            raise self.error
        return payload


@dataclass
class FakeAssistantClient(AssistantClient):
    """Fake assistant returning payloads keyed by schema name."""

    payloads: dict[str, dict[str, object]] = field(default_factory=dict)
    errors: dict[str, Exception] = field(default_factory=dict)
    prompts: list[tuple[str, str]] = field(default_factory=list)

    async def complete_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        self.prompts.append((schema_name, prompt))
        if schema_name in self.errors:
            raise self.errors[schema_name]
        if schema_name not in self.payloads:
            raise httpx.ConnectError("assistant unreachable")
        return self.payloads[schema_name]


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    slots: dict[str, str] = field(default_factory=dict)
    writes: int = 0

    def get(self, key: str) -> str | None:
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        self.slots[key] = value
        self.writes += 1


def enhancement_payload() -> dict[str, object]:
    return {
        "refined_steps": ["Preheat the oven.", "Mix the sauce.", "Bake for 30 min."],
        "substitutions": [{"ingredient": "soy sauce", "alternative": "tamari"}],
        "tips": ["Rest the chicken before slicing."],
        "calories": 520,
        "dietary_info": {
            "vegan": False,
            "keto": False,
            "gluten_free": False,
            "dairy_free": True,
        },
        "allergens": ["Soy", "Gluten"],
    }


def meal_plan_payload() -> dict[str, object]:
    days = [
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ]
    return {
        "meal_plan": [
            {
                "day": day,
                "breakfast": "Eggs and avocado",
                "lunch": "Chicken salad",
                "dinner": "Steak with greens",
                "calories": 1800,
            }
            for day in days
        ],
        "shopping_list": ["Eggs", "Avocado", "Chicken", "Steak", "Greens"],
    }


def build_suggestion_service(
    mealdb_client: FakeMealDbClient,
    assistant_client: FakeAssistantClient | None,
) -> SuggestionService:
    assistant = AssistantService(client=assistant_client, model="gpt-5.2")
    return SuggestionService(
        intent_resolver=IntentResolver(assistant),
        recipe_service=RecipeService(mealdb_client),
        assistant=assistant,
        chooser=lambda summaries: summaries[1],
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        openai_api_key="openai-key",
        shopping_list_path=str(tmp_path / "shopping_list.json"),
    )


@pytest.fixture
def mealdb_client() -> FakeMealDbClient:
    return FakeMealDbClient()


@pytest.fixture
def assistant_client() -> FakeAssistantClient:
    return FakeAssistantClient()


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def container(
    settings: Settings,
    mealdb_client: FakeMealDbClient,
    assistant_client: FakeAssistantClient,
    store: InMemoryKeyValueStore,
) -> AppContainer:
    suggestion_service = build_suggestion_service(mealdb_client, assistant_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_service=suggestion_service.recipe_service,
        assistant_service=suggestion_service.assistant,
        intent_resolver=suggestion_service.intent_resolver,
        suggestion_service=suggestion_service,
        shopping_list_service=ShoppingListService.load(store),
        close_resources=close_resources,
    )
