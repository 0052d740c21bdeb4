"""Generative assistant operations: intent, enhancement and meal plans."""

from dataclasses import dataclass
from typing import Protocol

from recipe_finder.domain.intents import Intent
from recipe_finder.domain.suggestions import MealPlan, RecipeEnhancement

SUPPORTED_CATEGORIES = (
    "Beef",
    "Chicken",
    "Dessert",
    "Lamb",
    "Miscellaneous",
    "Pasta",
    "Pork",
    "Seafood",
    "Side",
    "Starter",
    "Vegan",
    "Vegetarian",
    "Breakfast",
    "Goat",
)

_NULLABLE_STRING = {"anyOf": [{"type": "string"}, {"type": "null"}]}

INTENT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "type": {
            "type": "string",
            "enum": ["search", "category", "random", "plan", "none"],
        },
        "keyword": _NULLABLE_STRING,
        "thinking": _NULLABLE_STRING,
    },
    "required": ["type", "keyword", "thinking"],
    "additionalProperties": False,
}

ENHANCEMENT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "refined_steps": {"type": "array", "items": {"type": "string"}},
        "substitutions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "ingredient": {"type": "string"},
                    "alternative": {"type": "string"},
                },
                "required": ["ingredient", "alternative"],
                "additionalProperties": False,
            },
        },
        "tips": {"type": "array", "items": {"type": "string"}},
        "calories": {"anyOf": [{"type": "integer", "minimum": 0}, {"type": "null"}]},
        "dietary_info": {
            "type": "object",
            "properties": {
                "vegan": {"type": "boolean"},
                "keto": {"type": "boolean"},
                "gluten_free": {"type": "boolean"},
                "dairy_free": {"type": "boolean"},
            },
            "required": ["vegan", "keto", "gluten_free", "dairy_free"],
            "additionalProperties": False,
        },
        "allergens": {"type": "array", "items": {"type": "string"}},
    },
    "required": [
        "refined_steps",
        "substitutions",
        "tips",
        "calories",
        "dietary_info",
        "allergens",
    ],
    "additionalProperties": False,
}

MEAL_PLAN_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "meal_plan": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "day": {"type": "string"},
                    "breakfast": {"type": "string"},
                    "lunch": {"type": "string"},
                    "dinner": {"type": "string"},
                    "calories": {"type": "integer", "minimum": 0},
                },
                "required": ["day", "breakfast", "lunch", "dinner", "calories"],
                "additionalProperties": False,
            },
        },
        "shopping_list": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["meal_plan", "shopping_list"],
    "additionalProperties": False,
}

INTENT_INSTRUCTIONS = f"""\
You are a helper for a Recipe Finder app. Map the user's request to one action:
1. "search": the user asks for a specific dish (e.g. "Lasagne", "Cake", \
"something with chicken").
2. "category": the user asks for a type of food (e.g. "Vegetarian", "Seafood", \
"Breakfast").
3. "random": the user asks for a random suggestion.
4. "plan": the user asks for a meal plan (e.g. "Plan my meals", \
"Weekly keto plan").
5. "none": the request is unrelated to food.

Set "keyword" to the search term or category name to use with TheMealDB, or to \
the user's preferences for "plan" (e.g. "keto", "vegetarian", "1500 cal"). \
Set "thinking" to a brief explanation of the choice.

Supported categories: {", ".join(SUPPORTED_CATEGORIES)}.
If the user asks for a category not in the list (e.g. "Dinner"), use "search" \
with a relevant keyword or "random".
"""

ENHANCEMENT_INSTRUCTIONS = """\
You are an expert chef assistant. For the recipe provided:
1. Provide 3-5 ingredient substitutions with dietary restrictions in mind \
(e.g. vegan, gluten-free).
2. Provide 2-3 pro cooking tips for this specific dish.
3. Refine the cooking instructions into clear steps if they are unclear or \
poorly formatted.
4. Estimate the calories per serving as an integer.
5. Determine dietary suitability (vegan, keto, gluten_free, dairy_free).
6. List common allergens present (e.g. Peanuts, Dairy, Gluten, Shellfish, \
Soy, Eggs).
"""

MEAL_PLAN_INSTRUCTIONS = """\
You are an AI nutrition planner. Generate a 7-day meal plan, Monday through \
Sunday, based on the user's preferences. Each day names a breakfast, lunch and \
dinner and an estimated calorie total. Include a shopping list of the items \
needed for the whole week.
"""


class AssistantUnavailableError(RuntimeError):
    """Raised when the assistant is disabled or not configured."""


class AssistantClient(Protocol):
    """Interface for structured LLM completions."""

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
        """Return structured output matching the schema."""


@dataclass
class AssistantService:
    """Service that prepares assistant prompts and validates results."""

    client: AssistantClient | None
    model: str
    reasoning_effort: str | None = None
    store: bool = False

    @property
    def enabled(self) -> bool:
        """Return true when an assistant client is configured."""
        return self.client is not None

    async def classify_intent(self, query: str) -> Intent:
        """Classify a free-text query into an intent."""
        raw = await self._complete(
            instructions=INTENT_INSTRUCTIONS,
            prompt=query,
            schema_name="intent",
            schema=INTENT_SCHEMA,
        )
        return Intent.model_validate(raw)

    async def enhance_recipe(
        self, recipe_name: str, ingredients: list[str], instructions: str
    ) -> RecipeEnhancement:
        """Ask for substitutions, tips, calories and dietary flags."""
        prompt = (
            f"Recipe: {recipe_name}\n"
            f"Ingredients: {', '.join(ingredients)}\n"
            f"Instructions: {instructions}"
        )
        raw = await self._complete(
            instructions=ENHANCEMENT_INSTRUCTIONS,
            prompt=prompt,
            schema_name="recipe_enhancement",
            schema=ENHANCEMENT_SCHEMA,
        )
        return RecipeEnhancement.model_validate(raw)

    async def generate_meal_plan(self, preferences: str) -> MealPlan:
        """Generate a seven-day meal plan for the given preferences."""
        raw = await self._complete(
            instructions=MEAL_PLAN_INSTRUCTIONS,
            prompt=f"Preferences: {preferences}",
            schema_name="meal_plan",
            schema=MEAL_PLAN_SCHEMA,
        )
        return MealPlan.model_validate(raw)

    async def _complete(
        self,
        *,
        instructions: str,
        prompt: str,
        schema_name: str,
        schema: dict[str, object],
    ) -> dict[str, object]:
        if self.client is None:
            raise AssistantUnavailableError("Assistant is disabled")
        return await self.client.complete_json(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            instructions=instructions,
            prompt=prompt,
            schema_name=schema_name,
            schema=schema,
        )
