"""Recipe and meal plan suggestions for free-text queries."""

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from recipe_finder.domain.intents import Intent
from recipe_finder.domain.recipes import Recipe, RecipeSummary
from recipe_finder.domain.suggestions import (
    MealPlan,
    MealPlanDay,
    PlanResult,
    RecipeEnhancement,
    RecipeResult,
    RecipeSuggestion,
    SuggestedIngredient,
    Suggestion,
)
from recipe_finder.services.assistant import AssistantService
from recipe_finder.services.fallback import with_fallback
from recipe_finder.services.intents import IntentResolver
from recipe_finder.services.recipes import RecipeService

_logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "I couldn't find a matching recipe. Try asking for something else!"

_FALLBACK_WEEK = (
    ("Monday", "Greek yogurt with berries", "Chicken salad wrap", "Salmon with rice"),
    ("Tuesday", "Oatmeal with banana", "Lentil soup", "Beef stir-fry"),
    ("Wednesday", "Scrambled eggs on toast", "Tuna pasta salad", "Vegetable curry"),
    ("Thursday", "Greek yogurt with berries", "Chicken salad wrap", "Pork chops"),
    ("Friday", "Oatmeal with banana", "Lentil soup", "Baked cod with potatoes"),
    ("Saturday", "Pancakes", "Caprese sandwich", "Spaghetti bolognese"),
    ("Sunday", "Scrambled eggs on toast", "Tuna pasta salad", "Roast chicken"),
)

FALLBACK_MEAL_PLAN = MealPlan(
    meal_plan=[
        MealPlanDay(
            day=day, breakfast=breakfast, lunch=lunch, dinner=dinner, calories=2000
        )
        for day, breakfast, lunch, dinner in _FALLBACK_WEEK
    ],
    shopping_list=[
        "Greek yogurt",
        "Berries",
        "Oats",
        "Bananas",
        "Eggs",
        "Bread",
        "Chicken",
        "Salmon",
        "Rice",
        "Lentils",
        "Mixed vegetables",
        "Pasta",
    ],
)


def to_suggestion(recipe: Recipe) -> RecipeSuggestion:
    """Normalize a recipe into an unenhanced suggestion."""
    return RecipeSuggestion(
        recipe_id=recipe.id,
        recipe_name=recipe.name,
        category=recipe.category,
        area=recipe.area,
        ingredients=[
            SuggestedIngredient(name=ingredient.name, amount=ingredient.measure)
            for ingredient in recipe.ingredients
        ],
        instructions=split_instructions(recipe.instructions),
        video_link=recipe.youtube,
        image=recipe.thumbnail or None,
        tags=list(recipe.tags),
    )


def split_instructions(instructions: str) -> list[str]:
    """Split free-text instructions into non-blank steps."""
    return [line.strip() for line in instructions.splitlines() if line.strip()]


def apply_enhancement(
    suggestion: RecipeSuggestion, enhancement: RecipeEnhancement
) -> RecipeSuggestion:
    """Merge enhancement fields that are present into the suggestion."""
    updates: dict[str, object] = {}
    if enhancement.refined_steps:
        updates["instructions"] = list(enhancement.refined_steps)
    for name in ("substitutions", "tips", "calories", "dietary_info", "allergens"):
        value = getattr(enhancement, name)
        if value is not None:
            updates[name] = value
    return suggestion.model_copy(update=updates)


@dataclass
class SuggestionService:
    """Turns a query into a recipe suggestion or a meal plan."""

    intent_resolver: IntentResolver
    recipe_service: RecipeService
    assistant: AssistantService
    chooser: Callable[[Sequence[RecipeSummary]], RecipeSummary] = random.choice

    async def get_suggestion(self, query: str) -> Suggestion | None:
        """Return a suggestion, or None when nothing could be found."""
        intent = await self.intent_resolver.resolve(query)
        _logger.info(
            "Resolved intent: type=%s keyword=%s", intent.type, intent.keyword
        )
        if intent.type == "plan":
            preferences = (intent.keyword or "").strip() or query
            return PlanResult(plan=await self.meal_plan(preferences))

        recipe = await self._find_recipe(intent)
        if recipe is None:
            return None

        suggestion = await self.enhance(to_suggestion(recipe))
        return RecipeResult(suggestion=suggestion)

    async def meal_plan(self, preferences: str) -> MealPlan:
        """Return a generated meal plan, else the built-in one."""
        return await with_fallback(
            lambda: self.assistant.generate_meal_plan(preferences),
            lambda: FALLBACK_MEAL_PLAN.model_copy(deep=True),
            action="Meal plan generation",
        )

    async def enhance(self, suggestion: RecipeSuggestion) -> RecipeSuggestion:
        """Return the suggestion with any enhancement merged in."""
        ingredients = [
            f"{item.amount} {item.name}".strip() for item in suggestion.ingredients
        ]

        async def enhanced() -> RecipeSuggestion:
            enhancement = await self.assistant.enhance_recipe(
                suggestion.recipe_name,
                ingredients,
                "\n".join(suggestion.instructions),
            )
            return apply_enhancement(suggestion, enhancement)

        return await with_fallback(
            enhanced, lambda: suggestion, action="Recipe enhancement"
        )

    async def _find_recipe(self, intent: Intent) -> Recipe | None:
        keyword = intent.keyword or ""
        if intent.type == "random":
            return await self.recipe_service.random_recipe()
        if intent.type == "category" and keyword.strip():
            summaries = await self.recipe_service.filter_by_category(keyword)
            if not summaries:
                return None
            # Filter results lack ingredients and instructions.
            picked = self.chooser(summaries)
            return await self.recipe_service.get_recipe(picked.id)
        if intent.type == "search" and keyword.strip():
            matches = await self.recipe_service.search_by_name(keyword)
            return matches[0] if matches else None
        return None
