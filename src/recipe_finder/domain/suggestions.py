"""Models for assistant suggestions, enhancements and meal plans."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field, field_validator

MEAL_PLAN_DAYS = 7


class SuggestedIngredient(BaseModel):
    """Ingredient line shown with a suggestion."""

    name: str
    amount: str


class Substitution(BaseModel):
    """Ingredient substitution proposed by the assistant."""

    ingredient: str
    alternative: str


class DietaryInfo(BaseModel):
    """Dietary suitability flags."""

    vegan: bool
    keto: bool
    gluten_free: bool
    dairy_free: bool


class RecipeEnhancement(BaseModel):
    """Structured output of the recipe enhancement call."""

    refined_steps: list[str] | None = None
    substitutions: list[Substitution] | None = None
    tips: list[str] | None = None
    calories: int | None = Field(default=None, ge=0)
    dietary_info: DietaryInfo | None = None
    allergens: list[str] | None = None


class RecipeSuggestion(BaseModel):
    """Recipe view returned by the assistant, optionally enhanced.

    Enhancement fields left as ``None`` are unknown, not false.
    """

    recipe_id: str
    recipe_name: str
    category: str
    area: str
    ingredients: list[SuggestedIngredient]
    instructions: list[str]
    video_link: str | None = None
    image: str | None = None
    tags: list[str] = Field(default_factory=list)
    substitutions: list[Substitution] | None = None
    tips: list[str] | None = None
    calories: int | None = None
    dietary_info: DietaryInfo | None = None
    allergens: list[str] | None = None


class MealPlanDay(BaseModel):
    """One day of a meal plan."""

    day: str = Field(min_length=1)
    breakfast: str
    lunch: str
    dinner: str
    calories: int = Field(ge=0)


class MealPlan(BaseModel):
    """Seven-day meal plan with a flat shopping list."""

    meal_plan: list[MealPlanDay]
    shopping_list: list[str]

    @field_validator("meal_plan")
    @classmethod
    def _require_full_week(cls, days: list[MealPlanDay]) -> list[MealPlanDay]:
        if len(days) != MEAL_PLAN_DAYS:
            raise ValueError(f"meal plan must have {MEAL_PLAN_DAYS} days")
        if any(not day.day.strip() for day in days):
            raise ValueError("meal plan days must be named")
        return days


@dataclass(frozen=True)
class RecipeResult:
    """A single recipe suggestion."""

    suggestion: RecipeSuggestion
    kind: Literal["recipe"] = "recipe"


@dataclass(frozen=True)
class PlanResult:
    """A generated or fallback meal plan."""

    plan: MealPlan
    kind: Literal["plan"] = "plan"


Suggestion = RecipeResult | PlanResult
