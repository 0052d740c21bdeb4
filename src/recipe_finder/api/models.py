"""Request bodies for the recipe finder API."""

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    """Free-text query sent to the assistant."""

    query: str = Field(min_length=1)


class EnhanceRecipeRequest(BaseModel):
    """Recipe details to enhance."""

    recipe_name: str
    ingredients: list[str]
    instructions: str


class MealPlanRequest(BaseModel):
    """Preferences for a generated meal plan."""

    preferences: str


class AddIngredientRequest(BaseModel):
    """Single ingredient to add to the shopping list."""

    recipe_id: str
    recipe_name: str
    ingredient: str
    measure: str = ""
