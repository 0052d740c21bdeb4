"""Domain models for TheMealDB recipes and categories."""

from dataclasses import dataclass

MAX_INGREDIENT_SLOTS = 20


@dataclass(frozen=True)
class Ingredient:
    """A single ingredient slot with its measure."""

    name: str
    measure: str


@dataclass(frozen=True)
class Recipe:
    """Full recipe record as returned by a lookup or search."""

    id: str
    name: str
    category: str
    area: str
    instructions: str
    thumbnail: str
    youtube: str | None
    tags: tuple[str, ...]
    ingredients: tuple[Ingredient, ...]


@dataclass(frozen=True)
class RecipeSummary:
    """Abbreviated recipe record returned by the category filter."""

    id: str
    name: str
    thumbnail: str


@dataclass(frozen=True)
class Category:
    """Recipe category reference data."""

    id: str
    name: str
    thumbnail: str
    description: str


def extract_ingredients(payload: dict[str, object]) -> tuple[Ingredient, ...]:
    """Collect the populated ingredient slots of a raw meal payload in order."""
    ingredients: list[Ingredient] = []
    for slot in range(1, MAX_INGREDIENT_SLOTS + 1):
        name = payload.get(f"strIngredient{slot}")
        if not isinstance(name, str) or not name.strip():
            continue
        measure = payload.get(f"strMeasure{slot}")
        ingredients.append(
            Ingredient(
                name=name.strip(),
                measure=measure.strip() if isinstance(measure, str) else "",
            )
        )
    return tuple(ingredients)


def recipe_from_payload(payload: dict[str, object]) -> Recipe:
    """Build a recipe from a raw TheMealDB meal object."""
    raw_tags = payload.get("strTags")
    tags = (
        tuple(tag.strip() for tag in raw_tags.split(",") if tag.strip())
        if isinstance(raw_tags, str)
        else ()
    )
    return Recipe(
        id=str(payload["idMeal"]),
        name=str(payload.get("strMeal") or ""),
        category=str(payload.get("strCategory") or ""),
        area=str(payload.get("strArea") or ""),
        instructions=str(payload.get("strInstructions") or ""),
        thumbnail=str(payload.get("strMealThumb") or ""),
        youtube=payload.get("strYoutube") or None,
        tags=tags,
        ingredients=extract_ingredients(payload),
    )


def summary_from_payload(payload: dict[str, object]) -> RecipeSummary:
    """Build a recipe summary from a category filter entry."""
    return RecipeSummary(
        id=str(payload["idMeal"]),
        name=str(payload.get("strMeal") or ""),
        thumbnail=str(payload.get("strMealThumb") or ""),
    )


def category_from_payload(payload: dict[str, object]) -> Category:
    """Build a category from a raw TheMealDB category object."""
    return Category(
        id=str(payload["idCategory"]),
        name=str(payload.get("strCategory") or ""),
        thumbnail=str(payload.get("strCategoryThumb") or ""),
        description=str(payload.get("strCategoryDescription") or ""),
    )
