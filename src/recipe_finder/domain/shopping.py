"""Domain models for the shopping list."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShoppingListItem:
    """An ingredient on the shopping list, grouped by its recipe."""

    id: str
    recipe_id: str
    recipe_name: str
    ingredient: str
    measure: str
    checked: bool = False

    def matches(self, recipe_id: str, ingredient: str) -> bool:
        """Return true when the item is this recipe's ingredient, ignoring case."""
        return (
            self.recipe_id == recipe_id
            and self.ingredient.lower() == ingredient.lower()
        )
