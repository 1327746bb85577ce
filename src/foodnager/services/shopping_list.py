"""Shopping list generation for recipes."""

from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID

from foodnager.domain.matching import FridgeEntry, IngredientRequirement
from foodnager.domain.shopping import ShoppingList, ShoppingListItem
from foodnager.errors import NotFoundError
from foodnager.services.discovery import FridgeRepository, RecipeRepository


@dataclass
class ShoppingListService:
    """Builds the list of products to buy before cooking a recipe."""

    recipe_repository: RecipeRepository
    fridge_repository: FridgeRepository

    def generate(self, user_id: UUID, recipe_id: int) -> ShoppingList:
        """Return the missing ingredients for a recipe owned by the user."""
        recipe = self.recipe_repository.get_recipe(user_id, recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")

        product_ids = [ingredient.product_id for ingredient in recipe.ingredients]
        fridge_items = (
            self.fridge_repository.list_fridge_items_for_products(user_id, product_ids)
            if product_ids
            else []
        )
        return ShoppingList(
            recipe_id=recipe.id,
            recipe_title=recipe.title,
            items=tuple(missing_items(recipe.ingredients, fridge_items)),
        )


def missing_items(
    requirements: Iterable[IngredientRequirement],
    fridge_items: Iterable[FridgeEntry],
) -> list[ShoppingListItem]:
    """Compute what is missing, most-needed first.

    Fridge quantities of the same product and unit are summed. Stock in a
    different unit does not count towards a requirement.
    """
    on_hand = _aggregate(fridge_items)
    items = []
    for requirement in requirements:
        available = on_hand.get((requirement.product_id, requirement.unit.id), 0.0)
        missing = max(0.0, requirement.quantity - available)
        if missing > 0:
            items.append(
                ShoppingListItem(
                    product_id=requirement.product_id,
                    product_name=requirement.product_name,
                    required_quantity=requirement.quantity,
                    available_quantity=available,
                    missing_quantity=missing,
                    unit=requirement.unit,
                )
            )
    items.sort(key=lambda item: item.missing_quantity, reverse=True)
    return items


def _aggregate(fridge_items: Iterable[FridgeEntry]) -> dict[tuple[int, int], float]:
    totals: dict[tuple[int, int], float] = {}
    for item in fridge_items:
        key = (item.product_id, item.unit.id)
        totals[key] = totals.get(key, 0.0) + item.quantity
    return totals
