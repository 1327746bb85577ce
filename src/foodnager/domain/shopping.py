"""Shopping list domain models."""

from dataclasses import dataclass

from foodnager.domain.matching import UnitReference


@dataclass(frozen=True)
class ShoppingListItem:
    """A product the user needs to buy for a recipe."""

    product_id: int
    product_name: str
    required_quantity: float
    available_quantity: float
    missing_quantity: float
    unit: UnitReference


@dataclass(frozen=True)
class ShoppingList:
    """Missing ingredients for a single recipe."""

    recipe_id: int
    recipe_title: str
    items: tuple[ShoppingListItem, ...]

    @property
    def total_items(self) -> int:
        """Number of distinct items to buy."""
        return len(self.items)
