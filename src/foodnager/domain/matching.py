"""Domain models for recipe/fridge matching."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UnitReference:
    """Unit of measure as stored in the units table."""

    id: int
    name: str
    abbreviation: str


@dataclass(frozen=True)
class IngredientRequirement:
    """A recipe's need for a product in a given quantity and unit."""

    product_id: int
    product_name: str
    quantity: float
    unit: UnitReference


@dataclass(frozen=True)
class FridgeEntry:
    """A product and quantity currently in the user's fridge."""

    product_id: int
    quantity: float
    unit: UnitReference


@dataclass(frozen=True)
class IngredientOutcome:
    """Per-ingredient result of matching a recipe against the fridge."""

    product_id: int
    product_name: str
    required_quantity: float
    available_quantity: float
    unit: str
    unit_mismatch: bool | None = None
    fridge_unit: str | None = None


@dataclass(frozen=True)
class MatchResult:
    """Score and ingredient partition for one recipe."""

    score: float
    available_ingredients: tuple[IngredientOutcome, ...]
    missing_ingredients: tuple[IngredientOutcome, ...]
