"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from uuid import UUID

import pytest

from foodnager.config import Settings
from foodnager.containers import AppContainer
from foodnager.domain.matching import FridgeEntry, IngredientRequirement, UnitReference
from foodnager.domain.recipes import RecipeSummary, Tag
from foodnager.services.discovery import (
    FridgeRepository,
    RecipeDiscoveryService,
    RecipeRepository,
)
from foodnager.services.match_score import MatchScoreCalculator
from foodnager.services.shopping_list import ShoppingListService

GRAM = UnitReference(id=1, name="gram", abbreviation="g")
PIECE = UnitReference(id=2, name="sztuka", abbreviation="szt")
MILLILITRE = UnitReference(id=3, name="mililitr", abbreviation="ml")
LITRE = UnitReference(id=4, name="litr", abbreviation="L")
TABLESPOON = UnitReference(id=5, name="łyżka", abbreviation="łyżka")


def requirement(
    product_id: int, name: str, quantity: float, unit: UnitReference = GRAM
) -> IngredientRequirement:
    """Build an ingredient requirement."""
    return IngredientRequirement(
        product_id=product_id, product_name=name, quantity=quantity, unit=unit
    )


def fridge_item(
    product_id: int, quantity: float, unit: UnitReference = GRAM
) -> FridgeEntry:
    """Build a fridge entry."""
    return FridgeEntry(product_id=product_id, quantity=quantity, unit=unit)


def recipe(  # noqa: PLR0913
    recipe_id: int,
    title: str,
    ingredients: Sequence[IngredientRequirement] = (),
    cooking_time: int | None = None,
    difficulty: str | None = None,
    tags: Sequence[str] = (),
) -> RecipeSummary:
    """Build a recipe summary."""
    return RecipeSummary(
        id=recipe_id,
        title=title,
        instructions="Mix and cook.",
        source="user",
        cooking_time=cooking_time,
        difficulty=difficulty,
        tags=tuple(Tag(id=index, name=name) for index, name in enumerate(tags, 1)),
        ingredients=tuple(ingredients),
    )


@dataclass
class InMemoryFridgeRepository(FridgeRepository):
    """In-memory fridge repository for tests."""

    items: dict[UUID, list[FridgeEntry]] = field(default_factory=dict)
    queried_product_ids: list[list[int]] = field(default_factory=list)

    def list_fridge_items(self, user_id: UUID) -> list[FridgeEntry]:
        return list(self.items.get(user_id, []))

    def list_fridge_items_for_products(
        self, user_id: UUID, product_ids: Sequence[int]
    ) -> list[FridgeEntry]:
        self.queried_product_ids.append(list(product_ids))
        wanted = set(product_ids)
        return [
            item for item in self.items.get(user_id, []) if item.product_id in wanted
        ]


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """In-memory recipe repository for tests."""

    recipes: dict[UUID, list[RecipeSummary]] = field(default_factory=dict)

    def list_recipes(self, user_id: UUID) -> list[RecipeSummary]:
        return list(self.recipes.get(user_id, []))

    def get_recipe(self, user_id: UUID, recipe_id: int) -> RecipeSummary | None:
        for item in self.recipes.get(user_id, []):
            if item.id == recipe_id:
                return item
        return None


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def fridge_repository() -> InMemoryFridgeRepository:
    return InMemoryFridgeRepository()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository()


@pytest.fixture
def container(
    settings: Settings,
    fridge_repository: InMemoryFridgeRepository,
    recipe_repository: InMemoryRecipeRepository,
) -> AppContainer:
    discovery_service = RecipeDiscoveryService(
        fridge_repository=fridge_repository,
        recipe_repository=recipe_repository,
        calculator=MatchScoreCalculator(settings.match_threshold),
    )
    shopping_list_service = ShoppingListService(
        recipe_repository=recipe_repository,
        fridge_repository=fridge_repository,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        discovery_service=discovery_service,
        shopping_list_service=shopping_list_service,
        close_resources=close_resources,
    )
