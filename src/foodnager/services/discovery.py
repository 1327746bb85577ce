"""Recipe discovery based on fridge contents."""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from foodnager.domain.matching import FridgeEntry
from foodnager.domain.recipes import (
    FridgeSearchQuery,
    RecipeSearchResult,
    RecipeSummary,
    SearchMetadata,
    SearchResponse,
)
from foodnager.errors import NotFoundError, ValidationError
from foodnager.services.match_score import MatchScoreCalculator
from foodnager.services.preferences import recipe_matches_preferences

USER_RECIPES_SOURCE = "user_recipes"

_logger = logging.getLogger(__name__)


class FridgeRepository(Protocol):
    """Persistence interface for fridge contents."""

    def list_fridge_items(self, user_id: UUID) -> list[FridgeEntry]:
        """Return every item in the user's fridge."""

    def list_fridge_items_for_products(
        self, user_id: UUID, product_ids: Sequence[int]
    ) -> list[FridgeEntry]:
        """Return fridge items for the given product ids."""


class RecipeRepository(Protocol):
    """Persistence interface for user recipes."""

    def list_recipes(self, user_id: UUID) -> list[RecipeSummary]:
        """Return the user's recipes with ingredients and tags, newest first."""

    def get_recipe(self, user_id: UUID, recipe_id: int) -> RecipeSummary | None:
        """Return a recipe owned by the user, if present."""


@dataclass
class RecipeDiscoveryService:
    """Searches recipes that can be cooked from the fridge."""

    fridge_repository: FridgeRepository
    recipe_repository: RecipeRepository
    calculator: MatchScoreCalculator = field(default_factory=MatchScoreCalculator)

    def search_by_fridge(
        self, user_id: UUID, query: FridgeSearchQuery
    ) -> SearchResponse:
        """Score the user's recipes against the fridge and rank them."""
        started = time.perf_counter()
        fridge_items = self._available_products(user_id, query)
        if not fridge_items:
            raise ValidationError("No products available in fridge")

        results = self.search_user_recipes(user_id, fridge_items, query)
        if not self.has_good_matches(results):
            _logger.info(
                "No good recipe matches: user_id=%s results=%s threshold=%s",
                user_id,
                len(results),
                self.calculator.good_match_threshold,
            )

        duration_ms = int((time.perf_counter() - started) * 1000)
        return SearchResponse(
            results=results,
            metadata=SearchMetadata(
                source=USER_RECIPES_SOURCE,
                total_results=len(results),
                search_duration_ms=duration_ms,
            ),
        )

    def search_user_recipes(
        self,
        user_id: UUID,
        fridge_items: Sequence[FridgeEntry],
        query: FridgeSearchQuery,
    ) -> list[RecipeSearchResult]:
        """Score, filter and rank the user's own recipes."""
        results = []
        for recipe in self.recipe_repository.list_recipes(user_id):
            if not recipe_matches_preferences(recipe, query.preferences):
                continue
            match = self.calculator.calculate(recipe.ingredients, fridge_items)
            results.append(RecipeSearchResult(recipe=recipe, match=match))

        results.sort(key=lambda result: result.match.score, reverse=True)
        return results[: query.max_results]

    def has_good_matches(self, results: Sequence[RecipeSearchResult]) -> bool:
        """Return True when at least one result reaches the threshold."""
        return any(self.calculator.is_good(result.match) for result in results)

    def _available_products(
        self, user_id: UUID, query: FridgeSearchQuery
    ) -> list[FridgeEntry]:
        if query.use_all_fridge_items:
            return self.fridge_repository.list_fridge_items(user_id)

        product_ids = list(query.custom_product_ids)
        if not product_ids:
            raise ValidationError(
                "custom_product_ids required when use_all_fridge_items is false"
            )
        items = self.fridge_repository.list_fridge_items_for_products(
            user_id, product_ids
        )
        if not items:
            raise NotFoundError("No fridge items found for specified product IDs")

        found = {item.product_id for item in items}
        missing_ids = [
            product_id for product_id in product_ids if product_id not in found
        ]
        if missing_ids:
            raise NotFoundError(
                "Products not found in fridge: "
                + ", ".join(str(product_id) for product_id in missing_ids)
            )
        return items
