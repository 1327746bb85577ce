"""Tests for recipe discovery."""

import logging
from uuid import uuid4

import pytest

from foodnager.domain.recipes import FridgeSearchQuery, SearchPreferences
from foodnager.errors import NotFoundError, ValidationError
from foodnager.services.discovery import RecipeDiscoveryService
from foodnager.services.match_score import MatchScoreCalculator
from tests.conftest import (
    PIECE,
    InMemoryFridgeRepository,
    InMemoryRecipeRepository,
    fridge_item,
    recipe,
    requirement,
)


def _service(
    fridge: InMemoryFridgeRepository, recipes: InMemoryRecipeRepository
) -> RecipeDiscoveryService:
    return RecipeDiscoveryService(fridge_repository=fridge, recipe_repository=recipes)


def test_search_ranks_recipes_by_score() -> None:
    user_id = uuid4()
    fridge = InMemoryFridgeRepository(
        items={user_id: [fridge_item(1, 500), fridge_item(2, 1, PIECE)]}
    )
    recipes = InMemoryRecipeRepository(
        recipes={
            user_id: [
                recipe(
                    1,
                    "Chleb",
                    [requirement(1, "Mąka", 500), requirement(3, "Sól", 5)],
                ),
                recipe(2, "Placki", [requirement(1, "Mąka", 200)]),
                recipe(3, "Jajecznica", [requirement(2, "Jajka", 3, PIECE)]),
            ]
        }
    )

    response = _service(fridge, recipes).search_by_fridge(
        user_id, FridgeSearchQuery(use_all_fridge_items=True)
    )

    assert [result.recipe.title for result in response.results] == [
        "Placki",
        "Chleb",
        "Jajecznica",
    ]
    assert [result.match.score for result in response.results] == [1.0, 0.5, 0.5]
    assert response.metadata is not None
    assert response.metadata.source == "user_recipes"
    assert response.metadata.total_results == 3
    assert response.metadata.search_duration_ms >= 0


def test_search_truncates_to_max_results() -> None:
    user_id = uuid4()
    fridge = InMemoryFridgeRepository(items={user_id: [fridge_item(1, 500)]})
    recipes = InMemoryRecipeRepository(
        recipes={
            user_id: [
                recipe(index, f"Recipe {index}", [requirement(1, "Mąka", 100)])
                for index in range(1, 6)
            ]
        }
    )

    response = _service(fridge, recipes).search_by_fridge(
        user_id, FridgeSearchQuery(use_all_fridge_items=True, max_results=2)
    )

    assert [result.recipe.id for result in response.results] == [1, 2]
    assert response.metadata.total_results == 2


def test_search_applies_preferences() -> None:
    user_id = uuid4()
    fridge = InMemoryFridgeRepository(items={user_id: [fridge_item(1, 500)]})
    recipes = InMemoryRecipeRepository(
        recipes={
            user_id: [
                recipe(1, "Szybkie", [requirement(1, "Mąka", 100)], cooking_time=15),
                recipe(2, "Wolne", [requirement(1, "Mąka", 100)], cooking_time=90),
            ]
        }
    )
    query = FridgeSearchQuery(
        use_all_fridge_items=True,
        preferences=SearchPreferences(max_cooking_time=30),
    )

    response = _service(fridge, recipes).search_by_fridge(user_id, query)

    assert [result.recipe.title for result in response.results] == ["Szybkie"]


def test_search_with_empty_fridge_is_rejected() -> None:
    service = _service(InMemoryFridgeRepository(), InMemoryRecipeRepository())

    with pytest.raises(ValidationError, match="No products available"):
        service.search_by_fridge(uuid4(), FridgeSearchQuery(use_all_fridge_items=True))


def test_search_requires_custom_products_when_not_using_all() -> None:
    service = _service(InMemoryFridgeRepository(), InMemoryRecipeRepository())

    with pytest.raises(ValidationError):
        service.search_by_fridge(uuid4(), FridgeSearchQuery(use_all_fridge_items=False))


def test_search_reports_custom_products_missing_from_fridge() -> None:
    user_id = uuid4()
    fridge = InMemoryFridgeRepository(items={user_id: [fridge_item(1, 500)]})
    service = _service(fridge, InMemoryRecipeRepository())
    query = FridgeSearchQuery(use_all_fridge_items=False, custom_product_ids=(1, 7, 9))

    with pytest.raises(NotFoundError, match="7, 9"):
        service.search_by_fridge(user_id, query)


def test_search_with_no_custom_products_found() -> None:
    service = _service(InMemoryFridgeRepository(), InMemoryRecipeRepository())
    query = FridgeSearchQuery(use_all_fridge_items=False, custom_product_ids=(4,))

    with pytest.raises(NotFoundError, match="No fridge items"):
        service.search_by_fridge(uuid4(), query)


def test_search_scores_only_selected_products() -> None:
    user_id = uuid4()
    fridge = InMemoryFridgeRepository(
        items={user_id: [fridge_item(1, 500), fridge_item(2, 3, PIECE)]}
    )
    recipes = InMemoryRecipeRepository(
        recipes={
            user_id: [
                recipe(
                    1,
                    "Naleśniki",
                    [requirement(1, "Mąka", 500), requirement(2, "Jajka", 3, PIECE)],
                )
            ]
        }
    )
    query = FridgeSearchQuery(use_all_fridge_items=False, custom_product_ids=(1,))

    response = _service(fridge, recipes).search_by_fridge(user_id, query)

    assert fridge.queried_product_ids == [[1]]
    assert response.results[0].match.score == 0.5


def test_search_logs_when_no_good_matches(
    caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    user_id = uuid4()
    fridge = InMemoryFridgeRepository(items={user_id: [fridge_item(1, 100)]})
    recipes = InMemoryRecipeRepository(
        recipes={user_id: [recipe(1, "Chleb", [requirement(1, "Mąka", 500)])]}
    )
    service = RecipeDiscoveryService(
        fridge_repository=fridge,
        recipe_repository=recipes,
        calculator=MatchScoreCalculator(good_match_threshold=0.9),
    )
    monkeypatch.setattr(logging.getLogger("foodnager"), "propagate", True)

    with caplog.at_level(logging.INFO, logger="foodnager.services.discovery"):
        service.search_by_fridge(user_id, FridgeSearchQuery(use_all_fridge_items=True))

    assert "No good recipe matches" in caplog.text


def test_has_good_matches_uses_threshold() -> None:
    user_id = uuid4()
    fridge = InMemoryFridgeRepository(items={user_id: [fridge_item(1, 500)]})
    recipes = InMemoryRecipeRepository(
        recipes={user_id: [recipe(1, "Placki", [requirement(1, "Mąka", 200)])]}
    )
    service = _service(fridge, recipes)

    results = service.search_user_recipes(
        user_id,
        fridge.list_fridge_items(user_id),
        FridgeSearchQuery(use_all_fridge_items=True),
    )

    assert service.has_good_matches(results)
    assert not service.has_good_matches([])
