"""JSON serialization of domain objects for API responses."""

from datetime import datetime

from foodnager.domain.matching import (
    IngredientOutcome,
    IngredientRequirement,
    MatchResult,
    UnitReference,
)
from foodnager.domain.recipes import RecipeSearchResult, RecipeSummary, SearchResponse
from foodnager.domain.shopping import ShoppingList, ShoppingListItem


def serialize_outcome(outcome: IngredientOutcome) -> dict[str, object]:
    """Serialize an ingredient outcome, omitting absent mismatch fields."""
    data: dict[str, object] = {
        "product_id": outcome.product_id,
        "product_name": outcome.product_name,
        "required_quantity": outcome.required_quantity,
        "available_quantity": outcome.available_quantity,
        "unit": outcome.unit,
    }
    if outcome.unit_mismatch:
        data["unit_mismatch"] = True
        data["fridge_unit"] = outcome.fridge_unit
    return data


def serialize_match_result(result: MatchResult) -> dict[str, object]:
    """Serialize a match result."""
    return {
        "score": result.score,
        "available_ingredients": [
            serialize_outcome(outcome) for outcome in result.available_ingredients
        ],
        "missing_ingredients": [
            serialize_outcome(outcome) for outcome in result.missing_ingredients
        ],
    }


def serialize_search_response(response: SearchResponse) -> dict[str, object]:
    """Serialize ranked search results with their metadata."""
    metadata = response.metadata
    return {
        "results": [_serialize_search_result(result) for result in response.results],
        "search_metadata": {
            "source": metadata.source,
            "total_results": metadata.total_results,
            "search_duration_ms": metadata.search_duration_ms,
        }
        if metadata
        else None,
    }


def serialize_shopping_list(shopping_list: ShoppingList) -> dict[str, object]:
    """Serialize a shopping list."""
    return {
        "recipe": {
            "id": shopping_list.recipe_id,
            "title": shopping_list.recipe_title,
        },
        "missing_ingredients": [
            _serialize_shopping_item(item) for item in shopping_list.items
        ],
        "total_items": shopping_list.total_items,
    }


def _serialize_search_result(result: RecipeSearchResult) -> dict[str, object]:
    match = serialize_match_result(result.match)
    return {
        "recipe": _serialize_recipe(result.recipe),
        "match_score": match["score"],
        "available_ingredients": match["available_ingredients"],
        "missing_ingredients": match["missing_ingredients"],
    }


def _serialize_recipe(recipe: RecipeSummary) -> dict[str, object]:
    return {
        "id": recipe.id,
        "title": recipe.title,
        "description": recipe.description,
        "instructions": recipe.instructions,
        "cooking_time": recipe.cooking_time,
        "difficulty": recipe.difficulty,
        "source": recipe.source,
        "tags": [
            {
                "id": tag.id,
                "name": tag.name,
                "created_at": _isoformat(tag.created_at),
            }
            for tag in recipe.tags
        ],
        "ingredients": [
            _serialize_ingredient(ingredient) for ingredient in recipe.ingredients
        ],
        "created_at": _isoformat(recipe.created_at),
        "updated_at": _isoformat(recipe.updated_at),
    }


def _serialize_ingredient(ingredient: IngredientRequirement) -> dict[str, object]:
    return {
        "product": {"id": ingredient.product_id, "name": ingredient.product_name},
        "quantity": ingredient.quantity,
        "unit": _serialize_unit(ingredient.unit),
    }


def _serialize_shopping_item(item: ShoppingListItem) -> dict[str, object]:
    return {
        "product": {"id": item.product_id, "name": item.product_name},
        "required_quantity": item.required_quantity,
        "available_quantity": item.available_quantity,
        "missing_quantity": item.missing_quantity,
        "unit": _serialize_unit(item.unit),
    }


def _serialize_unit(unit: UnitReference) -> dict[str, object]:
    return {"id": unit.id, "name": unit.name, "abbreviation": unit.abbreviation}


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
