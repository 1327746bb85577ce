"""Pydantic models for API request bodies."""

from typing import Literal

from pydantic import BaseModel, Field, PositiveInt, model_validator

from foodnager.domain.recipes import FridgeSearchQuery, SearchPreferences


class SearchPreferencesModel(BaseModel):
    """Optional search filters."""

    max_cooking_time: PositiveInt | None = None
    difficulty: Literal["easy", "medium", "hard"] | None = None
    dietary_restrictions: list[str] = Field(default_factory=list)

    def to_domain(self) -> SearchPreferences:
        return SearchPreferences(
            max_cooking_time=self.max_cooking_time,
            difficulty=self.difficulty,
            dietary_restrictions=tuple(
                restriction.strip() for restriction in self.dietary_restrictions
            ),
        )


class SearchByFridgeRequest(BaseModel):
    """Body of a search-by-fridge request."""

    use_all_fridge_items: bool
    custom_product_ids: list[PositiveInt] | None = None
    max_results: int = Field(default=10, ge=1, le=50)
    preferences: SearchPreferencesModel | None = None

    @model_validator(mode="after")
    def _require_products_when_not_using_all(self) -> "SearchByFridgeRequest":
        if not self.use_all_fridge_items and not self.custom_product_ids:
            raise ValueError(
                "custom_product_ids is required and must not be empty "
                "when use_all_fridge_items is false"
            )
        return self

    def to_query(self) -> FridgeSearchQuery:
        return FridgeSearchQuery(
            use_all_fridge_items=self.use_all_fridge_items,
            custom_product_ids=tuple(self.custom_product_ids or ()),
            max_results=self.max_results,
            preferences=self.preferences.to_domain() if self.preferences else None,
        )


class GenerateShoppingListRequest(BaseModel):
    """Body of a shopping list request."""

    recipe_id: PositiveInt
