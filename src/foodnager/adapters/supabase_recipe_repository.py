"""Supabase repository for recipes with ingredients and tags."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from foodnager.domain.matching import IngredientRequirement, UnitReference
from foodnager.domain.recipes import RecipeSummary, Tag
from foodnager.services.discovery import RecipeRepository

_INGREDIENT_COLUMNS = (
    "recipe_id, quantity, product_id, products!inner(id, name), "
    "unit_id, units!inner(id, name, abbreviation)"
)
_TAG_COLUMNS = "recipe_id, tags!inner(id, name, created_at)"


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase implementation for recipe queries."""

    client: Client

    def list_recipes(self, user_id: UUID) -> list[RecipeSummary]:
        """Return the user's recipes, newest first."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return self._with_details(response.data or [])

    def get_recipe(self, user_id: UUID, recipe_id: int) -> RecipeSummary | None:
        """Return a recipe owned by the user, if present."""
        response = (
            self.client.table("recipes")
            .select("*")
            .eq("id", recipe_id)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        recipes = self._with_details(response.data or [])
        return recipes[0] if recipes else None

    def _with_details(self, rows: list[dict[str, object]]) -> list[RecipeSummary]:
        if not rows:
            return []
        recipe_ids = [int(row["id"]) for row in rows]
        ingredients = self._load_ingredients(recipe_ids)
        tags = self._load_tags(recipe_ids)
        return [
            _parse_recipe(
                row,
                ingredients.get(int(row["id"]), []),
                tags.get(int(row["id"]), []),
            )
            for row in rows
        ]

    def _load_ingredients(
        self, recipe_ids: Sequence[int]
    ) -> dict[int, list[IngredientRequirement]]:
        response = (
            self.client.table("recipe_ingredients")
            .select(_INGREDIENT_COLUMNS)
            .in_("recipe_id", list(recipe_ids))
            .execute()
        )
        grouped: dict[int, list[IngredientRequirement]] = {}
        for row in response.data or []:
            grouped.setdefault(int(row["recipe_id"]), []).append(
                _parse_ingredient(row)
            )
        return grouped

    def _load_tags(self, recipe_ids: Sequence[int]) -> dict[int, list[Tag]]:
        response = (
            self.client.table("recipe_tags")
            .select(_TAG_COLUMNS)
            .in_("recipe_id", list(recipe_ids))
            .execute()
        )
        grouped: dict[int, list[Tag]] = {}
        for row in response.data or []:
            tag = row.get("tags") or {}
            grouped.setdefault(int(row["recipe_id"]), []).append(
                Tag(
                    id=int(tag["id"]),
                    name=str(tag.get("name", "")),
                    created_at=_parse_datetime(tag.get("created_at")),
                )
            )
        return grouped


def _parse_ingredient(row: dict[str, object]) -> IngredientRequirement:
    product = row.get("products") or {}
    units = row.get("units") or {}
    return IngredientRequirement(
        product_id=int(row["product_id"]),
        product_name=str(product.get("name", "")),
        quantity=float(row.get("quantity", 0.0)),
        unit=UnitReference(
            id=int(row["unit_id"]),
            name=str(units.get("name", "")),
            abbreviation=str(units.get("abbreviation", "")),
        ),
    )


def _parse_recipe(
    row: dict[str, object],
    ingredients: list[IngredientRequirement],
    tags: list[Tag],
) -> RecipeSummary:
    cooking_time = row.get("cooking_time")
    return RecipeSummary(
        id=int(row["id"]),
        title=str(row.get("title", "")),
        instructions=str(row.get("instructions", "")),
        source=str(row.get("source", "user")),
        description=row.get("description"),
        cooking_time=int(cooking_time) if cooking_time is not None else None,
        difficulty=row.get("difficulty"),
        tags=tuple(tags),
        ingredients=tuple(ingredients),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def _parse_datetime(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None
