"""Recipe filtering by search preferences."""

from collections.abc import Iterable

from foodnager.domain.recipes import RecipeSummary, SearchPreferences


def filter_by_preferences(
    recipes: Iterable[RecipeSummary], preferences: SearchPreferences | None
) -> list[RecipeSummary]:
    """Return the recipes that satisfy every given preference."""
    return [
        recipe for recipe in recipes if recipe_matches_preferences(recipe, preferences)
    ]


def recipe_matches_preferences(
    recipe: RecipeSummary, preferences: SearchPreferences | None
) -> bool:
    """Check a single recipe against preferences.

    Recipes lacking the attribute a preference filters on are excluded.
    Dietary restrictions must all appear among the recipe's tag names,
    compared case-insensitively.
    """
    if preferences is None:
        return True

    if preferences.max_cooking_time is not None:
        if recipe.cooking_time is None:
            return False
        if recipe.cooking_time > preferences.max_cooking_time:
            return False

    if (
        preferences.difficulty is not None
        and recipe.difficulty != preferences.difficulty
    ):
        return False

    if preferences.dietary_restrictions:
        tag_names = {tag.name.lower() for tag in recipe.tags}
        for restriction in preferences.dietary_restrictions:
            if restriction.lower() not in tag_names:
                return False

    return True
