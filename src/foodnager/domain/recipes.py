"""Recipe and search domain models."""

from dataclasses import dataclass, field
from datetime import datetime

from foodnager.domain.matching import IngredientRequirement, MatchResult


@dataclass(frozen=True)
class Tag:
    """Recipe tag."""

    id: int
    name: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class RecipeSummary:
    """Recipe with its ingredients and tags."""

    id: int
    title: str
    instructions: str
    source: str
    description: str | None = None
    cooking_time: int | None = None
    difficulty: str | None = None
    tags: tuple[Tag, ...] = ()
    ingredients: tuple[IngredientRequirement, ...] = ()
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class SearchPreferences:
    """Optional recipe filters supplied with a search."""

    max_cooking_time: int | None = None
    difficulty: str | None = None
    dietary_restrictions: tuple[str, ...] = ()


@dataclass(frozen=True)
class FridgeSearchQuery:
    """Parameters for searching recipes by fridge contents."""

    use_all_fridge_items: bool
    custom_product_ids: tuple[int, ...] = ()
    max_results: int = 10
    preferences: SearchPreferences | None = None


@dataclass(frozen=True)
class RecipeSearchResult:
    """A recipe paired with its match against the fridge."""

    recipe: RecipeSummary
    match: MatchResult


@dataclass(frozen=True)
class SearchMetadata:
    """Metadata about a completed search."""

    source: str
    total_results: int
    search_duration_ms: int


@dataclass(frozen=True)
class SearchResponse:
    """Ranked search results with metadata."""

    results: list[RecipeSearchResult] = field(default_factory=list)
    metadata: SearchMetadata | None = None
