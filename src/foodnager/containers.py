"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from foodnager.adapters.supabase_fridge_repository import SupabaseFridgeRepository
from foodnager.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from foodnager.config import Settings
from foodnager.services.discovery import RecipeDiscoveryService
from foodnager.services.match_score import MatchScoreCalculator
from foodnager.services.shopping_list import ShoppingListService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    discovery_service: RecipeDiscoveryService
    shopping_list_service: ShoppingListService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    fridge_repository = SupabaseFridgeRepository(supabase_client)
    recipe_repository = SupabaseRecipeRepository(supabase_client)
    discovery_service = RecipeDiscoveryService(
        fridge_repository=fridge_repository,
        recipe_repository=recipe_repository,
        calculator=MatchScoreCalculator(
            good_match_threshold=resolved_settings.match_threshold
        ),
    )
    shopping_list_service = ShoppingListService(
        recipe_repository=recipe_repository,
        fridge_repository=fridge_repository,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        discovery_service=discovery_service,
        shopping_list_service=shopping_list_service,
        close_resources=close_resources,
    )
