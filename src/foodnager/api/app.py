"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import Depends, FastAPI, HTTPException, Request, status

from foodnager.api.auth import require_user
from foodnager.api.request_models import (
    GenerateShoppingListRequest,
    SearchByFridgeRequest,
)
from foodnager.api.serializers import (
    serialize_search_response,
    serialize_shopping_list,
)
from foodnager.app_logging import configure_logging
from foodnager.containers import AppContainer
from foodnager.errors import FoodnagerError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/recipes/search-by-fridge")
    async def search_by_fridge(
        body: SearchByFridgeRequest,
        request: Request,
        user_id: UUID = Depends(require_user),
    ) -> dict[str, object]:
        """Search the user's recipes by what is in their fridge."""
        state_container: AppContainer = request.app.state.container
        try:
            response = state_container.discovery_service.search_by_fridge(
                user_id, body.to_query()
            )
        except FoodnagerError as exc:
            raise _http_error(exc) from exc
        except Exception as exc:
            logger.exception("Failed to search recipes: user_id=%s", user_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={
                    "code": "INTERNAL_ERROR",
                    "message": "Failed to search recipes",
                },
            ) from exc
        return serialize_search_response(response)

    @app.post("/api/shopping-list/generate")
    async def generate_shopping_list(
        body: GenerateShoppingListRequest,
        request: Request,
        user_id: UUID = Depends(require_user),
    ) -> dict[str, object]:
        """Return what the user needs to buy to cook a recipe."""
        state_container: AppContainer = request.app.state.container
        try:
            shopping_list = state_container.shopping_list_service.generate(
                user_id, body.recipe_id
            )
        except FoodnagerError as exc:
            raise _http_error(exc) from exc
        except Exception as exc:
            logger.exception(
                "Failed to generate shopping list: user_id=%s recipe_id=%s",
                user_id,
                body.recipe_id,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={
                    "code": "INTERNAL_ERROR",
                    "message": "Failed to generate shopping list",
                },
            ) from exc
        return serialize_shopping_list(shopping_list)

    return app


def _http_error(exc: FoodnagerError) -> HTTPException:
    """Convert an application error into an HTTP error response."""
    return HTTPException(
        status_code=exc.status_code,
        detail={"code": exc.code, "message": exc.message},
    )
