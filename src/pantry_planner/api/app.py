"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status

from pantry_planner.api.models import GenerateMealPlanRequest, MealPlanDraftResponse
from pantry_planner.app_logging import configure_logging
from pantry_planner.containers import AppContainer
from pantry_planner.services.meal_plans import MealPlanDataError, MealPlanRequestError


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
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

    @app.post(
        "/meal-plans/generate",
        dependencies=[Depends(require_api_token)],
    )
    async def generate_meal_plan(
        body: GenerateMealPlanRequest, request: Request
    ) -> MealPlanDraftResponse:
        """Generate a meal plan draft from the user's pantry and recipes.

        The draft is not saved; the caller reviews and persists it.
        """
        state_container: AppContainer = request.app.state.container
        max_meal_count = state_container.settings.max_meal_count
        if body.meals > max_meal_count:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Cannot generate more than {max_meal_count} meals.",
            )
        try:
            draft = await state_container.meal_plan_service.generate_meal_plan(
                body.meals,
                body.user_id,
                force_external_only=body.use_external,
                start_date=body.start_date,
            )
        except MealPlanRequestError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        except MealPlanDataError as exc:
            logger.exception(
                "Failed to load meal plan data", extra={"user_id": body.user_id}
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Planning data is unavailable.",
            ) from exc
        return MealPlanDraftResponse.from_draft(draft)

    return app
