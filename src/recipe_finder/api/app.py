"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from recipe_finder.api.models import (
    AnalyzeRequest,
    NutritionReportResponse,
    RecipeCardModel,
    RecipeSearchResponse,
)
from recipe_finder.api.ui import router as ui_router
from recipe_finder.app_logging import configure_logging
from recipe_finder.containers import AppContainer
from recipe_finder.domain.nutrition import RecipeSubmission
from recipe_finder.domain.recipes import DietFilter, RecipeQuery
from recipe_finder.services.flows import nutrition_analyzer_flow, recipe_search_flow
from recipe_finder.services.views import nutrition_report, recipe_cards


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Recipe Finder", lifespan=lifespan)
    app.state.container = container

    app.include_router(ui_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/recipes/search", response_model=RecipeSearchResponse)
    async def search_recipes(
        request: Request, q: str = "", diet: DietFilter | None = None
    ) -> RecipeSearchResponse:
        """Search recipes through the provider."""
        state_container: AppContainer = request.app.state.container
        flow = recipe_search_flow(state_container.recipe_search_service)
        state = await flow.submit(RecipeQuery(text=q, diet=diet))
        if state.failure is not None:
            logger.warning("Search proxy returning 502: %s", state.failure.message)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=state.failure.message,
            )
        return RecipeSearchResponse(
            recipes=[
                RecipeCardModel.model_validate(card)
                for card in recipe_cards(state.result or [])
            ]
        )

    @app.post("/nutrition/analyze", response_model=NutritionReportResponse)
    async def analyze_nutrition(
        payload: AnalyzeRequest, request: Request
    ) -> NutritionReportResponse | JSONResponse:
        """Analyze a recipe's nutrition through the provider."""
        state_container: AppContainer = request.app.state.container
        submission = RecipeSubmission.from_text(payload.title, payload.ingredients)
        flow = nutrition_analyzer_flow(state_container.nutrition_service)
        state = await flow.submit(submission)
        if state.failure is not None:
            return JSONResponse(
                status_code=status.HTTP_502_BAD_GATEWAY,
                content={
                    "detail": state.error,
                    "upstream_status": state.failure.status_code,
                },
            )
        report = nutrition_report(submission.title, state.result)
        return NutritionReportResponse.model_validate(
            {**asdict(report), "ingredients": submission.ingredients}
        )

    return app
