"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from recipe_finder.adapters.edamam_client import EdamamClient, HttpxEdamamClient
from recipe_finder.config import Settings
from recipe_finder.services.nutrition import NutritionAnalysisService
from recipe_finder.services.recipes import RecipeSearchService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    edamam_client: EdamamClient
    recipe_search_service: RecipeSearchService
    nutrition_service: NutritionAnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    edamam_client = HttpxEdamamClient.create(
        app_id=resolved_settings.edamam_app_id,
        app_key=resolved_settings.edamam_app_key,
        base_url=resolved_settings.edamam_base_url,
        timeout_seconds=resolved_settings.edamam_timeout_seconds,
    )

    async def close_resources() -> None:
        await edamam_client.close()

    return AppContainer(
        settings=resolved_settings,
        edamam_client=edamam_client,
        recipe_search_service=RecipeSearchService(edamam_client),
        nutrition_service=NutritionAnalysisService(edamam_client),
        close_resources=close_resources,
    )
