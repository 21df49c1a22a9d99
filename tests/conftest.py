"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from recipe_finder.adapters.edamam_client import EdamamClient, HttpxEdamamClient
from recipe_finder.config import Settings
from recipe_finder.containers import AppContainer
from recipe_finder.services.nutrition import NutritionAnalysisService
from recipe_finder.services.recipes import RecipeSearchService


def make_status_error(status_code: int) -> httpx.HTTPStatusError:
    """Build the error httpx raises for a non-success response."""
    request = httpx.Request("POST", "https://api.test/api/nutrition-details")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(
        f"Server error '{status_code}'", request=request, response=response
    )


def html_body_client() -> HttpxEdamamClient:
    """Edamam client whose upstream answers 200 with an HTML page."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>Service unavailable</html>")

    return HttpxEdamamClient(
        app_id="app-id",
        app_key="app-key",
        base_url="https://api.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def recipe_hit(label: str) -> dict[str, object]:
    return {
        "recipe": {
            "label": label,
            "image": f"https://img.test/{label}.jpg",
            "url": f"https://recipes.test/{label}",
            "dietLabels": ["Low-Carb"],
            "healthLabels": ["Vegetarian", "Peanut-Free"],
        }
    }


def analysis_payload(nutrient_count: int = 7) -> dict[str, object]:
    codes = ["ENERC_KCAL", "FAT", "FASAT", "CHOCDF", "FIBTG", "SUGAR", "PROCNT"]
    return {
        "uri": "http://www.edamam.com/ontologies/edamam.owl#recipe_1",
        "calories": 412.6,
        "totalWeight": 287.4,
        "dietLabels": ["LOW_CARB"],
        "healthLabels": ["VEGETARIAN", "PESCATARIAN"],
        "cautions": ["EGGS"],
        "totalNutrients": {
            code: {"label": code.title(), "quantity": index + 0.125, "unit": "g"}
            for index, code in enumerate(codes[:nutrient_count])
        },
    }


@dataclass
class FakeEdamamClient(EdamamClient):
    """Fake Edamam client returning canned payloads or raising."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {"hits": [recipe_hit("omelette")]}
    )
    nutrition_payload: dict[str, object] = field(default_factory=analysis_payload)
    error: Exception | None = None
    search_calls: list[tuple[str, str | None]] = field(default_factory=list)
    analysis_calls: list[tuple[str, list[str]]] = field(default_factory=list)

    async def search_recipes(self, query: str, diet: str | None) -> dict[str, object]:
        self.search_calls.append((query, diet))
        if self.error is not None:
            raise self.error
        return self.search_payload

    async def analyze_nutrition(
        self, title: str, ingredients: list[str]
    ) -> dict[str, object]:
        self.analysis_calls.append((title, ingredients))
        if self.error is not None:
            raise self.error
        return self.nutrition_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        edamam_app_id="app-id",
        edamam_app_key="app-key",
        edamam_base_url="https://api.test",
    )


@pytest.fixture
def edamam_client() -> FakeEdamamClient:
    return FakeEdamamClient()


@pytest.fixture
def container(settings: Settings, edamam_client: FakeEdamamClient) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        edamam_client=edamam_client,
        recipe_search_service=RecipeSearchService(edamam_client),
        nutrition_service=NutritionAnalysisService(edamam_client),
        close_resources=close_resources,
    )
