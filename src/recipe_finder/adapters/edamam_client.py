"""Edamam recipe search and nutrition analysis API client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

_logger = logging.getLogger(__name__)


class EdamamClient(Protocol):
    """Interface for Edamam API interactions."""

    async def search_recipes(self, query: str, diet: str | None) -> dict[str, object]:
        """Search recipes by free text and optional diet label."""

    async def analyze_nutrition(
        self, title: str, ingredients: list[str]
    ) -> dict[str, object]:
        """Submit a recipe for nutrition analysis and return raw API data."""


@dataclass
class HttpxEdamamClient(EdamamClient):
    """HTTPX-backed Edamam client."""

    app_id: str
    app_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls,
        app_id: str,
        app_key: str,
        base_url: str,
        timeout_seconds: float = 15,
    ) -> "HttpxEdamamClient":
        """Create an Edamam client with a managed httpx session."""
        return cls(
            app_id=app_id,
            app_key=app_key,
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_recipes(self, query: str, diet: str | None) -> dict[str, object]:
        """Search recipes."""
        url = f"{self.base_url}/api/recipes/v2"
        params = {
            "type": "public",
            "q": query,
            "app_id": self.app_id,
            "app_key": self.app_key,
        }
        if diet:
            params["diet"] = diet
        response = await self.http_client.get(
            url,
            params=params,
            timeout=self.timeout_seconds,
        )
        _logger.debug("Edamam recipe search: status=%s", response.status_code)
        response.raise_for_status()
        return response.json()

    async def analyze_nutrition(
        self, title: str, ingredients: list[str]
    ) -> dict[str, object]:
        """Request nutrition details for a recipe."""
        url = f"{self.base_url}/api/nutrition-details"
        response = await self.http_client.post(
            url,
            params={"app_id": self.app_id, "app_key": self.app_key},
            json={"title": title, "ingr": ingredients},
            timeout=self.timeout_seconds,
        )
        _logger.debug("Edamam nutrition details: status=%s", response.status_code)
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
