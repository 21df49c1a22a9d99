"""Recipe search service backed by Edamam."""

import logging
from dataclasses import dataclass

import httpx

from recipe_finder.adapters.edamam_client import EdamamClient
from recipe_finder.domain.outcomes import (
    Failure,
    MalformedResponseError,
    Outcome,
    Success,
)
from recipe_finder.domain.recipes import RecipeQuery, RecipeSummary

_logger = logging.getLogger(__name__)


@dataclass
class RecipeSearchService:
    """Runs recipe searches and projects hits into summaries."""

    client: EdamamClient

    async def search(self, query: RecipeQuery) -> Outcome[list[RecipeSummary]]:
        """Search recipes; each call replaces any previous results."""
        diet = query.diet.value if query.diet else None
        try:
            payload = await self.client.search_recipes(query.text, diet)
            recipes = parse_recipe_hits(payload)
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            _logger.error("Recipe search failed: status=%s", status_code)
            return Failure(
                f"Failed to search recipes: HTTP error! status: {status_code}",
                status_code=status_code,
            )
        except (httpx.HTTPError, ValueError) as exc:
            _logger.error("Recipe search failed: %s", exc)
            return Failure(
                f"Failed to search recipes: {str(exc) or type(exc).__name__}"
            )
        _logger.info(
            "Recipe search: query=%r diet=%s results=%s", query.text, diet, len(recipes)
        )
        return Success(recipes)


def parse_recipe_hits(payload: dict[str, object]) -> list[RecipeSummary]:
    """Project each ``hits[*].recipe`` entry into a summary."""
    try:
        return [
            RecipeSummary(
                label=str(hit["recipe"]["label"]),
                image=str(hit["recipe"].get("image", "")),
                url=str(hit["recipe"].get("url", "")),
                diet_labels=list(hit["recipe"].get("dietLabels") or []),
                health_labels=list(hit["recipe"].get("healthLabels") or []),
            )
            for hit in payload.get("hits") or []
        ]
    except (AttributeError, KeyError, TypeError) as exc:
        raise MalformedResponseError(f"unexpected search payload: {exc!r}") from exc
