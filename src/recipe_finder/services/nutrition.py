"""Nutrition analysis service backed by Edamam."""

import logging
from dataclasses import dataclass

import httpx

from recipe_finder.adapters.edamam_client import EdamamClient
from recipe_finder.domain.nutrition import (
    NutrientAmount,
    NutritionAnalysis,
    RecipeSubmission,
)
from recipe_finder.domain.outcomes import (
    Failure,
    MalformedResponseError,
    Outcome,
    Success,
)

INSUFFICIENT_QUALITY_STATUS = 555
INSUFFICIENT_QUALITY_MESSAGE = "Recipe with insufficient quality to process correctly."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred. Please try again."

_logger = logging.getLogger(__name__)


@dataclass
class NutritionAnalysisService:
    """Submits recipes for analysis and classifies failures."""

    client: EdamamClient

    async def analyze(self, submission: RecipeSubmission) -> Outcome[NutritionAnalysis]:
        """Analyze a recipe submission."""
        try:
            payload = await self.client.analyze_nutrition(
                submission.title, submission.ingredients
            )
            analysis = parse_nutrition_analysis(payload)
        except Exception as exc:
            _logger.warning(
                "Error analyzing recipe (status=%s): %s",
                status_code_from_exception(exc),
                exc,
            )
            return classify_analysis_error(exc)
        _logger.info(
            "Analyzed recipe: ingredients=%s nutrients=%s",
            len(submission.ingredients),
            len(analysis.total_nutrients),
        )
        return Success(analysis)


def classify_analysis_error(exc: Exception) -> Failure:
    """Map an analysis error to a user-facing failure."""
    status_code = status_code_from_exception(exc)
    if status_code == INSUFFICIENT_QUALITY_STATUS:
        return Failure(INSUFFICIENT_QUALITY_MESSAGE, status_code=status_code)
    if status_code is not None:
        return Failure(
            f"Failed to analyze recipe: HTTP error! status: {status_code}",
            status_code=status_code,
        )
    detail = str(exc)
    if not detail and isinstance(exc, httpx.HTTPError | ValueError):
        detail = type(exc).__name__
    if not detail:
        return Failure(UNKNOWN_ERROR_MESSAGE)
    return Failure(f"Failed to analyze recipe: {detail}")


def status_code_from_exception(exc: Exception) -> int | None:
    """Extract an HTTP status code from an exception, if available."""
    if not isinstance(exc, httpx.HTTPStatusError):
        return None
    return exc.response.status_code


def parse_nutrition_analysis(payload: dict[str, object]) -> NutritionAnalysis:
    """Parse a nutrition-details payload, keeping nutrient order."""
    try:
        nutrients = {
            code: NutrientAmount(
                label=str(entry["label"]),
                quantity=float(entry["quantity"]),
                unit=str(entry["unit"]),
            )
            for code, entry in (payload.get("totalNutrients") or {}).items()
        }
        return NutritionAnalysis(
            uri=str(payload.get("uri", "")),
            calories=float(payload["calories"]),
            total_weight=float(payload["totalWeight"]),
            diet_labels=list(payload.get("dietLabels") or []),
            health_labels=list(payload.get("healthLabels") or []),
            cautions=list(payload.get("cautions") or []),
            total_nutrients=nutrients,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise MalformedResponseError(
            f"unexpected nutrition payload: {exc!r}"
        ) from exc
