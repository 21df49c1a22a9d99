"""Request/result flows holding UI-local loading, error, and result state."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from recipe_finder.domain.nutrition import NutritionAnalysis, RecipeSubmission
from recipe_finder.domain.outcomes import Failure, Outcome, Success
from recipe_finder.domain.recipes import RecipeQuery, RecipeSummary
from recipe_finder.services.nutrition import NutritionAnalysisService
from recipe_finder.services.recipes import RecipeSearchService

RequestT = TypeVar("RequestT")
ResultT = TypeVar("ResultT")

_logger = logging.getLogger(__name__)


@dataclass
class FlowState(Generic[ResultT]):
    """Loading flag, last error message, and last successful result.

    ``failure`` records the outcome of the latest failed call even when the
    flow does not surface it through ``error``.
    """

    loading: bool = False
    error: str | None = None
    result: ResultT | None = None
    failure: Failure | None = None


@dataclass
class RequestFlow(Generic[RequestT, ResultT]):
    """Runs one provider call at a time and tracks its state.

    ``submit`` is ignored while a request is in flight, the same way the
    action button is disabled while loading. Failures are always logged;
    they only reach ``state.error`` when ``surface_errors`` is set.
    """

    name: str
    call: Callable[[RequestT], Awaitable[Outcome[ResultT]]]
    surface_errors: bool = True
    state: FlowState[ResultT] = field(default_factory=FlowState)

    async def submit(self, request: RequestT) -> FlowState[ResultT]:
        """Run the call for ``request`` and update state."""
        if self.state.loading:
            _logger.warning("%s request already in flight; ignoring", self.name)
            return self.state
        self.state.loading = True
        self.state.error = None
        self.state.failure = None
        try:
            outcome = await self.call(request)
            if isinstance(outcome, Success):
                self.state.result = outcome.value
            else:
                self.state.failure = outcome
                _logger.error(
                    "%s failed (status=%s): %s",
                    self.name,
                    outcome.status_code,
                    outcome.message,
                )
                if self.surface_errors:
                    self.state.error = outcome.message
        finally:
            self.state.loading = False
        return self.state


def recipe_search_flow(
    service: RecipeSearchService,
) -> RequestFlow[RecipeQuery, list[RecipeSummary]]:
    """Build the recipe search flow.

    Search failures are only logged and leave ``state.error`` unset.
    """
    return RequestFlow(name="Recipe search", call=service.search, surface_errors=False)


def nutrition_analyzer_flow(
    service: NutritionAnalysisService,
) -> RequestFlow[RecipeSubmission, NutritionAnalysis]:
    """Build the nutrition analyzer flow, which reports failures to the user."""
    return RequestFlow(name="Nutrition analysis", call=service.analyze)
