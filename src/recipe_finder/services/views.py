"""View models for displaying search results and nutrition reports."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from recipe_finder.domain.nutrition import NutritionAnalysis
from recipe_finder.domain.recipes import RecipeSummary

MAX_DISPLAYED_NUTRIENTS = 5


@dataclass(frozen=True)
class RecipeCard:
    """Display card for a recipe hit."""

    label: str
    image: str
    url: str
    diet_labels: list[str]
    health_labels: list[str]


@dataclass(frozen=True)
class NutrientLine:
    """A rendered nutrient row."""

    code: str
    text: str


@dataclass(frozen=True)
class NutritionReport:
    """Display-ready nutrition breakdown for a recipe."""

    title: str
    calories: str
    weight: str
    diet_labels: str
    health_labels: str
    cautions: str
    nutrients: list[NutrientLine]


def recipe_cards(recipes: list[RecipeSummary]) -> list[RecipeCard]:
    """Map each recipe summary to one card, in order."""
    return [
        RecipeCard(
            label=recipe.label,
            image=recipe.image,
            url=recipe.url,
            diet_labels=list(recipe.diet_labels),
            health_labels=list(recipe.health_labels),
        )
        for recipe in recipes
    ]


def nutrition_report(title: str, analysis: NutritionAnalysis) -> NutritionReport:
    """Build a report showing only the first few nutrients, in response order."""
    nutrients = [
        NutrientLine(
            code=code,
            text=(
                f"{nutrient.label}: "
                f"{to_fixed(nutrient.quantity, 2)} {nutrient.unit}"
            ),
        )
        for code, nutrient in list(analysis.total_nutrients.items())[
            :MAX_DISPLAYED_NUTRIENTS
        ]
    ]
    return NutritionReport(
        title=title,
        calories=to_fixed(analysis.calories, 0),
        weight=f"{to_fixed(analysis.total_weight, 0)}g",
        diet_labels=", ".join(analysis.diet_labels),
        health_labels=", ".join(analysis.health_labels),
        cautions=", ".join(analysis.cautions),
        nutrients=nutrients,
    )


def to_fixed(value: float, digits: int) -> str:
    """Format ``value`` with ``digits`` decimals, rounding ties away from zero.

    Rounds the exact binary value, so ``1.005`` gives ``"1.00"`` while ``0.5``
    gives ``"1"``.
    """
    return str(Decimal(value).quantize(Decimal(1).scaleb(-digits), ROUND_HALF_UP))
