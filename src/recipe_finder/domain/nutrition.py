"""Nutrition analysis domain models."""

import re
from dataclasses import dataclass, field

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
# Whitespace and line terminators as trimmed by browsers, BOM included.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


@dataclass(frozen=True)
class RecipeSubmission:
    """Recipe title and ingredient lines sent for analysis."""

    title: str
    ingredients: list[str]

    @classmethod
    def from_text(cls, title: str, ingredients_text: str) -> "RecipeSubmission":
        """Build a submission from raw textbox content."""
        return cls(title=title, ingredients=parse_ingredient_lines(ingredients_text))


@dataclass(frozen=True)
class NutrientAmount:
    """Quantity of a single nutrient."""

    label: str
    quantity: float
    unit: str


@dataclass(frozen=True)
class NutritionAnalysis:
    """Nutrition breakdown for a whole recipe."""

    uri: str
    calories: float
    total_weight: float
    diet_labels: list[str] = field(default_factory=list)
    health_labels: list[str] = field(default_factory=list)
    cautions: list[str] = field(default_factory=list)
    total_nutrients: dict[str, NutrientAmount] = field(default_factory=dict)


def parse_ingredient_lines(text: str) -> list[str]:
    """Split textbox content into ingredient lines, dropping blank ones.

    Order is preserved and kept lines are passed through as typed.
    """
    return [line for line in _LINE_BREAK.split(text) if line.strip(_TRIM_CHARS)]
