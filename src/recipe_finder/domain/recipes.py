"""Recipe search domain models."""

from dataclasses import dataclass, field
from enum import Enum


class DietFilter(str, Enum):
    """Diet labels accepted by the recipe search endpoint."""

    BALANCED = "balanced"
    HIGH_FIBER = "high-fiber"
    HIGH_PROTEIN = "high-protein"
    LOW_CARB = "low-carb"
    LOW_FAT = "low-fat"
    LOW_SODIUM = "low-sodium"


@dataclass(frozen=True)
class RecipeQuery:
    """Free-text recipe query with an optional diet filter."""

    text: str
    diet: DietFilter | None = None


@dataclass(frozen=True)
class RecipeSummary:
    """A single recipe hit from a search."""

    label: str
    image: str
    url: str
    diet_labels: list[str] = field(default_factory=list)
    health_labels: list[str] = field(default_factory=list)
