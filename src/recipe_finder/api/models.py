"""Pydantic models for the proxy API."""

from pydantic import BaseModel, ConfigDict


class AnalyzeRequest(BaseModel):
    """Recipe title plus raw ingredient textbox content."""

    title: str
    ingredients: str


class RecipeCardModel(BaseModel):
    """Recipe card payload."""

    model_config = ConfigDict(from_attributes=True)

    label: str
    image: str
    url: str
    diet_labels: list[str]
    health_labels: list[str]


class RecipeSearchResponse(BaseModel):
    """Recipe search results."""

    recipes: list[RecipeCardModel]


class NutrientLineModel(BaseModel):
    """Rendered nutrient row payload."""

    model_config = ConfigDict(from_attributes=True)

    code: str
    text: str


class NutritionReportResponse(BaseModel):
    """Nutrition report payload."""

    model_config = ConfigDict(from_attributes=True)

    title: str
    calories: str
    weight: str
    diet_labels: str
    health_labels: str
    cautions: str
    nutrients: list[NutrientLineModel]
    ingredients: list[str]
