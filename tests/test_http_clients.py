"""Tests for the Edamam HTTP adapter."""

import asyncio
import json

import httpx
import pytest

from recipe_finder.adapters.edamam_client import HttpxEdamamClient


def _client(handler) -> HttpxEdamamClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxEdamamClient(
        app_id="app-id",
        app_key="app-key",
        base_url="https://api.test",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_search_recipes_sends_query_diet_and_credentials() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"hits": []})

    client = _client(handler)

    result = asyncio.run(client.search_recipes("chicken", "low-carb"))

    assert result == {"hits": []}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/api/recipes/v2"
    assert request.url.params["q"] == "chicken"
    assert request.url.params["diet"] == "low-carb"
    assert request.url.params["app_id"] == "app-id"
    assert request.url.params["app_key"] == "app-key"
    assert request.url.params["type"] == "public"


def test_search_recipes_omits_unset_diet() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"hits": []})

    client = _client(handler)

    asyncio.run(client.search_recipes("", None))

    assert "diet" not in seen[0].url.params
    assert seen[0].url.params["q"] == ""


def test_analyze_nutrition_posts_body_with_credentials_in_query() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"calories": 10, "totalWeight": 5})

    client = _client(handler)

    result = asyncio.run(client.analyze_nutrition("Omelette", ["2 eggs", "1 tbsp butter"]))

    assert result["calories"] == 10
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/api/nutrition-details"
    assert request.url.params["app_id"] == "app-id"
    assert request.url.params["app_key"] == "app-key"
    body = json.loads(request.content.decode())
    assert body == {"title": "Omelette", "ingr": ["2 eggs", "1 tbsp butter"]}
    assert "app_key" not in body


def test_analyze_nutrition_raises_on_non_success_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(555, json={"error": "low_quality"})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        asyncio.run(client.analyze_nutrition("Soup", ["water"]))

    assert excinfo.value.response.status_code == 555


def test_create_strips_trailing_slash() -> None:
    client = HttpxEdamamClient.create(
        app_id="app-id", app_key="app-key", base_url="https://api.test/"
    )

    assert client.base_url == "https://api.test"
    asyncio.run(client.close())
