"""Minimal browser UI that consumes the proxy API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from recipe_finder.domain.recipes import DietFilter

router = APIRouter(tags=["ui"])


@router.get("/ui", response_class=HTMLResponse)
async def recipe_finder_ui() -> HTMLResponse:
    """Recipe search and nutrition analyzer forms."""
    options = "\n".join(
        f'        <option value="{diet.value}">{diet.value}</option>'
        for diet in DietFilter
    )
    return HTMLResponse(_UI_HTML.replace("{diet_options}", options))


_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Recipe Finder</title>
    <meta name="description" content="Find recipes based on your dietary preferences" />
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; max-width: 48rem; }
      section { margin-bottom: 2rem; }
      .row { margin-bottom: 1rem; }
      input, select { padding: 0.4rem 0.6rem; width: 320px; }
      textarea { width: 100%; height: 8rem; padding: 0.4rem; }
      button { padding: 0.4rem 0.8rem; }
      .error { color: #c00; }
      .cards { display: grid; grid-template-columns: repeat(auto-fill, minmax(12rem, 1fr)); gap: 1rem; }
      .card { border: 1px solid #ddd; padding: 0.8rem; }
      .card img { width: 100%; }
    </style>
  </head>
  <body>
    <h1>Recipe Finder</h1>
    <section>
      <h2>Recipe Search</h2>
      <div class="row">
        <input id="query" type="text" placeholder="Search recipes" />
        <select id="diet">
        <option value="">Any diet</option>
{diet_options}
        </select>
        <button id="search-button" onclick="searchRecipes()">Search</button>
      </div>
      <div id="recipes" class="cards"></div>
    </section>
    <section>
      <h2>Recipe Nutrition Analyzer</h2>
      <div class="row"><input id="title" type="text" placeholder="Enter recipe title" /></div>
      <div class="row">
        <textarea id="ingredients" placeholder="Enter ingredients (one per line)"></textarea>
      </div>
      <button id="analyze-button" onclick="analyzeRecipe()">Analyze Recipe</button>
      <div id="analysis-error" class="error"></div>
      <div id="analysis"></div>
    </section>
    <script>
      function el(tag, text) {
        const node = document.createElement(tag);
        if (text !== undefined) node.textContent = text;
        return node;
      }

      async function searchRecipes() {
        const button = document.getElementById('search-button');
        button.disabled = true;
        try {
          const params = new URLSearchParams({ q: document.getElementById('query').value });
          const diet = document.getElementById('diet').value;
          if (diet) params.set('diet', diet);
          const res = await fetch('/recipes/search?' + params.toString());
          if (!res.ok) {
            console.error('Error fetching recipes:', res.status);
            return;
          }
          const data = await res.json();
          const container = document.getElementById('recipes');
          container.replaceChildren();
          for (const recipe of data.recipes) {
            const card = el('div');
            card.className = 'card';
            const img = el('img');
            img.src = recipe.image;
            img.alt = recipe.label;
            const link = el('a', 'View Recipe');
            link.href = recipe.url;
            link.target = '_blank';
            card.append(
              img,
              el('h3', recipe.label),
              el('p', recipe.diet_labels.join(', ')),
              el('p', recipe.health_labels.join(', ')),
              link
            );
            container.append(card);
          }
        } catch (err) {
          console.error('Error fetching recipes:', err);
        } finally {
          button.disabled = false;
        }
      }

      async function analyzeRecipe() {
        const button = document.getElementById('analyze-button');
        const errorBox = document.getElementById('analysis-error');
        button.disabled = true;
        errorBox.textContent = '';
        try {
          const res = await fetch('/nutrition/analyze', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({
              title: document.getElementById('title').value,
              ingredients: document.getElementById('ingredients').value
            })
          });
          const data = await res.json();
          if (!res.ok) {
            errorBox.textContent = typeof data.detail === 'string'
              ? data.detail
              : 'An unknown error occurred. Please try again.';
            return;
          }
          const output = document.getElementById('analysis');
          const list = el('ul');
          for (const nutrient of data.nutrients) list.append(el('li', nutrient.text));
          output.replaceChildren(
            el('h3', data.title),
            el('p', 'Calories: ' + data.calories + ' | Weight: ' + data.weight),
            el('p', 'Diet Labels: ' + data.diet_labels),
            el('p', 'Health Labels: ' + data.health_labels),
            el('p', 'Cautions: ' + data.cautions),
            el('h4', 'Nutrients:'),
            list
          );
        } catch (err) {
          errorBox.textContent = 'An unknown error occurred. Please try again.';
        } finally {
          button.disabled = false;
        }
      }
    </script>
  </body>
</html>
"""
