"""Imported recipe persistence (JSON files).

One ingredient record per parsed ingredient (reused when an ingredient with
the same name already exists) and one recipe record that links them.
"""
import json
import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union
from uuid import uuid4

from bento.domain.ParsedRecipe import ParsedRecipe
from bento.events.Event_Bus import GLOBAL_EVENT_BUS, RECIPE_IMPORTED, EventBus
from bento.infra.paths import RECIPES_FILE, INGREDIENTS_FILE

logger = logging.getLogger(__name__)


def _key(name: str) -> str:
    return (name or '').strip().lower()


def _read_list(path: Path) -> list:
    """Read a JSON list with graceful error handling."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return data if isinstance(data, list) else []
    except FileNotFoundError:
        logger.info(f"Data file not found: {path}. Starting empty.")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        return []


def _atomic_write(path: Path, items: list):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=os.path.dirname(path), prefix=f".{path.stem}_", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(items, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, path)
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


class RecipeRepository:
    def __init__(self, recipes_file: Union[str, Path] = RECIPES_FILE,
                 ingredients_file: Union[str, Path] = INGREDIENTS_FILE,
                 event_bus: Optional[EventBus] = None):
        self.recipes_file = Path(recipes_file)
        self.ingredients_file = Path(ingredients_file)
        self._event_bus = event_bus or GLOBAL_EVENT_BUS

    def list_recipes(self) -> List[dict]:
        return _read_list(self.recipes_file)

    def list_ingredients(self) -> List[dict]:
        return _read_list(self.ingredients_file)

    def get_recipe(self, recipe_id: str) -> Optional[dict]:
        return next((r for r in self.list_recipes() if r.get('id') == recipe_id), None)

    def save_parsed_recipe(self, parsed: ParsedRecipe, source: str = "manual") -> dict:
        '''
        Persists a normalized import: creates missing ingredient records and a recipe linking them.
        Returns the stored recipe record.
        '''
        ingredients = self.list_ingredients()
        by_name = {_key(i.get('name', '')): i for i in ingredients}

        lines = []
        for item in parsed.ingredients:
            record = by_name.get(_key(item.name))
            if record is None:
                record = {"id": str(uuid4()), "name": item.name, "unit": item.unit}
                ingredients.append(record)
                by_name[_key(item.name)] = record
            lines.append({"ingredient_id": record["id"], "quantity": item.quantity, "unit": item.unit})

        recipe = {
            "id": str(uuid4()),
            "name": parsed.name,
            "ingredients": lines,
            "source": source,
            "created_at": datetime.now().isoformat(timespec="seconds"),
        }
        # Missing sections stay absent so the UI can prompt for them
        if parsed.description is not None:
            recipe["description"] = parsed.description
        if parsed.procedures is not None:
            recipe["procedures"] = parsed.procedures

        recipes = self.list_recipes()
        recipes.append(recipe)
        _atomic_write(self.ingredients_file, ingredients)
        _atomic_write(self.recipes_file, recipes)
        logger.info("Imported recipe '%s' (%d ingredients) from %s", parsed.name, len(lines), source)

        self._event_bus.publish(RECIPE_IMPORTED, {
            "recipe_id": recipe["id"],
            "name": recipe["name"],
            "ingredients": len(lines),
            "source": source,
        })
        return recipe
