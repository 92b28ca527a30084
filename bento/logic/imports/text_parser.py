"""Heuristic recipe segmentation for plain text pulled out of a PDF.

Layout assumed (what most printed recipe cards look like):

    Title line
    description paragraph ...
    Ingredients
    2 cups flour
    100 g sugar
    Method
    step text ...

Lines that do not look like ``<quantity> <unit> <name>`` inside the
ingredient section are dropped silently. The output is a raw dict meant for
``normalize_recipe``; quantities stay as the strings found in the text.
"""
from __future__ import annotations
import math
from typing import Dict, List, Optional

from bento.domain.ParsedRecipe import ParsedRecipe
from bento.logic.imports.errors import NoTextExtractedError
from bento.logic.imports.normalizer import normalize_recipe
from bento.utilities.constants import (
    INGREDIENT_MARKERS, PROCEDURE_MARKERS, MAX_NAME_LENGTH, MAX_DESCRIPTION_LENGTH,
    MAX_PROCEDURES_LENGTH, MAX_INGREDIENTS, MAX_FALLBACK_DESCRIPTION_LINES
)

__all__ = ["parse_recipe_text", "parse_ingredient_line", "import_recipe_text"]

_BULLETS = "-*•·–"
_SHORT_HEADING_WORDS = 4


def _has_marker(line: str, markers) -> bool:
    lowered = line.lower()
    return any(marker in lowered for marker in markers)


def _is_heading(line: str, markers) -> bool:
    """Section heading: the line opens with a marker ('Ingredients:', 'Step 1 ...', '## Method')."""
    return line.lstrip(_BULLETS + "#: ").lower().startswith(tuple(markers))


def _is_number(token: str) -> bool:
    try:
        return math.isfinite(float(token))
    except ValueError:
        return False


def parse_ingredient_line(line: str) -> Optional[Dict[str, str]]:
    """'2 cups flour' -> {'quantity': '2', 'unit': 'cups', 'name': 'flour'}; None if the shape does not fit."""
    parts = line.strip().lstrip(_BULLETS).split()
    if len(parts) < 3 or not _is_number(parts[0]):
        return None
    return {"name": " ".join(parts[2:]), "quantity": parts[0], "unit": parts[1]}


def _find_ingredient_header(body: List[str]) -> Optional[int]:
    for i, line in enumerate(body):
        if not line:
            continue
        if _is_heading(line, PROCEDURE_MARKERS):
            # an "ingredients" word inside the method text is not a header
            return None
        if _is_heading(line, INGREDIENT_MARKERS) or (
                _has_marker(line, INGREDIENT_MARKERS) and len(line.split()) <= _SHORT_HEADING_WORDS):
            return i
    return None


def _first_paragraph(body: List[str]) -> int:
    """Index just past the first paragraph (blank-line bounded, capped in length)."""
    i = 0
    while i < len(body) and not body[i]:
        i += 1
    taken = 0
    while i < len(body) and body[i] and taken < MAX_FALLBACK_DESCRIPTION_LINES:
        if _is_heading(body[i], PROCEDURE_MARKERS) or parse_ingredient_line(body[i]):
            break
        i += 1
        taken += 1
    return i


def parse_recipe_text(text: str) -> dict:
    """Split document text into name/description/ingredients/procedures."""
    lines = [line.strip() for line in (text or "").splitlines()]
    start = next((i for i, line in enumerate(lines) if line), None)
    if start is None:
        raise NoTextExtractedError()

    name = lines[start]
    body = lines[start + 1:]

    header = _find_ingredient_header(body)
    if header is not None:
        description_end, ingredients_from = header, header + 1
    else:
        description_end = ingredients_from = _first_paragraph(body)
    description = " ".join(line for line in body[:description_end] if line)

    ingredients: List[Dict[str, str]] = []
    procedures_from = None
    for j in range(ingredients_from, len(body)):
        line = body[j]
        if not line:
            continue
        if _has_marker(line, PROCEDURE_MARKERS):
            procedures_from = j + 1
            break
        if _has_marker(line, INGREDIENT_MARKERS) or len(line) < 2:
            continue
        parsed = parse_ingredient_line(line)
        if parsed:
            ingredients.append(parsed)

    procedures = ""
    if procedures_from is not None:
        procedures = "\n".join(line for line in body[procedures_from:] if line)

    return {
        "name": name[:MAX_NAME_LENGTH],
        "description": description[:MAX_DESCRIPTION_LENGTH],
        "ingredients": ingredients[:MAX_INGREDIENTS],
        "procedures": procedures[:MAX_PROCEDURES_LENGTH],
    }


def import_recipe_text(text: str) -> ParsedRecipe:
    """parse_recipe_text + normalize_recipe."""
    return normalize_recipe(parse_recipe_text(text))
