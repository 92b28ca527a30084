"""Recipe and receipt import normalization.

Extraction output (AI JSON or the text parser's dict) is not trusted to
match any schema. Normalization is a single validation pass through the
``ParsedRecipe``/``ParsedReceipt`` models; every field has a default, so
these functions cannot fail.
"""
from __future__ import annotations
import logging
from typing import Any

from bento.domain.ParsedRecipe import ParsedRecipe
from bento.domain.Receipt import ParsedReceipt
from bento.utilities.parsing import parse_numeric_value

logger = logging.getLogger(__name__)

__all__ = ["parse_numeric_value", "normalize_recipe", "normalize_receipt"]


def normalize_recipe(raw: Any) -> ParsedRecipe:
    """Coerce arbitrary extraction output into a ParsedRecipe."""
    if not isinstance(raw, dict):
        logger.debug("Recipe extraction output is %s, not an object; using defaults", type(raw).__name__)
        raw = {}
    recipe = ParsedRecipe.model_validate(raw)
    logger.debug("Normalized recipe '%s' with %d ingredients", recipe.name, len(recipe.ingredients))
    return recipe


def normalize_receipt(raw: Any) -> ParsedReceipt:
    """Coerce arbitrary extraction output into a ParsedReceipt."""
    if not isinstance(raw, dict):
        logger.debug("Receipt extraction output is %s, not an object; using defaults", type(raw).__name__)
        raw = {}
    return ParsedReceipt.model_validate(raw)
