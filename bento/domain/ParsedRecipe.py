"""Canonical recipe import record, produced from untrusted extraction output.

The models below are the whole normalization contract: every field has a
``mode="before"`` validator that coerces or defaults the raw value, so
validating arbitrary JSON always succeeds.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, field_validator

from bento.utilities.constants import (
    DEFAULT_RECIPE_NAME, DEFAULT_INGREDIENT_NAME, DEFAULT_INGREDIENT_UNIT
)
from bento.utilities.parsing import parse_numeric_value, finite_float, coerce_text


def optional_text(value: Any) -> Optional[str]:
    """Trimmed text when the raw value is present, None when nothing was extracted."""
    if value is None or value == "" or value is False:
        return None
    return coerce_text(value)


def usable_quantity(value: Any) -> float:
    """Numeric quantity; zero, unparseable or non-finite values become 1."""
    return finite_float(parse_numeric_value(value), None) or 1.0


def as_list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []


def as_mapping(value: Any) -> dict:
    return dict(value) if isinstance(value, dict) else {}


class ParsedRecipeIngredient(BaseModel):
    name: str = DEFAULT_INGREDIENT_NAME
    quantity: float = 1.0
    unit: str = DEFAULT_INGREDIENT_UNIT

    @field_validator('name', mode='before')
    @classmethod
    def default_name(cls, v):
        return coerce_text(v) or DEFAULT_INGREDIENT_NAME

    @field_validator('quantity', mode='before')
    @classmethod
    def numeric_quantity(cls, v):
        return usable_quantity(v)

    @field_validator('unit', mode='before')
    @classmethod
    def default_unit(cls, v):
        return coerce_text(v) or DEFAULT_INGREDIENT_UNIT


class ParsedRecipe(BaseModel):
    name: str = DEFAULT_RECIPE_NAME
    description: Optional[str] = None
    ingredients: List[ParsedRecipeIngredient] = []
    procedures: Optional[str] = None

    @field_validator('name', mode='before')
    @classmethod
    def default_name(cls, v):
        return coerce_text(v) or DEFAULT_RECIPE_NAME

    @field_validator('description', 'procedures', mode='before')
    @classmethod
    def present_text(cls, v):
        return optional_text(v)

    @field_validator('ingredients', mode='before')
    @classmethod
    def ingredient_list(cls, v):
        # Elements that are not objects still become an ingredient made of defaults
        return [as_mapping(item) for item in as_list(v)]

    def __str__(self) -> str:
        return f"{self.name} - {len(self.ingredients)} ingredients"

    def to_dict(self):
        '''Plain dict; description/procedures are left out when they were not extracted.'''
        return self.model_dump(exclude_none=True)
