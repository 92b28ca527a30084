"""
Input validation schemas using Pydantic for the converter and import endpoints.

Numeric form fields are accepted as numbers or raw strings; the scaling
layer applies parseFloat/parseInt-style coercion with documented fallbacks,
so a half-typed field produces "not computable" instead of a 422.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Union

from bento.utilities.config import DEFAULT_CURRENCY

Number = Optional[Union[float, str]]


class PanInput(BaseModel):
    """Schema for one pan setup."""
    shape: str = Field("round", pattern=r'^(round|rectangular|square)$')
    diameter: Number = None
    width: Number = None
    length: Number = None
    height: Number = None
    count: Optional[Union[int, str]] = 1

    @field_validator('shape', mode='before')
    @classmethod
    def normalize_shape(cls, v):
        """Accept 'Round', ' square ' etc."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class IngredientLineInput(BaseModel):
    """Schema for a recipe ingredient row to be scaled."""
    ingredient_id: str = ""
    name: str = Field(..., min_length=1, max_length=200)
    baker_percentage: float = Field(0.0, ge=0)
    original_weight: float = Field(0.0, ge=0)
    original_cost: float = Field(0.0, ge=0)

    @field_validator('name')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        return v.strip()


class VolumeConversionInput(BaseModel):
    """Schema for the cake pan (pan-to-pan) converter."""
    original: PanInput
    target: PanInput
    ingredients: List[IngredientLineInput] = Field(default_factory=list)


class YieldConversionInput(BaseModel):
    """Schema for the pan/yield converter (by pieces or by pan)."""
    mode: str = Field("pieces", pattern=r'^(pieces|pan)$')
    desired_pieces: Number = None
    target_weight_per_piece: Number = None
    original_total_weight: Number = None
    current_yield: int = Field(0, ge=0)
    current_pan_setup: str = ""
    original_pan: Optional[PanInput] = None
    target_pan: Optional[PanInput] = None
    ingredients: List[IngredientLineInput] = Field(default_factory=list)


class ScaledSheetInput(YieldConversionInput):
    """Schema for the printable scaled recipe sheet."""
    title: str = Field("Recipe", min_length=1, max_length=200)
    currency: str = Field(DEFAULT_CURRENCY, min_length=3, max_length=3)

    @field_validator('currency')
    @classmethod
    def upper_currency(cls, v):
        return v.upper()


class TextImportInput(BaseModel):
    """Schema for importing a recipe from pasted/extracted text."""
    text: str = Field(..., max_length=200_000)


class CsvReceiptInput(BaseModel):
    """Schema for a receipt CSV export pasted as text."""
    csv: str = Field(..., min_length=1, max_length=200_000)
