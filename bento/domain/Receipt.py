"""Supplier receipt/invoice record extracted from a photo or CSV export."""
from typing import List, Literal, Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator

from bento.domain.ParsedRecipe import optional_text, usable_quantity, as_list, as_mapping
from bento.utilities.constants import DEFAULT_RECEIPT_ITEM_NAME, DEFAULT_RECEIPT_ITEM_UNIT
from bento.utilities.parsing import parse_numeric_value, finite_float, coerce_text


class ReceiptSupplier(BaseModel):
    name: str = ""
    phone: Optional[str] = None
    email: Optional[str] = None

    @field_validator('name', mode='before')
    @classmethod
    def text_name(cls, v):
        return coerce_text(v)

    @field_validator('phone', 'email', mode='before')
    @classmethod
    def present_text(cls, v):
        return optional_text(v)


class ReceiptItem(BaseModel):
    name: str = DEFAULT_RECEIPT_ITEM_NAME
    quantity: float = 1.0
    unit: str = DEFAULT_RECEIPT_ITEM_UNIT
    price: float = 0.0
    category: Optional[str] = None
    type: Literal["ingredient", "material"] = "ingredient"

    @field_validator('name', mode='before')
    @classmethod
    def default_name(cls, v):
        return coerce_text(v) or DEFAULT_RECEIPT_ITEM_NAME

    @field_validator('quantity', mode='before')
    @classmethod
    def numeric_quantity(cls, v):
        return usable_quantity(v)

    @field_validator('unit', mode='before')
    @classmethod
    def default_unit(cls, v):
        return coerce_text(v) or DEFAULT_RECEIPT_ITEM_UNIT

    @field_validator('price', mode='before')
    @classmethod
    def numeric_price(cls, v):
        return finite_float(parse_numeric_value(v), 0.0)

    @field_validator('category', mode='before')
    @classmethod
    def present_category(cls, v):
        return optional_text(v)

    @field_validator('type', mode='before')
    @classmethod
    def item_type(cls, v):
        return "material" if coerce_text(v).lower() == "material" else "ingredient"


class ParsedReceipt(BaseModel):
    supplier: Optional[ReceiptSupplier] = None
    items: List[ReceiptItem] = []
    total_amount: Optional[float] = Field(None, validation_alias=AliasChoices("total_amount", "totalAmount"))
    date: Optional[str] = None

    @field_validator('supplier', mode='before')
    @classmethod
    def supplier_mapping(cls, v):
        mapping = as_mapping(v)
        return mapping if coerce_text(mapping.get("name")) else None

    @field_validator('items', mode='before')
    @classmethod
    def item_list(cls, v):
        return [as_mapping(item) for item in as_list(v)]

    @field_validator('total_amount', mode='before')
    @classmethod
    def numeric_total(cls, v):
        if v is None or v == "":
            return None
        return finite_float(parse_numeric_value(v), 0.0)

    @field_validator('date', mode='before')
    @classmethod
    def present_date(cls, v):
        return optional_text(v)

    def ingredients(self) -> List[ReceiptItem]:
        return [item for item in self.items if item.type == "ingredient"]

    def materials(self) -> List[ReceiptItem]:
        return [item for item in self.items if item.type == "material"]

    def to_dict(self):
        return self.model_dump(exclude_none=True)
