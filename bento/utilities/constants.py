from typing import Final

# Pan shapes understood by the scaling calculator
PAN_SHAPES: Final[tuple[str, ...]] = ("round", "rectangular", "square")

# Import defaults
DEFAULT_RECIPE_NAME: Final[str] = "Imported Recipe"
DEFAULT_INGREDIENT_NAME: Final[str] = "Unknown Ingredient"
DEFAULT_INGREDIENT_UNIT: Final[str] = "g"
DEFAULT_RECEIPT_ITEM_NAME: Final[str] = "Unknown Item"
DEFAULT_RECEIPT_ITEM_UNIT: Final[str] = "pcs"

# Text segmentation markers (case-insensitive substring match)
INGREDIENT_MARKERS: Final[tuple[str, ...]] = ("ingredient", "what you need", "you need")
PROCEDURE_MARKERS: Final[tuple[str, ...]] = ("instruction", "procedure", "method", "direction", "step")

# Text extraction limits
MAX_NAME_LENGTH: Final[int] = 100
MAX_DESCRIPTION_LENGTH: Final[int] = 500
MAX_PROCEDURES_LENGTH: Final[int] = 2000
MAX_INGREDIENTS: Final[int] = 50
MAX_FALLBACK_DESCRIPTION_LINES: Final[int] = 5

# Accepted uploads
IMAGE_MIME_TYPES: Final[tuple[str, ...]] = ("image/png", "image/jpeg", "image/jpg")
PDF_MIME_TYPE: Final[str] = "application/pdf"

NOT_COMPUTABLE_PANS_MESSAGE: Final[str] = "Please enter valid dimensions for both pans."
NOT_COMPUTABLE_PIECES_MESSAGE: Final[str] = "Please enter a valid piece count and weight per piece."

RECIPE_IMAGE_PROMPT: Final[str] = (
    """
    You are a recipe extraction assistant for a bakery and food business.
    Read the recipe in the image and return ONLY a JSON object, no prose and no markdown,
    with exactly this structure:

    """
)
RECIPE_JSON_FORMAT: Final[str] = (
    """
{
    "name": str,
    "description": str,
    "ingredients": [
      {
        "name": str,
        "quantity": number,
        "unit": str
      }
    ],
    "procedures": str
}

    Quantities MUST be plain numbers (convert fractions such as 1/2 to 0.5).
    Use metric units (g, ml) when the recipe allows it, otherwise keep the written unit.
    If a section is not visible, leave it out.
    """
)
RECEIPT_PROMPT: Final[str] = (
    """
    You are a receipt/invoice parser for a kitchen management system. Extract structured data.

    For each item, decide whether it is an "ingredient" (food used in recipes) or a
    "material" (packaging, equipment, supplies).

    Common ingredient categories: Produce, Meat & Poultry, Seafood, Dairy, Grains & Flour,
    Spices & Seasonings, Oils & Fats, Sweeteners, Baking, Canned Goods, Frozen, Other
    Common material categories: Packaging, Equipment, Utensils, Containers, Labels,
    Cleaning Supplies, Other

    Return ONLY a JSON object with this structure:
    """
)
RECEIPT_JSON_FORMAT: Final[str] = (
    """
{
    "supplier": {"name": str, "phone": str, "email": str},
    "items": [
      {
        "name": str,
        "quantity": number,
        "unit": str,
        "price": number,
        "category": str,
        "type": "ingredient" | "material"
      }
    ],
    "total_amount": number,
    "date": str
}

    If information is not clear, make reasonable estimates.
    """
)
