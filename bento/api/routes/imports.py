"""Recipe and receipt import endpoints (text, PDF, image, CSV, raw JSON)."""
import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, File, HTTPException, UploadFile

from bento.api import api_ai
from bento.events.Event_Bus import publish, RECEIPT_PARSED
from bento.infra.pdf_utils import extract_pdf_text
from bento.infra.Recipe_Repository import RecipeRepository
from bento.logic.imports.errors import (
    ExtractionError, NoTextExtractedError, ExtractionUnavailableError, InvalidExtractionResponseError
)
from bento.logic.imports.normalizer import normalize_recipe
from bento.logic.imports.text_parser import import_recipe_text
from bento.utilities.config import MAX_UPLOAD_BYTES
from bento.utilities.constants import IMAGE_MIME_TYPES, PDF_MIME_TYPE
from bento.utilities.validators import TextImportInput, CsvReceiptInput

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    NoTextExtractedError: 422,
    ExtractionUnavailableError: 503,
    InvalidExtractionResponseError: 502,
}


def get_repository() -> RecipeRepository:
    return RecipeRepository()


def _http_error(e: ExtractionError) -> HTTPException:
    status = ERROR_STATUS.get(type(e), 500)
    logger.warning("Import failed (%s): %s", type(e).__name__, e.message)
    return HTTPException(status_code=status, detail=e.message)


async def _read_upload(file: UploadFile, allowed, kinds: str = "PNG, JPG, or PDF") -> bytes:
    content_type = (file.content_type or "").lower()
    if content_type not in allowed:
        raise HTTPException(status_code=400, detail=f"Please upload a {kinds} file")
    data = await file.read()
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File size must be less than {MAX_UPLOAD_BYTES // (1024 * 1024)}MB")
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    return data


def _recipe_from_pdf(data: bytes) -> dict:
    try:
        return import_recipe_text(extract_pdf_text(data)).to_dict()
    except ExtractionError as e:
        raise _http_error(e) from e


# === Recipes ===
@router.post("/recipes/parse-text")
def parse_recipe_text(payload: TextImportInput):
    try:
        return import_recipe_text(payload.text).to_dict()
    except ExtractionError as e:
        raise _http_error(e) from e


@router.post("/recipes/parse-pdf")
async def parse_recipe_pdf(file: UploadFile = File(...)):
    data = await _read_upload(file, (PDF_MIME_TYPE,), kinds="PDF")
    return _recipe_from_pdf(data)


@router.post("/recipes/parse-image")
async def parse_recipe_image(file: UploadFile = File(...)):
    """Recipe card/photo via the AI service; PDFs go through the text parser."""
    data = await _read_upload(file, IMAGE_MIME_TYPES + (PDF_MIME_TYPE,))
    if file.content_type == PDF_MIME_TYPE:
        return _recipe_from_pdf(data)
    try:
        return api_ai.extract_recipe_from_image(data, file.content_type).to_dict()
    except ExtractionError as e:
        raise _http_error(e) from e


@router.post("/recipes/import", status_code=201)
def import_recipe(raw: Any = Body(...), repo: RecipeRepository = Depends(get_repository)):
    """Normalize any extraction output and store it as a recipe with its ingredients."""
    parsed = normalize_recipe(raw)
    stored = repo.save_parsed_recipe(parsed, source="import")
    return {"status": "success", "recipe": stored, "parsed": parsed.to_dict()}


@router.get("/recipes")
def list_recipes(repo: RecipeRepository = Depends(get_repository)):
    recipes = repo.list_recipes()
    return {"recipes": recipes, "count": len(recipes)}


# === Receipts ===
def _receipt_response(receipt, source: str) -> dict:
    publish(RECEIPT_PARSED, {
        "items": len(receipt.items),
        "supplier": receipt.supplier.name if receipt.supplier else None,
        "source": source,
    })
    return receipt.to_dict()


@router.post("/receipts/parse-image")
async def parse_receipt_image(file: UploadFile = File(...)):
    data = await _read_upload(file, IMAGE_MIME_TYPES, kinds="PNG or JPG")
    try:
        receipt = api_ai.extract_receipt_from_image(data, file.content_type)
    except ExtractionError as e:
        raise _http_error(e) from e
    return _receipt_response(receipt, "image")


@router.post("/receipts/parse-csv")
def parse_receipt_csv(payload: CsvReceiptInput):
    try:
        receipt = api_ai.extract_receipt_from_csv(payload.csv)
    except ExtractionError as e:
        raise _http_error(e) from e
    return _receipt_response(receipt, "csv")
