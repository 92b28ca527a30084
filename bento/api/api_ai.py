import re
import json
import base64
import logging
from json import JSONDecodeError
from typing import Any, Optional
from openai import OpenAI, OpenAIError

from bento.domain.ParsedRecipe import ParsedRecipe
from bento.domain.Receipt import ParsedReceipt
from bento.logic.imports.errors import ExtractionUnavailableError, InvalidExtractionResponseError
from bento.logic.imports.normalizer import normalize_recipe, normalize_receipt
from bento.utilities import config
from bento.utilities.constants import (
    RECIPE_IMAGE_PROMPT, RECIPE_JSON_FORMAT, RECEIPT_PROMPT, RECEIPT_JSON_FORMAT
)

logger = logging.getLogger(__name__)


# === Helper: Get OpenAI Client ===
def _get_openai_client() -> Optional[OpenAI]:
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    if not config.OPENAI_API_KEY:
        return None
    return OpenAI(api_key=config.OPENAI_API_KEY, base_url=config.OPENAI_BASE_URL)


def _image_data_url(image_bytes: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


# === OpenAI Call ===
def _complete_json(content, *, purpose: str) -> Any:
    """Send one request in JSON mode and return the decoded object.

    Raises ExtractionUnavailableError when there is no client, the call fails
    or the answer is empty, InvalidExtractionResponseError when the answer
    cannot be turned into JSON.
    """
    client = _get_openai_client()
    if client is None:
        logger.warning("OPENAI_API_KEY not set, cannot run %s extraction.", purpose)
        raise ExtractionUnavailableError("AI extraction is not configured")

    try:
        response = client.responses.create(
            model=config.OPENAI_MODEL,
            input=[{"role": "user", "content": content}],
            text={"format": {"type": "json_object"}},
            max_output_tokens=4096,
        )
    except OpenAIError as e:
        logger.error("%s extraction request failed: %s", purpose, e)
        raise ExtractionUnavailableError() from e

    output = (response.output_text or "").strip()
    if not output:
        logger.warning("AI returned empty %s data", purpose)
        raise ExtractionUnavailableError(f"Failed to parse {purpose} - no response from AI")

    parsed = _decode_json(output)
    if parsed is None:
        logger.error("AI output for %s is not valid JSON and no JSON substring found", purpose)
        raise InvalidExtractionResponseError(f"Failed to parse {purpose} - invalid JSON response")
    return parsed


# === JSON Parsing ===
def _decode_json(text: str) -> Any:
    """json.loads with the usual LLM clean-ups; None when nothing decodes."""
    try:
        return json.loads(text)
    except JSONDecodeError:
        pass

    cleaned = _remove_trailing_commas(_strip_code_fences(text))
    try:
        return json.loads(cleaned)
    except JSONDecodeError:
        pass

    candidate = _extract_json_by_balancing(cleaned)
    if candidate:
        try:
            return json.loads(_remove_trailing_commas(candidate))
        except JSONDecodeError:
            logger.debug("Balanced JSON candidate still could not be decoded")
    return None


# === Text Cleaning Helpers ===
def _strip_code_fences(text: str) -> str:
    """Remove common markdown code fences and leading/trailing whitespace."""
    text = re.sub(r"```(?:json)?\n(.*?)```", r"\1", text, flags=re.S)
    text = re.sub(r"^```|```$", "", text)
    return text.strip()


def _remove_trailing_commas(text: str) -> str:
    """Remove trailing commas before a closing brace/bracket."""
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _extract_json_by_balancing(text: str) -> Optional[str]:
    """Extract the first JSON object/array by balancing braces/brackets."""
    start = None
    stack = []
    in_string = False
    escape = False

    for i, ch in enumerate(text):
        if escape:
            escape = False
            continue
        if in_string:
            if ch == "\\":
                escape = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in "{[":
            if start is None:
                start = i
            stack.append(ch)
        elif ch in "}]":
            if not stack:
                continue
            opening = stack.pop()
            if (opening == "{" and ch != "}") or (opening == "[" and ch != "]"):
                return None
            if not stack and start is not None:
                return text[start:i + 1]
    return None


# === Extraction entry points ===
def extract_recipe_from_image(image_bytes: bytes, mime_type: str) -> ParsedRecipe:
    """Read a recipe card/photo with the multimodal model and normalize the result."""
    raw = _complete_json([
        {"type": "input_text", "text": RECIPE_IMAGE_PROMPT + RECIPE_JSON_FORMAT},
        {"type": "input_image", "image_url": _image_data_url(image_bytes, mime_type)},
    ], purpose="recipe")
    return normalize_recipe(raw)


def extract_receipt_from_image(image_bytes: bytes, mime_type: str) -> ParsedReceipt:
    raw = _complete_json([
        {"type": "input_text", "text": RECEIPT_PROMPT + RECEIPT_JSON_FORMAT},
        {"type": "input_image", "image_url": _image_data_url(image_bytes, mime_type)},
        {"type": "input_text",
         "text": "Parse this receipt/invoice and extract all items with their prices, quantities, and categories."},
    ], purpose="receipt")
    return normalize_receipt(raw)


def extract_receipt_from_csv(csv_content: str) -> ParsedReceipt:
    raw = _complete_json([
        {"type": "input_text", "text": RECEIPT_PROMPT + RECEIPT_JSON_FORMAT
            + "\nThe data is CSV; it may or may not have a header row.\n\n" + csv_content},
    ], purpose="receipt")
    return normalize_receipt(raw)
