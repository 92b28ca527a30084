"""Pan & yield converter endpoints.

"Not computable" is a normal answer here: the response carries
``result: null`` plus a message for the form, never an error status.
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, Response

from bento.domain.Pan import PanDimensions
from bento.domain.Scaling import ScalingResult, ScaledIngredientLine
from bento.events.Event_Bus import publish, RECIPE_SCALED
from bento.infra.pdf_utils import generate_scaled_recipe_pdf
from bento.logic.scaling.calculator import (
    compute_area, compute_volume, scaling_factor_from_pans, apply_scaling, ratio_direction,
    convert_by_pieces, convert_by_pan
)
from bento.utilities.config import DEFAULT_TARGET_WEIGHT_PER_PIECE
from bento.utilities.constants import NOT_COMPUTABLE_PANS_MESSAGE, NOT_COMPUTABLE_PIECES_MESSAGE
from bento.utilities.parsing import coerce_float, coerce_int
from bento.utilities.validators import (
    PanInput, IngredientLineInput, VolumeConversionInput, YieldConversionInput, ScaledSheetInput
)

router = APIRouter(prefix="/api/pan-converter")
logger = logging.getLogger(__name__)


def _pan(pan: Optional[PanInput]) -> PanDimensions:
    return PanDimensions.from_dict(pan.model_dump() if pan else {})


def _lines(rows: List[IngredientLineInput]) -> List[ScaledIngredientLine]:
    return [ScaledIngredientLine.from_dict(r.model_dump()) for r in rows]


def run_yield_conversion(req: YieldConversionInput) -> Optional[ScalingResult]:
    """Dispatch on mode; piece counts parse like parseInt, weights like parseFloat (30 g per piece by default)."""
    total_weight = coerce_float(req.original_total_weight, 0.0)
    if req.mode == "pieces":
        pieces = coerce_int(req.desired_pieces, 0)
        weight = coerce_float(req.target_weight_per_piece, None) or DEFAULT_TARGET_WEIGHT_PER_PIECE
        return convert_by_pieces(pieces, weight, total_weight, req.current_pan_setup)
    return convert_by_pan(_pan(req.original_pan), _pan(req.target_pan), req.current_yield, total_weight)


@router.post("/volume")
def convert_pan_volume(req: VolumeConversionInput):
    """Cake pan converter: compare two pans and scale the ingredient list."""
    original, target = _pan(req.original), _pan(req.target)
    factor = scaling_factor_from_pans(original, target)
    body = {
        "original_area": compute_area(original),
        "new_area": compute_area(target),
        "original_volume": compute_volume(original),
        "new_volume": compute_volume(target),
        "scaling_factor": factor,
        "direction": None,
        "message": None,
        "ingredients": [],
    }
    if factor is None:
        body["message"] = NOT_COMPUTABLE_PANS_MESSAGE
        return body
    body["direction"] = ratio_direction(factor)
    body["ingredients"] = [line.to_dict() for line in apply_scaling(_lines(req.ingredients), factor)]
    return body


@router.post("/yield")
def convert_yield(req: YieldConversionInput):
    """Pan/yield converter by pieces or by pan size."""
    result = run_yield_conversion(req)
    if result is None:
        message = NOT_COMPUTABLE_PIECES_MESSAGE if req.mode == "pieces" else NOT_COMPUTABLE_PANS_MESSAGE
        return {"mode": req.mode, "result": None, "direction": None, "message": message, "ingredients": []}

    publish(RECIPE_SCALED, {
        "mode": req.mode,
        "scaling_factor": result.scaling_factor,
        "new_yield": result.new_yield,
    })
    scaled = apply_scaling(_lines(req.ingredients), result.scaling_factor)
    return {
        "mode": req.mode,
        "result": result.to_dict(),
        "direction": ratio_direction(result.scaling_factor),
        "message": None,
        "ingredients": [line.to_dict() for line in scaled],
    }


@router.post("/export-pdf")
def export_scaled_sheet(req: ScaledSheetInput):
    result = run_yield_conversion(req)
    if result is None:
        raise HTTPException(status_code=422, detail=NOT_COMPUTABLE_PANS_MESSAGE if req.mode == "pan"
                            else NOT_COMPUTABLE_PIECES_MESSAGE)
    scaled = apply_scaling(_lines(req.ingredients), result.scaling_factor)
    pdf_bytes = generate_scaled_recipe_pdf(req.title, result, scaled, currency=req.currency,
                                           original_setup=req.current_pan_setup or None)
    filename = "".join(c if c.isalnum() else "_" for c in req.title.lower()).strip("_") or "recipe"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={filename}_scaled.pdf"
        },
    )
