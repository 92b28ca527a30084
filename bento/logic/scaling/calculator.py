"""Pan and yield scaling calculator.

Pure functions: pan footprint/volume, the scaling factor between two pan
setups or between a piece target and the current batch, and applying that
factor to a recipe's ingredient rows.

Degenerate input (missing, zero or negative numbers) never raises and never
produces NaN or infinity: the factor functions return None and callers show
a validation message instead.
"""
from __future__ import annotations
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Optional

from bento.domain.Pan import PanDimensions
from bento.domain.Scaling import ScalingResult, ScaledIngredientLine

__all__ = [
    "compute_area", "compute_volume", "scaling_factor_from_pans", "scaling_factor_from_pieces",
    "apply_scaling", "rounded_yield", "ratio_direction", "describe_pan",
    "convert_by_pieces", "convert_by_pan",
]


def _positive(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) \
        and (isinstance(value, int) or math.isfinite(value)) and value > 0


def compute_area(pan: PanDimensions) -> float:
    """Total footprint of all pans in square inches; 0 when the pan is not usable."""
    if not _positive(pan.count):
        return 0.0
    if pan.shape == "round":
        if not _positive(pan.diameter):
            return 0.0
        radius = pan.diameter / 2
        return math.pi * radius * radius * pan.count
    if pan.shape in ("rectangular", "square"):
        if not (_positive(pan.width) and _positive(pan.length)):
            return 0.0
        return pan.width * pan.length * pan.count
    return 0.0


def compute_volume(pan: PanDimensions) -> float:
    """Footprint x depth; 0 when the depth is missing or not positive."""
    if not _positive(pan.height):
        return 0.0
    return compute_area(pan) * pan.height


def _capacity(pan: PanDimensions, by_volume: bool) -> float:
    return compute_volume(pan) if by_volume else compute_area(pan)


def scaling_factor_from_pans(original: PanDimensions, target: PanDimensions) -> Optional[float]:
    """target / original capacity, or None when either capacity is not positive.

    Volume is compared when both pans give a positive depth; otherwise both are
    assumed equally deep and the footprints are compared.
    """
    by_volume = original.has_height and target.has_height
    original_capacity = _capacity(original, by_volume)
    target_capacity = _capacity(target, by_volume)
    if original_capacity <= 0 or target_capacity <= 0:
        return None
    return target_capacity / original_capacity


def scaling_factor_from_pieces(desired_pieces, target_weight_per_piece,
                               original_total_weight) -> Optional[float]:
    """(pieces x weight per piece) / current batch weight, or None for non-positive inputs."""
    if not (_positive(desired_pieces) and _positive(target_weight_per_piece)
            and _positive(original_total_weight)):
        return None
    return (desired_pieces * target_weight_per_piece) / original_total_weight


def apply_scaling(ingredients: Iterable[ScaledIngredientLine], factor: float) -> List[ScaledIngredientLine]:
    """Return new rows with weight and cost multiplied by factor."""
    return [line.scaled(factor) for line in ingredients]


def rounded_yield(current_yield: int, factor: float) -> int:
    """Piece count after scaling, rounded half away from zero (2.5 -> 3, -2.5 -> -3)."""
    scaled = Decimal(str(current_yield)) * Decimal(str(factor))
    return int(scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def ratio_direction(factor: float) -> str:
    if factor == 1:
        return "same"
    return "smaller" if factor < 1 else "larger"


def _fmt_number(value) -> str:
    if value is None:
        return "?"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def describe_pan(pan: PanDimensions) -> str:
    """Free-text pan setup, e.g. '2 trays, 12x18 in' or '1 pan, 9" diameter'."""
    plural = "s" if pan.count > 1 else ""
    if pan.shape == "round":
        return f'{pan.count} pan{plural}, {_fmt_number(pan.diameter)}" diameter'
    if pan.shape == "rectangular":
        return f"{pan.count} tray{plural}, {_fmt_number(pan.width)}x{_fmt_number(pan.length)} in"
    if pan.shape == "square":
        return f"{pan.count} pan{plural}, {_fmt_number(pan.width)}x{_fmt_number(pan.length)} in"
    return ""


def convert_by_pieces(desired_pieces, target_weight_per_piece, original_total_weight,
                      current_pan_setup: str = "") -> Optional[ScalingResult]:
    """Scale the batch so it yields desired_pieces of target_weight_per_piece grams each."""
    # only whole pieces can be made
    pieces = math.floor(desired_pieces) if _positive(desired_pieces) else 0
    factor = scaling_factor_from_pieces(pieces, target_weight_per_piece, original_total_weight)
    if factor is None:
        return None
    return ScalingResult(
        scaling_factor=factor,
        new_yield=pieces,
        new_total_weight=pieces * target_weight_per_piece,
        pan_description=current_pan_setup,
    )


def convert_by_pan(original: PanDimensions, target: PanDimensions, current_yield: int,
                   original_total_weight: float) -> Optional[ScalingResult]:
    """Scale the batch from the original pan setup to the target one."""
    factor = scaling_factor_from_pans(original, target)
    if factor is None:
        return None
    return ScalingResult(
        scaling_factor=factor,
        new_yield=rounded_yield(current_yield, factor),
        new_total_weight=original_total_weight * factor,
        pan_description=describe_pan(target),
    )
