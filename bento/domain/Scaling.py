"""Scaling results: the factor and yield of a conversion, and the ingredient rows it produces."""
from typing import Optional
from bento.utilities.parsing import coerce_float


class ScalingResult:
    def __init__(self, scaling_factor: float, new_yield: int, new_total_weight: float,
                 pan_description: str = ""):
        self.scaling_factor = scaling_factor
        self.new_yield = new_yield
        self.new_total_weight = new_total_weight
        self.pan_description = pan_description

    def __str__(self) -> str:
        return (f"x{self.scaling_factor:.2f} - {self.new_yield} pieces - "
                f"{self.new_total_weight:.1f} g - {self.pan_description or '-'}")

    __repr__ = __str__

    def to_dict(self):
        return {
            "scaling_factor": self.scaling_factor,
            "new_yield": self.new_yield,
            "new_total_weight": self.new_total_weight,
            "pan_description": self.pan_description,
        }


class ScaledIngredientLine:
    def __init__(self, ingredient_id: str = "", name: str = "", baker_percentage: float = 0.0,
                 original_weight: float = 0.0, original_cost: float = 0.0,
                 new_weight: Optional[float] = None, new_cost: Optional[float] = None):
        self.ingredient_id = ingredient_id
        self.name = name
        self.baker_percentage = baker_percentage
        self.original_weight = original_weight
        self.original_cost = original_cost
        # Unscaled rows report their original values
        self.new_weight = original_weight if new_weight is None else new_weight
        self.new_cost = original_cost if new_cost is None else new_cost

    def scaled(self, factor: float) -> "ScaledIngredientLine":
        '''Returns a new line with weight and cost multiplied by factor; baker's % is carried through.'''
        return ScaledIngredientLine(
            ingredient_id=self.ingredient_id,
            name=self.name,
            baker_percentage=self.baker_percentage,
            original_weight=self.original_weight,
            original_cost=self.original_cost,
            new_weight=self.original_weight * factor,
            new_cost=self.original_cost * factor,
        )

    def __str__(self) -> str:
        return f"{self.name} - {self.baker_percentage}% - {self.original_weight} g -> {self.new_weight:.1f} g"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a line from a recipe ingredient row. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return ScaledIngredientLine(
            ingredient_id=str(d.get("ingredient_id", d.get("ingredientId", "")) or ""),
            name=str(d.get("name") or ""),
            baker_percentage=coerce_float(d.get("baker_percentage", d.get("bakerPercentage")), 0.0),
            original_weight=coerce_float(d.get("original_weight", d.get("originalWeight")), 0.0),
            original_cost=coerce_float(d.get("original_cost", d.get("originalCost")), 0.0),
        )

    def to_dict(self):
        return {
            "ingredient_id": self.ingredient_id,
            "name": self.name,
            "baker_percentage": self.baker_percentage,
            "original_weight": self.original_weight,
            "original_cost": self.original_cost,
            "new_weight": self.new_weight,
            "new_cost": self.new_cost,
        }
