"""Pan domain entity: shape, footprint dimensions, optional depth and number of pans."""
from typing import Optional
from bento.utilities.parsing import coerce_float, coerce_int


class PanDimensions:
    def __init__(self, shape: str = "round", diameter: Optional[float] = None,
                 width: Optional[float] = None, length: Optional[float] = None,
                 height: Optional[float] = None, count: int = 1):
        # Fields that do not apply to the shape are kept but never read
        self.shape = shape
        self.diameter = diameter
        self.width = width
        self.length = length
        self.height = height
        self.count = count

    def __str__(self) -> str:
        if self.shape == "round":
            size = f'{self.diameter}" diameter'
        else:
            size = f"{self.width}x{self.length} in"
        depth = f", {self.height} in deep" if self.height else ""
        return f"{self.count} x {self.shape} pan - {size}{depth}"

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, PanDimensions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @property
    def has_height(self) -> bool:
        return self.height is not None and self.height > 0

    @staticmethod
    def from_dict(data):
        '''Creates a PanDimensions object from user-entered values. Ignores unknown keys.

        Dimensions follow parseFloat semantics (unparseable -> missing); the
        pan count follows parseInt semantics and falls back to 1.
        '''
        d = dict(data) if isinstance(data, dict) else {}
        shape = str(d.get("shape") or "round").strip().lower()
        return PanDimensions(
            shape=shape,
            diameter=coerce_float(d.get("diameter"), None),
            width=coerce_float(d.get("width"), None),
            length=coerce_float(d.get("length"), None),
            height=coerce_float(d.get("height", d.get("depth")), None),
            count=coerce_int(d.get("count"), 1) or 1,
        )

    def to_dict(self):
        return {
            "shape": self.shape,
            "diameter": self.diameter,
            "width": self.width,
            "length": self.length,
            "height": self.height,
            "count": self.count,
        }
