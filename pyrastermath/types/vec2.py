import dataclasses

from .enums import Domain
from .operations import (
    Additive, Distance, Divisible, DotProduct, Normalizable, Scalable,
)
from .vector_base import VectorBase


@dataclasses.dataclass(slots=True)
class Vec2(VectorBase, Normalizable, DotProduct, Distance, Additive, Scalable, Divisible):
    """
    A real-valued 2D vector with x and y components.
    Packs into a 16-bit color (x high byte, y low byte). No abs, clamp,
    component-wise multiply or cross.
    """
    x: float = 0.0
    y: float = 0.0

    FIELDS = ("x", "y")
    DOMAIN = Domain.REAL
