import dataclasses

from .enums import Domain
from .operations import (
    Additive, Distance, Divisible, DotProduct, Normalizable, Scalable,
)
from .vector_base import VectorBase


@dataclasses.dataclass(slots=True)
class IVec2(VectorBase, Normalizable, DotProduct, Distance, Additive, Scalable, Divisible):
    """An integer 2D vector. Same surface as Vec2; results truncate toward zero."""
    x: int = 0
    y: int = 0

    FIELDS = ("x", "y")
    DOMAIN = Domain.INTEGER
