import dataclasses

from .enums import Domain
from .operations import (
    Additive, ComponentProduct, CrossProduct, Distance, Divisible, DotProduct,
    Normalizable, Scalable,
)
from .vector_base import VectorBase


@dataclasses.dataclass(slots=True)
class IVec3(VectorBase, Normalizable, DotProduct, Distance, Additive, Scalable,
            ComponentProduct, Divisible, CrossProduct):
    """
    An integer 3D vector.

    Integer vectors intentionally truncate geometric results: length(),
    distance() and normalize() do the real computation and store the integer
    part, so IVec3(1, 1, 0).length() is 1 and IVec3(3, 4, 0).normalize()
    is the zero vector. divide() truncates each component toward zero.
    No abs or clamp.
    """
    x: int = 0
    y: int = 0
    z: int = 0

    FIELDS = ("x", "y", "z")
    DOMAIN = Domain.INTEGER
