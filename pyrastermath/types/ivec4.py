import dataclasses

from pyrastermath.settings import Settings
from .enums import Domain
from .ivec2 import IVec2
from .ivec3 import IVec3
from .operations import (
    Absolute, Additive, Clampable, ComponentProduct, Distance, Divisible,
    DotProduct, Normalizable, Scalable,
)
from .vector_base import VectorBase, widen


@dataclasses.dataclass(slots=True)
class IVec4(VectorBase, Normalizable, Absolute, Clampable, DotProduct, Distance,
            Additive, Scalable, ComponentProduct, Divisible):
    """
    An integer 4D vector (x, y, z, w).

    Has abs() and clamp(), which IVec3 lacks. clamp() stores the clamped value
    as an integer, so every component ends up 0 or 1. Geometric results
    truncate the same way as IVec3.
    """
    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    FIELDS = ("x", "y", "z", "w")
    DOMAIN = Domain.INTEGER

    @classmethod
    def from_vec2(cls, vec: IVec2) -> "IVec4":
        """Widens an IVec2, z is 0 and w is Settings.FROM_VEC2_W (0)."""
        return widen(cls, vec, IVec2, 0, Settings.FROM_VEC2_W)

    @classmethod
    def from_vec3(cls, vec: IVec3) -> "IVec4":
        """Widens an IVec3, w is Settings.FROM_VEC3_W (1), unlike from_vec2."""
        return widen(cls, vec, IVec3, Settings.FROM_VEC3_W)
