import dataclasses

from .enums import Domain
from .operations import (
    Absolute, Additive, Clampable, ComponentProduct, CrossProduct, Distance,
    Divisible, DotProduct, Normalizable, Scalable,
)
from .vec2 import Vec2
from .vector_base import VectorBase, widen


@dataclasses.dataclass(slots=True)
class Vec3(VectorBase, Normalizable, Absolute, Clampable, DotProduct, Distance,
           Additive, Scalable, ComponentProduct, Divisible, CrossProduct):
    """
    A real-valued 3D vector with x, y and z components.

    The richest type of the family: besides the common arithmetic it has abs(),
    clamp() for preparing colors, component-wise multiply_vec() and cross().
    to_color_int() packs x, y, z into a 24-bit 0xRRGGBB value.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    FIELDS = ("x", "y", "z")
    DOMAIN = Domain.REAL

    @classmethod
    def from_vec2(cls, vec: Vec2) -> "Vec3":
        """Widens a Vec2, z is 0.0."""
        return widen(cls, vec, Vec2, 0.0)
