import dataclasses

from pyrastermath.settings import Settings
from .enums import Domain
from .operations import (
    Absolute, Additive, Clampable, ComponentProduct, Distance, Divisible,
    DotProduct, Normalizable, Scalable,
)
from .vec2 import Vec2
from .vec3 import Vec3
from .vector_base import VectorBase, widen


@dataclasses.dataclass(slots=True)
class Vec4(VectorBase, Normalizable, Absolute, Clampable, DotProduct, Distance,
           Additive, Scalable, ComponentProduct, Divisible):
    """A real-valued 4D vector (x, y, z, w). Packs into a 32-bit 0xRRGGBBAA color."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    FIELDS = ("x", "y", "z", "w")
    DOMAIN = Domain.REAL

    @classmethod
    def from_vec2(cls, vec: Vec2) -> "Vec4":
        """Widens a Vec2, z is 0.0 and w is Settings.FROM_VEC2_W (0)."""
        return widen(cls, vec, Vec2, 0.0, Settings.FROM_VEC2_W)

    @classmethod
    def from_vec3(cls, vec: Vec3) -> "Vec4":
        """Widens a Vec3, w is Settings.FROM_VEC3_W (1), unlike from_vec2."""
        return widen(cls, vec, Vec3, Settings.FROM_VEC3_W)
