# Main __init__.py for the types sub-package

from .enums import Domain, LogLevel
from .vector_base import VectorBase
from .vec2 import Vec2
from .vec3 import Vec3
from .vec4 import Vec4
from .ivec2 import IVec2
from .ivec3 import IVec3
from .ivec4 import IVec4
from .operations import (
    normalize, normalize_into,
    absolute, absolute_into,
    clamp, clamp_into,
    dot, distance,
    add, add_into, subtract, subtract_into,
    multiply, multiply_into, multiply_vec, multiply_vec_into,
    divide, divide_into,
    cross, cross_into,
    Normalizable, Absolute, Clampable, DotProduct, Distance,
    Additive, Scalable, ComponentProduct, Divisible, CrossProduct,
)

__all__ = [
    "Domain", "LogLevel", "VectorBase",
    "Vec2", "Vec3", "Vec4", "IVec2", "IVec3", "IVec4",
    # Functional forms
    "normalize", "normalize_into",
    "absolute", "absolute_into",
    "clamp", "clamp_into",
    "dot", "distance",
    "add", "add_into", "subtract", "subtract_into",
    "multiply", "multiply_into", "multiply_vec", "multiply_vec_into",
    "divide", "divide_into",
    "cross", "cross_into",
    # Capabilities
    "Normalizable", "Absolute", "Clampable", "DotProduct", "Distance",
    "Additive", "Scalable", "ComponentProduct", "Divisible", "CrossProduct",
]
