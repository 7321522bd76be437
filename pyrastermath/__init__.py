"""pyrastermath: fixed-dimension real and integer vectors for a software renderer."""

__version__ = "0.1.0"

# types must load before settings; settings imports LogLevel from it.
from .types import Vec2, Vec3, Vec4, IVec2, IVec3, IVec4, Domain, LogLevel
from .settings import Settings, configure_logging

__all__ = [
    "Vec2", "Vec3", "Vec4", "IVec2", "IVec3", "IVec4",
    "Domain", "LogLevel",
    "Settings", "configure_logging",
    "__version__",
]
