import math
from enum import Enum, IntEnum

from pyrastermath.utils.helpers import truncate_divide


class Domain(Enum):
    """Scalar element kind of a vector type."""
    REAL = "real"         # 64-bit float components
    INTEGER = "integer"   # int components, fractional results truncate on storage

    def coerce(self, value):
        """Converts a computed value to the stored representation of this domain."""
        if self is Domain.INTEGER:
            return int(value)  # truncates toward zero
        return float(value)

    def root(self, value):
        """Square root as the domain stores it. Integer roots are truncated."""
        if self is Domain.INTEGER:
            return math.isqrt(int(value))
        return math.sqrt(value)

    def quotient(self, value, divisor):
        """Divides as the domain stores it. Integer quotients truncate toward zero."""
        if self is Domain.INTEGER:
            return truncate_divide(value, divisor)
        return value / divisor


class LogLevel(IntEnum): NONE = 0; DEBUG = 1; INFO = 2; WARNING = 3; ERROR = 4
