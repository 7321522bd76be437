"""
Scalar helpers shared by the vector types.
"""
import math


def clamp(value, min_val, max_val):
    """Clamps a value to the range [min_val, max_val]."""
    return max(min(value, max_val), min_val)


def approximately_equal(a: float, b: float, tolerance: float = 1e-6) -> bool:
    """Checks if two floats are approximately equal within a tolerance."""
    return abs(a - b) < tolerance


def truncate_divide(a, b):
    """
    Divides a by b and truncates the quotient toward zero.
    Exact for integer operands; float operands go through true division first.
    Raises ZeroDivisionError when b is zero.
    """
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return -q if (a < 0) != (b < 0) else q
    return int(a / b)


def scale_channel(value, scale: int = 255, mask: int = 0xFF) -> int:
    """
    Scales a single color channel and masks it to one byte.
    No rounding: the scaled value is truncated toward zero before masking,
    so 0.5 packs to 127 and -0.5 packs to 129. Non-finite values pack as 0.
    """
    scaled = value * scale
    if isinstance(scaled, float) and not math.isfinite(scaled):
        return 0
    return int(scaled) & mask


def pack_channels(values, scale: int = 255, mask: int = 0xFF, bits: int = 8) -> int:
    """Packs channels into one integer, first value in the most significant byte."""
    packed = 0
    for value in values:
        packed = (packed << bits) + scale_channel(value, scale, mask)
    return packed
