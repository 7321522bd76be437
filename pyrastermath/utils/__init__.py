# This file marks pyrastermath.utils as a Python package.

from .helpers import (
    clamp,
    approximately_equal,
    truncate_divide,
    scale_channel,
    pack_channels,
)

__all__ = [
    "clamp",
    "approximately_equal",
    "truncate_divide",
    "scale_channel",
    "pack_channels",
]
