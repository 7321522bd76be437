"""
Behaviour shared by every vector type: storage, the flat view, color packing
and widening conversions. Arithmetic lives in operations.py as per-operation mixins.
"""
import logging
from typing import ClassVar

from pyrastermath.settings import Settings
from pyrastermath.utils.helpers import approximately_equal, pack_channels
from .enums import Domain

logger = logging.getLogger(__name__)


class VectorBase:
    """
    Base of the fixed-dimension vector types.

    Subclasses are slotted dataclasses that name their components in FIELDS
    and pick a DOMAIN. Every value written to a component goes through
    DOMAIN.coerce, so integer vectors truncate fractional results on storage.
    """
    __slots__ = ()

    FIELDS: ClassVar[tuple[str, ...]] = ()
    DOMAIN: ClassVar[Domain] = Domain.REAL

    def __post_init__(self):
        self._store(self.raw())

    def __str__(self) -> str:
        return f"{type(self).__name__}({', '.join(str(c) for c in self.raw())})"

    def __iter__(self):
        return iter(self.raw())

    @classmethod
    def zero(cls):
        """Returns a new all-zero vector."""
        return cls()

    def _store(self, values):
        coerce = self.DOMAIN.coerce
        for name, value in zip(self.FIELDS, values, strict=True):
            setattr(self, name, coerce(value))
        return self

    def raw(self) -> tuple:
        """Returns the components in declared order."""
        return tuple(getattr(self, name) for name in self.FIELDS)

    def copy(self):
        """Returns an independent vector with the same components."""
        return type(self)(*self.raw())

    def length(self):
        """Euclidean norm. Integer vectors return the truncated integer root."""
        return self.DOMAIN.root(sum(c * c for c in self.raw()))

    def to_color_int(self) -> int:
        """
        Packs the components into one integer, one byte per component, x in the
        most significant byte. Each component is scaled by 255 and truncated
        (not rounded) before it is masked to 8 bits.
        """
        return pack_channels(
            self.raw(),
            Settings.COLOR_CHANNEL_SCALE,
            Settings.COLOR_CHANNEL_MASK,
            Settings.COLOR_CHANNEL_BITS,
        )

    def is_close(self, other, tolerance: float = None) -> bool:
        """Checks if every component is within tolerance of the other vector's."""
        if type(other) is not type(self):
            return False
        if tolerance is None:
            tolerance = Settings.DEFAULT_TOLERANCE
        return all(approximately_equal(a, b, tolerance)
                   for a, b in zip(self.raw(), other.raw()))


def widen(cls, source, source_type, *trailing):
    """
    Builds a cls from a lower dimension source_type vector, appending trailing
    component values. There is no narrowing counterpart.
    """
    if not isinstance(source, source_type):
        raise TypeError(f"{cls.__name__} can only be widened from {source_type.__name__}, "
                        f"got {type(source).__name__}.")
    logger.debug("Widening %s to %s with trailing %s", source, cls.__name__, trailing)
    return cls(*source.raw(), *trailing)
