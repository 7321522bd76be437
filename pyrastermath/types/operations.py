"""
Vector operations.

Each operation has one core, ``<op>_into(..., out)``, that computes every result
component from the operands and only then writes them into ``out``. On top of it:

* ``<op>(...)`` allocates a fresh result and returns it (the functional form).
* a capability mixin gives the vector types a mutating method that runs the core
  with the receiver as ``out`` and returns the receiver, so calls can be chained.

A vector type opts into an operation by inheriting its mixin. The free functions
refuse types that did not opt in.
"""
import logging

from pyrastermath.settings import Settings
from pyrastermath.utils import helpers
from .enums import Domain

logger = logging.getLogger(__name__)


def _require(vector, capability, operation):
    if not isinstance(vector, capability):
        raise TypeError(f"{type(vector).__name__} does not support {operation}().")


def _check_same_type(first, *others):
    for other in others:
        if type(other) is not type(first):
            raise TypeError(f"Expected {type(first).__name__} operand, got {type(other).__name__}.")


def _check_scalar(value):
    if not isinstance(value, (int, float)):
        raise TypeError(f"Expected a scalar, got {type(value).__name__}.")


def _domain_scalar(vector, value):
    """Integer vectors take integer scalars: 2.5 becomes 2 and 0.5 becomes 0."""
    _check_scalar(value)
    if vector.DOMAIN is Domain.INTEGER:
        return vector.DOMAIN.coerce(value)
    return value


def _fresh(vector, capability, operation):
    _require(vector, capability, operation)
    return type(vector).zero()


# --- Normalize ---

def normalize_into(vector, out):
    """
    Writes vector scaled to unit length into out.
    Scales by the reciprocal of length(). A zero-length vector yields the zero
    vector instead of an error. Integer vectors use their truncated length and
    truncate every component, so most of them normalize to zero.
    """
    _require(vector, Normalizable, "normalize")
    _check_same_type(vector, out)
    length = vector.length()
    if length > 0:
        factor = 1 / length
        return out._store([c * factor for c in vector.raw()])
    logger.debug("Normalizing zero-length %s; result is the zero vector.", type(vector).__name__)
    return out._store([0] * len(out.FIELDS))


def normalize(vector):
    return normalize_into(vector, _fresh(vector, Normalizable, "normalize"))


# --- Abs ---

def absolute_into(vector, out):
    _require(vector, Absolute, "abs")
    _check_same_type(vector, out)
    return out._store([abs(c) for c in vector.raw()])


def absolute(vector):
    return absolute_into(vector, _fresh(vector, Absolute, "abs"))


# --- Clamp ---

def clamp_into(vector, out):
    """Clamps each component to [0.0, 1.0], ready for color packing."""
    _require(vector, Clampable, "clamp")
    _check_same_type(vector, out)
    lower, upper = Settings.CLAMP_LOWER, Settings.CLAMP_UPPER
    return out._store([helpers.clamp(c, lower, upper) for c in vector.raw()])


def clamp(vector):
    return clamp_into(vector, _fresh(vector, Clampable, "clamp"))


# --- Dot / distance ---

def dot(left, right):
    _require(left, DotProduct, "dot")
    _check_same_type(left, right)
    return sum(l * r for l, r in zip(left.raw(), right.raw()))


def distance(left, right):
    """Euclidean distance. Integer vectors return the truncated integer root."""
    _require(left, Distance, "distance")
    _check_same_type(left, right)
    return left.DOMAIN.root(sum((l - r) * (l - r) for l, r in zip(left.raw(), right.raw())))


# --- Add / subtract ---

def add_into(left, right, out):
    _require(left, Additive, "add")
    _check_same_type(left, right, out)
    return out._store([l + r for l, r in zip(left.raw(), right.raw())])


def add(left, right):
    return add_into(left, right, _fresh(left, Additive, "add"))


def subtract_into(left, right, out):
    _require(left, Additive, "subtract")
    _check_same_type(left, right, out)
    return out._store([l - r for l, r in zip(left.raw(), right.raw())])


def subtract(left, right):
    return subtract_into(left, right, _fresh(left, Additive, "subtract"))


# --- Multiply ---

def multiply_into(vector, value, out):
    _require(vector, Scalable, "multiply")
    _check_same_type(vector, out)
    value = _domain_scalar(vector, value)
    return out._store([c * value for c in vector.raw()])


def multiply(vector, value):
    return multiply_into(vector, value, _fresh(vector, Scalable, "multiply"))


def multiply_vec_into(left, right, out):
    """Component-wise (Hadamard) product."""
    _require(left, ComponentProduct, "multiply_vec")
    _check_same_type(left, right, out)
    return out._store([l * r for l, r in zip(left.raw(), right.raw())])


def multiply_vec(left, right):
    return multiply_vec_into(left, right, _fresh(left, ComponentProduct, "multiply_vec"))


# --- Divide ---

def divide_into(vector, value, out):
    """
    Divides every component by value. Raises ZeroDivisionError when value is 0,
    before out is touched. Integer vectors truncate the divisor to an integer
    first, so 0.5 counts as zero, and truncate each quotient toward zero.
    """
    _require(vector, Divisible, "divide")
    _check_same_type(vector, out)
    value = _domain_scalar(vector, value)
    if value == 0:
        raise ZeroDivisionError(f"Cannot divide {type(vector).__name__} by zero.")
    quotient = vector.DOMAIN.quotient
    return out._store([quotient(c, value) for c in vector.raw()])


def divide(vector, value):
    return divide_into(vector, value, _fresh(vector, Divisible, "divide"))


# --- Cross ---

def cross_into(left, right, out):
    _require(left, CrossProduct, "cross")
    _check_same_type(left, right, out)
    # out may be left itself: read both operands fully before writing.
    lx, ly, lz = left.raw()
    rx, ry, rz = right.raw()
    return out._store((
        ly * rz - lz * ry,
        lz * rx - lx * rz,
        lx * ry - ly * rx,
    ))


def cross(left, right):
    return cross_into(left, right, _fresh(left, CrossProduct, "cross"))


# --- Capability mixins ---

class Normalizable:
    __slots__ = ()

    def normalize(self):
        """Normalizes this vector in place. Returns self."""
        normalize_into(self, self)
        return self


class Absolute:
    __slots__ = ()

    def abs(self):
        """Replaces each component with its magnitude. Returns self."""
        absolute_into(self, self)
        return self

    def __abs__(self):
        return absolute(self)


class Clampable:
    __slots__ = ()

    def clamp(self):
        """Clamps each component to [0.0, 1.0] in place. Returns self."""
        clamp_into(self, self)
        return self


class DotProduct:
    __slots__ = ()

    def dot(self, right):
        return dot(self, right)


class Distance:
    __slots__ = ()

    def distance(self, right):
        return distance(self, right)


class Additive:
    """In place add/subtract, plus the +, -, += and -= operators."""
    __slots__ = ()

    def add(self, right):
        add_into(self, right, self)
        return self

    def subtract(self, right):
        subtract_into(self, right, self)
        return self

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return subtract(self, other)

    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.subtract(other)


class Scalable:
    """Scalar multiplication in place, plus the * and *= operators."""
    __slots__ = ()

    def multiply(self, value):
        multiply_into(self, value, self)
        return self

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return multiply(self, scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __imul__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.multiply(scalar)


class ComponentProduct:
    __slots__ = ()

    def multiply_vec(self, right):
        """Multiplies component-wise by another vector in place. Returns self."""
        multiply_vec_into(self, right, self)
        return self


class Divisible:
    """Scalar division in place, plus the / and /= operators."""
    __slots__ = ()

    def divide(self, value):
        """Divides in place. Raises ZeroDivisionError for 0 and leaves self unchanged."""
        divide_into(self, value, self)
        return self

    def __truediv__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return divide(self, scalar)

    def __itruediv__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.divide(scalar)


class CrossProduct:
    __slots__ = ()

    def cross(self, right):
        """Replaces self with self x right. Returns self."""
        cross_into(self, right, self)
        return self
