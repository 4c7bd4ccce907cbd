"""
Three-dimensional vector value type.

This module defines ``Vector3d``, a small value type holding three
single-precision Cartesian components. Instances support componentwise
addition and subtraction, scalar multiplication and scalar division, both as
operators returning a new ``Vector3d`` and as in-place variants that mutate
the receiver. Components are stored as ``numpy.float32`` and arithmetic
follows IEEE-754 single-precision rules: dividing by zero yields ``inf`` or
``nan`` rather than raising, and numpy's floating-point warnings are kept
quiet for these operations.

Examples
--------
>>> from biost import Vector3d
>>> v = Vector3d(1, 2, 3)
>>> w = Vector3d(2, 4, 6)
>>> v + w
Vector3d(x=3.0, y=6.0, z=9.0)
>>> v += w
>>> v
Vector3d(x=3.0, y=6.0, z=9.0)
>>> w / 2.0
Vector3d(x=1.0, y=2.0, z=3.0)
"""

from __future__ import annotations

import logging
import numbers
from typing import Iterator, Sequence

import numpy as np

from biost import config as cfg

logger = logging.getLogger(__name__)


def _component(value) -> np.float32:
    """Coerce ``value`` to the component dtype (out-of-range values become ``±inf``)."""
    with np.errstate(all="ignore"):
        try:
            return cfg.DTYPE(value)
        except OverflowError:
            # Python ints beyond the float range
            return cfg.DTYPE(np.inf if value > 0 else -np.inf)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (numbers.Real, np.floating, np.integer))


class Vector3d:
    """A three-dimensional single-precision vector.

    Parameters
    ----------
    x, y, z : float
        The Cartesian components, stored in that order. Values are coerced to
        ``numpy.float32``; nothing is validated, so ``nan`` and ``inf`` are
        accepted as they are.

    Notes
    -----
    * ``+``, ``-``, ``*`` and ``/`` return new vectors and leave their operands
      untouched; ``+=``, ``-=``, ``*=`` and ``/=`` mutate the left operand.
    * Python names are references, so ``w = v`` shares the instance. Use
      :meth:`copy` for an independent value.
    """

    __slots__ = ("x", "y", "z")

    # numpy scalars on the left defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float) -> None:
        self.x = _component(x)
        self.y = _component(y)
        self.z = _component(z)

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Vector3d":
        """Construct a vector with the given coordinates."""
        return cls(x, y, z)

    @classmethod
    def zero(cls) -> "Vector3d":
        """The vector at the origin."""
        return cls(0.0, 0.0, 0.0)

    def copy(self) -> "Vector3d":
        """Return an independent vector with the same components."""
        return Vector3d(self.x, self.y, self.z)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Vector3d":
        return self.copy()

    # ------------------------------------------------------------------
    # Arithmetic returning new vectors
    # ------------------------------------------------------------------
    def add(self, other: "Vector3d") -> "Vector3d":
        """Vector addition (componentwise)."""
        with np.errstate(all="ignore"):
            return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3d") -> "Vector3d":
        """Vector subtraction (componentwise)."""
        with np.errstate(all="ignore"):
            return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def mul(self, scalar: float) -> "Vector3d":
        """Scalar multiplication."""
        s = _component(scalar)
        with np.errstate(all="ignore"):
            return Vector3d(self.x * s, self.y * s, self.z * s)

    def div(self, scalar: float) -> "Vector3d":
        """Scalar division. A zero or ``nan`` scalar gives ``inf``/``nan`` components."""
        s = _component(scalar)
        with np.errstate(all="ignore"):
            result = Vector3d(self.x / s, self.y / s, self.z / s)
        _log_non_finite(result, s)
        return result

    subtract = sub
    scale = mul
    divide_by = div

    # ------------------------------------------------------------------
    # In-place arithmetic
    # ------------------------------------------------------------------
    def add_in_place(self, other: "Vector3d") -> "Vector3d":
        """Add ``other`` to this vector; ``other`` is left unchanged."""
        with np.errstate(all="ignore"):
            self.x += other.x
            self.y += other.y
            self.z += other.z
        return self

    def sub_in_place(self, other: "Vector3d") -> "Vector3d":
        """Subtract ``other`` from this vector; ``other`` is left unchanged."""
        with np.errstate(all="ignore"):
            self.x -= other.x
            self.y -= other.y
            self.z -= other.z
        return self

    def mul_in_place(self, scalar: float) -> "Vector3d":
        s = _component(scalar)
        with np.errstate(all="ignore"):
            self.x *= s
            self.y *= s
            self.z *= s
        return self

    def div_in_place(self, scalar: float) -> "Vector3d":
        s = _component(scalar)
        with np.errstate(all="ignore"):
            self.x /= s
            self.y /= s
            self.z /= s
        _log_non_finite(self, s)
        return self

    # ------------------------------------------------------------------
    # Operator bindings
    # ------------------------------------------------------------------
    def __add__(self, other: "Vector3d") -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.add(other)

    def __iadd__(self, other: "Vector3d") -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.add_in_place(other)

    def __sub__(self, other: "Vector3d") -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.sub(other)

    def __isub__(self, other: "Vector3d") -> "Vector3d":
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.sub_in_place(other)

    def __mul__(self, scalar: float) -> "Vector3d":
        """Scalar multiplication from the right."""
        if not _is_scalar(scalar):
            return NotImplemented
        return self.mul(scalar)

    def __rmul__(self, scalar: float) -> "Vector3d":
        """Scalar multiplication from the left."""
        return self.__mul__(scalar)

    def __imul__(self, scalar: float) -> "Vector3d":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.mul_in_place(scalar)

    def __truediv__(self, scalar: float) -> "Vector3d":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.div(scalar)

    def __itruediv__(self, scalar: float) -> "Vector3d":
        if not _is_scalar(scalar):
            return NotImplemented
        return self.div_in_place(scalar)

    # ------------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        """Return a new ``float32`` array ``[x, y, z]``."""
        return np.array([self.x, self.y, self.z], dtype=cfg.DTYPE)

    @staticmethod
    def from_numpy(arr: Sequence[float]) -> "Vector3d":
        """Construct a ``Vector3d`` from a 3-element array or sequence."""
        if len(arr) != 3:
            raise ValueError(f"Expected 3 components, got {len(arr)}.")
        return Vector3d(arr[0], arr[1], arr[2])

    def __iter__(self) -> Iterator[np.float32]:
        """Yield the components in order x, y, z."""
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector3d(x={float(self.x)!r}, y={float(self.y)!r}, z={float(self.z)!r})"


def _log_non_finite(v: Vector3d, scalar: np.float32) -> None:
    if cfg.DEBUG and not np.all(np.isfinite(v.to_numpy())):
        logger.debug("Result of division by %r has non-finite components: %r", float(scalar), v)
