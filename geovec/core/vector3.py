"""
Vector3 module.

A point in 3D space with components ``x`` (left - / right +), ``y``
(out - / in +) and ``z`` (down - / up +). Components are scalars of one of
the float kinds in ``geovec.core.numeric.FLOAT_KINDS``.
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import chex
import jax
import jax.numpy as jnp
import numpy as np

from .numeric import KindLike, Real, get_kind, require_kind
from .primitives import FLOAT_DTYPE, Vector3Array


@jax.tree_util.register_dataclass
@dataclass(frozen=True, eq=False)
class Vector3:
    """A point in 3D space."""

    x: Real
    """Left (-) / right (+) axis."""

    y: Real
    """In (+) / out (-) axis."""

    z: Real
    """Up (+) / down (-) axis."""

    @classmethod
    def create(cls, x: Any, y: Any, z: Any, kind: KindLike = FLOAT_DTYPE) -> "Vector3":
        """Build a vector with every component cast to ``kind``."""
        float_kind = get_kind(kind)
        return cls(float_kind.cast(x), float_kind.cast(y), float_kind.cast(z))

    @classmethod
    def from_tuple(cls, values: Sequence[Any], kind: KindLike = FLOAT_DTYPE) -> "Vector3":
        if len(values) != 3:
            raise ValueError(f"Expected 3 components, got {len(values)}")
        return cls.create(*values, kind=kind)

    @classmethod
    def from_array(cls, array: Vector3Array) -> "Vector3":
        """Split a ``(3,)`` array into a vector, keeping its dtype."""
        chex.assert_shape(array, (3,))
        return cls(array[0], array[1], array[2])

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], kind: KindLike = FLOAT_DTYPE) -> "Vector3":
        return cls.create(data["x"], data["y"], data["z"], kind=kind)

    def to_tuple(self) -> tuple[Real, Real, Real]:
        return (self.x, self.y, self.z)

    def to_list(self) -> list[Real]:
        return [self.x, self.y, self.z]

    def to_array(self) -> Vector3Array:
        return jnp.stack([self.x, self.y, self.z])

    def to_dict(self) -> dict[str, float]:
        """Plain-float mapping keyed by field name, for JSON and friends."""
        return {"x": float(self.x), "y": float(self.y), "z": float(self.z)}

    def __iter__(self) -> Iterator[Real]:
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    # Arithmetic (operators return a new vector)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: Real) -> "Vector3":
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Real) -> "Vector3":
        """
        Divide every component by a scalar.

        Division by zero is not trapped: it yields inf or NaN following
        IEEE-754, whatever the component type.
        """
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(
            jnp.divide(self.x, scalar),
            jnp.divide(self.y, scalar),
            jnp.divide(self.z, scalar),
        )

    # Comparison (concrete values only; use algebra.isclose in traced code)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return all(bool(a == b) for a, b in zip(self, other))

    def partial_compare(self, other: "Vector3") -> int | None:
        """
        Componentwise partial order.

        Returns
        -------
        int | None
            ``-1`` if every component is <= the other's (and one is <),
            ``0`` if equal, ``1`` for the mirror case, and ``None`` when
            the vectors are incomparable (including any NaN component).
        """
        less_equal = all(bool(a <= b) for a, b in zip(self, other))
        greater_equal = all(bool(a >= b) for a, b in zip(self, other))
        if less_equal and greater_equal:
            return 0
        if less_equal:
            return -1
        if greater_equal:
            return 1
        return None

    def __lt__(self, other: "Vector3") -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.partial_compare(other) == -1

    def __le__(self, other: "Vector3") -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.partial_compare(other) in (-1, 0)

    def __gt__(self, other: "Vector3") -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.partial_compare(other) == 1

    def __ge__(self, other: "Vector3") -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.partial_compare(other) in (0, 1)


@dataclass(frozen=True)
class Directions:
    """Named unit vectors (and the origin) for one float kind."""

    ORIGIN: Vector3
    UP: Vector3
    DOWN: Vector3
    FORWARD: Vector3
    BACK: Vector3
    LEFT: Vector3
    RIGHT: Vector3


def _directions(dtype: type) -> Directions:
    # NumPy scalars keep the literals exact and need no JAX runtime at import
    zero, one, minus_one = dtype(0.0), dtype(1.0), dtype(-1.0)
    return Directions(
        ORIGIN=Vector3(zero, zero, zero),
        UP=Vector3(zero, zero, one),
        DOWN=Vector3(zero, zero, minus_one),
        FORWARD=Vector3(zero, one, zero),
        BACK=Vector3(zero, minus_one, zero),
        LEFT=Vector3(minus_one, zero, zero),
        RIGHT=Vector3(one, zero, zero),
    )


DIRECTIONS: dict[str, Directions] = {
    "float32": _directions(np.float32),
    "float64": _directions(np.float64),
}


def directions(kind: KindLike = FLOAT_DTYPE) -> Directions:
    """
    Constant table for a float kind.

    Raises
    ------
    RuntimeError
        If float64 is requested while JAX 64-bit mode is off, since JAX ops
        would truncate the constants to float32.
    """
    return DIRECTIONS[require_kind(kind).name]


ORIGIN = DIRECTIONS["float32"].ORIGIN
UP = DIRECTIONS["float32"].UP
DOWN = DIRECTIONS["float32"].DOWN
FORWARD = DIRECTIONS["float32"].FORWARD
BACK = DIRECTIONS["float32"].BACK
LEFT = DIRECTIONS["float32"].LEFT
RIGHT = DIRECTIONS["float32"].RIGHT
