"""Geovec - JAX-based 3D vector primitives and coordinate conversions."""

from geovec.core.algebra import (
    angle_to,
    checked_angle_to,
    checked_divide,
    cross,
    distance,
    dot,
    isclose,
    magnitude,
    quick_magnitude,
)
from geovec.core.config import PrecisionConfig, apply_config
from geovec.core.conversions import (
    from_cylindrical,
    from_spherical,
    to_cartesian,
    to_cylindrical,
    to_spherical,
)
from geovec.core.coordinates import Cylindrical, Spherical
from geovec.core.numeric import FLOAT32, FLOAT64, FLOAT_KINDS, FloatKind, get_kind, kind_of
from geovec.core.vector3 import (
    BACK,
    DOWN,
    FORWARD,
    LEFT,
    ORIGIN,
    RIGHT,
    UP,
    Directions,
    Vector3,
    directions,
)


# Convenience functions
def vec3(x: float, y: float, z: float, kind: str = "float32") -> Vector3:
    """Create a Vector3 without importing the numeric kinds."""
    return Vector3.create(x, y, z, kind=kind)


def double_precision() -> FloatKind:
    """Enable JAX 64-bit mode and return the float64 kind."""
    return apply_config(PrecisionConfig(kind="float64"))


__all__ = [
    # Vector type and constants
    "Vector3",
    "Directions",
    "directions",
    "ORIGIN",
    "UP",
    "DOWN",
    "FORWARD",
    "BACK",
    "LEFT",
    "RIGHT",
    # Algebra
    "dot",
    "cross",
    "magnitude",
    "quick_magnitude",
    "distance",
    "angle_to",
    "isclose",
    "checked_divide",
    "checked_angle_to",
    # Coordinate records and conversions
    "Cylindrical",
    "Spherical",
    "from_cylindrical",
    "from_spherical",
    "to_cartesian",
    "to_cylindrical",
    "to_spherical",
    # Numeric kinds
    "FloatKind",
    "FLOAT32",
    "FLOAT64",
    "FLOAT_KINDS",
    "get_kind",
    "kind_of",
    # Configuration
    "PrecisionConfig",
    "apply_config",
    # Convenience functions
    "vec3",
    "double_precision",
]
