"""
Algebra module for products, lengths and angles of Vector3 values.

All functions are pure and traceable under ``jax.jit`` except the checked
variants, which inspect concrete values. Degenerate inputs propagate NaN or
inf following IEEE-754 instead of raising.
"""

import chex
import jax.numpy as jnp

from .numeric import Real, acos, sqrt
from .primitives import EPS, BoolScalar, FloatScalar
from .vector3 import Vector3


def dot(a: Vector3, b: Vector3) -> FloatScalar:
    """
    Dot product of two vectors.

    Parameters
    ----------
    a : Vector3
        First vector.
    b : Vector3
        Second vector.

    Returns
    -------
    dot : FloatScalar
        ``a.x * b.x + a.y * b.y + a.z * b.z``.
    """
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    """
    Cross product ``a x b`` (right-handed).

    Parameters
    ----------
    a : Vector3
        First vector.
    b : Vector3
        Second vector.

    Returns
    -------
    Vector3
        Vector perpendicular to both inputs, with length equal to the area
        of the parallelogram they span.
    """
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def quick_magnitude(v: Vector3) -> FloatScalar:
    """Squared length of a vector, for comparisons that skip the square root."""
    return v.x * v.x + v.y * v.y + v.z * v.z


def magnitude(v: Vector3) -> FloatScalar:
    """Euclidean length of a vector."""
    return sqrt(quick_magnitude(v))


def distance(a: Vector3, b: Vector3) -> FloatScalar:
    return magnitude(b - a)


def angle_to(a: Vector3, b: Vector3) -> FloatScalar:
    """
    Angle between two vectors.

    Parameters
    ----------
    a : Vector3
        First vector.
    b : Vector3
        Second vector.

    Returns
    -------
    angle : FloatScalar
        Angle in radians within [0, pi]. NaN if either vector has zero length.

    Notes
    -----
    The cosine is clipped to [-1, 1] so that rounding on (anti)parallel
    inputs gives 0 or pi instead of NaN. NaN inputs stay NaN.
    """
    cosine = dot(a, b) / (magnitude(a) * magnitude(b))
    return acos(jnp.clip(cosine, -1.0, 1.0))


def isclose(
    a: Vector3,
    b: Vector3,
    rtol: float = 1e-5,
    atol: float = EPS,
) -> BoolScalar:
    """
    Componentwise approximate equality.

    Unlike ``a == b`` this returns a boolean scalar array and can be used
    inside traced code.
    """
    return jnp.all(jnp.isclose(a.to_array(), b.to_array(), rtol=rtol, atol=atol))


def checked_divide(v: Vector3, scalar: Real) -> Vector3:
    """
    Divide a vector by a scalar, rejecting non-finite results.

    Raises
    ------
    AssertionError
        If any component of the quotient is NaN or inf.
    """
    result = v / scalar
    chex.assert_tree_all_finite(result)
    return result


def checked_angle_to(a: Vector3, b: Vector3) -> FloatScalar:
    """
    Angle between two vectors, rejecting zero-length or non-finite inputs.

    Raises
    ------
    AssertionError
        If the angle is NaN.
    """
    angle = angle_to(a, b)
    chex.assert_tree_all_finite(angle)
    return angle
