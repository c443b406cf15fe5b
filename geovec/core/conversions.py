"""
Conversions between Cartesian vectors and cylindrical or spherical records.

Angles in radians. The polar angle is measured from UP and the azimuthal
angle from RIGHT towards FORWARD (physics convention).
"""

import jax.numpy as jnp

from .algebra import magnitude
from .coordinates import Cylindrical, Spherical
from .numeric import acos, atan2, hypot, sin_cos
from .vector3 import Vector3


def from_cylindrical(cyl: Cylindrical) -> Vector3:
    """
    Convert a cylindrical point to Cartesian form.

    Parameters
    ----------
    cyl : Cylindrical
        Radius, azimuth [rad] and height.

    Returns
    -------
    Vector3
        ``(r cos(azimuth), r sin(azimuth), height)``.

    Notes
    -----
    In float32, ``sin(pi)`` evaluates to about ``-8.742278e-8`` rather than
    zero, so ``y`` may be off by that much times the radius when the azimuth
    is near pi. For an Earth-sized radius that is roughly 60 cm.
    """
    sin_az, cos_az = sin_cos(cyl.azimuth)
    return Vector3(
        cyl.radius * cos_az,
        cyl.radius * sin_az,
        jnp.asarray(cyl.height),
    )


def from_spherical(sph: Spherical) -> Vector3:
    """
    Convert a spherical point to Cartesian form.

    Parameters
    ----------
    sph : Spherical
        Radius, azimuthal angle [rad] and polar angle [rad].

    Returns
    -------
    Vector3
        ``(r sin(p) cos(a), r sin(p) sin(a), r cos(p))``.

    Notes
    -----
    At either pole (``polar_angle`` of 0 or pi) the azimuthal angle has no
    effect on the result beyond rounding of ``sin(p)``.
    """
    # (0, 1) for straight right
    sin_az, cos_az = sin_cos(sph.azimuthal_angle)
    # (0, 1) for straight up
    sin_pol, cos_pol = sin_cos(sph.polar_angle)
    return Vector3(
        sph.radius * sin_pol * cos_az,
        sph.radius * sin_pol * sin_az,
        sph.radius * cos_pol,
    )


def to_cartesian(coords: Cylindrical | Spherical | Vector3) -> Vector3:
    """Convert any supported coordinate record to a Cartesian vector."""
    if isinstance(coords, Vector3):
        return coords
    elif isinstance(coords, Cylindrical):
        return from_cylindrical(coords)
    elif isinstance(coords, Spherical):
        return from_spherical(coords)
    else:
        raise TypeError(f"Unknown coordinate record: {type(coords)}")


def to_cylindrical(v: Vector3) -> Cylindrical:
    """
    Convert a Cartesian vector to cylindrical form.

    Returns
    -------
    Cylindrical
        Radius ``hypot(x, y)``, azimuth ``atan2(y, x)`` in ``(-pi, pi]``
        and height ``z``.
    """
    return Cylindrical(
        radius=hypot(v.x, v.y),
        azimuth=atan2(v.y, v.x),
        height=jnp.asarray(v.z),
    )


def to_spherical(v: Vector3) -> Spherical:
    """
    Convert a Cartesian vector to spherical form.

    Returns
    -------
    Spherical
        Radius ``|v|``, azimuthal angle ``atan2(y, x)`` and polar angle
        ``acos(z / |v|)``.

    Notes
    -----
    The origin has no defined polar angle; it comes back as NaN.
    """
    radius = magnitude(v)
    return Spherical(
        radius=radius,
        azimuthal_angle=atan2(v.y, v.x),
        polar_angle=acos(jnp.divide(v.z, radius)),
    )
