"""Field shapes of the non-Cartesian coordinate records read by the conversions."""

from dataclasses import dataclass

import jax

from .numeric import Real


@jax.tree_util.register_dataclass
@dataclass(frozen=True)
class Cylindrical:
    """Point given by distance from the up axis, angle around it and height."""

    radius: Real
    """Distance from the up axis."""

    azimuth: Real
    """Angle around the up axis from the right axis [rad]."""

    height: Real
    """Offset along the up axis."""


@jax.tree_util.register_dataclass
@dataclass(frozen=True)
class Spherical:
    """Point given by distance from the origin and two angles (physics convention)."""

    radius: Real
    """Distance from the origin."""

    azimuthal_angle: Real
    """Angle in the horizontal plane from the right axis [rad]."""

    polar_angle: Real
    """Angle from the up axis [rad]."""
