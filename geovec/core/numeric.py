"""
Numeric module for the floating-point kinds a vector may be built from.

Every operation in the package is written once against the elementary
functions below and works for each kind in ``FLOAT_KINDS``. The table is
closed: adding a kind means adding an entry here and a constant table in
``geovec.core.vector3``.
"""

from dataclasses import dataclass
from typing import Any, Protocol

import jax
import jax.numpy as jnp
import numpy as np

from .primitives import FloatScalar


class Real(Protocol):
    """Field arithmetic and comparisons required of a vector component."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __lt__(self, other: Any) -> Any: ...

    def __le__(self, other: Any) -> Any: ...


@dataclass(frozen=True)
class FloatKind:
    """A supported floating-point precision."""

    name: str
    """Canonical dtype name, e.g. ``"float32"``."""

    dtype: type
    """NumPy scalar type of the kind."""

    eps: float
    """Machine epsilon of the kind."""

    def zero(self) -> FloatScalar:
        return self.cast(0.0)

    def one(self) -> FloatScalar:
        return self.cast(1.0)

    def cast(self, value: Any) -> FloatScalar:
        """Convert ``value`` to a JAX scalar of this kind."""
        return jnp.asarray(value, dtype=require_kind(self).dtype)


FLOAT32 = FloatKind(name="float32", dtype=np.float32, eps=float(np.finfo(np.float32).eps))
FLOAT64 = FloatKind(name="float64", dtype=np.float64, eps=float(np.finfo(np.float64).eps))

FLOAT_KINDS: dict[str, FloatKind] = {
    FLOAT32.name: FLOAT32,
    FLOAT64.name: FLOAT64,
}

KindLike = FloatKind | str | type | np.dtype


def get_kind(kind: KindLike) -> FloatKind:
    """
    Look up a supported float kind.

    Parameters
    ----------
    kind : FloatKind | str | type | np.dtype
        A kind, a kind name, or a floating dtype such as ``jnp.float64``.

    Returns
    -------
    FloatKind
        Entry of ``FLOAT_KINDS``.

    Raises
    ------
    TypeError
        If the kind is not one of the supported floating kinds.
    """
    if isinstance(kind, FloatKind):
        name = kind.name
    elif isinstance(kind, str):
        name = kind
    else:
        try:
            name = np.dtype(kind).name
        except TypeError:
            raise TypeError(f"Unknown float kind: {kind!r}") from None
    if name not in FLOAT_KINDS:
        raise TypeError(
            f"Unsupported float kind: {name!r}. Expected one of {sorted(FLOAT_KINDS)}"
        )
    return FLOAT_KINDS[name]


def kind_of(value: Any) -> FloatKind:
    """Resolve the float kind of a scalar or array from its dtype."""
    return get_kind(jnp.result_type(value))


def x64_enabled() -> bool:
    """Whether JAX 64-bit mode is on, so float64 values keep their precision."""
    return jax.dtypes.canonicalize_dtype(np.float64) == np.float64


def require_kind(kind: KindLike) -> FloatKind:
    """
    Check that JAX can represent a kind at its full precision.

    Raises
    ------
    RuntimeError
        If float64 is requested while ``jax_enable_x64`` is off, since JAX
        would otherwise truncate the values to float32.
    """
    resolved = get_kind(kind)
    if resolved.name == "float64" and not x64_enabled():
        raise RuntimeError(
            "float64 requires JAX 64-bit mode; "
            "call geovec.apply_config(PrecisionConfig(kind='float64')) first."
        )
    return resolved


def sqrt(x: Real) -> FloatScalar:
    return jnp.sqrt(x)


def sin(x: Real) -> FloatScalar:
    return jnp.sin(x)


def cos(x: Real) -> FloatScalar:
    return jnp.cos(x)


def sin_cos(x: Real) -> tuple[FloatScalar, FloatScalar]:
    """
    Sine and cosine of the same angle.

    Returns
    -------
    (sin, cos) : tuple[FloatScalar, FloatScalar]
        Both evaluated on the same argument so XLA can fuse them under jit.

    Notes
    -----
    The argument is rounded to the kind before evaluation, so ``sin(pi)``
    is not zero: about ``-8.742278e-8`` in float32 and ``1.2246e-16`` in
    float64.
    """
    return jnp.sin(x), jnp.cos(x)


def acos(x: Real) -> FloatScalar:
    return jnp.arccos(x)


def atan2(y: Real, x: Real) -> FloatScalar:
    return jnp.arctan2(y, x)


def hypot(x: Real, y: Real) -> FloatScalar:
    """Length of ``(x, y)`` without overflow from squaring large components."""
    return jnp.hypot(x, y)
