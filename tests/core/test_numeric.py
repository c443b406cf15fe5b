"""Tests for numeric module."""

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from geovec.core.numeric import (
    FLOAT32,
    FLOAT64,
    FLOAT_KINDS,
    acos,
    atan2,
    get_kind,
    hypot,
    kind_of,
    require_kind,
    sin_cos,
    sqrt,
)


def test_get_kind() -> None:
    """Test float kind lookup."""
    # Standard case 1 - lookup by name
    assert get_kind("float32") is FLOAT32
    assert get_kind("float64") is FLOAT64

    # Standard case 2 - lookup by dtype
    assert get_kind(jnp.float32) is FLOAT32
    assert get_kind(np.float64) is FLOAT64
    assert get_kind(np.dtype("float32")) is FLOAT32

    # Standard case 3 - a kind resolves to itself
    assert get_kind(FLOAT64) is FLOAT64

    # Edge case 1 - the table is closed
    assert set(FLOAT_KINDS) == {"float32", "float64"}

    # Edge case 2 - non-floating and unknown kinds are rejected
    with pytest.raises(TypeError):
        get_kind("int32")
    with pytest.raises(TypeError):
        get_kind(np.float16)
    with pytest.raises(TypeError):
        get_kind("quad")


def test_float_kind_values() -> None:
    """Test zero, one and cast for every kind."""
    for kind in (FLOAT32, FLOAT64):
        # Standard case 1 - identities carry the kind's dtype
        assert kind.zero() == 0.0
        assert kind.one() == 1.0
        assert kind.zero().dtype == kind.dtype
        assert kind.one().dtype == kind.dtype

        # Standard case 2 - cast rounds to the kind
        assert kind.cast(0.1).dtype == kind.dtype
        assert kind.cast(0.1) == kind.dtype(0.1)

    # Edge case 1 - machine epsilon per kind
    assert FLOAT32.eps == pytest.approx(1.1920929e-07)
    assert FLOAT64.eps == pytest.approx(2.220446049250313e-16)


def test_kind_of() -> None:
    """Test kind resolution from values."""
    # Standard case 1 - JAX arrays
    assert kind_of(jnp.array(1.0, dtype=jnp.float32)) is FLOAT32
    assert kind_of(jnp.array(1.0, dtype=jnp.float64)) is FLOAT64

    # Standard case 2 - NumPy scalars
    assert kind_of(np.float32(1.0)) is FLOAT32

    # Edge case 1 - integer arrays are not a float kind
    with pytest.raises(TypeError):
        kind_of(jnp.array(1, dtype=jnp.int32))


def test_require_kind() -> None:
    """Test float64 availability check."""
    # Standard case 1 - float32 always available
    assert require_kind("float32") is FLOAT32

    # Standard case 2 - float64 available with 64-bit mode on
    assert require_kind("float64") is FLOAT64

    # Edge case 1 - float64 without 64-bit mode is refused
    jax.config.update("jax_enable_x64", False)
    try:
        with pytest.raises(RuntimeError):
            require_kind("float64")
        with pytest.raises(RuntimeError):
            FLOAT64.cast(1.0)
        assert FLOAT32.cast(1.0).dtype == jnp.float32
    finally:
        jax.config.update("jax_enable_x64", True)


def test_elementary_functions(jit_mode: str) -> None:
    """Test elementary functions for every kind."""
    for kind in (FLOAT32, FLOAT64):
        tol = 4 * kind.eps
        half_pi = kind.cast(jnp.pi / 2)

        # Standard case 1 - combined sine and cosine
        s, c = jax.jit(sin_cos)(half_pi)
        assert jnp.isclose(s, 1.0, atol=tol)
        assert jnp.isclose(c, 0.0, atol=tol)
        assert s.dtype == kind.dtype

        # Standard case 2 - square root
        assert jnp.isclose(jax.jit(sqrt)(kind.cast(9.0)), 3.0, rtol=tol)

        # Standard case 3 - inverse cosine endpoints
        assert acos(kind.cast(1.0)) == 0.0
        assert jnp.isclose(acos(kind.cast(-1.0)), kind.cast(jnp.pi), rtol=tol)

        # Standard case 4 - atan2 quadrants
        assert jnp.isclose(atan2(kind.one(), kind.zero()), half_pi, rtol=tol)
        assert jnp.isclose(
            atan2(kind.zero(), -kind.one()), kind.cast(jnp.pi), rtol=tol
        )

        # Standard case 5 - hypot avoids overflow from squaring
        assert jnp.isclose(hypot(kind.cast(3.0), kind.cast(4.0)), 5.0, rtol=tol)
        large = hypot(kind.cast(3e20), kind.cast(4e20))
        assert jnp.isfinite(large)
        assert jnp.isclose(large, 5e20, rtol=1e-6)

        # Edge case 1 - sin(pi) is not exactly zero after rounding pi
        s_pi, c_pi = sin_cos(kind.cast(jnp.pi))
        assert s_pi != 0.0
        assert jnp.abs(s_pi) < 1e-7
        assert jnp.isclose(c_pi, -1.0, atol=tol)

        # Edge case 2 - NaN propagates
        assert jnp.isnan(sqrt(kind.cast(-1.0)))
        assert jnp.isnan(acos(kind.cast(2.0)))
