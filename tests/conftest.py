"""Test configuration for geovec tests."""

import jax
import pytest

from geovec.core.config import PrecisionConfig, apply_config

# float64 cases need JAX 64-bit mode for the whole session
apply_config(PrecisionConfig(enable_x64=True))


def pytest_generate_tests(metafunc):
    """Run each test with JIT enabled and disabled."""
    if "jit_mode" in metafunc.fixturenames:
        metafunc.parametrize("jit_mode", ["no_jit", "jit"], indirect=True)


@pytest.fixture
def jit_mode(request):
    """Set JAX JIT compilation mode."""
    with jax.disable_jit(request.param == "no_jit"):
        yield request.param


@pytest.fixture(params=["float32", "float64"])
def kind_name(request):
    """Float kind name, covering every supported precision."""
    return request.param
