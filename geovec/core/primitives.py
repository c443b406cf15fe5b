"""
Primitives module for shared type aliases and numerical defaults.
"""

import jax.numpy as jnp
from jaxtyping import Array, Bool, Float

# Project precision settings
FLOAT_DTYPE = jnp.float32
EPS = 1e-6

# Project type aliases
BoolScalar = Bool[Array, ""]
FloatScalar = Float[Array, ""]
Vector3Array = Float[Array, "3"]
Array = Array
