"""Configuration dataclasses for numeric precision."""

import logging
from dataclasses import dataclass

import jax

from .numeric import FloatKind, get_kind, x64_enabled

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrecisionConfig:
    """Configuration for the floating-point kind used by constructors."""

    kind: str = "float32"
    """Default float kind name, one of ``geovec.core.numeric.FLOAT_KINDS``."""

    enable_x64: bool = False
    """Enable JAX 64-bit mode. Forced on when ``kind`` is ``"float64"``."""


def apply_config(config: PrecisionConfig) -> FloatKind:
    """
    Apply a precision configuration to the JAX runtime.

    Parameters
    ----------
    config : PrecisionConfig
        Requested precision settings.

    Returns
    -------
    kind : FloatKind
        Resolved default float kind.

    Notes
    -----
    ``jax_enable_x64`` is process-wide. Switching it after arrays have been
    created does not convert those arrays.
    """
    kind = get_kind(config.kind)
    enable_x64 = config.enable_x64 or kind.name == "float64"
    if x64_enabled() != enable_x64:
        jax.config.update("jax_enable_x64", enable_x64)
        logger.info("JAX 64-bit mode %s", "enabled" if enable_x64 else "disabled")
    logger.debug("Default float kind: %s", kind.name)
    return kind
