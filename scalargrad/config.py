"""
Runtime configuration for scalargrad.

Settings are class attributes read from the environment once, at import.
Tests and callers may override them by assigning the attribute.

    SCALARGRAD_STRICT_NUMERICS   "1"/"true"/"yes" to reject non-finite results
    SCALARGRAD_LOG_LEVEL         level name for setup_logger() (default WARNING)
"""

import os

import numpy as np


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class AutogradConfig:
    """Shared configuration for graph builders and the logger"""

    # Off: inf/nan results propagate as IEEE values.
    # On: a builder producing a non-finite value raises FloatingPointError.
    STRICT_NUMERICS = _env_flag("SCALARGRAD_STRICT_NUMERICS", False)

    LOG_LEVEL = os.getenv("SCALARGRAD_LOG_LEVEL", "WARNING").upper()

    @staticmethod
    def check_finite(value, op_name: str) -> None:
        """
        Enforce STRICT_NUMERICS for a freshly computed node value.

        Args:
            value: The computed value
            op_name: Operation name used in the error message

        Raises:
            FloatingPointError: if strict mode is on and `value` is inf or nan
        """
        if AutogradConfig.STRICT_NUMERICS and not np.isfinite(value):
            raise FloatingPointError(f"{op_name} produced a non-finite value ({value})")
