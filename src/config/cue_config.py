"""CUE compiler configuration.

This module defines how the CUE CLI adapters locate and bound the `cue`
executable, with environment variable overrides for deployment.

Environment Variables:
- CUE_BINARY: Executable name or path (default: "cue")
- CUE_COMPILE_TIMEOUT_SECONDS: Per-command timeout (default: 30, min: 1, max: 300)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


DEFAULT_CUE_BINARY = "cue"

# Default per-command timeout
DEFAULT_CUE_COMPILE_TIMEOUT_SECONDS = 30

# Timeout floor (a compile never finishes instantly)
MIN_CUE_COMPILE_TIMEOUT_SECONDS = 1

# Timeout ceiling (a hung compiler must not block admission for long)
MAX_CUE_COMPILE_TIMEOUT_SECONDS = 300


@dataclass(frozen=True)
class CueCompilerConfig:
    """Configuration for the CUE CLI compiler adapters.

    Attributes:
        cue_binary: Executable name or path of the CUE CLI.
        timeout_seconds: Timeout applied to each CLI invocation.
                        Default: 30 seconds.
                        Minimum: 1 second.
                        Maximum: 300 seconds.
    """

    cue_binary: str = DEFAULT_CUE_BINARY
    timeout_seconds: int = DEFAULT_CUE_COMPILE_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.cue_binary:
            raise ValueError("cue_binary must be non-empty")
        if (
            not MIN_CUE_COMPILE_TIMEOUT_SECONDS
            <= self.timeout_seconds
            <= MAX_CUE_COMPILE_TIMEOUT_SECONDS
        ):
            raise ValueError(
                f"timeout_seconds must be between {MIN_CUE_COMPILE_TIMEOUT_SECONDS} "
                f"and {MAX_CUE_COMPILE_TIMEOUT_SECONDS}, got {self.timeout_seconds}"
            )

    @classmethod
    def from_environment(cls) -> CueCompilerConfig:
        """Create config from environment variables with defaults.

        Returns:
            CueCompilerConfig with values from environment or defaults.
        """
        binary = os.environ.get("CUE_BINARY") or DEFAULT_CUE_BINARY

        timeout = _get_int_env(
            "CUE_COMPILE_TIMEOUT_SECONDS",
            DEFAULT_CUE_COMPILE_TIMEOUT_SECONDS,
        )
        # Clamp to valid range
        timeout = max(
            MIN_CUE_COMPILE_TIMEOUT_SECONDS,
            min(timeout, MAX_CUE_COMPILE_TIMEOUT_SECONDS),
        )

        return cls(cue_binary=binary, timeout_seconds=timeout)


# Default production config
DEFAULT_CUE_COMPILER_CONFIG = CueCompilerConfig()

# Testing config with the shortest timeout
TEST_CUE_COMPILER_CONFIG = CueCompilerConfig(
    timeout_seconds=MIN_CUE_COMPILE_TIMEOUT_SECONDS,
)
