"""Configuration module for the definition guard.

Available Configurations:
- CueCompilerConfig: CUE CLI location and timeout
"""

from src.config.cue_config import (
    DEFAULT_CUE_COMPILER_CONFIG,
    TEST_CUE_COMPILER_CONFIG,
    CueCompilerConfig,
)

__all__ = [
    "CueCompilerConfig",
    "DEFAULT_CUE_COMPILER_CONFIG",
    "TEST_CUE_COMPILER_CONFIG",
]
