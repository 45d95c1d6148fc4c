"""CUE toolchain adapters."""

from src.infrastructure.adapters.cue.cli_compiler import (
    CueCliCompiler,
    CueCliValue,
    CuexCliCompiler,
)
from src.infrastructure.adapters.cue.compiler_provider import CueCompilerProvider

__all__: list[str] = [
    "CueCliCompiler",
    "CueCliValue",
    "CueCompilerProvider",
    "CuexCliCompiler",
]
