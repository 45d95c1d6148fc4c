"""Infrastructure stubs for development and testing.

This module provides stub implementations of infrastructure ports
for use in development and testing environments.

Available stubs:
- DefinitionRevisionStoreStub: In-memory published revisions, injectable failures
- CueCompilerStub: Scripted diagnostics for the hermetic compiler
- CuexCompilerStub: Scripted diagnostics, failures or blocking for the shared compiler
- CueCompilerProviderStub: Hands out a fixed shared compiler

WARNING: These stubs are NOT for production use.
Production implementations are in src/infrastructure/adapters/.
"""

from src.infrastructure.stubs.cue_compiler_stub import (
    CueCompilerProviderStub,
    CueCompilerStub,
    CuexCompilerStub,
    CueValueStub,
)
from src.infrastructure.stubs.definition_revision_store_stub import (
    DefinitionRevisionStoreStub,
)

__all__: list[str] = [
    "CueCompilerProviderStub",
    "CueCompilerStub",
    "CueValueStub",
    "CuexCompilerStub",
    "DefinitionRevisionStoreStub",
]
