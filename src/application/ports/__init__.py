"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- CueCompilerProtocol: Hermetic synchronous CUE compiler
- CuexCompilerProtocol: Shared, cancellable CUE compiler
- CueCompilerProviderProtocol: Access to the shared compiler
- DefinitionRevisionStoreProtocol: Published revision lookup
- RevisionGathererProtocol: Derive a revision from a definition
- RevisionComparatorProtocol: Structural revision comparison
"""

from src.application.ports.cue_compiler import (
    CueCompilerProtocol,
    CueCompilerProviderProtocol,
    CuexCompilerProtocol,
    CueValueProtocol,
)
from src.application.ports.definition_revision_store import (
    DefinitionRevisionStoreProtocol,
)
from src.application.ports.revision_gatherer import (
    RevisionComparatorProtocol,
    RevisionGathererProtocol,
)

__all__: list[str] = [
    "CueCompilerProtocol",
    "CueCompilerProviderProtocol",
    "CueValueProtocol",
    "CuexCompilerProtocol",
    "DefinitionRevisionStoreProtocol",
    "RevisionComparatorProtocol",
    "RevisionGathererProtocol",
]
