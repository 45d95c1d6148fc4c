"""Domain errors for the definition guard.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from DefinitionGuardError.
"""

from src.domain.errors.cue_compiler import (
    CueCompileTimeoutError,
    CueCompilerUnavailableError,
)
from src.domain.errors.definition_revision import (
    DefinitionRevisionMismatchError,
    DefinitionRevisionNotFoundError,
    ImmutabilityViolationError,
    InvalidDefinitionRevisionNameError,
    RevisionGatherError,
)
from src.domain.errors.input_format import (
    InputFormatError,
    InvalidVersionError,
    MultipleDefinitionVersionsError,
)
from src.domain.errors.template import TemplateValidationError

__all__: list[str] = [
    "CueCompileTimeoutError",
    "CueCompilerUnavailableError",
    "DefinitionRevisionMismatchError",
    "DefinitionRevisionNotFoundError",
    "ImmutabilityViolationError",
    "InputFormatError",
    "InvalidDefinitionRevisionNameError",
    "InvalidVersionError",
    "MultipleDefinitionVersionsError",
    "RevisionGatherError",
    "TemplateValidationError",
]
