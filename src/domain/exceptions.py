"""Base exception classes for the definition guard domain layer."""


class DefinitionGuardError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This lets callers tell validation outcomes apart from failures
    raised by the object store or the CUE toolchain.

    Subclass families:
    - InputFormatError: malformed names, versions, exclusive fields
    - TemplateValidationError: real CUE diagnostics
    - ImmutabilityViolationError: drift against a stored revision
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
