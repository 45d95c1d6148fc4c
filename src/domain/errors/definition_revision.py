"""Definition revision errors.

Covers the immutability guard: malformed revision names, the store's
"not found" signal, failures deriving a revision from a candidate, and
the hard rejection when a candidate drifts from a published revision.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.errors.input_format import InputFormatError
from src.domain.exceptions import DefinitionGuardError

REVISION_MISMATCH_MESSAGE = (
    "the definition's spec is different with existing definitionRevision's spec"
)


class InvalidDefinitionRevisionNameError(InputFormatError):
    """Error when a revision name is not a valid qualified name.

    Raised before any store access.

    Attributes:
        name: The rejected revision name.
        violations: Human-readable qualified-name violations.
    """

    def __init__(self, name: str, violations: Sequence[str]) -> None:
        """Initialize the error.

        Args:
            name: The rejected revision name.
            violations: Human-readable qualified-name violations.
        """
        self.name = name
        self.violations: tuple[str, ...] = tuple(violations)
        super().__init__(
            f"invalid definitionRevision name {name}:{','.join(self.violations)}"
        )


class DefinitionRevisionNotFoundError(DefinitionGuardError):
    """Raised by revision stores when no revision exists under a name.

    The immutability guard treats this as a first publication.

    Attributes:
        namespace: Namespace that was searched.
        name: Revision name that was searched.
    """

    def __init__(self, namespace: str, name: str) -> None:
        """Initialize the error.

        Args:
            namespace: Namespace that was searched.
            name: Revision name that was searched.
        """
        self.namespace = namespace
        self.name = name
        super().__init__(f'definitionrevisions "{name}" not found in "{namespace}"')


class RevisionGatherError(DefinitionGuardError):
    """Error when a revision cannot be derived from a candidate definition."""

    pass


class ImmutabilityViolationError(DefinitionGuardError):
    """Base class for drift against a published revision.

    Always a hard rejection, never auto-resolved.
    """

    pass


class DefinitionRevisionMismatchError(ImmutabilityViolationError):
    """Error when a candidate differs from the stored revision.

    Attributes:
        revision_name: Name of the stored revision.
        stored_hash: Hash recorded on the stored revision.
        candidate_hash: Hash derived from the candidate.
    """

    def __init__(
        self,
        revision_name: str,
        stored_hash: str,
        candidate_hash: str,
    ) -> None:
        """Initialize the error.

        Args:
            revision_name: Name of the stored revision.
            stored_hash: Hash recorded on the stored revision.
            candidate_hash: Hash derived from the candidate.
        """
        self.revision_name = revision_name
        self.stored_hash = stored_hash
        self.candidate_hash = candidate_hash
        super().__init__(REVISION_MISMATCH_MESSAGE)
