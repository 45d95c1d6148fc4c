"""Revision derivation and comparison ports.

The immutability guard derives a would-be revision from a candidate
definition and compares it with the published one. Both steps are
pluggable so the comparison can be tested without a full object model.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from src.domain.models.definition import DefinitionObject
from src.domain.models.definition_revision import (
    DefinitionRevision,
    GatheredRevision,
)


@runtime_checkable
class RevisionGathererProtocol(Protocol):
    """Derives a revision and its content hash from a definition."""

    @abstractmethod
    def gather(self, definition: DefinitionObject) -> GatheredRevision:
        """Derive the revision a definition would publish.

        Args:
            definition: Candidate definition.

        Returns:
            The derived revision plus auxiliary metadata.

        Raises:
            RevisionGatherError: If the revision cannot be derived.
        """
        ...


@runtime_checkable
class RevisionComparatorProtocol(Protocol):
    """Decides whether two revisions snapshot the same definition."""

    @abstractmethod
    def deep_equal(self, left: DefinitionRevision, right: DefinitionRevision) -> bool:
        """Compare two revisions.

        Args:
            left: First revision.
            right: Second revision.

        Returns:
            True if the revisions are semantically equal.
        """
        ...
