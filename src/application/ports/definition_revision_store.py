"""Definition revision store port.

Read-only access to published DefinitionRevisions. The store is owned
by the surrounding controller; validators never write to it.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from src.domain.models.definition import NamespacedName
from src.domain.models.definition_revision import DefinitionRevision


@runtime_checkable
class DefinitionRevisionStoreProtocol(Protocol):
    """Protocol for fetching definition revisions by key.

    Implementations must:
    1. Raise DefinitionRevisionNotFoundError when no revision exists
    2. Let every other failure (timeouts, connectivity) propagate as-is
    """

    @abstractmethod
    async def get_definition_revision(
        self,
        namespaced_name: NamespacedName,
    ) -> DefinitionRevision:
        """Fetch a revision.

        Args:
            namespaced_name: Store key of the revision.

        Returns:
            The stored revision.

        Raises:
            DefinitionRevisionNotFoundError: If no revision exists at the key.
        """
        ...
