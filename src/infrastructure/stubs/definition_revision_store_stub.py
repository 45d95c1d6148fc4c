"""Definition revision store stub.

In-memory stub implementation for testing and development.
"""

from __future__ import annotations

from src.application.ports.definition_revision_store import (
    DefinitionRevisionStoreProtocol,
)
from src.domain.errors.definition_revision import DefinitionRevisionNotFoundError
from src.domain.models.definition import NamespacedName
from src.domain.models.definition_revision import DefinitionRevision


class DefinitionRevisionStoreStub(DefinitionRevisionStoreProtocol):
    """In-memory stub for DefinitionRevisionStoreProtocol.

    Example:
        stub = DefinitionRevisionStoreStub()
        stub.add_revision(revision)

        # Simulate an unreachable store
        stub.set_failure(ConnectionError("api server unreachable"))

        await stub.get_definition_revision(revision.namespaced_name)
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._revisions: dict[NamespacedName, DefinitionRevision] = {}
        self._failure: Exception | None = None
        self.get_calls: list[NamespacedName] = []

    def add_revision(self, revision: DefinitionRevision) -> None:
        """Store a revision under its namespaced name.

        Args:
            revision: Revision to store.
        """
        self._revisions[revision.namespaced_name] = revision

    def set_failure(self, failure: Exception | None) -> None:
        """Make every subsequent fetch raise the given exception.

        Args:
            failure: Exception to raise, or None to clear.
        """
        self._failure = failure

    async def get_definition_revision(
        self,
        namespaced_name: NamespacedName,
    ) -> DefinitionRevision:
        """Fetch a revision."""
        self.get_calls.append(namespaced_name)
        if self._failure is not None:
            raise self._failure
        try:
            return self._revisions[namespaced_name]
        except KeyError:
            raise DefinitionRevisionNotFoundError(
                namespace=namespaced_name.namespace,
                name=namespaced_name.name,
            ) from None

    def clear(self) -> None:
        """Clear stored revisions, failures and recorded calls."""
        self._revisions.clear()
        self._failure = None
        self.get_calls.clear()
