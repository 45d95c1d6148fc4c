"""Definition revision immutability guard.

Published DefinitionRevisions are immutable history. Before a candidate
definition is admitted under a revision name that already exists, the
guard derives the revision the candidate would publish and rejects it
when it differs from the stored one.

Guard Steps:
1. Reject malformed revision names before touching the store
2. Missing revision -> first publication, accept
3. Other store failures propagate unchanged
4. Hash mismatch or structural mismatch -> reject

Concurrency:
    One read, no writes. The comparison is point-in-time; a revision
    created concurrently under the same name is not detected here.
"""

from __future__ import annotations

from src.application.ports.definition_revision_store import (
    DefinitionRevisionStoreProtocol,
)
from src.application.ports.revision_gatherer import (
    RevisionComparatorProtocol,
    RevisionGathererProtocol,
)
from src.application.services.base import LoggingMixin
from src.domain.errors.definition_revision import (
    DefinitionRevisionMismatchError,
    DefinitionRevisionNotFoundError,
    InvalidDefinitionRevisionNameError,
)
from src.domain.models.definition import DefinitionObject, NamespacedName
from src.domain.services.qualified_name import is_qualified_name


class RevisionImmutabilityGuard(LoggingMixin):
    """Rejects candidates that would rewrite a published revision.

    Thread Safety:
        Stateless; safe to call concurrently for different candidates.
    """

    def __init__(
        self,
        store: DefinitionRevisionStoreProtocol,
        gatherer: RevisionGathererProtocol,
        comparator: RevisionComparatorProtocol,
    ) -> None:
        """Initialize the guard.

        Args:
            store: Read access to published revisions.
            gatherer: Derives a revision from a candidate.
            comparator: Deep-compares two revisions.
        """
        self._store = store
        self._gatherer = gatherer
        self._comparator = comparator
        self._init_logger()

    async def validate_definition_revision(
        self,
        definition: DefinitionObject,
        revision_name: NamespacedName,
    ) -> None:
        """Validate that a candidate does not modify a published revision.

        Args:
            definition: Candidate definition.
            revision_name: Key under which its revision would be stored.

        Raises:
            InvalidDefinitionRevisionNameError: If the name is not a
                qualified name.
            DefinitionRevisionMismatchError: If the candidate differs from
                the stored revision.
            RevisionGatherError: If no revision can be derived.
            Exception: Store failures other than "not found", unchanged.
        """
        log = self._log_operation(
            "validate_definition_revision",
            definition=definition.name,
            revision=str(revision_name),
        )

        violations = is_qualified_name(revision_name.name)
        if violations:
            log.warning("definition_revision_name_invalid", violations=violations)
            raise InvalidDefinitionRevisionNameError(revision_name.name, violations)

        try:
            stored = await self._store.get_definition_revision(revision_name)
        except DefinitionRevisionNotFoundError:
            log.debug("definition_revision_not_published")
            return

        derived = self._gatherer.gather(definition).revision

        if stored.revision_hash != derived.revision_hash:
            log.warning(
                "definition_revision_hash_mismatch",
                stored_hash=stored.revision_hash,
                candidate_hash=derived.revision_hash,
            )
            raise DefinitionRevisionMismatchError(
                revision_name=revision_name.name,
                stored_hash=stored.revision_hash,
                candidate_hash=derived.revision_hash,
            )

        if not self._comparator.deep_equal(stored, derived):
            log.warning(
                "definition_revision_spec_mismatch",
                revision_hash=stored.revision_hash,
            )
            raise DefinitionRevisionMismatchError(
                revision_name=revision_name.name,
                stored_hash=stored.revision_hash,
                candidate_hash=derived.revision_hash,
            )

        log.debug("definition_revision_unchanged")
