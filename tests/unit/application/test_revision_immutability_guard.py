"""Unit tests for RevisionImmutabilityGuard.

Tests cover:
- Name validation before any store access
- First publication (revision not found)
- Store failures propagating unchanged
- Hash and structural comparison against the stored revision
"""

from collections.abc import Callable

import pytest

from src.application.services.definition_revision_service import (
    DefinitionRevisionComparator,
    DefinitionRevisionGatherer,
)
from src.application.services.revision_immutability_guard import (
    RevisionImmutabilityGuard,
)
from src.domain.errors.definition_revision import (
    DefinitionRevisionMismatchError,
    InvalidDefinitionRevisionNameError,
    RevisionGatherError,
)
from src.domain.models.definition import DefinitionKind, DefinitionObject, NamespacedName
from src.domain.models.definition_revision import DefinitionRevision, GatheredRevision
from src.infrastructure.stubs.definition_revision_store_stub import (
    DefinitionRevisionStoreStub,
)

REVISION_KEY = NamespacedName("vela-system", "scaler-v1")


class FixedGatherer:
    """Gatherer returning a fixed revision."""

    def __init__(self, revision: DefinitionRevision) -> None:
        self.revision = revision
        self.calls = 0

    def gather(self, definition: DefinitionObject) -> GatheredRevision:
        self.calls += 1
        return GatheredRevision(revision=self.revision)


class FailingGatherer:
    """Gatherer that cannot derive a revision."""

    def gather(self, definition: DefinitionObject) -> GatheredRevision:
        raise RevisionGatherError("cannot hash definition spec")


class ConstantComparator:
    """Comparator with a fixed answer."""

    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls = 0

    def deep_equal(self, left: DefinitionRevision, right: DefinitionRevision) -> bool:
        self.calls += 1
        return self.result


def _revision(revision_hash: str, spec: dict | None = None) -> DefinitionRevision:
    return DefinitionRevision(
        name=REVISION_KEY.name,
        namespace=REVISION_KEY.namespace,
        revision=1,
        revision_hash=revision_hash,
        definition_kind=DefinitionKind.TRAIT,
        definition_spec=spec if spec is not None else {"podDisruptive": False},
    )


@pytest.fixture
def store() -> DefinitionRevisionStoreStub:
    """Create a fresh store for each test."""
    return DefinitionRevisionStoreStub()


@pytest.fixture
def candidate(make_definition: Callable[..., DefinitionObject]) -> DefinitionObject:
    """Candidate definition pinned to revision 1."""
    return make_definition(revision_name="1")


class TestNameValidation:
    """Revision names are checked before touching the store."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["Scaler-v1", "scaler v1", "scaler@v1", ""])
    async def test_malformed_name_rejected_without_store_access(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
        name: str,
    ) -> None:
        guard = RevisionImmutabilityGuard(
            store, DefinitionRevisionGatherer(), DefinitionRevisionComparator()
        )

        with pytest.raises(InvalidDefinitionRevisionNameError) as exc_info:
            await guard.validate_definition_revision(
                candidate, NamespacedName("vela-system", name)
            )

        assert str(exc_info.value).startswith(f"invalid definitionRevision name {name}:")
        assert store.get_calls == []


class TestStoreAccess:
    """Store outcomes."""

    @pytest.mark.asyncio
    async def test_missing_revision_passes(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
    ) -> None:
        gatherer = FixedGatherer(_revision("h2"))
        guard = RevisionImmutabilityGuard(store, gatherer, ConstantComparator(False))

        await guard.validate_definition_revision(candidate, REVISION_KEY)

        assert store.get_calls == [REVISION_KEY]
        assert gatherer.calls == 0

    @pytest.mark.asyncio
    async def test_store_failure_propagates_unchanged(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
    ) -> None:
        failure = ConnectionError("api server unreachable")
        store.set_failure(failure)
        guard = RevisionImmutabilityGuard(
            store, FixedGatherer(_revision("h1")), ConstantComparator(True)
        )

        with pytest.raises(ConnectionError) as exc_info:
            await guard.validate_definition_revision(candidate, REVISION_KEY)

        assert exc_info.value is failure


class TestComparison:
    """Comparison against a stored revision."""

    @pytest.mark.asyncio
    async def test_same_hash_and_equal_payload_passes(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
    ) -> None:
        store.add_revision(_revision("h1"))
        comparator = ConstantComparator(True)
        guard = RevisionImmutabilityGuard(store, FixedGatherer(_revision("h1")), comparator)

        await guard.validate_definition_revision(candidate, REVISION_KEY)

        assert comparator.calls == 1

    @pytest.mark.asyncio
    async def test_different_hash_rejected_before_deep_compare(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
    ) -> None:
        store.add_revision(_revision("h1"))
        comparator = ConstantComparator(True)
        guard = RevisionImmutabilityGuard(store, FixedGatherer(_revision("h2")), comparator)

        with pytest.raises(DefinitionRevisionMismatchError) as exc_info:
            await guard.validate_definition_revision(candidate, REVISION_KEY)

        assert str(exc_info.value) == (
            "the definition's spec is different with existing definitionRevision's spec"
        )
        assert exc_info.value.stored_hash == "h1"
        assert exc_info.value.candidate_hash == "h2"
        assert comparator.calls == 0

    @pytest.mark.asyncio
    async def test_same_hash_but_different_payload_rejected(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
    ) -> None:
        store.add_revision(_revision("h1", {"podDisruptive": False}))
        guard = RevisionImmutabilityGuard(
            store,
            FixedGatherer(_revision("h1", {"podDisruptive": True})),
            DefinitionRevisionComparator(),
        )

        with pytest.raises(DefinitionRevisionMismatchError):
            await guard.validate_definition_revision(candidate, REVISION_KEY)

    @pytest.mark.asyncio
    async def test_gather_failure_propagates(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
    ) -> None:
        store.add_revision(_revision("h1"))
        guard = RevisionImmutabilityGuard(store, FailingGatherer(), ConstantComparator(True))

        with pytest.raises(RevisionGatherError):
            await guard.validate_definition_revision(candidate, REVISION_KEY)

    @pytest.mark.asyncio
    async def test_republishing_unchanged_definition_passes(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
    ) -> None:
        """End to end with the default gatherer and comparator."""
        gatherer = DefinitionRevisionGatherer()
        store.add_revision(gatherer.gather(candidate).revision)
        guard = RevisionImmutabilityGuard(store, gatherer, DefinitionRevisionComparator())

        await guard.validate_definition_revision(candidate, REVISION_KEY)

    @pytest.mark.asyncio
    async def test_modified_definition_rejected(
        self,
        store: DefinitionRevisionStoreStub,
        candidate: DefinitionObject,
        make_definition: Callable[..., DefinitionObject],
    ) -> None:
        gatherer = DefinitionRevisionGatherer()
        store.add_revision(gatherer.gather(candidate).revision)
        modified = make_definition(revision_name="1", podDisruptive=True)
        guard = RevisionImmutabilityGuard(store, gatherer, DefinitionRevisionComparator())

        with pytest.raises(DefinitionRevisionMismatchError):
            await guard.validate_definition_revision(modified, REVISION_KEY)
