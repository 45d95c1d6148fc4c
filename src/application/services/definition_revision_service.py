"""Default revision derivation and comparison.

Derives the DefinitionRevision a candidate definition would publish and
compares revisions by their snapshotted spec.

Hashing:
    The revision hash is the first 16 hex characters of the BLAKE3
    digest of the canonical JSON form of {"kind", "spec"}. Canonical
    JSON uses sorted keys and compact separators, so key order in the
    source manifest never changes the hash.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import blake3

from src.application.ports.revision_gatherer import (
    RevisionComparatorProtocol,
    RevisionGathererProtocol,
)
from src.domain.errors.definition_revision import RevisionGatherError
from src.domain.models.definition import DefinitionObject
from src.domain.models.definition_revision import (
    DefinitionRevision,
    GatheredRevision,
)

REVISION_HASH_LENGTH: int = 16
DEFAULT_REVISION: int = 1


def convert_definition_revision_name(definition_name: str, revision_name: str) -> str:
    """Build the stored revision name for a definition.

    Args:
        definition_name: metadata.name of the definition.
        revision_name: Revision name annotation value.

    Returns:
        "<definition_name>-v<revision_name>"
    """
    return f"{definition_name}-v{revision_name}"


def canonical_spec_bytes(kind: str, spec: Mapping[str, Any]) -> bytes:
    """Serialize a definition spec canonically.

    Args:
        kind: Definition kind label.
        spec: Definition spec.

    Returns:
        UTF-8 canonical JSON.

    Raises:
        RevisionGatherError: If the spec holds values JSON cannot encode.
    """
    try:
        text = json.dumps(
            {"kind": kind, "spec": dict(spec)},
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise RevisionGatherError(f"cannot hash definition spec: {e}") from e
    return text.encode("utf-8")


def compute_revision_hash(kind: str, spec: Mapping[str, Any]) -> str:
    """Compute the content hash of a definition spec."""
    digest = blake3.blake3(canonical_spec_bytes(kind, spec)).hexdigest()
    return digest[:REVISION_HASH_LENGTH]


class DefinitionRevisionGatherer(RevisionGathererProtocol):
    """Derives revisions from candidate definitions.

    The revision number is taken from a numeric revision name
    annotation and defaults to 1 otherwise.
    """

    def gather(self, definition: DefinitionObject) -> GatheredRevision:
        """Derive the revision a definition would publish.

        Args:
            definition: Candidate definition.

        Returns:
            The derived revision with hash metadata.

        Raises:
            RevisionGatherError: If the spec cannot be hashed.
        """
        revision_label = definition.revision_name or str(DEFAULT_REVISION)
        revision_number = (
            int(revision_label)
            if revision_label.isascii() and revision_label.isdigit()
            else DEFAULT_REVISION
        )
        revision_hash = compute_revision_hash(definition.kind.value, definition.spec)

        revision = DefinitionRevision(
            name=convert_definition_revision_name(definition.name, revision_label),
            namespace=definition.namespace,
            revision=revision_number,
            revision_hash=revision_hash,
            definition_kind=definition.kind,
            definition_spec=definition.spec,
        )
        return GatheredRevision(
            revision=revision,
            metadata={"hash_algorithm": "blake3", "revision_label": revision_label},
        )


class DefinitionRevisionComparator(RevisionComparatorProtocol):
    """Compares revisions by definition kind and spec payload.

    Names, namespaces and revision numbers are bookkeeping and do not
    take part in the comparison.
    """

    def deep_equal(self, left: DefinitionRevision, right: DefinitionRevision) -> bool:
        """Compare two revisions."""
        if left.definition_kind != right.definition_kind:
            return False
        return dict(left.definition_spec) == dict(right.definition_spec)
