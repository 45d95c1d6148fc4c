"""Definition revision domain model.

A DefinitionRevision is an immutable, hashed snapshot of a definition's
spec. Once published, its hash and payload never change; spec changes
produce a new revision under a new name.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from src.domain.models.definition import DefinitionKind, NamespacedName


@dataclass(frozen=True)
class DefinitionRevision:
    """Immutable snapshot of a definition spec.

    Attributes:
        name: Revision name, e.g. "webservice-v1".
        namespace: Revision namespace.
        revision: Revision number.
        revision_hash: Content hash of the snapshot.
        definition_kind: Kind of the snapshotted definition.
        definition_spec: The snapshotted spec payload.
    """

    name: str
    namespace: str
    revision: int
    revision_hash: str
    definition_kind: DefinitionKind
    definition_spec: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate and freeze the revision."""
        if self.revision < 0:
            raise ValueError(f"revision must be non-negative, got {self.revision}")
        object.__setattr__(
            self, "definition_spec", MappingProxyType(dict(self.definition_spec))
        )

    @property
    def namespaced_name(self) -> NamespacedName:
        """Store key of this revision."""
        return NamespacedName(namespace=self.namespace, name=self.name)

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any]) -> DefinitionRevision:
        """Build a revision from a DefinitionRevision manifest mapping.

        Reads spec.revision, spec.revisionHash, spec.definitionType and the
        spec of the embedded definition matching that type.

        Args:
            manifest: Parsed DefinitionRevision manifest.

        Returns:
            The revision.

        Raises:
            ValueError: If the manifest is missing required fields.
        """
        metadata = manifest.get("metadata") or {}
        spec = manifest.get("spec") or {}
        name = metadata.get("name")
        if not name:
            raise ValueError("DefinitionRevision manifest is missing metadata.name")

        kind = DefinitionKind.from_definition_type(spec.get("definitionType"))
        # e.g. Trait -> traitDefinition
        embedded_key = kind.value[0].lower() + kind.value[1:]
        embedded = spec.get(embedded_key) or {}

        return cls(
            name=name,
            namespace=metadata.get("namespace") or "default",
            revision=int(spec.get("revision", 0)),
            revision_hash=str(spec.get("revisionHash", "")),
            definition_kind=kind,
            definition_spec=embedded.get("spec") or {},
        )


@dataclass(frozen=True)
class GatheredRevision:
    """Revision derived from a candidate definition.

    Attributes:
        revision: The would-be revision.
        metadata: Auxiliary information about the derivation.
    """

    revision: DefinitionRevision
    metadata: Mapping[str, Any] = field(default_factory=dict)
