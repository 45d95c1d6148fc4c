"""Capability definition domain model.

A definition is a user-authored capability description (component,
trait, policy, workflow step). This module models the candidate object
handed to the validators for one call; nothing here is retained after
the call returns.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

# Annotation pinning a definition to an explicit revision name
DEFINITION_REVISION_NAME_ANNOTATION = "definitionrevision.oam.dev/name"

DEFAULT_NAMESPACE = "default"


class DefinitionKind(str, Enum):
    """Kinds of capability definitions."""

    COMPONENT = "ComponentDefinition"
    TRAIT = "TraitDefinition"
    POLICY = "PolicyDefinition"
    WORKFLOW_STEP = "WorkflowStepDefinition"

    @property
    def uses_cuex(self) -> bool:
        """Whether templates of this kind compile through the shared CueX compiler.

        Workflow steps and policies may import providers that resolve
        asynchronously, so they need the context-aware compiler.
        """
        return self in (DefinitionKind.WORKFLOW_STEP, DefinitionKind.POLICY)

    @property
    def definition_type(self) -> str:
        """Short type name stored in a DefinitionRevision, e.g. "Trait"."""
        return self.value.removesuffix("Definition")

    @classmethod
    def from_definition_type(cls, definition_type: object) -> DefinitionKind:
        """Resolve the short type name of a DefinitionRevision.

        Args:
            definition_type: spec.definitionType, e.g. "Trait" or "WorkflowStep".

        Raises:
            ValueError: If the type name is unknown.
        """
        for kind in cls:
            if kind.definition_type == definition_type:
                return kind
        raise ValueError(f"unsupported definition type: {definition_type!r}")


@dataclass(frozen=True)
class NamespacedName:
    """Key of an object in the store.

    Attributes:
        namespace: Object namespace.
        name: Object name.
    """

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class DefinitionObject:
    """Candidate definition under validation.

    Attributes:
        kind: Definition kind.
        name: metadata.name of the definition.
        namespace: metadata.namespace of the definition.
        spec: The definition spec, treated as read-only.
        annotations: metadata.annotations of the definition.
    """

    kind: DefinitionKind
    name: str
    namespace: str = DEFAULT_NAMESPACE
    spec: Mapping[str, Any] = field(default_factory=dict)
    annotations: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the mapping fields."""
        object.__setattr__(self, "spec", MappingProxyType(dict(self.spec)))
        object.__setattr__(
            self, "annotations", MappingProxyType(dict(self.annotations))
        )

    @property
    def version(self) -> str:
        """spec.version, or an empty string when unset."""
        return str(self.spec.get("version") or "")

    @property
    def revision_name(self) -> str:
        """Revision name annotation, or an empty string when unset."""
        return self.annotations.get(DEFINITION_REVISION_NAME_ANNOTATION, "")

    @property
    def cue_template(self) -> str | None:
        """spec.schematic.cue.template, or None when the definition has none."""
        schematic = self.spec.get("schematic")
        if not isinstance(schematic, Mapping):
            return None
        cue = schematic.get("cue")
        if not isinstance(cue, Mapping):
            return None
        template = cue.get("template")
        return template if isinstance(template, str) else None

    @classmethod
    def from_manifest(cls, manifest: Mapping[str, Any]) -> DefinitionObject:
        """Build a definition from a Kubernetes-style manifest mapping.

        Args:
            manifest: Parsed manifest with kind, metadata and spec.

        Returns:
            The definition object.

        Raises:
            ValueError: If kind is unknown or metadata.name is missing.
        """
        kind_value = manifest.get("kind")
        try:
            kind = DefinitionKind(kind_value)
        except ValueError:
            raise ValueError(f"unsupported definition kind: {kind_value!r}") from None

        metadata = manifest.get("metadata") or {}
        name = metadata.get("name")
        if not name:
            raise ValueError(f"{kind.value} manifest is missing metadata.name")

        return cls(
            kind=kind,
            name=name,
            namespace=metadata.get("namespace") or DEFAULT_NAMESPACE,
            spec=manifest.get("spec") or {},
            annotations=metadata.get("annotations") or {},
        )
