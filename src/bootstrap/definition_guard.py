"""Bootstrap wiring for the definition validators.

Builds validators backed by the CUE CLI adapters and the default
revision gatherer. The revision store is supplied by the caller, since
the object store belongs to the surrounding controller.
"""

from __future__ import annotations

from src.application.ports.definition_revision_store import (
    DefinitionRevisionStoreProtocol,
)
from src.application.services.definition_admission_service import (
    DefinitionAdmissionService,
)
from src.application.services.definition_revision_service import (
    DefinitionRevisionComparator,
    DefinitionRevisionGatherer,
)
from src.application.services.revision_immutability_guard import (
    RevisionImmutabilityGuard,
)
from src.application.services.template_validator import TemplateValidator
from src.config.cue_config import CueCompilerConfig
from src.infrastructure.adapters.cue import CueCliCompiler, CueCompilerProvider


def create_template_validator(config: CueCompilerConfig | None = None) -> TemplateValidator:
    """Create a template validator backed by the CUE CLI.

    Args:
        config: CLI configuration; read from the environment when omitted.
    """
    config = config or CueCompilerConfig.from_environment()
    return TemplateValidator(
        compiler_factory=lambda: CueCliCompiler(config),
        compiler_provider=CueCompilerProvider(config),
    )


def create_revision_guard(
    store: DefinitionRevisionStoreProtocol,
) -> RevisionImmutabilityGuard:
    """Create an immutability guard with the default gatherer and comparator."""
    return RevisionImmutabilityGuard(
        store=store,
        gatherer=DefinitionRevisionGatherer(),
        comparator=DefinitionRevisionComparator(),
    )


def create_admission_service(
    store: DefinitionRevisionStoreProtocol,
    config: CueCompilerConfig | None = None,
) -> DefinitionAdmissionService:
    """Create the admission service composing every validator.

    Args:
        store: Read access to published revisions.
        config: CLI configuration; read from the environment when omitted.
    """
    return DefinitionAdmissionService(
        template_validator=create_template_validator(config),
        revision_guard=create_revision_guard(store),
    )


__all__ = [
    "create_admission_service",
    "create_revision_guard",
    "create_template_validator",
]
