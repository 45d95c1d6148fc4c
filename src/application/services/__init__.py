"""Application services - Use case orchestration.

Available services:
- TemplateValidator: CUE template compile and validate checks
- RevisionImmutabilityGuard: Rejects edits to published revisions
- DefinitionRevisionGatherer / DefinitionRevisionComparator: default
  revision derivation and comparison
- DefinitionAdmissionService: Runs every check against a candidate
"""

from src.application.services.definition_admission_service import (
    DefinitionAdmissionService,
)
from src.application.services.definition_revision_service import (
    DefinitionRevisionComparator,
    DefinitionRevisionGatherer,
    compute_revision_hash,
    convert_definition_revision_name,
)
from src.application.services.revision_immutability_guard import (
    RevisionImmutabilityGuard,
)
from src.application.services.template_validator import TemplateValidator

__all__ = [
    "DefinitionAdmissionService",
    "DefinitionRevisionComparator",
    "DefinitionRevisionGatherer",
    "RevisionImmutabilityGuard",
    "TemplateValidator",
    "compute_revision_hash",
    "convert_definition_revision_name",
]
