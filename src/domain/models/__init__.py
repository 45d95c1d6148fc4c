"""Domain models for the definition guard.

Contains immutable value objects describing candidate definitions and
the published revisions they are checked against.
"""

from src.domain.models.definition import (
    DEFINITION_REVISION_NAME_ANNOTATION,
    DefinitionKind,
    DefinitionObject,
    NamespacedName,
)
from src.domain.models.definition_revision import DefinitionRevision, GatheredRevision

__all__: list[str] = [
    "DEFINITION_REVISION_NAME_ANNOTATION",
    "DefinitionKind",
    "DefinitionObject",
    "DefinitionRevision",
    "GatheredRevision",
    "NamespacedName",
]
