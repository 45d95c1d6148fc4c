"""
Domain layer - Pure validation logic for capability definitions.

This layer contains:
- Domain models (definitions, definition revisions, namespaced names)
- Domain services (version, qualified name and diagnostic checks)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or config.
Only stdlib and typing imports are allowed.
"""

from src.domain.exceptions import DefinitionGuardError
from src.domain.models import DefinitionKind, DefinitionObject, NamespacedName

__all__: list[str] = [
    "DefinitionGuardError",
    "DefinitionKind",
    "DefinitionObject",
    "NamespacedName",
]
