"""Domain services for the definition guard.

Pure checks with no port dependencies.

Available services:
- validate_semantic_version: spec.version format check
- validate_multiple_def_versions_not_present: version/annotation exclusivity
- is_qualified_name: Kubernetes style qualified name check
- reportable_diagnostics: CUE diagnostic suppression and ordering
"""

from src.domain.services.qualified_name import is_dns1123_subdomain, is_qualified_name
from src.domain.services.template_diagnostics import (
    CONTEXT_NOT_FOUND_PATTERN,
    is_context_not_found,
    reportable_diagnostics,
)
from src.domain.services.version_validator import (
    validate_multiple_def_versions_not_present,
    validate_semantic_version,
)

__all__ = [
    "CONTEXT_NOT_FOUND_PATTERN",
    "is_context_not_found",
    "is_dns1123_subdomain",
    "is_qualified_name",
    "reportable_diagnostics",
    "validate_multiple_def_versions_not_present",
    "validate_semantic_version",
]
