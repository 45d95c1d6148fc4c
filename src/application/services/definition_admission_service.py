"""Definition admission service.

Composes the definition validators the way an admission handler runs
them for one candidate. The service stops at the first failure and
lets the error propagate to the caller.

Validation Order:
1. spec.version format
2. spec.version / revision name annotation exclusivity
3. CUE template, when the definition carries one
4. Revision immutability, when a revision name annotation is set
"""

from __future__ import annotations

from src.application.services.base import LoggingMixin
from src.application.services.definition_revision_service import (
    convert_definition_revision_name,
)
from src.application.services.revision_immutability_guard import (
    RevisionImmutabilityGuard,
)
from src.application.services.template_validator import TemplateValidator
from src.domain.models.definition import DefinitionObject, NamespacedName
from src.domain.services.version_validator import (
    validate_multiple_def_versions_not_present,
    validate_semantic_version,
)


class DefinitionAdmissionService(LoggingMixin):
    """Runs every definition validator against a candidate."""

    def __init__(
        self,
        template_validator: TemplateValidator,
        revision_guard: RevisionImmutabilityGuard,
    ) -> None:
        """Initialize the service.

        Args:
            template_validator: Validates embedded CUE templates.
            revision_guard: Protects published revisions.
        """
        self._template_validator = template_validator
        self._revision_guard = revision_guard
        self._init_logger()

    async def validate_definition(self, definition: DefinitionObject) -> None:
        """Validate a candidate definition.

        Args:
            definition: Candidate definition.

        Raises:
            DefinitionGuardError: The first validation failure.
            Exception: Infrastructure failures from the store or compiler.
        """
        log = self._log_operation(
            "validate_definition",
            kind=definition.kind.value,
            definition=definition.name,
            namespace=definition.namespace,
        )

        validate_semantic_version(definition.version)
        validate_multiple_def_versions_not_present(
            definition.version,
            definition.revision_name,
            definition.kind.value,
        )

        template = definition.cue_template
        if template is not None:
            if definition.kind.uses_cuex:
                await self._template_validator.validate_cuex_template(template)
            else:
                self._template_validator.validate_cue_template(template)

        if definition.revision_name:
            await self._revision_guard.validate_definition_revision(
                definition,
                NamespacedName(
                    namespace=definition.namespace,
                    name=convert_definition_revision_name(
                        definition.name, definition.revision_name
                    ),
                ),
            )

        log.info("definition_admitted")
