"""CUE template validation errors."""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.exceptions import DefinitionGuardError


class TemplateValidationError(DefinitionGuardError):
    """Error when a CUE template produces a real diagnostic.

    The message is the first reportable diagnostic. Diagnostics that
    only say the deferred "context" reference is missing never end up
    here.

    Attributes:
        diagnostic: The diagnostic used as the error message.
        diagnostics: Every reportable diagnostic, in reporting order.
    """

    def __init__(self, diagnostics: Sequence[str]) -> None:
        """Initialize the error.

        Args:
            diagnostics: Reportable diagnostics, at least one.
        """
        if not diagnostics:
            raise ValueError("TemplateValidationError requires a diagnostic")
        self.diagnostics: tuple[str, ...] = tuple(diagnostics)
        self.diagnostic = self.diagnostics[0]
        super().__init__(self.diagnostic)
