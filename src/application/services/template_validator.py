"""CUE template validator service.

Compiles a definition's CUE template and reports real diagnostics while
suppressing the deferred "context" reference signature.

Two entry points:
- validate_cue_template: synchronous, one fresh compiler per call
- validate_cuex_template: asynchronous, shared compiler from the
  injected provider, for kinds whose templates import providers

Error Policy:
    Diagnostics are checked after compiling and again after the
    validation pass. Suppressed diagnostics are dropped; the rest are
    sorted and the first one becomes the error message.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import structlog

from src.application.ports.cue_compiler import (
    CueCompilerProtocol,
    CueCompilerProviderProtocol,
    CueValueProtocol,
)
from src.application.services.base import LoggingMixin
from src.domain.errors.template import TemplateValidationError
from src.domain.services.template_diagnostics import reportable_diagnostics


class TemplateValidator(LoggingMixin):
    """Validates CUE templates embedded in definitions.

    Thread Safety:
        Holds no per-call state. The synchronous path creates a compiler
        per call; the asynchronous path relies on the provider's shared
        compiler being safe for concurrent use.
    """

    def __init__(
        self,
        compiler_factory: Callable[[], CueCompilerProtocol],
        compiler_provider: CueCompilerProviderProtocol,
    ) -> None:
        """Initialize the validator.

        Args:
            compiler_factory: Creates a fresh synchronous compiler.
            compiler_provider: Hands out the shared CueX compiler.
        """
        self._compiler_factory = compiler_factory
        self._compiler_provider = compiler_provider
        self._init_logger()

    def validate_cue_template(self, cue_template: str) -> None:
        """Validate a template with a fresh, isolated compiler.

        Args:
            cue_template: CUE source text.

        Raises:
            TemplateValidationError: If a reportable diagnostic exists.
        """
        log = self._log_operation("validate_cue_template")
        value = self._compiler_factory().compile_string(cue_template)
        self._check_value(value, log)
        log.debug("cue_template_validated")

    async def validate_cuex_template(
        self,
        cue_template: str,
        **options: Any,
    ) -> None:
        """Validate a template with the shared context-aware compiler.

        Args:
            cue_template: CUE source text.
            **options: Passed through to the compiler.

        Raises:
            TemplateValidationError: If a reportable diagnostic exists.
            Exception: Compiler infrastructure failures, unchanged.
            asyncio.CancelledError: If the awaiting task is cancelled.
        """
        log = self._log_operation("validate_cuex_template")
        compiler = self._compiler_provider.get()
        value = await compiler.compile_string_with_options(cue_template, **options)
        self._check_value(value, log)
        log.debug("cuex_template_validated")

    def _check_value(
        self,
        value: CueValueProtocol,
        log: structlog.BoundLogger,
    ) -> None:
        self._check_diagnostics(value.err(), "compile", log)
        self._check_diagnostics(value.validate(), "validate", log)

    @staticmethod
    def _check_diagnostics(
        diagnostics: Sequence[str],
        phase: str,
        log: structlog.BoundLogger,
    ) -> None:
        reportable = reportable_diagnostics(diagnostics)
        if reportable:
            log.warning(
                "cue_template_rejected",
                phase=phase,
                diagnostic=reportable[0],
                diagnostic_count=len(reportable),
            )
            raise TemplateValidationError(reportable)
        if diagnostics:
            log.debug(
                "context_reference_diagnostics_suppressed",
                phase=phase,
                suppressed_count=len(diagnostics),
            )
