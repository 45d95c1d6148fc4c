"""CUE compiler stubs.

In-memory stubs for the CUE compiler ports. Diagnostics are scripted
instead of produced by a real evaluator.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from src.application.ports.cue_compiler import (
    CueCompilerProtocol,
    CueCompilerProviderProtocol,
    CuexCompilerProtocol,
)


@dataclass(frozen=True)
class CueValueStub:
    """Compiled value with scripted diagnostics.

    Attributes:
        compile_diagnostics: Returned by err().
        validate_diagnostics: Returned by validate().
    """

    compile_diagnostics: tuple[str, ...] = field(default_factory=tuple)
    validate_diagnostics: tuple[str, ...] = field(default_factory=tuple)

    def err(self) -> Sequence[str]:
        return self.compile_diagnostics

    def validate(self) -> Sequence[str]:
        return self.validate_diagnostics


class CueCompilerStub(CueCompilerProtocol):
    """Synchronous compiler stub.

    Example:
        stub = CueCompilerStub(compile_diagnostics=['x: reference "y" not found'])
        validator = TemplateValidator(lambda: stub, provider)
    """

    def __init__(
        self,
        compile_diagnostics: Sequence[str] = (),
        validate_diagnostics: Sequence[str] = (),
    ) -> None:
        """Initialize the stub with the diagnostics it reports."""
        self._value = CueValueStub(
            compile_diagnostics=tuple(compile_diagnostics),
            validate_diagnostics=tuple(validate_diagnostics),
        )
        self.compiled_sources: list[str] = []

    def compile_string(self, source: str) -> CueValueStub:
        """Record the source and return the scripted value."""
        self.compiled_sources.append(source)
        return self._value


class CuexCompilerStub(CuexCompilerProtocol):
    """Asynchronous compiler stub.

    Can be configured to raise an infrastructure failure or to block
    until cancelled.
    """

    def __init__(
        self,
        compile_diagnostics: Sequence[str] = (),
        validate_diagnostics: Sequence[str] = (),
        failure: Exception | None = None,
        block: bool = False,
    ) -> None:
        """Initialize the stub.

        Args:
            compile_diagnostics: Returned by the value's err().
            validate_diagnostics: Returned by the value's validate().
            failure: Raised instead of compiling, when set.
            block: Wait forever instead of compiling, when True.
        """
        self._value = CueValueStub(
            compile_diagnostics=tuple(compile_diagnostics),
            validate_diagnostics=tuple(validate_diagnostics),
        )
        self._failure = failure
        self._block = block
        self.compiled_sources: list[str] = []
        self.received_options: list[dict[str, Any]] = []

    async def compile_string_with_options(
        self,
        source: str,
        **options: Any,
    ) -> CueValueStub:
        """Record the call and return the scripted value."""
        self.compiled_sources.append(source)
        self.received_options.append(dict(options))
        if self._block:
            await asyncio.Event().wait()
        if self._failure is not None:
            raise self._failure
        return self._value


class CueCompilerProviderStub(CueCompilerProviderProtocol):
    """Provider stub handing out a fixed compiler."""

    def __init__(self, compiler: CuexCompilerProtocol | None = None) -> None:
        """Initialize the provider with the compiler to hand out."""
        self._compiler = compiler or CuexCompilerStub()
        self.get_calls = 0

    def get(self) -> CuexCompilerProtocol:
        """Return the configured compiler."""
        self.get_calls += 1
        return self._compiler
