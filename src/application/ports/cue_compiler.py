"""CUE compiler port.

Defines the protocols for compiling and validating CUE templates. The
evaluator itself is an external capability; adapters wrap whatever
toolchain is available.

Two compile paths exist:
- CueCompilerProtocol: synchronous, one fresh compiler per validation
- CuexCompilerProtocol: asynchronous, one shared compiler per process,
  reached through CueCompilerProviderProtocol

Diagnostics are flattened to rendered message strings.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CueValueProtocol(Protocol):
    """A compiled CUE value."""

    @abstractmethod
    def err(self) -> Sequence[str]:
        """Diagnostics recorded while compiling the value.

        Returns:
            Rendered diagnostics, empty when compilation was clean.
        """
        ...

    @abstractmethod
    def validate(self) -> Sequence[str]:
        """Run the compiler's validation pass over the value.

        Returns:
            Rendered diagnostics, empty when the value is valid.
        """
        ...


@runtime_checkable
class CueCompilerProtocol(Protocol):
    """Synchronous CUE compiler.

    Implementations hold per-compilation state, so callers create a
    new instance for every template.
    """

    @abstractmethod
    def compile_string(self, source: str) -> CueValueProtocol:
        """Compile CUE source.

        Args:
            source: CUE source text.

        Returns:
            The compiled value. Compile diagnostics are reported through
            CueValueProtocol.err(), not raised.
        """
        ...


@runtime_checkable
class CuexCompilerProtocol(Protocol):
    """Context-aware CUE compiler shared across callers.

    Implementations must be safe for concurrent use and must abort
    promptly when the awaiting task is cancelled.
    """

    @abstractmethod
    async def compile_string_with_options(
        self,
        source: str,
        **options: Any,
    ) -> CueValueProtocol:
        """Compile CUE source, resolving provider references as needed.

        Args:
            source: CUE source text.
            **options: Adapter-specific compile options.

        Returns:
            The compiled value.

        Raises:
            DefinitionGuardError subclasses or other exceptions for
            infrastructure failures; these are not template diagnostics.
        """
        ...


@runtime_checkable
class CueCompilerProviderProtocol(Protocol):
    """Provides the process-wide shared CueX compiler."""

    @abstractmethod
    def get(self) -> CuexCompilerProtocol:
        """Return the shared compiler, creating it on first use."""
        ...
