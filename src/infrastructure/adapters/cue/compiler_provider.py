"""Process-wide provider of the shared CueX compiler.

The provider is injected into TemplateValidator instead of being
reached as a global, so tests can hand out a fake compiler.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from src.application.ports.cue_compiler import (
    CueCompilerProviderProtocol,
    CuexCompilerProtocol,
)
from src.config.cue_config import CueCompilerConfig
from src.infrastructure.adapters.cue.cli_compiler import CuexCliCompiler


class CueCompilerProvider(CueCompilerProviderProtocol):
    """Lazily creates one shared compiler and hands it to every caller.

    Thread Safety:
        Creation is guarded by a lock; concurrent first calls receive the
        same instance.
    """

    def __init__(
        self,
        config: CueCompilerConfig,
        factory: Callable[[CueCompilerConfig], CuexCompilerProtocol] = CuexCliCompiler,
    ) -> None:
        """Initialize the provider.

        Args:
            config: Configuration passed to the factory.
            factory: Builds the shared compiler on first use.
        """
        self._config = config
        self._factory = factory
        self._compiler: CuexCompilerProtocol | None = None
        self._lock = threading.Lock()

    def get(self) -> CuexCompilerProtocol:
        """Return the shared compiler, creating it on first use."""
        compiler = self._compiler
        if compiler is not None:
            return compiler
        with self._lock:
            if self._compiler is None:
                self._compiler = self._factory(self._config)
            return self._compiler
