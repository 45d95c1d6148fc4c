"""CUE toolchain infrastructure errors.

These are not validation outcomes. They signal that the compiler could
not be reached or did not answer in time, so the caller may retry.
"""

from __future__ import annotations

from src.domain.exceptions import DefinitionGuardError


class CueCompilerUnavailableError(DefinitionGuardError):
    """Error when the CUE compiler cannot be started.

    Attributes:
        binary: The executable that failed to start.
    """

    def __init__(self, binary: str, reason: str) -> None:
        """Initialize the error.

        Args:
            binary: The executable that failed to start.
            reason: Underlying failure description.
        """
        self.binary = binary
        self.reason = reason
        super().__init__(f"CUE compiler {binary!r} unavailable: {reason}")


class CueCompileTimeoutError(DefinitionGuardError):
    """Error when a compile exceeds the configured timeout.

    Attributes:
        timeout_seconds: The timeout that was exceeded.
    """

    def __init__(self, timeout_seconds: float) -> None:
        """Initialize the error.

        Args:
            timeout_seconds: The timeout that was exceeded.
        """
        self.timeout_seconds = timeout_seconds
        super().__init__(f"CUE compile timed out after {timeout_seconds}s")
