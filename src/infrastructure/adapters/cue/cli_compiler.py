"""CUE compiler adapters backed by the `cue` CLI.

Implements the CUE compiler ports by running the CUE command line tool
on a template written to a private temporary directory:

- compile step: `cue def <file>` (parse, compile, resolve references)
- validate step: `cue vet <file>` (evaluate, report conflicts)

Non-zero exit codes become diagnostics. A missing executable or an
exceeded timeout raises an infrastructure error instead, so callers can
tell toolchain trouble from a broken template.
"""

from __future__ import annotations

import asyncio
import subprocess
import tempfile
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

from src.application.ports.cue_compiler import (
    CueCompilerProtocol,
    CuexCompilerProtocol,
)
from src.config.cue_config import CueCompilerConfig
from src.domain.errors.cue_compiler import (
    CueCompilerUnavailableError,
    CueCompileTimeoutError,
)
from src.infrastructure.adapters.cue.diagnostics import parse_cli_diagnostics

logger = structlog.get_logger()

TEMPLATE_FILE_NAME = "template.cue"
COMPILE_COMMAND = "def"
VALIDATE_COMMAND = "vet"


@dataclass(frozen=True)
class CueCliValue:
    """Result of running the CLI over a template.

    Attributes:
        compile_diagnostics: Diagnostics from the compile step.
        validate_diagnostics: Diagnostics from the validate step.
    """

    compile_diagnostics: tuple[str, ...] = field(default_factory=tuple)
    validate_diagnostics: tuple[str, ...] = field(default_factory=tuple)

    def err(self) -> Sequence[str]:
        return self.compile_diagnostics

    def validate(self) -> Sequence[str]:
        return self.validate_diagnostics


def _tag_args(tags: Mapping[str, str] | None) -> list[str]:
    args: list[str] = []
    for key, value in sorted((tags or {}).items()):
        args.extend(["-t", f"{key}={value}"])
    return args


def _diagnostics_for(
    command: str,
    returncode: int,
    stderr: str,
) -> tuple[str, ...]:
    if returncode == 0:
        return ()
    diagnostics = parse_cli_diagnostics(stderr)
    if not diagnostics:
        diagnostics = [f"cue {command} exited with status {returncode}"]
    return tuple(diagnostics)


class CueCliCompiler(CueCompilerProtocol):
    """Synchronous CUE compiler.

    Every compile runs in its own temporary directory, so instances
    share nothing between templates.
    """

    def __init__(self, config: CueCompilerConfig) -> None:
        """Initialize the compiler.

        Args:
            config: CLI location and timeout.
        """
        self._config = config

    def compile_string(self, source: str) -> CueCliValue:
        """Compile and validate a template with the CLI.

        Args:
            source: CUE source text.

        Returns:
            The diagnostics of both steps. The validate step only runs
            when compiling succeeded.

        Raises:
            CueCompilerUnavailableError: If the executable cannot be started.
            CueCompileTimeoutError: If a command exceeds the timeout.
        """
        with tempfile.TemporaryDirectory(prefix="cue-template-") as workdir:
            template_path = Path(workdir) / TEMPLATE_FILE_NAME
            template_path.write_text(source, encoding="utf-8")

            compile_diagnostics = self._run(COMPILE_COMMAND, template_path, workdir)
            if compile_diagnostics:
                return CueCliValue(compile_diagnostics=compile_diagnostics)

            validate_diagnostics = self._run(VALIDATE_COMMAND, template_path, workdir)
            return CueCliValue(validate_diagnostics=validate_diagnostics)

    def _run(self, command: str, template_path: Path, workdir: str) -> tuple[str, ...]:
        args = [self._config.cue_binary, command, str(template_path)]
        try:
            completed = subprocess.run(
                args,
                cwd=workdir,
                capture_output=True,
                text=True,
                timeout=self._config.timeout_seconds,
                check=False,
            )
        except FileNotFoundError as e:
            raise CueCompilerUnavailableError(self._config.cue_binary, str(e)) from e
        except subprocess.TimeoutExpired as e:
            raise CueCompileTimeoutError(self._config.timeout_seconds) from e
        return _diagnostics_for(command, completed.returncode, completed.stderr)


class CuexCliCompiler(CuexCompilerProtocol):
    """Asynchronous CUE compiler shared across callers.

    Holds only immutable configuration, so concurrent compiles do not
    interfere. A cancelled or timed-out compile kills the child process
    before the exception propagates.
    """

    def __init__(self, config: CueCompilerConfig) -> None:
        """Initialize the compiler.

        Args:
            config: CLI location and timeout.
        """
        self._config = config

    async def compile_string_with_options(
        self,
        source: str,
        **options: Any,
    ) -> CueCliValue:
        """Compile and validate a template with the CLI.

        Args:
            source: CUE source text.
            **options: `tags` maps injection tag names to values.

        Returns:
            The diagnostics of both steps.

        Raises:
            TypeError: If an unknown option is given.
            CueCompilerUnavailableError: If the executable cannot be started.
            CueCompileTimeoutError: If a command exceeds the timeout.
            asyncio.CancelledError: If the awaiting task is cancelled.
        """
        tags = options.pop("tags", None)
        if options:
            raise TypeError(f"unsupported compile options: {sorted(options)}")
        extra_args = _tag_args(tags)

        with tempfile.TemporaryDirectory(prefix="cuex-template-") as workdir:
            template_path = Path(workdir) / TEMPLATE_FILE_NAME
            template_path.write_text(source, encoding="utf-8")

            compile_diagnostics = await self._run(
                COMPILE_COMMAND, template_path, workdir, extra_args
            )
            if compile_diagnostics:
                return CueCliValue(compile_diagnostics=compile_diagnostics)

            validate_diagnostics = await self._run(
                VALIDATE_COMMAND, template_path, workdir, extra_args
            )
            return CueCliValue(validate_diagnostics=validate_diagnostics)

    async def _run(
        self,
        command: str,
        template_path: Path,
        workdir: str,
        extra_args: list[str],
    ) -> tuple[str, ...]:
        args = [self._config.cue_binary, command, *extra_args, str(template_path)]
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                cwd=workdir,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise CueCompilerUnavailableError(self._config.cue_binary, str(e)) from e

        try:
            _, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=self._config.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            await self._kill(process, command)
            raise CueCompileTimeoutError(self._config.timeout_seconds) from e
        except asyncio.CancelledError:
            await self._kill(process, command)
            raise

        return _diagnostics_for(
            command,
            process.returncode if process.returncode is not None else -1,
            stderr.decode("utf-8", errors="replace"),
        )

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process, command: str) -> None:
        if process.returncode is None:
            process.kill()
            await process.wait()
        logger.warning("cue_compile_aborted", command=command, pid=process.pid)
