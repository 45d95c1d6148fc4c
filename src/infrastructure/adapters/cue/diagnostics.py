"""Parsing of CUE CLI error output into flat diagnostics.

The CLI prints one header line per error followed by indented source
positions:

    spec.replicas: conflicting values 1 and "x" (mismatched types int and string):
        ./template.cue:3:12
        ./template.cue:4:12

Each header becomes one diagnostic. The colon that introduces a
position block is not part of the message.
"""

from __future__ import annotations


def parse_cli_diagnostics(output: str) -> list[str]:
    """Split CUE CLI error output into diagnostic messages.

    Args:
        output: Captured stderr of a cue command.

    Returns:
        Diagnostic messages in the order printed.
    """
    lines = [line.rstrip() for line in output.splitlines() if line.strip()]
    diagnostics: list[str] = []
    for index, line in enumerate(lines):
        if line[0].isspace():
            continue
        followed_by_positions = index + 1 < len(lines) and lines[index + 1][0].isspace()
        if followed_by_positions and line.endswith(":"):
            line = line[:-1]
        diagnostics.append(line)
    return diagnostics
