"""CUE diagnostic filtering domain service.

Templates may reference a "context" value that is injected later in the
rendering pipeline. Compiling such a template on its own yields a
diagnostic of the exact form:

    <path>: reference "context" not found

where <path> contains no whitespace. That one signature is suppressed;
every other diagnostic is reportable.
The pattern is anchored at both ends so that messages which merely
mention "context" are still reported.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

CONTEXT_NOT_FOUND_PATTERN = r'^\S+:\sreference\s"context"\snot\sfound$'

_CONTEXT_NOT_FOUND_RE = re.compile(CONTEXT_NOT_FOUND_PATTERN)


def is_context_not_found(diagnostic: str) -> bool:
    """Check whether a diagnostic only reports the deferred context reference.

    Args:
        diagnostic: Rendered diagnostic message.

    Returns:
        True if the whole message matches the suppressed signature.
    """
    # fullmatch: "$" alone would also accept a trailing newline
    return _CONTEXT_NOT_FOUND_RE.fullmatch(diagnostic) is not None


def reportable_diagnostics(diagnostics: Iterable[str]) -> list[str]:
    """Drop suppressed diagnostics and order the rest deterministically.

    Compilers do not promise a stable diagnostic order, so the remaining
    messages are de-duplicated and sorted.

    Args:
        diagnostics: Flattened diagnostic messages.

    Returns:
        Sorted, unique diagnostics that must be reported.
    """
    return sorted(
        {message for message in diagnostics if not is_context_not_found(message)}
    )
