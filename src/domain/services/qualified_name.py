"""Qualified name validation for object store keys.

Follows the Kubernetes qualified-name layout: an optional DNS-1123
subdomain prefix and a name part separated by a single "/". The name
part is restricted to lowercase alphanumerics, "-", "_" and ".", must
start and end with an alphanumeric, and is at most 63 characters.

Violations are returned as human-readable strings; an empty list means
the value is valid.
"""

from __future__ import annotations

import re

QUALIFIED_NAME_MAX_LENGTH: int = 63
DNS1123_SUBDOMAIN_MAX_LENGTH: int = 253

QUALIFIED_NAME_FMT = r"[a-z0-9]([-a-z0-9_.]*[a-z0-9])?"
QUALIFIED_NAME_ERR_MSG = (
    "must consist of lower case alphanumeric characters, '-', '_' or '.', "
    "and must start and end with an alphanumeric character"
)

DNS1123_LABEL_FMT = r"[a-z0-9]([-a-z0-9]*[a-z0-9])?"
DNS1123_SUBDOMAIN_FMT = rf"{DNS1123_LABEL_FMT}(\.{DNS1123_LABEL_FMT})*"
DNS1123_SUBDOMAIN_ERR_MSG = (
    "a lowercase RFC 1123 subdomain must consist of lower case alphanumeric "
    "characters, '-' or '.', and must start and end with an alphanumeric character"
)

_QUALIFIED_NAME_RE = re.compile(QUALIFIED_NAME_FMT)
_DNS1123_SUBDOMAIN_RE = re.compile(DNS1123_SUBDOMAIN_FMT)


def _regex_error(msg: str, fmt: str, *examples: str) -> str:
    """Render a regex violation with examples, Kubernetes style."""
    if examples:
        quoted = " or ".join(f"'{example}'" for example in examples)
        return f"{msg} (e.g. {quoted}, regex used for validation is '{fmt}')"
    return f"{msg} (regex used for validation is '{fmt}')"


def _max_len_error(length: int) -> str:
    return f"must be no more than {length} characters"


def is_dns1123_subdomain(value: str) -> list[str]:
    """Validate a lowercase RFC 1123 subdomain.

    Args:
        value: Candidate subdomain.

    Returns:
        Violation messages, empty when valid.
    """
    errs: list[str] = []
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        errs.append(_max_len_error(DNS1123_SUBDOMAIN_MAX_LENGTH))
    if not _DNS1123_SUBDOMAIN_RE.fullmatch(value):
        errs.append(
            _regex_error(DNS1123_SUBDOMAIN_ERR_MSG, DNS1123_SUBDOMAIN_FMT, "example.com")
        )
    return errs


def is_qualified_name(value: str) -> list[str]:
    """Validate a qualified name.

    Args:
        value: Candidate name, optionally "prefix/name".

    Returns:
        Violation messages, empty when valid.
    """
    errs: list[str] = []
    parts = value.split("/")

    if len(parts) == 1:
        name = parts[0]
    elif len(parts) == 2:
        prefix, name = parts
        if not prefix:
            errs.append("prefix part must be non-empty")
        else:
            errs.extend(f"prefix part {msg}" for msg in is_dns1123_subdomain(prefix))
    else:
        return [
            "a qualified name "
            + _regex_error(
                QUALIFIED_NAME_ERR_MSG,
                QUALIFIED_NAME_FMT,
                "my-name",
                "123-abc",
            )
            + " with an optional DNS subdomain prefix and '/' (e.g. "
            "'example.com/my-name')"
        ]

    if not name:
        errs.append("name part must be non-empty")
    elif len(name) > QUALIFIED_NAME_MAX_LENGTH:
        errs.append("name part " + _max_len_error(QUALIFIED_NAME_MAX_LENGTH))

    if name and not _QUALIFIED_NAME_RE.fullmatch(name):
        errs.append(
            "name part "
            + _regex_error(
                QUALIFIED_NAME_ERR_MSG,
                QUALIFIED_NAME_FMT,
                "my-name",
                "my.name",
                "123-abc",
            )
        )
    return errs
