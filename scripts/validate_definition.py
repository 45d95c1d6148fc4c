#!/usr/bin/env python3
"""Validate capability definition manifests offline.

Runs the admission validators over one or more YAML manifests: version
format, version/revision-name exclusivity, CUE templates, and, when a
directory of published DefinitionRevision manifests is given, revision
immutability.

Usage:
    python scripts/validate_definition.py MANIFEST [MANIFEST ...] [options]

Options:
    --revision-store DIR   Directory of DefinitionRevision YAML files
    --env ENV              Log output: production (JSON) or development
    --cue-binary PATH      Override CUE_BINARY

Exit codes:
    0: Every definition was admitted
    1: At least one definition was rejected
    2: A manifest or the toolchain could not be used
"""

import argparse
import asyncio
import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import yaml
from dotenv import load_dotenv

from src.application.services.definition_admission_service import (
    DefinitionAdmissionService,
)
from src.bootstrap.definition_guard import create_admission_service
from src.config.cue_config import CueCompilerConfig
from src.domain.errors.cue_compiler import (
    CueCompilerUnavailableError,
    CueCompileTimeoutError,
)
from src.domain.exceptions import DefinitionGuardError
from src.domain.models.definition import DefinitionKind, DefinitionObject
from src.domain.models.definition_revision import DefinitionRevision
from src.infrastructure.observability import (
    configure_structlog,
    generate_correlation_id,
    set_correlation_id,
)
from src.infrastructure.stubs.definition_revision_store_stub import (
    DefinitionRevisionStoreStub,
)

DEFINITION_REVISION_KIND = "DefinitionRevision"

DEFINITION_KINDS = frozenset(kind.value for kind in DefinitionKind)

EXIT_ADMITTED = 0
EXIT_REJECTED = 1
EXIT_UNUSABLE = 2


# ANSI color codes for terminal output
class Colors:
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def iter_manifests(path: Path) -> Iterator[dict[str, Any]]:
    """Yield every non-empty YAML document in a file.

    Args:
        path: YAML file, possibly multi-document.

    Raises:
        ValueError: If a document is not a mapping.
    """
    with path.open(encoding="utf-8") as f:
        for document in yaml.safe_load_all(f):
            if document is None:
                continue
            if not isinstance(document, dict):
                raise ValueError(f"{path}: manifest is not a mapping")
            yield document


def load_revision_store(directory: Path | None) -> DefinitionRevisionStoreStub:
    """Load published revisions into an in-memory store.

    Args:
        directory: Directory of *.yaml / *.yml files, or None for an empty store.

    Returns:
        The populated store. Documents of other kinds are ignored.
    """
    store = DefinitionRevisionStoreStub()
    if directory is None:
        return store
    paths = sorted([*directory.glob("*.yaml"), *directory.glob("*.yml")])
    for path in paths:
        for manifest in iter_manifests(path):
            if manifest.get("kind") == DEFINITION_REVISION_KIND:
                store.add_revision(DefinitionRevision.from_manifest(manifest))
    return store


async def validate_manifests(
    service: DefinitionAdmissionService,
    paths: list[Path],
) -> int:
    """Validate every definition in the given files and print the results.

    Documents of other kinds, such as DefinitionRevisions, are skipped.

    Args:
        service: Admission service to run.
        paths: Manifest files.

    Returns:
        Process exit code.
    """
    exit_code = EXIT_ADMITTED
    for path in paths:
        for manifest in iter_manifests(path):
            if manifest.get("kind") not in DEFINITION_KINDS:
                continue
            definition = DefinitionObject.from_manifest(manifest)
            label = f"{definition.kind.value}/{definition.name}"
            set_correlation_id(generate_correlation_id())
            try:
                await service.validate_definition(definition)
            except (CueCompilerUnavailableError, CueCompileTimeoutError) as e:
                print(f"{Colors.YELLOW}ERROR{Colors.ENDC}  {label}: {e}")
                return EXIT_UNUSABLE
            except DefinitionGuardError as e:
                print(f"{Colors.RED}DENIED{Colors.ENDC} {label}: {e}")
                exit_code = EXIT_REJECTED
            else:
                print(f"{Colors.GREEN}OK{Colors.ENDC}     {label}")
    return exit_code


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate capability definition manifests",
    )
    parser.add_argument(
        "manifests",
        nargs="+",
        type=Path,
        help="YAML manifest files containing definitions",
    )
    parser.add_argument(
        "--revision-store",
        type=Path,
        default=None,
        help="Directory of published DefinitionRevision manifests",
    )
    parser.add_argument(
        "--env",
        choices=["production", "development"],
        default="development",
        help="Log output mode (default: development)",
    )
    parser.add_argument(
        "--cue-binary",
        default=None,
        help="CUE CLI executable (default: $CUE_BINARY or 'cue')",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point."""
    load_dotenv()
    args = parse_args(argv)
    if args.cue_binary:
        os.environ["CUE_BINARY"] = args.cue_binary
    configure_structlog(environment=args.env)

    try:
        store = load_revision_store(args.revision_store)
        service = create_admission_service(store, CueCompilerConfig.from_environment())
        return asyncio.run(validate_manifests(service, args.manifests))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"{Colors.BOLD}{Colors.RED}Error:{Colors.ENDC} {e}", file=sys.stderr)
        return EXIT_UNUSABLE


if __name__ == "__main__":
    sys.exit(main())
