"""
Pytest configuration and shared fixtures for definition guard tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Stubs from src/infrastructure/stubs stand in for the store and compiler
- Unit tests go in tests/unit/
"""

from collections.abc import Callable

import pytest

from src.domain.models.definition import (
    DEFINITION_REVISION_NAME_ANNOTATION,
    DefinitionKind,
    DefinitionObject,
)

TRAIT_TEMPLATE = """
patch: spec: replicas: parameter.replicas
parameter: replicas: *1 | int
"""


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def make_definition() -> Callable[..., DefinitionObject]:
    """Factory for candidate definitions."""

    def _make(
        kind: DefinitionKind = DefinitionKind.TRAIT,
        name: str = "scaler",
        namespace: str = "vela-system",
        version: str = "",
        revision_name: str = "",
        template: str | None = TRAIT_TEMPLATE,
        **spec_fields: object,
    ) -> DefinitionObject:
        spec: dict[str, object] = dict(spec_fields)
        if version:
            spec["version"] = version
        if template is not None:
            spec["schematic"] = {"cue": {"template": template}}
        annotations = (
            {DEFINITION_REVISION_NAME_ANNOTATION: revision_name} if revision_name else {}
        )
        return DefinitionObject(
            kind=kind,
            name=name,
            namespace=namespace,
            spec=spec,
            annotations=annotations,
        )

    return _make
