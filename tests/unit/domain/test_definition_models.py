"""Unit tests for definition and definition revision models."""

import pytest

from src.domain.models.definition import (
    DEFINITION_REVISION_NAME_ANNOTATION,
    DefinitionKind,
    DefinitionObject,
    NamespacedName,
)
from src.domain.models.definition_revision import DefinitionRevision


class TestDefinitionKind:
    """Tests for DefinitionKind."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (DefinitionKind.COMPONENT, False),
            (DefinitionKind.TRAIT, False),
            (DefinitionKind.POLICY, True),
            (DefinitionKind.WORKFLOW_STEP, True),
        ],
    )
    def test_uses_cuex(self, kind: DefinitionKind, expected: bool) -> None:
        assert kind.uses_cuex is expected

    @pytest.mark.parametrize(
        ("definition_type", "expected"),
        [
            ("Component", DefinitionKind.COMPONENT),
            ("Trait", DefinitionKind.TRAIT),
            ("Policy", DefinitionKind.POLICY),
            ("WorkflowStep", DefinitionKind.WORKFLOW_STEP),
        ],
    )
    def test_from_definition_type(
        self, definition_type: str, expected: DefinitionKind
    ) -> None:
        assert DefinitionKind.from_definition_type(definition_type) is expected
        assert expected.definition_type == definition_type

    @pytest.mark.parametrize("definition_type", ["TraitDefinition", "trait", None])
    def test_from_definition_type_rejects_unknown(self, definition_type: object) -> None:
        with pytest.raises(ValueError, match="unsupported definition type"):
            DefinitionKind.from_definition_type(definition_type)


class TestNamespacedName:
    """Tests for NamespacedName."""

    def test_str(self) -> None:
        assert str(NamespacedName("vela-system", "scaler-v1")) == "vela-system/scaler-v1"

    def test_hashable_key(self) -> None:
        key = NamespacedName("ns", "a")
        assert {key: 1}[NamespacedName("ns", "a")] == 1


class TestDefinitionObject:
    """Tests for DefinitionObject."""

    def test_defaults_to_empty_version_and_revision_name(self) -> None:
        definition = DefinitionObject(kind=DefinitionKind.TRAIT, name="scaler")

        assert definition.version == ""
        assert definition.revision_name == ""
        assert definition.cue_template is None
        assert definition.namespace == "default"

    def test_reads_version_annotation_and_template(self) -> None:
        definition = DefinitionObject(
            kind=DefinitionKind.TRAIT,
            name="scaler",
            spec={"version": "1.2.3", "schematic": {"cue": {"template": "a: 1"}}},
            annotations={DEFINITION_REVISION_NAME_ANNOTATION: "2"},
        )

        assert definition.version == "1.2.3"
        assert definition.revision_name == "2"
        assert definition.cue_template == "a: 1"

    def test_non_cue_schematic_has_no_template(self) -> None:
        definition = DefinitionObject(
            kind=DefinitionKind.COMPONENT,
            name="rds",
            spec={"schematic": {"terraform": {"configuration": "..."}}},
        )

        assert definition.cue_template is None

    @pytest.mark.parametrize(
        "spec",
        [
            {"schematic": "oops"},
            {"schematic": {"cue": "template: 1"}},
            {"schematic": {"cue": {"template": 42}}},
        ],
    )
    def test_malformed_schematic_has_no_template(self, spec: dict) -> None:
        definition = DefinitionObject.from_manifest(
            {"kind": "TraitDefinition", "metadata": {"name": "x"}, "spec": spec}
        )

        assert definition.cue_template is None

    def test_spec_is_read_only(self) -> None:
        definition = DefinitionObject(kind=DefinitionKind.TRAIT, name="scaler")

        with pytest.raises(TypeError):
            definition.spec["version"] = "1.0.0"  # type: ignore[index]

    def test_from_manifest(self) -> None:
        manifest = {
            "apiVersion": "core.oam.dev/v1beta1",
            "kind": "WorkflowStepDefinition",
            "metadata": {
                "name": "apply-object",
                "namespace": "vela-system",
                "annotations": {DEFINITION_REVISION_NAME_ANNOTATION: "1"},
            },
            "spec": {"schematic": {"cue": {"template": "parameter: {}"}}},
        }

        definition = DefinitionObject.from_manifest(manifest)

        assert definition.kind is DefinitionKind.WORKFLOW_STEP
        assert definition.name == "apply-object"
        assert definition.namespace == "vela-system"
        assert definition.revision_name == "1"
        assert definition.cue_template == "parameter: {}"

    def test_from_manifest_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValueError, match="unsupported definition kind"):
            DefinitionObject.from_manifest({"kind": "Deployment", "metadata": {"name": "x"}})

    def test_from_manifest_requires_name(self) -> None:
        with pytest.raises(ValueError, match="metadata.name"):
            DefinitionObject.from_manifest({"kind": "TraitDefinition", "metadata": {}})


class TestDefinitionRevision:
    """Tests for DefinitionRevision."""

    def test_rejects_negative_revision(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            DefinitionRevision(
                name="scaler-v1",
                namespace="default",
                revision=-1,
                revision_hash="abc",
                definition_kind=DefinitionKind.TRAIT,
            )

    def test_namespaced_name(self) -> None:
        revision = DefinitionRevision(
            name="scaler-v1",
            namespace="vela-system",
            revision=1,
            revision_hash="abc",
            definition_kind=DefinitionKind.TRAIT,
        )

        assert revision.namespaced_name == NamespacedName("vela-system", "scaler-v1")

    def test_from_manifest(self) -> None:
        manifest = {
            "apiVersion": "core.oam.dev/v1beta1",
            "kind": "DefinitionRevision",
            "metadata": {"name": "scaler-v1", "namespace": "vela-system"},
            "spec": {
                "revision": 1,
                "revisionHash": "8f2a1c",
                "definitionType": "Trait",
                "traitDefinition": {
                    "metadata": {"name": "scaler"},
                    "spec": {"podDisruptive": False},
                },
            },
        }

        revision = DefinitionRevision.from_manifest(manifest)

        assert revision.name == "scaler-v1"
        assert revision.revision == 1
        assert revision.revision_hash == "8f2a1c"
        assert revision.definition_kind is DefinitionKind.TRAIT
        assert revision.definition_spec == {"podDisruptive": False}

    def test_from_manifest_rejects_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            DefinitionRevision.from_manifest(
                {"metadata": {"name": "x-v1"}, "spec": {"definitionType": "Unknown"}}
            )

    def test_from_manifest_resolves_embedded_workflow_step(self) -> None:
        manifest = {
            "kind": "DefinitionRevision",
            "metadata": {"name": "apply-object-v3"},
            "spec": {
                "revision": 3,
                "revisionHash": "51c0e1",
                "definitionType": "WorkflowStep",
                "workflowStepDefinition": {
                    "spec": {"schematic": {"cue": {"template": "parameter: {}"}}}
                },
            },
        }

        revision = DefinitionRevision.from_manifest(manifest)

        assert revision.definition_kind is DefinitionKind.WORKFLOW_STEP
        assert revision.namespace == "default"
        assert revision.definition_spec == {
            "schematic": {"cue": {"template": "parameter: {}"}}
        }
