"""Tests for the encoder and round trips."""

import pytest

from devcontainers.models.variants import (
    BuildPath,
    CommandArgs,
    CommandMap,
    CommandString,
    ComposeFileList,
    MountString,
    PortMapping,
    PortNumber,
    ShutdownAction,
)


class TestEncode:
    """Test encoding entities into documents."""

    def test_empty_container(self, strict_schema):
        """Test that absent fields produce no keys."""
        assert strict_schema.encode(strict_schema.DevContainer()) == {}

    def test_empty_lenient_container(self, lenient_schema):
        """Test that an empty capture map adds nothing."""
        assert lenient_schema.encode(lenient_schema.decode({})) == {}

    def test_declared_key_order(self, strict_schema):
        """Test that known fields come out in declared order."""
        container = strict_schema.decode({
            "remoteUser": "vscode",
            "postCreateCommand": "make",
            "image": "ubuntu:22.04",
            "name": "Ordered",
        })

        assert list(strict_schema.encode(container)) == [
            "name", "image", "remoteUser", "postCreateCommand"
        ]

    def test_mapping_keys_sorted(self, strict_schema):
        """Test that free-form mappings are emitted in key order."""
        container = strict_schema.decode({
            "containerEnv": {"ZED": "1", "ALPHA": "2", "MID": "3"},
            "features": {"b-feature": {"z": 1, "a": 2}, "a-feature": {}},
        })

        document = strict_schema.encode(container)
        assert list(document["containerEnv"]) == ["ALPHA", "MID", "ZED"]
        assert list(document["features"]) == ["a-feature", "b-feature"]
        assert list(document["features"]["b-feature"]) == ["a", "z"]

    def test_document_keys_use_aliases(self, strict_schema):
        """Test that attributes are written under their document keys."""
        container = strict_schema.DevContainer(
            docker_file="Dockerfile",
            workspace_folder="/workspace",
            mounts=[strict_schema.MountSpec(source="a", target="/b", mount_type="bind")],
        )

        assert strict_schema.encode(container) == {
            "dockerFile": "Dockerfile",
            "workspaceFolder": "/workspace",
            "mounts": [{"source": "a", "target": "/b", "type": "bind"}],
        }

    def test_union_variants_keep_shape(self, strict_schema):
        """Test that each command variant re-encodes to its own shape."""
        container = strict_schema.DevContainer(
            on_create_command=CommandString(value="npm install"),
            post_create_command=CommandArgs(args=["npm", "install"]),
            post_start_command=CommandMap(commands={"b": "y", "a": "x"}),
        )

        document = strict_schema.encode(container)
        assert document["onCreateCommand"] == "npm install"
        assert document["postCreateCommand"] == ["npm", "install"]
        assert document["postStartCommand"] == {"a": "x", "b": "y"}

    def test_ports(self, strict_schema):
        """Test encoding each port variant."""
        container = strict_schema.DevContainer(forward_ports=[
            PortNumber(port=3000),
            PortMapping(mapping="8080:80"),
            strict_schema.PortObject(port=9000, label="api"),
        ])

        assert strict_schema.encode(container) == {
            "forwardPorts": [3000, "8080:80", {"port": 9000, "label": "api"}]
        }

    def test_enum_value(self, strict_schema):
        """Test that enums are written as their document value."""
        container = strict_schema.DevContainer(shutdown_action=ShutdownAction.STOP_COMPOSE)
        assert strict_schema.encode(container) == {"shutdownAction": "stopCompose"}

    def test_additional_fields_last(self, lenient_schema):
        """Test that captured keys follow known ones, in encounter order."""
        container = lenient_schema.decode({
            "zeta": 1,
            "name": "n",
            "alpha": {"y": 1, "x": 2},
        })

        document = lenient_schema.encode(container)
        assert list(document) == ["name", "zeta", "alpha"]
        assert list(document["alpha"]) == ["y", "x"]

    def test_captured_key_shadowing_known_field(self, lenient_schema):
        """Test that a captured key never overrides a known field."""
        container = lenient_schema.DevContainer(
            name="real",
            additional_fields={"name": "shadow", "extra": True},
        )

        assert lenient_schema.encode(container) == {"name": "real", "extra": True}

    def test_encode_does_not_share_values(self, lenient_schema):
        """Test that changing an encoded tree leaves the entity untouched."""
        container = lenient_schema.decode({"extra": {"nested": [1]}, "features": {"f": {"a": [1]}}})

        document = lenient_schema.encode(container)
        document["extra"]["nested"].append(2)
        document["features"]["f"]["a"].append(2)

        assert container.additional_fields == {"extra": {"nested": [1]}}
        assert container.features == {"f": {"a": [1]}}


class TestRoundTrip:
    """Test decode/encode round trips."""

    def test_constructed_value_round_trip(self, full_schema):
        """Test decode(encode(x)) == x for a container built through the API."""
        schema = full_schema
        container = schema.DevContainer(
            name="Round Trip",
            image="ubuntu:22.04",
            build=schema.BuildConfig(
                dockerfile="Dockerfile",
                args={"VARIANT": "bullseye"},
                cache_from=["ghcr.io/example/cache"],
                additional_fields={"options": ["--pull"]},
            ),
            features={"ghcr.io/devcontainers/features/go:1": {"version": "1.22"}},
            forward_ports=[PortNumber(port=3000), PortMapping(mapping="db:5432"),
                           schema.PortObject(port=9000, protocol="https")],
            ports_attributes={"3000": schema.PortAttributes(label="App", elevate_if_needed=False)},
            other_ports_attributes=schema.PortAttributes(on_auto_forward="ignore"),
            container_env={"A": "1"},
            mounts=[MountString(spec="type=tmpfs,target=/tmp"), schema.MountSpec(target="/data")],
            run_args=["--cap-add=SYS_PTRACE"],
            init=True,
            shutdown_action=ShutdownAction.NONE,
            post_create_command=CommandMap(commands={"install": "npm ci"}),
            customizations=schema.Customizations(
                vscode=schema.VSCodeCustomizations(extensions=["rust-lang.rust-analyzer"]),
                unrecognized={"jetbrains": {"backend": "RustRover"}},
            ),
            extensions=["legacy.extension"],
            docker_compose_file=ComposeFileList(paths=["docker-compose.yml", "override.yml"]),
            service="app",
            run_services=["app", "db"],
            additional_fields={"hostRequirements": {"cpus": 2}},
        )

        assert schema.decode(schema.encode(container)) == container

    def test_default_value_round_trip(self, strict_schema):
        """Test the round trip of a default-constructed container."""
        container = strict_schema.DevContainer()
        assert strict_schema.decode(strict_schema.encode(container)) == container

    def test_modified_default_round_trip(self, strict_schema):
        """Test using a default container as a builder."""
        container = strict_schema.DevContainer()
        container.name = "Test Container"
        container.image = "ubuntu:latest"
        container.build = BuildPath(dockerfile="Dockerfile")

        parsed = strict_schema.loads(strict_schema.dumps(container))
        assert parsed == container
        assert parsed.name == "Test Container"

    @pytest.mark.parametrize("schema_fixture", ["strict_schema", "lenient_schema"])
    def test_document_round_trip(self, request, schema_fixture, sample_document):
        """Test that re-encoding is shape-equivalent and idempotent."""
        schema = request.getfixturevalue(schema_fixture)

        container = schema.decode(sample_document)
        document = schema.encode(container)

        assert document == sample_document
        assert schema.decode(document) == container
        assert schema.encode(schema.decode(document)) == document


class TestModelDump:
    """Test that encoding is pydantic serialization."""

    def test_encode_matches_model_dump(self, lenient_schema, sample_document):
        """Test encode against model_dump with document options."""
        container = lenient_schema.decode(dict(sample_document, extraKey=[1, 2]))

        assert lenient_schema.encode(container) == container.model_dump(
            mode="json", by_alias=True, exclude_none=True
        )

    def test_variant_dumps_as_payload(self):
        """Test that a variant serializes to its bare payload."""
        assert PortNumber(port=3000).model_dump() == 3000
        assert CommandArgs(args=["make", "test"]).model_dump() == ["make", "test"]

    def test_nested_capture_not_dumped_as_field(self, lenient_schema):
        """Test that nested capture maps never appear under their attribute name."""
        container = lenient_schema.decode({"build": {"dockerfile": "D", "options": ["--pull"]}})

        assert lenient_schema.encode(container) == {"build": {"dockerfile": "D", "options": ["--pull"]}}

    def test_attribute_names_without_aliases(self, strict_schema):
        """Test dumping with attribute names keeps the canonical ordering."""
        container = strict_schema.DevContainer(container_env={"B": "2", "A": "1"}, remote_user="dev")

        assert container.model_dump(exclude_none=True) == {
            "container_env": {"A": "1", "B": "2"},
            "remote_user": "dev",
        }
        assert list(container.model_dump(exclude_none=True)["container_env"]) == ["A", "B"]
