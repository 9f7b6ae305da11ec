"""Tests for builder.py - buildx inspect parsing."""

from datetime import datetime, timezone

import pytest
from bxkit_common import CommandError

from bxkit_sdk.buildx import builder as builder_module
from bxkit_sdk.buildx.builder import (
    Builder,
    InspectKey,
    parse_datetime,
    parse_driver_opts,
    parse_inspect,
    parse_platforms,
)
from bxkit_sdk.buildx.buildx import Buildx
from bxkit_sdk.exec import ExecOutput


class TestInspectKey:
    """Tests for InspectKey lookup."""

    def test_lookup_is_case_insensitive(self):
        assert InspectKey.lookup("Name") is InspectKey.NAME
        assert InspectKey.lookup("LAST ACTIVITY") is InspectKey.LAST_ACTIVITY
        assert InspectKey.lookup("Driver Options") is InspectKey.DRIVER_OPTIONS

    def test_lookup_unknown_key(self):
        assert InspectKey.lookup("Labels") is None
        assert InspectKey.lookup("BuildKit daemon flags") is None


class TestParseInspect:
    """Tests for parse_inspect."""

    def test_builder_and_single_node(self):
        """First name is the builder, second one opens a node."""
        builder = parse_inspect("Name: a\nDriver: x\nName: b\nEndpoint: e\n")

        assert builder.name == "a"
        assert builder.driver == "x"
        assert len(builder.nodes) == 1
        assert builder.nodes[0].name == "b"
        assert builder.nodes[0].endpoint == "e"
        assert builder.nodes[0].status is None

    def test_default_docker_builder(self):
        """Output of the default docker driver builder."""
        data = (
            "Name:   default\n"
            "Driver: docker\n"
            "\n"
            "Nodes:\n"
            "Name:      default\n"
            "Endpoint:  default\n"
            "Status:    running\n"
            "Flags:     --debug --allow-insecure-entitlement security.insecure\n"
            "Buildkit:  v0.10.4\n"
            "Platforms: linux/amd64, linux/arm64, linux/riscv64, linux/arm/v7\n"
        )
        builder = parse_inspect(data)

        assert builder.name == "default"
        assert builder.driver == "docker"
        assert builder.last_activity is None
        assert len(builder.nodes) == 1
        node = builder.nodes[0]
        assert node.name == "default"
        assert node.endpoint == "default"
        assert node.status == "running"
        assert node.buildkitd_flags == "--debug --allow-insecure-entitlement security.insecure"
        assert node.buildkit_version == "v0.10.4"
        assert node.platforms == "linux/amd64,linux/arm64,linux/riscv64,linux/arm/v7"
        assert node.driver_opts is None

    def test_multi_node_fixture(self, fixtures_dir):
        """Nodes are kept in order and each closes on the next name line."""
        builder = parse_inspect((fixtures_dir / "inspect-multi-node.txt").read_text())

        assert builder.name == "builder2"
        assert builder.driver == "docker-container"
        assert builder.last_activity == datetime(2023, 1, 16, 9, 45, 23, tzinfo=timezone.utc)
        assert [n.name for n in builder.nodes] == ["builder20", "builder21"]

        first, second = builder.nodes
        assert first.endpoint == "unix:///var/run/docker.sock"
        assert first.driver_opts == [
            "env.BUILDKIT_STEP_LOG_MAX_SIZE=10485760",
            "image=moby/buildkit:buildx-stable-1",
            "network=host",
        ]
        assert first.status == "running"
        assert first.buildkit_version == "v0.11.0"
        assert first.platforms == "linux/amd64"

        assert second.endpoint == "tcp://10.0.0.2:1234"
        assert second.status == "inactive"
        # Empty value lines are skipped
        assert second.platforms is None

    def test_unknown_lines_are_skipped(self):
        data = (
            "Name: mybuilder\n"
            "Labels:\n"
            "  org.mobyproject.buildkit.worker.executor: oci\n"
            "garbage without colon\n"
            ": value without key\n"
            "Name: mybuilder0\n"
            "GC Policy rule#0: All: false\n"
            "Status: running\n"
        )
        builder = parse_inspect(data)

        assert builder.name == "mybuilder"
        assert len(builder.nodes) == 1
        assert builder.nodes[0].name == "mybuilder0"
        assert builder.nodes[0].status == "running"

    def test_builder_without_nodes(self):
        builder = parse_inspect("Name: lonely\nDriver: remote\n")

        assert builder.name == "lonely"
        assert builder.nodes == []

    def test_empty_input(self):
        builder = parse_inspect("")

        assert builder.name is None
        assert builder.driver is None
        assert builder.nodes == []

    def test_node_fields_before_second_name(self):
        """Node fields seen before any node name still form a node."""
        builder = parse_inspect("Name: b\nStatus: running\nName: b0\nStatus: stopped\n")

        assert [n.model_dump(exclude_none=True) for n in builder.nodes] == [
            {"status": "running"},
            {"name": "b0", "status": "stopped"},
        ]

    def test_unparseable_last_activity(self):
        builder = parse_inspect("Name: b\nLast Activity: yesterday afternoon\n")

        assert builder.name == "b"
        assert builder.last_activity is None

    def test_windows_line_endings(self):
        builder = parse_inspect("Name: b\r\nDriver: docker\r\nName: b0\r\nStatus: running\r\n")

        assert builder.driver == "docker"
        assert builder.nodes[0].status == "running"


class TestParsePlatforms:
    """Tests for parse_platforms."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("linux/amd64*, linux/arm64", "linux/amd64"),
            ("linux/amd64, linux/arm64", "linux/amd64,linux/arm64"),
            ("linux/amd64*, linux/arm64*, linux/386", "linux/amd64,linux/arm64"),
            ("linux/amd64", "linux/amd64"),
        ],
    )
    def test_platforms(self, value, expected):
        assert parse_platforms(value) == expected


class TestParseDriverOpts:
    """Tests for parse_driver_opts."""

    def test_extracts_quoted_values(self):
        assert parse_driver_opts('image="moby/buildkit:latest" network="host"') == [
            "image=moby/buildkit:latest",
            "network=host",
        ]

    def test_keeps_empty_values(self):
        assert parse_driver_opts('cgroup-parent=""') == ["cgroup-parent="]

    def test_no_options(self):
        assert parse_driver_opts("none") == []


class TestParseDatetime:
    """Tests for parse_datetime."""

    def test_go_format(self):
        assert parse_datetime("2023-01-16 09:45:23 +0000 UTC") == datetime(
            2023, 1, 16, 9, 45, 23, tzinfo=timezone.utc
        )

    def test_iso_format(self):
        assert parse_datetime("2023-01-16T09:45:23+00:00") == datetime(
            2023, 1, 16, 9, 45, 23, tzinfo=timezone.utc
        )

    def test_invalid(self):
        assert parse_datetime("not a date") is None


class TestBuilderInspect:
    """Tests for Builder.inspect."""

    def test_runs_buildx_inspect(self, monkeypatch):
        calls = []

        def fake_exec(command, args=None, ignore_return_code=False, silent=False):
            calls.append((command, args, ignore_return_code, silent))
            return ExecOutput(stdout="Name: mybuilder\nDriver: docker\n", stderr="", exit_code=0)

        monkeypatch.setattr(builder_module, "get_exec_output", fake_exec)

        info = Builder(Buildx(standalone=False)).inspect("mybuilder")

        assert calls == [("docker", ["buildx", "inspect", "mybuilder"], True, True)]
        assert info.name == "mybuilder"
        assert info.driver == "docker"

    def test_standalone_command(self, monkeypatch):
        calls = []

        def fake_exec(command, args=None, ignore_return_code=False, silent=False):
            calls.append((command, args))
            return ExecOutput(stdout="", stderr="", exit_code=0)

        monkeypatch.setattr(builder_module, "get_exec_output", fake_exec)

        Builder(Buildx(standalone=True)).inspect("mybuilder")

        assert calls == [("buildx", ["inspect", "mybuilder"])]

    def test_failure_raises_command_error(self, monkeypatch):
        def fake_exec(command, args=None, ignore_return_code=False, silent=False):
            return ExecOutput(stdout="", stderr="ERROR: no builder \"nope\" found\n", exit_code=1)

        monkeypatch.setattr(builder_module, "get_exec_output", fake_exec)

        with pytest.raises(CommandError) as exc_info:
            Builder(Buildx(standalone=False)).inspect("nope")

        assert exc_info.value.message == 'ERROR: no builder "nope" found'
        assert exc_info.value.exit_code == 1
