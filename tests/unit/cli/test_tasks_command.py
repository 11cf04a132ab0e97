"""Tests for the `flowctl tasks` command.

The control plane is replaced by an httpx.MockTransport so the command runs
end to end: HTTP client, decoding, summary, printer and stdout sink.
"""

import json
from unittest.mock import MagicMock, Mock

import httpx
import pytest

from flowctl.cli.app import app
from flowctl.cli.client import SyncCLIClient
from flowctl.cli.commands import tasks_cmd
from flowctl.cli.commands.tasks_cmd import resolve_output_format, show_attempt_tasks
from flowctl.cli.printers import OutputFormat
from flowctl.cli.sink import LineSink
from flowctl.cli.state import CLIState
from flowctl.cli.time_format import format_time
from flowctl.models import decode_summary, decode_tasks, encode_tasks
from flowctl.version import __version__, get_version


class FakeControlPlane:
    """Serves `/attempts/{id}/tasks` from canned responses and records requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"tasks": []})

    def serve_tasks(self, tasks) -> None:
        self.response = httpx.Response(
            200, json={"tasks": json.loads(encode_tasks(tasks))}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    def client_factory(self, base_url=None) -> SyncCLIClient:
        return SyncCLIClient(
            base_url=base_url or "http://ctl.test/api",
            max_retries=0,
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def control_plane(monkeypatch, sample_tasks) -> FakeControlPlane:
    fake = FakeControlPlane()
    fake.serve_tasks(sample_tasks)
    monkeypatch.setattr(tasks_cmd, "SyncCLIClient", fake.client_factory)
    return fake


class TestTasksListing:
    """Tests for listing an attempt's tasks."""

    def test_text_listing(self, runner, control_plane, time_stamps) -> None:
        ts0, ts1, ts2 = time_stamps

        result = runner.invoke(app, ["tasks", "42"])

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert len(lines) == 25
        assert lines[:5] == [
            "   id: 42",
            "   name: +test",
            "   state: success",
            "   started: ",
            "   updated: " + format_time(ts2),
        ]
        assert lines[15] == "   started: " + format_time(ts0)
        assert lines[16] == "   updated: " + format_time(ts1)
        assert lines[18] == "   parent: 42"
        assert lines[-1] == "2 entries."

    def test_requests_the_attempt_tasks_resource(self, runner, control_plane) -> None:
        result = runner.invoke(app, ["tasks", "42"])

        assert result.exit_code == 0, result.output
        assert len(control_plane.requests) == 1
        request = control_plane.requests[0]
        assert request.method == "GET"
        assert str(request.url) == "http://ctl.test/api/attempts/42/tasks"

    def test_url_flag_overrides_base_url(self, runner, control_plane) -> None:
        result = runner.invoke(
            app, ["--url", "http://other.test:65432/api/", "tasks", "7"]
        )

        assert result.exit_code == 0, result.output
        assert (
            str(control_plane.requests[0].url)
            == "http://other.test:65432/api/attempts/7/tasks"
        )

    def test_json_format_option(self, runner, control_plane, sample_tasks) -> None:
        result = runner.invoke(app, ["tasks", "42", "--format", "json"])

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines == [encode_tasks(sample_tasks)]
        assert decode_tasks(lines[0]) == sample_tasks

    def test_global_json_flag(self, runner, control_plane, sample_tasks) -> None:
        result = runner.invoke(app, ["--json", "tasks", "42"])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [encode_tasks(sample_tasks)]

    def test_default_format_from_settings(
        self, runner, control_plane, monkeypatch
    ) -> None:
        monkeypatch.setenv("FLOWCTL_DISPLAY_DEFAULT_FORMAT", "json")

        result = runner.invoke(app, ["tasks", "42"])

        assert result.exit_code == 0, result.output
        assert len(result.stdout.splitlines()) == 1

    def test_empty_attempt(self, runner, control_plane) -> None:
        control_plane.serve_tasks([])

        text = runner.invoke(app, ["tasks", "42"])
        as_json = runner.invoke(app, ["tasks", "42", "--format", "json"])

        assert text.stdout.splitlines() == ["0 entries."]
        assert as_json.stdout.splitlines() == ["[]"]

    def test_invalid_format_is_a_usage_error(self, runner, control_plane) -> None:
        result = runner.invoke(app, ["tasks", "42", "--format", "yaml"])

        assert result.exit_code == 2
        assert control_plane.requests == []


class TestTasksSummary:
    """Tests for `--summary`."""

    def test_text_summary(self, runner, control_plane) -> None:
        result = runner.invoke(app, ["tasks", "42", "--summary"])

        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "   total tasks: 2",
            "   total invoked tasks: 1",
            "   total success tasks: 1",
            "   exec duration of group tasks (ms):",
            "       average: 1000",
            "       stddev: 0",
        ]

    def test_json_summary(self, runner, control_plane) -> None:
        result = runner.invoke(app, ["--json", "tasks", "42", "--summary"])

        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert len(lines) == 1
        payload = json.loads(lines[0])
        assert payload["startDelayMillis"] is None
        assert payload["execDurationOfNonGroupTasksMillis"] is None
        summary = decode_summary(lines[0])
        assert summary.total_tasks == 2
        assert summary.exec_duration_of_group_tasks_millis.mean == 1000.0


class TestTasksErrors:
    """Tests for failures surfaced as exit code 1."""

    def test_api_error(self, runner, control_plane) -> None:
        control_plane.response = httpx.Response(
            404, json={"message": "attempt 99 not found"}
        )

        result = runner.invoke(app, ["tasks", "99"])

        assert result.exit_code == 1
        assert "attempt 99 not found" in result.output

    def test_api_error_in_json_mode(self, runner, control_plane) -> None:
        control_plane.response = httpx.Response(
            404, json={"message": "attempt 99 not found"}
        )

        result = runner.invoke(app, ["--json", "tasks", "99"])

        assert result.exit_code == 1
        output = json.loads(result.stdout.strip())
        assert output["status"] == "error"
        assert output["status_code"] == 404

    def test_malformed_task_records(self, runner, control_plane) -> None:
        control_plane.response = httpx.Response(
            200,
            json={"tasks": [{"id": "1", "fullName": "+a", "state": "success", "isGroup": False}]},
        )

        result = runner.invoke(app, ["tasks", "1"])

        assert result.exit_code == 1
        assert "Malformed task records" in result.output
        assert "entries." not in result.output

    def test_response_without_tasks_list(self, runner, control_plane) -> None:
        control_plane.response = httpx.Response(200, json={"attempts": []})

        result = runner.invoke(app, ["tasks", "1"])

        assert result.exit_code == 1
        assert "missing 'tasks' list" in result.output


class TestShowAttemptTasks:
    """Tests for the command's driver function."""

    def _client_factory(self, tasks):
        client = MagicMock()
        client.__enter__.return_value = client
        client.get.return_value = {"tasks": json.loads(encode_tasks(tasks))}
        return Mock(return_value=client), client

    def test_prints_through_the_sink(self, sample_tasks) -> None:
        sink = Mock(spec=LineSink)
        factory, client = self._client_factory(sample_tasks)

        show_attempt_tasks(
            CLIState(api_url="http://ctl.test/api"),
            "42",
            OutputFormat.TEXT,
            summary=False,
            sink=sink,
            client_factory=factory,
        )

        factory.assert_called_once_with(base_url="http://ctl.test/api")
        client.get.assert_called_once_with("/attempts/42/tasks")
        assert sink.write_line.call_count == 25
        client.__exit__.assert_called_once()

    def test_summary_in_json_is_one_line(self, sample_tasks) -> None:
        sink = Mock(spec=LineSink)
        factory, _ = self._client_factory(sample_tasks)

        show_attempt_tasks(
            CLIState(), "42", OutputFormat.JSON, summary=True, sink=sink, client_factory=factory
        )

        assert sink.write_line.call_count == 1


class TestResolveOutputFormat:
    """Tests for resolve_output_format."""

    def test_json_mode_wins(self) -> None:
        state = CLIState(json_mode=True)
        assert resolve_output_format(OutputFormat.TEXT, state) is OutputFormat.JSON

    def test_explicit_format(self) -> None:
        assert resolve_output_format(OutputFormat.JSON, CLIState()) is OutputFormat.JSON

    def test_settings_default(self) -> None:
        assert resolve_output_format(None, CLIState()) is OutputFormat.TEXT


class TestApp:
    """Tests for global flags."""

    def test_version(self, runner) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.strip() == f"flowctl {get_version()}"
        assert get_version() == __version__

    def test_help_lists_tasks_command(self, runner) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "tasks" in result.output

    def test_verbose_enables_debug_mode(self, runner, control_plane) -> None:
        from flowctl.logging import is_debug_mode

        result = runner.invoke(app, ["--verbose", "tasks", "42"])

        assert result.exit_code == 0, result.output
        assert is_debug_mode() is True

    def test_command_module_is_importable_by_name(self) -> None:
        import importlib
        import types

        module = importlib.import_module("flowctl.cli.commands.tasks_cmd")

        assert isinstance(module, types.ModuleType)
        assert module is tasks_cmd
        assert module.SyncCLIClient is SyncCLIClient
