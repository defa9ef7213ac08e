"""Tests for output formatting."""

import io
import json
from datetime import UTC, datetime

from rich.console import Console

from graviton.output import OutputContext, entry_to_dict
from tests.conftest import make_entry

T0 = datetime(2026, 10, 19, 8, 0, tzinfo=UTC)


def _plain_context(json_mode: bool = False) -> tuple[OutputContext, io.StringIO]:
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=200)
    return OutputContext(console=console, json_mode=json_mode), output


class TestOutputContextPrint:
    """Tests for OutputContext.print method."""

    def test_print_in_normal_mode(self) -> None:
        ctx, output = _plain_context()
        ctx.print("Hello world")
        assert "Hello world" in output.getvalue()

    def test_print_suppressed_in_json_mode(self) -> None:
        ctx, output = _plain_context(json_mode=True)
        ctx.print("Hello world")
        assert output.getvalue() == ""


class TestOutputContextResult:
    """Tests for OutputContext.result method."""

    def test_result_prints_json_in_json_mode(self, capsys) -> None:
        ctx, _ = _plain_context(json_mode=True)
        ctx.result({"status": "ok"}, "Success message")
        data = json.loads(capsys.readouterr().out)
        assert data["status"] == "ok"

    def test_result_prints_message_in_normal_mode(self) -> None:
        ctx, output = _plain_context()
        ctx.result({"status": "ok"}, "Success message")
        assert "Success message" in output.getvalue()
        assert "status" not in output.getvalue()


class TestOutputContextError:
    """Tests for OutputContext.error method."""

    def test_error_prints_json_with_data(self, capsys) -> None:
        ctx, _ = _plain_context(json_mode=True)
        ctx.error("Something failed", {"package": "g:a"})
        data = json.loads(capsys.readouterr().out)
        assert data == {"error": "Something failed", "package": "g:a"}

    def test_error_prints_json_without_data(self, capsys) -> None:
        ctx, _ = _plain_context(json_mode=True)
        ctx.error("Something failed")
        assert json.loads(capsys.readouterr().out) == {"error": "Something failed"}

    def test_error_prints_message_in_normal_mode(self) -> None:
        ctx, output = _plain_context()
        ctx.error("Something failed")
        assert "Error: Something failed" in output.getvalue()


class TestOutputContextEntries:
    """Tests for OutputContext.entries method."""

    def test_table_lists_entries_in_order(self) -> None:
        ctx, output = _plain_context()
        ctx.entries(
            [
                make_entry("g:b", "g:b:2.0", last_run_time=T0),
                make_entry("g:a", "g:a:1.0", last_run_time=T0),
            ]
        )
        text = output.getvalue()
        assert "g:b:jar:2.0" in text
        assert "2026-10-19 08:00:00" in text
        assert text.index("g:b:jar:2.0") < text.index("g:a:jar:1.0")

    def test_empty_history_message(self) -> None:
        ctx, output = _plain_context()
        ctx.entries([])
        assert "No history entries" in output.getvalue()

    def test_json_mode_prints_on_disk_keys(self, capsys) -> None:
        ctx, output = _plain_context(json_mode=True)
        entry = make_entry("g:a", "g:a:1.0", "/a.jar", T0)
        ctx.entries([entry])
        assert json.loads(capsys.readouterr().out) == [entry_to_dict(entry)]
        assert output.getvalue() == ""

    def test_entry_to_dict(self) -> None:
        entry = make_entry("g:a", "g:a:1.0", "/a.jar", T0)
        assert entry_to_dict(entry) == {
            "user input": "g:a",
            "last run time": "2026-10-19T08:00:00Z",
            "resolved artifact": "g:a:jar:1.0",
            "classpath": "/a.jar",
        }
