"""
Tests for the GitHub Actions, console and in-memory output sinks.
"""
import io
import re
import pytest
from rich.console import Console
from read_properties import ConsoleSink, GitHubActionsSink, MemorySink, OutputSink, InvalidInputError, default_sink
from read_properties.logger import get_log_level, set_log_level
from read_properties.output_sink import escape_data, format_command, format_file_command_entry


class TestCommandFormatting:
    def test_escape_data(self):
        assert escape_data("50%\r\nnext") == "50%25%0D%0Anext"

    def test_format_command_with_properties(self):
        assert format_command("set-output", "a:b,c", {"name": "x:y,z"}) == "::set-output name=x%3Ay%2Cz::a:b,c"

    def test_format_command_without_properties(self):
        assert format_command("warning", "careful\nnow") == "::warning::careful%0Anow"

    def test_file_command_entry(self):
        entry = format_file_command_entry("A", "line1\nline2", delimiter="EOF_X")
        assert entry == "A<<EOF_X\nline1\nline2\nEOF_X\n"

    def test_file_command_entry_rejects_delimiter_in_value(self):
        with pytest.raises(InvalidInputError):
            format_file_command_entry("A", "has EOF_X inside", delimiter="EOF_X")


class TestGitHubActionsSink:
    def test_writes_github_output_file(self, tmp_path):
        output_file = tmp_path / "github_output"
        output_file.write_text("", encoding="utf-8")
        sink = GitHubActionsSink(output_file=str(output_file), stream=io.StringIO())
        sink.set_output("version", "1.2.3")
        sink.set_output("value", "1.2.3")

        content = output_file.read_text(encoding="utf-8")
        entries = re.findall(r"^(\S+)<<(ghadelimiter_[0-9a-f-]+)\n(.*?)\n\2\n", content, re.M | re.S)
        assert [(name, value) for name, _, value in entries] == [("version", "1.2.3"), ("value", "1.2.3")]

    def test_env_var_output_file(self, tmp_path, monkeypatch):
        output_file = tmp_path / "github_output"
        output_file.write_text("", encoding="utf-8")
        monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
        GitHubActionsSink(stream=io.StringIO()).set_output("A", "1")
        assert output_file.read_text(encoding="utf-8").startswith("A<<ghadelimiter_")

    def test_missing_output_file(self, tmp_path):
        sink = GitHubActionsSink(output_file=str(tmp_path / "nope"), stream=io.StringIO())
        with pytest.raises(InvalidInputError):
            sink.set_output("A", "1")

    def test_legacy_set_output(self, monkeypatch):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        stream = io.StringIO()
        GitHubActionsSink(stream=stream).set_output("A", "1")
        assert stream.getvalue() == "\n::set-output name=A::1\n"

    def test_messages(self):
        stream = io.StringIO()
        sink = GitHubActionsSink(output_file="", stream=stream)
        sink.warn("multiple files")
        sink.error("boom")
        sink.debug("details")
        sink.info("done")
        assert stream.getvalue().splitlines() == [
            "::warning::multiple files",
            "::error::boom",
            "::debug::details",
            "done",
        ]


class TestMemorySink:
    def test_satisfies_protocol(self):
        assert isinstance(MemorySink(), OutputSink)
        assert isinstance(GitHubActionsSink(output_file=""), OutputSink)

    def test_records_in_order(self):
        sink = MemorySink()
        sink.set_output("A", "1")
        sink.set_output("A", "2")
        sink.info("hello")
        assert sink.outputs == {"A": "2"}
        assert sink.calls == [("A", "1"), ("A", "2")]
        assert sink.messages_at("info") == ["hello"]


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, highlight=False)


@pytest.fixture
def log_level():
    previous = get_log_level()
    yield set_log_level
    set_log_level(previous)


class TestConsoleSink:
    def test_satisfies_protocol(self):
        assert isinstance(ConsoleSink(), OutputSink)

    def test_outputs_on_stdout(self, console):
        stream = io.StringIO()
        sink = ConsoleSink(stream=stream, console=console)
        sink.set_output("version", "1.2.3")
        sink.set_output("value", "1.2.3")
        assert stream.getvalue() == "version=1.2.3\nvalue=1.2.3\n"
        assert console.file.getvalue() == ""

    def test_warn_and_error(self, console):
        sink = ConsoleSink(stream=io.StringIO(), console=console)
        sink.warn("Multiple properties files found")
        sink.error("Property [x] not found")
        assert console.file.getvalue().splitlines() == [
            "Warning: Multiple properties files found",
            "Error: Property [x] not found",
        ]

    def test_debug_follows_log_level(self, console, log_level):
        sink = ConsoleSink(stream=io.StringIO(), console=console)
        log_level("info")
        sink.debug("hidden")
        log_level("debug")
        sink.debug("shown")
        assert console.file.getvalue().splitlines() == ["shown"]


class TestDefaultSink:
    def test_runner_with_output_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        monkeypatch.setenv("GITHUB_OUTPUT", str(tmp_path / "out"))
        assert isinstance(default_sink(), GitHubActionsSink)

    def test_runner_flag(self, monkeypatch):
        monkeypatch.setenv("GITHUB_ACTIONS", "true")
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        assert isinstance(default_sink(), GitHubActionsSink)

    def test_local(self, monkeypatch):
        monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        assert isinstance(default_sink(), ConsoleSink)
