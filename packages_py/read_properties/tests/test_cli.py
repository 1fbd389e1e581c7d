"""
Tests for the read-properties command line.
"""
import re
import pytest
from click.testing import CliRunner
from read_properties import MemorySink
from read_properties.cli import cli, run


def read_outputs(path):
    content = path.read_text(encoding="utf-8")
    return {
        name: value
        for name, _, value in re.findall(r"^(\S+)<<(ghadelimiter_[0-9a-f-]+)\n(.*?)\n\2\n", content, re.M | re.S)
    }


@pytest.fixture
def action_env(tmp_path, monkeypatch):
    """Working tree, $GITHUB_OUTPUT and $RUNNER_TEMP as a runner would set them."""
    for var in ("INPUT_FILE", "INPUT_PROPERTY", "INPUT_ALL", "INPUT_DEFAULT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    output_file = tmp_path / "github_output"
    output_file.write_text("", encoding="utf-8")
    runner_temp = tmp_path / "runner_temp"
    runner_temp.mkdir()
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("RUNNER_TEMP", str(runner_temp))
    (tmp_path / "gradle.properties").write_text("# build\nversion=1.2.3\ngroup=org.example\n", encoding="utf-8")
    return output_file


class TestCli:
    def test_single_property(self, action_env):
        result = CliRunner().invoke(cli, ["--file", "gradle.properties", "--property", "version"])
        assert result.exit_code == 0
        assert read_outputs(action_env) == {"version": "1.2.3", "value": "1.2.3"}

    def test_inputs_from_environment(self, action_env, monkeypatch):
        monkeypatch.setenv("INPUT_FILE", "*.properties")
        monkeypatch.setenv("INPUT_PROPERTY", "missing")
        monkeypatch.setenv("INPUT_DEFAULT", "fallback")
        result = CliRunner().invoke(cli, [])
        assert result.exit_code == 0
        assert read_outputs(action_env) == {"missing": "fallback", "value": "fallback"}

    def test_all_mode(self, action_env):
        result = CliRunner().invoke(cli, ["--file", "gradle.properties", "--all", "true"])
        assert result.exit_code == 0
        outputs = read_outputs(action_env)
        assert outputs["version"] == "1.2.3"
        assert outputs["group"] == "org.example"
        with open(outputs["env_path"], encoding="utf-8") as handle:
            assert handle.read() == 'version="1.2.3"\ngroup="org.example"\n'

    def test_property_not_found_exits_1(self, action_env):
        result = CliRunner().invoke(cli, ["--file", "gradle.properties", "--property", "missing"])
        assert result.exit_code == 1
        assert "::error::Property missing not found in gradle.properties" in result.output
        assert result.output.count("Property missing not found in gradle.properties") == 1
        assert read_outputs(action_env) == {}

    def test_missing_file_input_exits_1(self, action_env):
        result = CliRunner().invoke(cli, ["--property", "version"])
        assert result.exit_code == 1
        assert "Input required and not supplied: file" in result.output

    def test_no_match_exits_1(self, action_env):
        result = CliRunner().invoke(cli, ["--file", "*.props", "--property", "version"])
        assert result.exit_code == 1
        assert "No properties files found with pattern *.props" in result.output

    def test_log_level_option(self, action_env):
        result = CliRunner().invoke(
            cli, ["--file", "gradle.properties", "--property", "version", "--log-level", "silent"]
        )
        assert result.exit_code == 0


class TestRun:
    def test_returns_status_and_reports_error(self, action_env):
        sink = MemorySink()
        assert run(file="gradle.properties", sink=sink) == 1
        assert sink.messages_at("error") == ["Property is not defined and 'all' is not true"]

    def test_success(self, action_env):
        sink = MemorySink()
        assert run(file="gradle.properties", property_name="group", sink=sink) == 0
        assert sink.outputs == {"group": "org.example", "value": "org.example"}


@pytest.fixture
def local_env(action_env, monkeypatch):
    """Same working tree, outside a runner."""
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    return action_env


class TestLocalRun:
    def test_outputs_printed(self, local_env):
        result = CliRunner().invoke(cli, ["--file", "gradle.properties", "--property", "version"])
        assert result.exit_code == 0
        assert "version=1.2.3" in result.output.splitlines()
        assert "value=1.2.3" in result.output.splitlines()
        assert read_outputs(local_env) == {}

    def test_error_reported_once(self, local_env):
        result = CliRunner().invoke(cli, ["--file", "gradle.properties", "--property", "missing"])
        assert result.exit_code == 1
        assert result.output.count("Property missing not found in gradle.properties") == 1
        assert "Error: Property missing not found in gradle.properties" in result.output
        assert "::error::" not in result.output
