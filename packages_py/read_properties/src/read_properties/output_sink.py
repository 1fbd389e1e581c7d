"""
Output sinks.

The resolver never talks to the runner directly; it writes through an
``OutputSink``. ``GitHubActionsSink`` speaks the GitHub Actions workflow
command and file command protocols, ``ConsoleSink`` prints for local runs and
``MemorySink`` keeps everything in memory.
"""
import os
import sys
import uuid
from typing import Dict, List, Optional, Protocol, TextIO, Tuple, runtime_checkable

from rich.console import Console
from rich.markup import escape

from .errors import InvalidInputError
from .logger import LOG_LEVELS, get_log_level, get_logger


logger = get_logger()


@runtime_checkable
class OutputSink(Protocol):
    def set_output(self, key: str, value: str) -> None: ...
    def warn(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


def escape_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(command: str, message: str, properties: Optional[Dict[str, str]] = None) -> str:
    """
    Build a ``::command key=value::message`` line.

    Example:
        >>> format_command("set-output", "1", {"name": "A"})
        '::set-output name=A::1'
    """
    line = f"::{command}"
    if properties:
        line += " " + ",".join(f"{k}={escape_property(v)}" for k, v in properties.items() if v)
    return f"{line}::{escape_data(message)}"


def format_file_command_entry(key: str, value: str, delimiter: Optional[str] = None) -> str:
    """Render one ``key<<delimiter`` heredoc entry for the $GITHUB_OUTPUT file."""
    delimiter = delimiter or f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in key:
        raise InvalidInputError(f"Unexpected input: name should not contain the delimiter \"{delimiter}\"")
    if delimiter in value:
        raise InvalidInputError(f"Unexpected input: value should not contain the delimiter \"{delimiter}\"")
    return f"{key}<<{delimiter}\n{value}\n{delimiter}\n"


class GitHubActionsSink:
    """Sink backed by the Actions runner.

    Outputs are appended to the file named by ``GITHUB_OUTPUT``; older runners
    without it get the legacy ``set-output`` command on stdout.
    """

    def __init__(self, output_file: Optional[str] = None, stream: Optional[TextIO] = None):
        self.output_file = output_file if output_file is not None else os.getenv("GITHUB_OUTPUT", "")
        self.stream = stream or sys.stdout

    def _issue(self, command: str, message: str, properties: Optional[Dict[str, str]] = None) -> None:
        print(format_command(command, message, properties), file=self.stream)

    def set_output(self, key: str, value: str) -> None:
        if self.output_file:
            if not os.path.exists(self.output_file):
                raise InvalidInputError(f"Missing file at path: {self.output_file}")
            with open(self.output_file, "a", encoding="utf-8") as handle:
                handle.write(format_file_command_entry(key, value))
            return
        print("", file=self.stream)
        self._issue("set-output", value, {"name": key})

    def warn(self, message: str) -> None:
        self._issue("warning", message)

    def error(self, message: str) -> None:
        self._issue("error", message)

    def info(self, message: str) -> None:
        print(message, file=self.stream)

    def debug(self, message: str) -> None:
        self._issue("debug", message)


class MemorySink:
    """Sink that records outputs and messages, in emission order."""

    def __init__(self):
        self.outputs: Dict[str, str] = {}
        self.calls: List[Tuple[str, str]] = []
        self.messages: List[Tuple[str, str]] = []

    def set_output(self, key: str, value: str) -> None:
        logger.trace(f"OUTPUT: {key}")
        self.outputs[key] = value
        self.calls.append((key, value))

    def warn(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def messages_at(self, level: str) -> List[str]:
        return [msg for lvl, msg in self.messages if lvl == level]


class ConsoleSink:
    """Sink for runs outside a runner.

    Outputs go to stdout as ``key=value`` lines; diagnostics go to stderr
    through rich. Debug lines follow the package log level.
    """

    def __init__(self, stream: Optional[TextIO] = None, console: Optional[Console] = None):
        self.stream = stream or sys.stdout
        self.console = console or Console(stderr=True, highlight=False)

    def set_output(self, key: str, value: str) -> None:
        print(f"{key}={value}", file=self.stream)

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def info(self, message: str) -> None:
        self.console.print(escape(message))

    def debug(self, message: str) -> None:
        if LOG_LEVELS[get_log_level()] >= LOG_LEVELS["debug"]:
            self.console.print(f"[dim]{escape(message)}[/dim]")


def default_sink() -> OutputSink:
    """The Actions sink on a runner, the console sink anywhere else."""
    if os.getenv("GITHUB_ACTIONS") == "true" or os.getenv("GITHUB_OUTPUT"):
        return GitHubActionsSink()
    return ConsoleSink()
