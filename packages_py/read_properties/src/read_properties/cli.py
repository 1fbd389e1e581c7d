#!/usr/bin/env python3
"""
Command-line entry point for the read-properties action.

Usage:
    read-properties --file 'gradle.properties' --property version
    read-properties --file '**/app.props' --all true
    INPUT_FILE=gradle.properties INPUT_PROPERTY=version read-properties
"""

import sys
from typing import Optional

import click

from .config import load_request
from .errors import ReadPropertiesError
from .logger import LOG_LEVELS, set_log_level
from .output_sink import OutputSink, default_sink
from .resolver import PropertyResolver


def run(
    file: Optional[str] = None,
    property_name: Optional[str] = None,
    export_all: Optional[bool] = None,
    default_value: Optional[str] = None,
    sink: Optional[OutputSink] = None,
) -> int:
    """Run one resolution and return the process exit status."""
    sink = sink or default_sink()
    try:
        request = load_request(file, property_name, export_all, default_value)
        PropertyResolver(sink).run(request)
    except ReadPropertiesError as e:
        sink.error(str(e))
        return 1
    return 0


@click.command(name="read-properties")
@click.version_option(version="0.1.0", prog_name="read-properties")
@click.option("--file", "file", default=None, help="Glob pattern for the properties file (env INPUT_FILE)")
@click.option("--property", "property_name", default=None, help="Property to export (env INPUT_PROPERTY)")
@click.option("--all", "export_all", type=click.BOOL, default=None, help="Export every property (env INPUT_ALL)")
@click.option("--default", "default_value", default=None, help="Fallback value (env INPUT_DEFAULT)")
@click.option("--log-level", type=click.Choice(list(LOG_LEVELS)), default=None, help="Console log level")
def cli(
    file: Optional[str],
    property_name: Optional[str],
    export_all: Optional[bool],
    default_value: Optional[str],
    log_level: Optional[str],
):
    """Read a .properties/.props file and expose its values as step outputs.

    Examples:

        read-properties --file gradle.properties --property version

        read-properties --file '**/app.properties' --all true
    """
    if log_level:
        set_log_level(log_level)  # type: ignore[arg-type]
    sys.exit(run(file, property_name, export_all, default_value))


def main():
    """Main entry point."""
    return cli()


if __name__ == "__main__":
    main()
