"""
Serializers for all mode: the generated env file, the JSON blob and the
bash associative array literal.
"""
import json
import os
import tempfile
import time
from typing import Optional

from .logger import get_logger
from .types import PropertySet

logger = get_logger()

ENV_FILE_SUFFIX = "_props.env"
BASH_ARRAY_NAME = "esbProps"


def render_env_file(props: PropertySet) -> str:
    """``KEY="VALUE"`` lines in insertion order; values are not escaped."""
    return "".join(f'{key}="{value}"\n' for key, value in props.items())


def render_json(props: PropertySet) -> str:
    return json.dumps(props, indent=2, ensure_ascii=False)


def _escape_quotes(value: str) -> str:
    return value.replace('"', '\\"')


def render_bash_array(props: PropertySet, name: str = BASH_ARRAY_NAME) -> str:
    """
    Render a ``declare -A`` literal with double quotes backslash-escaped.

    Example:
        >>> render_bash_array({"A": "1"})
        'declare -A esbProps=(["A"]="1" )'
    """
    entries = "".join(
        f'["{_escape_quotes(key)}"]="{_escape_quotes(value)}" ' for key, value in props.items()
    )
    return f"declare -A {name}=({entries})"


def default_env_dir() -> str:
    """Runner temp directory when available, else the system temp directory."""
    return os.getenv("RUNNER_TEMP") or tempfile.gettempdir()


def write_env_file(props: PropertySet, directory: Optional[str] = None) -> str:
    """Write the env file for ``props`` and return its path."""
    directory = directory or default_env_dir()
    prefix = f"{int(time.time() * 1000)}_"
    fd, path = tempfile.mkstemp(prefix=prefix, suffix=ENV_FILE_SUFFIX, dir=directory)
    with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
        handle.write(render_env_file(props))
    logger.debug(f"Wrote {len(props)} entries to {path}")
    return path
