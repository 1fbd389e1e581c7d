"""
read_properties - Expose values from a .properties/.props file as pipeline outputs
"""
from .types import (
    PropertySet,
    ResolutionRequest,
    ResolutionResult,
    LEGACY_OUTPUT_KEY,
    ENV_PATH_OUTPUT_KEY,
    JSON_OUTPUT_KEY,
    BASH_ARRAY_OUTPUT_KEY,
)
from .errors import (
    ReadPropertiesError,
    PropertiesNotFoundError,
    PropertiesFileNotFoundError,
    PropertyNotFoundError,
    InvalidInputError,
)
from .discovery import DEFAULT_IGNORE_DIRS, find_properties_file
from .parser import parse_properties, read_properties_file
from .env_file import render_env_file, render_json, render_bash_array, write_env_file
from .output_sink import OutputSink, GitHubActionsSink, ConsoleSink, MemorySink, default_sink
from .resolver import PropertyResolver, resolve_properties
from .config import load_request, get_input
from .logger import ReadPropertiesLogger, get_logger, set_log_level, get_log_level
from .sensitive import PropertyMasker, is_secret_property, mask_value

__all__ = [
    # Types
    "PropertySet",
    "ResolutionRequest",
    "ResolutionResult",
    "LEGACY_OUTPUT_KEY",
    "ENV_PATH_OUTPUT_KEY",
    "JSON_OUTPUT_KEY",
    "BASH_ARRAY_OUTPUT_KEY",
    # Errors
    "ReadPropertiesError",
    "PropertiesNotFoundError",
    "PropertiesFileNotFoundError",
    "PropertyNotFoundError",
    "InvalidInputError",
    # Pipeline
    "DEFAULT_IGNORE_DIRS",
    "find_properties_file",
    "parse_properties",
    "read_properties_file",
    "render_env_file",
    "render_json",
    "render_bash_array",
    "write_env_file",
    "OutputSink",
    "GitHubActionsSink",
    "MemorySink",
    "ConsoleSink",
    "default_sink",
    "PropertyResolver",
    "resolve_properties",
    "load_request",
    "get_input",
    # Logging
    "ReadPropertiesLogger",
    "get_logger",
    "set_log_level",
    "get_log_level",
    "mask_value",
    "PropertyMasker",
    "is_secret_property",
]
