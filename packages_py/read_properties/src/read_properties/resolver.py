"""
Resolution pipeline: discovery -> read -> parse -> emit.
"""
from typing import Iterable, Optional

from .discovery import DEFAULT_IGNORE_DIRS, find_properties_file
from .env_file import render_bash_array, render_json, write_env_file
from .errors import InvalidInputError, PropertyNotFoundError
from .logger import get_logger
from .output_sink import OutputSink
from .parser import read_properties_file
from .sensitive import PropertyMasker
from .types import (
    BASH_ARRAY_OUTPUT_KEY,
    ENV_PATH_OUTPUT_KEY,
    JSON_OUTPUT_KEY,
    LEGACY_OUTPUT_KEY,
    PropertySet,
    ResolutionRequest,
    ResolutionResult,
)

logger = get_logger()


class PropertyResolver:
    """Runs one resolution against an injected output sink.

    Args:
        sink: Where outputs and diagnostics go
        ignore_dirs: Directory names excluded from discovery
        env_dir: Directory for the generated env file (all mode)
    """

    def __init__(
        self,
        sink: OutputSink,
        ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS,
        env_dir: Optional[str] = None,
    ):
        self.sink = sink
        self.ignore_dirs = set(ignore_dirs)
        self.env_dir = env_dir
        self.masker = PropertyMasker()

    def run(self, request: ResolutionRequest) -> ResolutionResult:
        source_file = find_properties_file(request.file, self.ignore_dirs, self.sink)
        self.sink.debug(f"Using properties file {source_file}")
        props = read_properties_file(source_file)
        self.masker = PropertyMasker(props)

        if request.export_all:
            return self.export_all(props, source_file)
        return self.export_single(props, source_file, request.property_name, request.default_value)

    def export_all(self, props: PropertySet, source_file: str) -> ResolutionResult:
        """Emit every property, then the env file path, JSON and bash array."""
        self.sink.debug("Got all=true, exporting all properties as outputs")

        for key, value in props.items():
            self.sink.set_output(key, value)
            self.sink.debug(f"Set output {key}={self.masker.value(key, value)}")

        env_path = write_env_file(props, self.env_dir)
        self.sink.set_output(ENV_PATH_OUTPUT_KEY, env_path)
        self.sink.set_output(JSON_OUTPUT_KEY, render_json(props))
        self.sink.set_output(BASH_ARRAY_OUTPUT_KEY, render_bash_array(props))

        self.sink.info(f"Wrote environment file: {env_path}")
        self.sink.info(f"Exported {len(props)} properties successfully")
        return ResolutionResult(
            mode="all",
            source_file=source_file,
            properties=props,
            env_path=env_path,
        )

    def export_single(
        self,
        props: PropertySet,
        source_file: str,
        property_name: Optional[str],
        default_value: Optional[str] = None,
    ) -> ResolutionResult:
        """
        Emit one property under its own name and under the legacy ``value`` key.

        Empty values count as missing, so ``KEY=`` falls through to the default.
        """
        if not property_name:
            raise InvalidInputError("Property is not defined and 'all' is not true")

        value = props.get(property_name)
        used_default = False
        if not value:
            if not default_value:
                raise PropertyNotFoundError(property_name, source_file)
            logger.debug(f"Property {property_name} missing or empty, using default")
            value = default_value
            used_default = True

        self._set_single_value(property_name, value)
        if used_default:
            self.sink.info(f"Used default value for {property_name}")
        else:
            self.sink.info(f"Successfully set property {property_name} as output")

        return ResolutionResult(
            mode="single",
            source_file=source_file,
            key=property_name,
            value=value,
            used_default=used_default,
        )

    def _set_single_value(self, key: str, value: str) -> None:
        self.sink.debug(f"Setting output {key} to {self.masker.value(key, value)}")
        self.sink.set_output(key, value)
        self.sink.set_output(LEGACY_OUTPUT_KEY, value)
        self.sink.debug(f"Setting legacy output {LEGACY_OUTPUT_KEY} to {self.masker.value(key, value)}")


def resolve_properties(request: ResolutionRequest, sink: OutputSink, **kwargs) -> ResolutionResult:
    """Convenience wrapper: ``PropertyResolver(sink, **kwargs).run(request)``."""
    return PropertyResolver(sink, **kwargs).run(request)
