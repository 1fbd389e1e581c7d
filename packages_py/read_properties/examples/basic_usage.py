"""
Basic usage examples for read_properties package.

Resolves values from a .properties file without a real Actions runner by
collecting outputs in a MemorySink.
"""
import tempfile
from pathlib import Path

from read_properties import MemorySink, PropertyResolver, ResolutionRequest, PropertyNotFoundError


# =============================================================================
# Example 1: One property, with a fallback default
# =============================================================================
def example1_single_property(workdir: Path) -> None:
    sink = MemorySink()
    resolver = PropertyResolver(sink)

    resolver.run(ResolutionRequest(file=str(workdir / "*.properties"), property_name="version"))
    print(f"Example 1 - version: {sink.outputs}")
    # Output: {'version': '1.2.3', 'value': '1.2.3'}

    resolver.run(ResolutionRequest(
        file=str(workdir / "*.properties"),
        property_name="channel",
        default_value="stable",
    ))
    print(f"Example 1 - channel (default): {sink.outputs['channel']}")


# =============================================================================
# Example 2: Every property plus the generated env file
# =============================================================================
def example2_all_properties(workdir: Path) -> None:
    sink = MemorySink()
    result = PropertyResolver(sink, env_dir=str(workdir)).run(
        ResolutionRequest(file=str(workdir / "*.properties"), export_all=True)
    )
    print(f"Example 2 - properties: {result.properties}")
    print(f"Example 2 - env file: {Path(result.env_path).read_text()}")
    print(f"Example 2 - bash array: {sink.outputs['bash_array']}")


# =============================================================================
# Example 3: Missing property without a default
# =============================================================================
def example3_not_found(workdir: Path) -> None:
    try:
        PropertyResolver(MemorySink()).run(
            ResolutionRequest(file=str(workdir / "*.properties"), property_name="missing")
        )
    except PropertyNotFoundError as e:
        print(f"Example 3 - error: {e}")


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        workdir = Path(tmp)
        (workdir / "gradle.properties").write_text(
            "# Build settings\nversion=1.2.3\ngroup=org.example\nchannel=\n",
            encoding="utf-8",
        )
        example1_single_property(workdir)
        example2_all_properties(workdir)
        example3_not_found(workdir)
