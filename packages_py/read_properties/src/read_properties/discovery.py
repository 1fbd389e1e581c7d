"""
Properties file discovery - expands a glob pattern to exactly one file.
"""
import glob
import os
import re
from pathlib import Path
from typing import Iterable, List, Optional, Set

from .errors import InvalidInputError, PropertiesFileNotFoundError
from .logger import get_logger
from .output_sink import OutputSink

logger = get_logger()

# Dependency and build caches that can hold stray .properties files
DEFAULT_IGNORE_DIRS: Set[str] = {
    "node_modules",
    ".gradle",
}

PROPERTIES_EXTENSIONS = (".properties", ".props")

BRACE_RANGE = re.compile(r"^(-?\d+)\.\.(-?\d+)$")


def is_ignored(path: str, ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS) -> bool:
    """Whether any directory component of ``path`` is in ``ignore_dirs``."""
    ignore = set(ignore_dirs)
    return any(part in ignore for part in Path(path).parts[:-1])


def has_properties_extension(path: str) -> bool:
    return path.lower().endswith(PROPERTIES_EXTENSIONS)


def _split_alternatives(body: str) -> List[str]:
    """Split a brace body on its top-level commas."""
    parts: List[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(current)
            current = ""
            continue
        current += ch
    parts.append(current)
    return parts


def _brace_options(body: str) -> Optional[List[str]]:
    """Alternatives for one ``{...}`` group, or None when it is literal text."""
    numeric = BRACE_RANGE.match(body)
    if numeric:
        start, end = int(numeric.group(1)), int(numeric.group(2))
        step = 1 if end >= start else -1
        return [str(n) for n in range(start, end + step, step)]
    parts = _split_alternatives(body)
    if len(parts) < 2:
        return None
    return parts


def expand_braces(pattern: str) -> List[str]:
    """
    Expand ``{a,b}`` alternatives and ``{1..3}`` ranges, nested groups included.

    A group without a comma or range, and an unmatched ``{``, stay literal.

    Example:
        >>> expand_braces("conf/{app,gradle}.{properties,props}")
        ['conf/app.properties', 'conf/app.props', 'conf/gradle.properties', 'conf/gradle.props']
    """
    depth = 0
    start = 0
    for index, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = index
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth:
                continue
            body = pattern[start + 1:index]
            prefix, suffix = pattern[:start], pattern[index + 1:]
            options = _brace_options(body)
            if options is None:
                return [
                    f"{prefix}{{{inner}}}{rest}"
                    for inner in expand_braces(body)
                    for rest in expand_braces(suffix)
                ]
            expanded: List[str] = []
            for option in options:
                for candidate in expand_braces(prefix + option + suffix):
                    if candidate not in expanded:
                        expanded.append(candidate)
            return expanded
    return [pattern]


def expand_pattern(pattern: str, ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS) -> List[str]:
    """
    Expand ``pattern`` against the working tree.

    Brace groups are expanded first, then each variant is globbed with ``**``
    matching across directories. Matches under an ignored directory are
    dropped and the rest are returned sorted so the first pick is stable.
    """
    variants = expand_braces(pattern)
    matches = {m for variant in variants for m in glob.glob(variant, recursive=True)}
    kept = sorted(m for m in matches if not is_ignored(m, ignore_dirs))
    logger.trace(f"  pattern: {pattern}")
    logger.trace(f"  variants: {variants}")
    logger.trace(f"  matched: {len(matches)}, kept: {len(kept)}")
    return kept


def find_properties_file(
    pattern: str,
    ignore_dirs: Iterable[str] = DEFAULT_IGNORE_DIRS,
    sink: Optional[OutputSink] = None,
) -> str:
    """
    Locate the single properties file a run reads.

    Args:
        pattern: Glob pattern, relative to the working directory or absolute
        ignore_dirs: Directory names whose contents never match
        sink: Receives the warning when more than one file matches

    Raises:
        PropertiesFileNotFoundError: nothing matched
        InvalidInputError: the match is empty, missing or has the wrong extension
    """
    logger.debug(f"Searching for file pattern: {pattern}")
    candidates = expand_pattern(pattern, ignore_dirs)

    if not candidates:
        raise PropertiesFileNotFoundError(pattern, sorted(ignore_dirs))

    if len(candidates) > 1:
        message = f"Multiple properties files found, using first one ({candidates[0]})."
        if sink is not None:
            sink.warn(message)
        else:
            logger.warn(message)
        logger.debug(f"  candidates: {candidates}")

    properties_file = candidates[0]
    if not properties_file:
        raise InvalidInputError("Resolved file path is empty")

    if not os.path.isfile(properties_file):
        raise InvalidInputError(f"File {properties_file} does not exist")

    if not has_properties_extension(properties_file):
        raise InvalidInputError(f"File {properties_file} is not a valid .properties or .props file")

    logger.debug(f"Using properties file: {properties_file}")
    return properties_file
