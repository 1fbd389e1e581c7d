"""
Line-oriented ``key=value`` parser.

Deliberately minimal: no escape sequences, no continuation lines, no ``:``
separator and no ``!`` comments. Lines without ``=`` are skipped.
"""
from .errors import InvalidInputError
from .logger import get_logger
from .sensitive import mask_value
from .types import PropertySet

logger = get_logger()

COMMENT_PREFIX = "#"
SEPARATOR = "="

# Code points JavaScript's String.prototype.trim removes. Narrower than
# str.strip() (U+001C-U+001F and U+0085 are kept) and it also drops U+FEFF.
TRIM_CHARS = "".join(chr(c) for c in (
    0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
    *range(0x2000, 0x200B),
    0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
))


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)


def parse_line(line: str):
    """Return ``(key, value)`` for a property line, or None for anything else."""
    trimmed = trim(line)
    if not trimmed or trimmed.startswith(COMMENT_PREFIX):
        return None

    index = trimmed.find(SEPARATOR)
    if index == -1:
        return None

    return trim(trimmed[:index]), trim(trimmed[index + 1:])


def parse_properties(text: str) -> PropertySet:
    """
    Parse properties text into an insertion-ordered mapping.

    Duplicate keys keep the last value. An empty value (``KEY=``) is kept
    as the empty string.

    Example:
        >>> parse_properties("# comment\\n\\nA=1\\nB=2\\n")
        {'A': '1', 'B': '2'}
    """
    props: PropertySet = {}
    for number, line in enumerate(text.split("\n"), start=1):
        pair = parse_line(line)
        if pair is None:
            continue
        key, value = pair
        if key in props:
            logger.trace(f"  line {number}: {key} overrides earlier value")
        props[key] = value
        logger.trace(f"  line {number}: {key} = {mask_value(key, value)}")
    return props


def read_properties_file(path: str) -> PropertySet:
    """Read and parse one properties file as UTF-8 text."""
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as handle:
            content = handle.read()
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"File {path} is not valid UTF-8 text: {e}")
    except OSError as e:
        raise InvalidInputError(f"File {path} could not be read: {e}")

    props = parse_properties(content)
    logger.debug(f"Parsed {len(props)} properties from {path}")
    return props
