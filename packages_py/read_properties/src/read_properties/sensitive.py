"""
Masking of property values in debug and trace lines.

Outputs always carry the real value; only what the parser and resolver log
goes through here. A property counts as secret when a segment of its name
(split on ``.``, ``_``, ``-`` and camelCase) is a known credential word, so
``db.password`` and ``githubToken`` are masked while ``keystore.path`` is not.
"""
import os
import re
from typing import Dict, Iterable, List, Optional

MASK = "***"

SECRET_NAME_SEGMENTS = frozenset({
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "credential",
    "credentials",
    "passphrase",
    "private",
})

# Pairs of segments that only mean a secret together, e.g. api.key, access_key
SECRET_NAME_PAIRS = frozenset({
    ("api", "key"),
    ("access", "key"),
    ("secret", "key"),
    ("private", "key"),
    ("signing", "key"),
})

_SEGMENT_SPLIT = re.compile(r"[._\-\s/]+|(?<=[a-z0-9])(?=[A-Z])")


def name_segments(key: str) -> List[str]:
    """
    Lower-cased words of a property name.

    Example:
        >>> name_segments("signing.keyStorePassword")
        ['signing', 'key', 'store', 'password']
    """
    return [part.lower() for part in _SEGMENT_SPLIT.split(key) if part]


def is_secret_property(key: str) -> bool:
    segments = name_segments(key)
    if any(segment in SECRET_NAME_SEGMENTS for segment in segments):
        return True
    return any(pair in SECRET_NAME_PAIRS for pair in zip(segments, segments[1:]))


def _masking_enabled() -> bool:
    return os.getenv("READ_PROPERTIES_LOG_MASK", "").lower() != "false"


class PropertyMasker:
    """Masks the values of secret properties from one parsed file.

    Besides masking a value next to its own key, ``scrub`` removes those
    values wherever they show up in a free-form message, for example when a
    secret is reused as the default or inside another property.
    """

    def __init__(self, props: Optional[Dict[str, str]] = None, enabled: Optional[bool] = None):
        self.enabled = _masking_enabled() if enabled is None else enabled
        self._secrets: List[str] = []
        if props:
            self.register(props.items())

    def register(self, pairs: Iterable) -> None:
        for key, value in pairs:
            if value and is_secret_property(key) and value not in self._secrets:
                self._secrets.append(value)
        # Longest first so a secret containing another is replaced whole
        self._secrets.sort(key=len, reverse=True)

    def value(self, key: str, value: str) -> str:
        if not self.enabled or not value:
            return value
        if is_secret_property(key) or value in self._secrets:
            return MASK
        return self.scrub(value)

    def scrub(self, message: str) -> str:
        if not self.enabled:
            return message
        for secret in self._secrets:
            message = message.replace(secret, MASK)
        return message


def mask_value(key: str, value: str) -> str:
    """Mask one value by its property name alone."""
    return PropertyMasker(enabled=None).value(key, value)
