"""Content-line properties and value escaping."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

# Replacement pairs are applied in sequence; each pair sees the result of
# the ones before it, so the sequence is significant.
_ESCAPE_STEPS: tuple[tuple[str, str], ...] = (
    ("\\N", "\n"),
    ("\\", "\\\\"),
    (";", "\\;"),
    (",", "\\,"),
    ("\r\n", "\\n"),
    ("\n", "\\n"),
)

_UNESCAPE_STEPS: tuple[tuple[str, str], ...] = (
    ("\\N", "\\n"),
    ("\r\n", "\n"),
    ("\\n", "\n"),
    ("\\,", ","),
    ("\\;", ";"),
    ("\\\\", "\\"),
)


def _rewrite(text: str, steps: Iterable[tuple[str, str]]) -> str:
    for old, new in steps:
        text = text.replace(old, new)
    return text


def escape_chars(s: str) -> str:
    """Escape text for use as a property value."""
    return _rewrite(s, _ESCAPE_STEPS)


def unescape_chars(s: str) -> str:
    """Undo the escaping of a property value."""
    return _rewrite(s, _UNESCAPE_STEPS)


@dataclass
class Property:
    """One content line: name, parameters, raw value and optional group."""

    name: str
    params: dict[str, str] = field(default_factory=dict)
    raw_value: str = ""
    prop_group: str | None = None

    @classmethod
    def from_value(cls, name: str, value: str) -> Property:
        """Create a property from an unescaped value."""
        return cls(name=name, raw_value=escape_chars(value))

    def value_as_string(self) -> str:
        """Return the value with escapes removed."""
        return unescape_chars(self.raw_value)