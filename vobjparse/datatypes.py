"""Typed wrappers around raw property values."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from .errors import VObjectError
from .property import Property

DATE_TIME_FORMAT = "%Y%m%dT%H%M%SZ"
DATE_FORMAT = "%Y%m%d"


class TimeParseError(VObjectError, ValueError):
    """A value could not be read as a date or a date-time."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"failed to parse time: {raw!r}")
        self.raw = raw


@dataclass
class PropertyValue:
    """A raw property value together with its parameters."""

    raw: str
    params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: str) -> PropertyValue:
        """Wrap a raw value that has no parameters."""
        return cls(raw)

    @classmethod
    def from_property(cls, prop: Property) -> PropertyValue:
        """Take the raw value and parameters of a property."""
        return cls(prop.raw_value, dict(prop.params))

    def into_raw(self) -> str:
        """Return the raw value."""
        return self.raw


def parse_time(raw: str) -> date:
    """Read a UTC date-time (``YYYYMMDDTHHMMSSZ``) or, failing that, a date.

    A date-time comes back as a naive :class:`datetime.datetime`, a bare
    date as a :class:`datetime.date`.
    """
    try:
        return datetime.strptime(raw, DATE_TIME_FORMAT)
    except ValueError:
        pass
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        raise TimeParseError(raw) from None