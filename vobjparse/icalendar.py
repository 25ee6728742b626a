"""Calendars and the events they hold."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from typing import TypeVar

from .component import Component, parse_component
from .datatypes import PropertyValue, parse_time
from .errors import NotAnICalendarError
from .property import Property

_V = TypeVar("_V", bound=PropertyValue)


class Version(PropertyValue):
    """The VERSION property."""


class Prodid(PropertyValue):
    """The PRODID property."""


class Dtend(PropertyValue):
    """The DTEND property."""

    def as_datetime(self) -> date:
        """Read the value as a date-time, or as a date if that fails."""
        return parse_time(self.raw)


class Dtstart(PropertyValue):
    """The DTSTART property."""

    def as_datetime(self) -> date:
        """Read the value as a date-time, or as a date if that fails."""
        return parse_time(self.raw)


class Dtstamp(PropertyValue):
    """The DTSTAMP property."""

    def as_datetime(self) -> date:
        """Read the value as a date-time, or as a date if that fails."""
        return parse_time(self.raw)


class Uid(PropertyValue):
    """The UID property."""


class Description(PropertyValue):
    """The DESCRIPTION property."""


class Summary(PropertyValue):
    """The SUMMARY property."""


class Url(PropertyValue):
    """The URL property."""


class Location(PropertyValue):
    """The LOCATION property."""


class Class(PropertyValue):
    """The CLASS property."""


class Categories(PropertyValue):
    """The CATEGORIES property."""


class Transp(PropertyValue):
    """The TRANSP property."""


class Rrule(PropertyValue):
    """The RRULE property."""


def _only(component: Component, prop_name: str, value_type: type[_V]) -> _V | None:
    prop = component.get_only(prop_name)
    return None if prop is None else value_type.from_property(prop)


class ICalendar:
    """A VCALENDAR component."""

    def __init__(self, component: Component) -> None:
        self.component = component

    def __repr__(self) -> str:
        return f"ICalendar({self.component!r})"

    @classmethod
    def build(cls, s: str) -> ICalendar:
        """Parse text that must hold exactly one VCALENDAR."""
        component = parse_component(s)
        try:
            return cls.from_component(component)
        except NotAnICalendarError:
            raise NotAnICalendarError(s) from None

    @classmethod
    def empty(cls) -> ICalendar:
        """A calendar with no properties and no events."""
        return cls(Component("VCALENDAR"))

    @classmethod
    def from_component(cls, component: Component) -> ICalendar:
        """Wrap a component, which must be a VCALENDAR."""
        if component.name != "VCALENDAR":
            raise NotAnICalendarError(component.name)
        return cls(component)

    def add_event(self, builder: EventBuilder) -> None:
        """Append the event that a builder holds."""
        self.component.subcomponents.append(builder.into_component())

    def with_event(self, builder: EventBuilder) -> ICalendar:
        """Append an event and return the calendar, for chaining."""
        self.add_event(builder)
        return self

    def events(self) -> Iterator[Event | Component]:
        """Yield an Event for each VEVENT, and other subcomponents unchanged."""
        for sub in self.component.subcomponents:
            yield Event(sub) if sub.name == "VEVENT" else sub

    def version(self) -> Version | None:
        """The VERSION property, if there is exactly one."""
        return _only(self.component, "VERSION", Version)

    def prodid(self) -> Prodid | None:
        """The PRODID property, if there is exactly one."""
        return _only(self.component, "PRODID", Prodid)


class Event:
    """A VEVENT component."""

    def __init__(self, component: Component) -> None:
        self.component = component

    def __repr__(self) -> str:
        return f"Event({self.component!r})"

    @classmethod
    def from_component(cls, component: Component) -> Event:
        """Wrap a component, which must be a VEVENT."""
        if component.name != "VEVENT":
            raise ValueError(f"not a VEVENT: {component.name}")
        return cls(component)

    @classmethod
    def build(cls) -> EventBuilder:
        """Start building a new event."""
        return EventBuilder(Component("VEVENT"))

    def dtend(self) -> Dtend | None:
        """The DTEND property, if there is exactly one."""
        return _only(self.component, "DTEND", Dtend)

    def dtstart(self) -> Dtstart | None:
        """The DTSTART property, if there is exactly one."""
        return _only(self.component, "DTSTART", Dtstart)

    def dtstamp(self) -> Dtstamp | None:
        """The DTSTAMP property, if there is exactly one."""
        return _only(self.component, "DTSTAMP", Dtstamp)

    def uid(self) -> Uid | None:
        """The UID property, if there is exactly one."""
        return _only(self.component, "UID", Uid)

    def description(self) -> Description | None:
        """The DESCRIPTION property, if there is exactly one."""
        return _only(self.component, "DESCRIPTION", Description)

    def summary(self) -> Summary | None:
        """The SUMMARY property, if there is exactly one."""
        return _only(self.component, "SUMMARY", Summary)

    def url(self) -> Url | None:
        """The URL property, if there is exactly one."""
        return _only(self.component, "URL", Url)

    def location(self) -> Location | None:
        """The LOCATION property, if there is exactly one."""
        return _only(self.component, "LOCATION", Location)

    def class_(self) -> Class | None:
        """The CLASS property, if there is exactly one."""
        return _only(self.component, "CLASS", Class)

    def categories(self) -> Categories | None:
        """The CATEGORIES property, if there is exactly one."""
        return _only(self.component, "CATEGORIES", Categories)

    def transp(self) -> Transp | None:
        """The TRANSP property, if there is exactly one."""
        return _only(self.component, "TRANSP", Transp)

    def rrule(self) -> Rrule | None:
        """The RRULE property, if there is exactly one."""
        return _only(self.component, "RRULE", Rrule)


def _make_property(
    prop_name: str, value: PropertyValue, params: dict[str, str] | None
) -> Property:
    return Property(
        name=prop_name,
        params=dict(params) if params else {},
        raw_value=value.into_raw(),
    )


class EventBuilder:
    """Collects the properties of a new event.

    ``set_*`` methods replace earlier values of a property; ``with_*``
    methods add a value and return the builder for chaining.
    """

    def __init__(self, component: Component) -> None:
        self._component = component

    def __repr__(self) -> str:
        return f"EventBuilder({self._component!r})"

    def into_component(self) -> Component:
        """The VEVENT component built so far."""
        return self._component

    def _set(self, prop_name: str, value: PropertyValue, params: dict[str, str] | None) -> None:
        self._component.set(_make_property(prop_name, value, params))

    def _with(
        self, prop_name: str, value: PropertyValue, params: dict[str, str] | None
    ) -> EventBuilder:
        self._component.push(_make_property(prop_name, value, params))
        return self

    def set_dtend(self, value: Dtend, params: dict[str, str] | None = None) -> None:
        """Set DTEND, dropping any earlier values."""
        self._set("DTEND", value, params)

    def set_dtstart(self, value: Dtstart, params: dict[str, str] | None = None) -> None:
        """Set DTSTART, dropping any earlier values."""
        self._set("DTSTART", value, params)

    def set_dtstamp(self, value: Dtstamp, params: dict[str, str] | None = None) -> None:
        """Set DTSTAMP, dropping any earlier values."""
        self._set("DTSTAMP", value, params)

    def set_uid(self, value: Uid, params: dict[str, str] | None = None) -> None:
        """Set UID, dropping any earlier values."""
        self._set("UID", value, params)

    def set_description(self, value: Description, params: dict[str, str] | None = None) -> None:
        """Set DESCRIPTION, dropping any earlier values."""
        self._set("DESCRIPTION", value, params)

    def set_summary(self, value: Summary, params: dict[str, str] | None = None) -> None:
        """Set SUMMARY, dropping any earlier values."""
        self._set("SUMMARY", value, params)

    def set_url(self, value: Url, params: dict[str, str] | None = None) -> None:
        """Set URL, dropping any earlier values."""
        self._set("URL", value, params)

    def set_location(self, value: Location, params: dict[str, str] | None = None) -> None:
        """Set LOCATION, dropping any earlier values."""
        self._set("LOCATION", value, params)

    def set_class(self, value: Class, params: dict[str, str] | None = None) -> None:
        """Set CLASS, dropping any earlier values."""
        self._set("CLASS", value, params)

    def set_categories(self, value: Categories, params: dict[str, str] | None = None) -> None:
        """Set CATEGORIES, dropping any earlier values."""
        self._set("CATEGORIES", value, params)

    def set_transp(self, value: Transp, params: dict[str, str] | None = None) -> None:
        """Set TRANSP, dropping any earlier values."""
        self._set("TRANSP", value, params)

    def set_rrule(self, value: Rrule, params: dict[str, str] | None = None) -> None:
        """Set RRULE, dropping any earlier values."""
        self._set("RRULE", value, params)

    def with_dtend(self, value: Dtend, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a DTEND value and return the builder."""
        return self._with("DTEND", value, params)

    def with_dtstart(self, value: Dtstart, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a DTSTART value and return the builder."""
        return self._with("DTSTART", value, params)

    def with_dtstamp(self, value: Dtstamp, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a DTSTAMP value and return the builder."""
        return self._with("DTSTAMP", value, params)

    def with_uid(self, value: Uid, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a UID value and return the builder."""
        return self._with("UID", value, params)

    def with_description(
        self, value: Description, params: dict[str, str] | None = None
    ) -> EventBuilder:
        """Add a DESCRIPTION value and return the builder."""
        return self._with("DESCRIPTION", value, params)

    def with_summary(self, value: Summary, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a SUMMARY value and return the builder."""
        return self._with("SUMMARY", value, params)

    def with_url(self, value: Url, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a URL value and return the builder."""
        return self._with("URL", value, params)

    def with_location(self, value: Location, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a LOCATION value and return the builder."""
        return self._with("LOCATION", value, params)

    def with_class(self, value: Class, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a CLASS value and return the builder."""
        return self._with("CLASS", value, params)

    def with_categories(
        self, value: Categories, params: dict[str, str] | None = None
    ) -> EventBuilder:
        """Add a CATEGORIES value and return the builder."""
        return self._with("CATEGORIES", value, params)

    def with_transp(self, value: Transp, params: dict[str, str] | None = None) -> EventBuilder:
        """Add a TRANSP value and return the builder."""
        return self._with("TRANSP", value, params)

    def with_rrule(self, value: Rrule, params: dict[str, str] | None = None) -> EventBuilder:
        """Add an RRULE value and return the builder."""
        return self._with("RRULE", value, params)