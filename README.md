# vobjparse

A small library for reading, building and writing VObject data: vCard
contacts and iCalendar calendars.

It parses a text into a tree of `Component` objects holding `Property`
objects. Continued lines are unfolded on the way in, and long lines are
folded on the way out. On top of that, `Vcard` and `ICalendar` give named
access to the usual properties, and builders make new objects.

It needs only the standard library.

## Installing

```
pip install vobjparse
```

## Parsing any component

```python
from vobjparse.component import parse_component

item = parse_component(
    "BEGIN:VCARD\n"
    "FN:Erika Mustermann\n"
    "N:Mustermann;Erika\n"
    "END:VCARD\n"
)
item.name                                     # "VCARD"
item.get_only("FN").raw_value                 # "Erika Mustermann"
[p.raw_value for p in item.get_all("TEL")]    # []
```

The parser accepts lines ending in LF or CRLF. A line break followed by a
space or a tab is a fold and is removed. Blank lines between properties
are skipped. A content line may start with a group, as in
`foo.EMAIL:...`, and the group is kept in `Property.prop_group`. Parameter
values may be double-quoted, so `CN="Cott:n Eye Joe"` keeps its colon.

`Component` has these methods:

- `push(prop)` adds a property and keeps others of the same name.
- `set(prop)` replaces every property of that name.
- `get_only(name)` returns the property only if there is exactly one of it, and `None` otherwise.
- `get_all(name)` returns a list, which is empty if there are none.
- `pop(name)` removes the last property of that name and returns it.
- `remove(name)` removes all properties of that name and returns them.

`parse_component` rejects trailing data with `TrailingDataError`.
`read_component` returns the component together with the unread rest of
the input.

## Errors

All errors raised by the package derive from
`vobjparse.errors.VObjectError`. Parse failures are `ParseError`s:

- `TrailingDataError`
- `UnexpectedEolError`
- `UnexpectedCharError`
- `ExpectedEolError`
- `NoPropertyNameError`
- `NoParameterNameError`
- `ExpectedBeginError`
- `MismatchedTagError`, which has `begin` and `end` attributes

`NotAVCardError` and `NotAnICalendarError` are raised when a text parses
but holds a different kind of component.

## Writing

`write_component(component)` returns the text of a `Component` with CRLF
line endings:

- Properties are written grouped by name, in sorted name order.
- Parameters within a property are written in sorted key order, without quoting.
- Subcomponents follow the properties.

`fold_line(line)` folds a content line into pieces of at most 75 UTF-8
bytes. It never splits a character.

## Properties and escaping

```python
from vobjparse.property import Property, escape_chars, unescape_chars

prop = Property.from_value("NOTE", "one, two; three")
prop.raw_value            # "one\\, two\\; three"
prop.value_as_string()    # "one, two; three"
```

`Property` is a dataclass with four fields: `name`, `params` (a dict),
`raw_value` and `prop_group`.

## vCards

```python
from vobjparse.component import write_component
from vobjparse.vcard import Vcard

card = (
    Vcard.builder()
    .with_fullname("Erika Mustermann")
    .with_email("erika@example.com")
    .with_tel({"TYPE": "WORK"}, "tel:unknown")
    .with_name({}, "Mustermann", "Erika", None, None, None)
    .build()
)
text = write_component(card.component)

parsed = Vcard.build(text)
parsed.fullname()[0].raw           # "Erika Mustermann"
parsed.name().given_name()         # "Erika"
parsed.tel()[0].params             # {"TYPE": "WORK"}
```

`Vcard.build` raises `NotAVCardError` if the text holds some other
component.

Accessors for properties that may repeat, such as `email()`, `tel()`,
`adr()` and `org()`, return lists. Single-valued accessors, such as
`name()`, `bday()`, `uid()`, `rev()` and `version()`, return `None`
unless exactly one such property exists.

Each value has a `raw` string and a `params` dict. `Name` splits its
value at `;` into the parts of a structured name:

- `surname()`, and its alias `family_name()`
- `given_name()`
- `additional_names()`
- `honorific_prefixes()`
- `honorific_suffixes()`

A `Vcard` also exposes `component`, `props`, `subcomponents`, `get_only`
and `get_all`.

## iCalendar

```python
from vobjparse.icalendar import Event, ICalendar, Summary, Uid

builder = Event.build()
builder.set_uid(Uid.from_raw("event-1"))
builder.set_summary(Summary.from_raw("Meeting"))

cal = ICalendar.empty().with_event(builder)
for event in cal.events():
    if isinstance(event, Event):
        print(event.summary().raw)    # Meeting
```

`ICalendar.build` parses a text that must hold a `VCALENDAR`. It raises
`NotAnICalendarError` otherwise.

`events()` yields an `Event` for each `VEVENT` subcomponent and the bare
`Component` for anything else.

`EventBuilder` has two kinds of method:

- `set_*` methods replace earlier values of a property.
- `with_*` methods add a value and return the builder.

Both kinds take an optional dict of parameters.

`Dtstart`, `Dtend` and `Dtstamp` have `as_datetime()`:

- A value of the form `YYYYMMDDTHHMMSSZ` gives a naive `datetime`.
- A value of the form `YYYYMMDD` gives a `date`.
- Anything else raises `vobjparse.datatypes.TimeParseError`.

## What it does not do

- It has no command-line tool; it is a library only.
- Values are kept as raw strings. Quoted-printable and other encodings are not decoded.
- Recurrence rules are not expanded.
- Time zones and `TZID` parameters are ignored by `as_datetime()`.
- There is no validation of which properties a vCard or an event must have.