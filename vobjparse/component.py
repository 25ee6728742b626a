"""Components: named groups of properties and subcomponents."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import TrailingDataError
from .property import Property

_FOLD_LIMIT = 75


@dataclass
class Component:
    """A component such as VCARD or VEVENT."""

    name: str
    props: dict[str, list[Property]] = field(default_factory=dict)
    subcomponents: list[Component] = field(default_factory=list)

    def push(self, prop: Property) -> None:
        """Append a property, keeping others of the same name."""
        self.props.setdefault(prop.name, []).append(prop)

    def set(self, prop: Property) -> None:
        """Set a property, replacing others of the same name."""
        self.props[prop.name] = [prop]

    def get_only(self, name: str) -> Property | None:
        """Return the property by name if there is exactly one of it."""
        values = self.props.get(name)
        if values is not None and len(values) == 1:
            return values[0]
        return None

    def get_all(self, name: str) -> list[Property]:
        """Return all properties of the given name, possibly none."""
        return list(self.props.get(name, ()))

    def pop(self, name: str) -> Property | None:
        """Remove and return the last property of the given name."""
        values = self.props.get(name)
        if not values:
            return None
        return values.pop()

    def remove(self, name: str) -> list[Property] | None:
        """Remove and return all properties of the given name."""
        return self.props.pop(name, None)


def read_component(s: str) -> tuple[Component, str]:
    """Parse one component and return it with the unread rest of the text."""
    from .parser import Parser

    parser = Parser(s)
    component = parser.consume_component()
    rest = "" if parser.eof() else s[parser.pos:]
    return component, rest


def parse_component(s: str) -> Component:
    """Parse exactly one component; trailing data is an error."""
    component, rest = read_component(s)
    if rest:
        raise TrailingDataError(rest)
    return component


def _write_lines(component: Component):
    yield f"BEGIN:{component.name}"
    for prop_name, props in sorted(component.props.items()):
        for prop in props:
            group = f"{prop.prop_group}." if prop.prop_group is not None else ""
            params = "".join(f";{key}={value}" for key, value in sorted(prop.params.items()))
            yield f"{group}{prop_name}{params}:{fold_line(prop.raw_value)}"
    for sub in component.subcomponents:
        yield from _write_lines(sub)
    yield f"END:{component.name}"


def write_component(component: Component) -> str:
    """Serialise a component with CRLF line endings."""
    return "".join(line + "\r\n" for line in _write_lines(component))


def fold_line(line: str) -> str:
    """Fold an unfolded content line into pieces of at most 75 UTF-8 bytes."""
    data = line.encode("utf-8")
    pieces = []
    pos = 0
    while len(data) - pos > _FOLD_LIMIT:
        cut = pos + _FOLD_LIMIT
        while data[cut] & 0xC0 == 0x80:
            cut -= 1
        pieces.append(data[pos:cut].decode("utf-8"))
        pos = cut
    pieces.append(data[pos:].decode("utf-8"))
    return "\r\n ".join(pieces)