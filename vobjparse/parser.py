"""A content-line parser with line unfolding."""

from __future__ import annotations

from collections.abc import Callable

from .component import Component
from .errors import (
    ExpectedBeginError,
    ExpectedEolError,
    MismatchedTagError,
    NoParameterNameError,
    NoPropertyNameError,
    ParseError,
    UnexpectedCharError,
    UnexpectedEolError,
)
from .property import Property


def _is_name_char(c: str) -> bool:
    return c == "-" or c.isalnum()


def _quote_safe(c: str) -> bool:
    return c not in '"\r\n\x7f' and c > "\x1f"


def _unquoted_safe(c: str) -> bool:
    return _quote_safe(c) and c not in ";:"


class Parser:
    """Reads components and properties from text, unfolding lines on the fly.

    Carriage returns are skipped, so CRLF reads as LF; a newline followed by a
    space or tab is a fold and disappears.
    """

    def __init__(self, input: str, pos: int = 0) -> None:
        self.input = input
        self.pos = pos

    def _peek_at(self, at: int) -> tuple[str, int] | None:
        """Next character at an offset from pos, and the offset past it."""
        while True:
            index = self.pos + at
            if index >= len(self.input):
                return None
            c = self.input[index]
            if c == "\r":
                at += 1
                continue
            if c == "\n":
                following = self._peek_at(at + 1)
                if following is not None and following[0] in " \t":
                    at = following[1]
                    continue
                return "\n", at + 1
            return c, at + 1

    def _peek(self) -> tuple[str, int] | None:
        return self._peek_at(0)

    def eof(self) -> bool:
        """Whether the whole input has been consumed."""
        return self.pos >= len(self.input)

    def _assert_char(self, c: str) -> None:
        peeked = self._peek()
        if peeked is None:
            raise UnexpectedEolError(c)
        if peeked[0] != c:
            raise UnexpectedCharError(c, peeked[0])

    def consume_char(self) -> str | None:
        """Consume and return the next unfolded character, or None at the end."""
        peeked = self._peek()
        if peeked is None:
            return None
        c, offset = peeked
        self.pos += offset
        return c

    def consume_only_char(self, c: str) -> bool:
        """Consume the next character only if it is ``c``."""
        peeked = self._peek()
        if peeked is not None and peeked[0] == c:
            self.pos += peeked[1]
            return True
        return False

    def _consume_eol(self) -> None:
        start_pos = self.pos
        c = self.consume_char()
        if c == "\n" or (c == "\r" and self.consume_char() == "\n"):
            return
        self.pos = start_pos
        raise ExpectedEolError()

    def _sloppy_terminate_line(self) -> None:
        if self.eof():
            return
        self._consume_eol()
        while True:
            try:
                self._consume_eol()
            except ExpectedEolError:
                break

    def consume_while(self, test: Callable[[str], bool]) -> str:
        """Consume unfolded characters while ``test`` holds and return them."""
        chars = []
        while not self.eof():
            peeked = self._peek()
            if peeked is None or not test(peeked[0]):
                break
            c, offset = peeked
            chars.append(c)
            self.pos += offset
        return "".join(chars)

    def consume_property(self) -> Property:
        """Consume one content line."""
        try:
            group: str | None = self._consume_property_group()
        except ParseError:
            group = None
        name = self._consume_property_name()
        params = self._consume_params()
        self._assert_char(":")
        self.consume_char()
        value = self._consume_property_value()
        return Property(name=name, params=params, raw_value=value, prop_group=group)

    def _consume_property_name(self) -> str:
        name = self.consume_while(_is_name_char)
        if not name:
            raise NoPropertyNameError()
        return name

    def _consume_property_group(self) -> str:
        start_pos = self.pos
        try:
            name = self._consume_property_name()
            self._assert_char(".")
        except ParseError:
            self.pos = start_pos
            raise
        self.consume_char()
        return name

    def _consume_property_value(self) -> str:
        value = self.consume_while(lambda c: c not in "\r\n")
        self._sloppy_terminate_line()
        return value

    def _consume_param_name(self) -> str:
        try:
            return self._consume_property_name()
        except NoPropertyNameError:
            raise NoParameterNameError() from None

    def _consume_param_value(self) -> str:
        if self.consume_only_char('"'):
            value = self.consume_while(_quote_safe)
            self._assert_char('"')
            self.consume_char()
            return value
        return self.consume_while(_unquoted_safe)

    def _consume_param(self) -> tuple[str, str]:
        name = self._consume_param_name()
        start_pos = self.pos
        if not self.consume_only_char("="):
            return name, ""
        try:
            return name, self._consume_param_value()
        except ParseError:
            self.pos = start_pos
            raise

    def _consume_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        while self.consume_only_char(";"):
            try:
                name, value = self._consume_param()
            except ParseError:
                break
            params[name] = value
        return params

    def consume_component(self) -> Component:
        """Consume a BEGIN/END delimited component with its subcomponents."""
        start_pos = self.pos
        prop = self.consume_property()
        if prop.name != "BEGIN":
            self.pos = start_pos
            raise ExpectedBeginError()

        component = Component(prop.raw_value)
        while True:
            previous_pos = self.pos
            prop = self.consume_property()
            if prop.name == "BEGIN":
                self.pos = previous_pos
                component.subcomponents.append(self.consume_component())
            elif prop.name == "END":
                if prop.raw_value != component.name:
                    self.pos = start_pos
                    raise MismatchedTagError(component.name, prop.raw_value)
                return component
            else:
                component.push(prop)