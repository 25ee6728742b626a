"""Exceptions raised while reading and interpreting vobject data."""


class VObjectError(Exception):
    """Base class of every error raised by this package."""


class ParseError(VObjectError):
    """The input text could not be parsed."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"failed to parse: {self.reason}"


class TrailingDataError(ParseError):
    """Data was left over after a complete component."""

    def __init__(self, data: str) -> None:
        super().__init__(f"trailing data: {data}")
        self.data = data


class UnexpectedEolError(ParseError):
    """The input ended where a specific character was required."""

    def __init__(self, expected: str) -> None:
        super().__init__(f"expected {expected}, found EOL")
        self.expected = expected


class UnexpectedCharError(ParseError):
    """A character other than the required one was found."""

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(f"expected {expected}, found {found}")
        self.expected = expected
        self.found = found


class ExpectedEolError(ParseError):
    """A line terminator was required."""

    def __init__(self) -> None:
        super().__init__("expected EOL")


class NoPropertyNameError(ParseError):
    """A content line does not start with a property name."""

    def __init__(self) -> None:
        super().__init__("no property name found")


class NoParameterNameError(ParseError):
    """A parameter separator was not followed by a parameter name."""

    def __init__(self) -> None:
        super().__init__("no parameter name found")


class ExpectedBeginError(ParseError):
    """A component did not start with a BEGIN line."""

    def __init__(self) -> None:
        super().__init__("expected BEGIN tag")


class MismatchedTagError(ParseError):
    """The END line of a component names a different component."""

    def __init__(self, begin: str, end: str) -> None:
        super().__init__(f"mismatched tags: BEGIN:{begin} vs END:{end}")
        self.begin = begin
        self.end = end


class NotAVCardError(VObjectError):
    """The parsed component is not a VCARD."""

    def __init__(self) -> None:
        super().__init__("Not a Vcard")


class NotAnICalendarError(VObjectError):
    """The parsed component is not a VCALENDAR."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Not a Icalendar: {text}")
        self.text = text