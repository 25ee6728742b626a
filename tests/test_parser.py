import pytest

from vobjparse.errors import (
    ExpectedBeginError,
    MismatchedTagError,
    UnexpectedEolError,
)
from vobjparse.parser import Parser


def test_unfold1():
    p = Parser("ab\r\n c", pos=2)
    assert p.consume_char() == "c"
    assert p.pos == 6


def test_unfold2():
    p = Parser("ab\n\tc\nx", pos=2)
    assert p.consume_char() == "c"
    assert p.consume_char() == "\n"
    assert p.consume_char() == "x"


def test_consume_while():
    p = Parser("af\n oo:bar", pos=1)
    assert p.consume_while(lambda x: x != ":") == "foo"
    assert p.consume_char() == ":"
    assert p.consume_while(lambda x: x != "\n") == "bar"


def test_consume_while2():
    p = Parser("af\n oo\n\t:bar", pos=1)
    assert p.consume_while(lambda x: x != ":") == "foo"
    assert p.consume_char() == ":"
    assert p.consume_while(lambda x: x != "\n") == "bar"


def test_consume_while3():
    p = Parser("af\n oo:\n bar", pos=1)
    assert p.consume_while(lambda x: x != ":") == "foo"
    assert p.consume_char() == ":"
    assert p.consume_while(lambda x: x != "\n") == "bar"


def test_consume_only_char():
    p = Parser('\n "bar')
    assert p.consume_only_char('"')
    assert p.pos == 3
    assert not p.consume_only_char('"')
    assert p.pos == 3
    assert p.consume_only_char("b")
    assert p.pos == 4


def test_mismatched_begin_end_tags_returns_error():
    p = Parser("BEGIN:a\nBEGIN:b\nEND:a")
    with pytest.raises(MismatchedTagError) as info:
        p.consume_component()
    assert info.value.begin == "b"
    assert info.value.end == "a"


def test_consume_char_at_end_returns_none():
    p = Parser("a")
    assert p.consume_char() == "a"
    assert p.eof()
    assert p.consume_char() is None


def test_consume_property_with_group_and_params():
    p = Parser('grp.EMAIL;TYPE=INTERNET;CN="A: B":x@example.com\n')
    prop = p.consume_property()
    assert prop.prop_group == "grp"
    assert prop.name == "EMAIL"
    assert prop.params == {"TYPE": "INTERNET", "CN": "A: B"}
    assert prop.raw_value == "x@example.com"
    assert p.eof()


def test_consume_property_param_without_value():
    prop = Parser("TEL;WORK;VOICE:1\n").consume_property()
    assert prop.params == {"WORK": "", "VOICE": ""}
    assert prop.raw_value == "1"


def test_consume_property_missing_colon():
    with pytest.raises(UnexpectedEolError):
        Parser("NAME").consume_property()


def test_consume_component_requires_begin():
    p = Parser("END:x\n")
    with pytest.raises(ExpectedBeginError):
        p.consume_component()
    assert p.pos == 0


def test_consume_component_nested():
    p = Parser("BEGIN:A\nX:1\nBEGIN:B\nY:2\nEND:B\nEND:A\n")
    component = p.consume_component()
    assert component.name == "A"
    assert component.get_only("X").raw_value == "1"
    assert [sub.name for sub in component.subcomponents] == ["B"]
    assert component.subcomponents[0].get_only("Y").raw_value == "2"
    assert p.eof()