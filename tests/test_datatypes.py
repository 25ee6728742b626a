from datetime import date, datetime

import pytest

from vobjparse.datatypes import PropertyValue, TimeParseError, parse_time
from vobjparse.errors import VObjectError
from vobjparse.property import Property


class _Other(PropertyValue):
    pass


def test_from_raw_has_no_params():
    value = PropertyValue.from_raw("2.0")
    assert value.raw == "2.0"
    assert value.params == {}


def test_into_raw_returns_raw():
    assert PropertyValue("abc", {"X": "y"}).into_raw() == "abc"


def test_from_property_copies_value_and_params():
    prop = Property(name="DTSTART", params={"VALUE": "DATE"}, raw_value="20160325")
    value = PropertyValue.from_property(prop)
    assert value.raw == prop.raw_value
    assert value.params == prop.params
    prop.params["OTHER"] = "1"
    assert "OTHER" not in value.params


def test_from_property_keeps_subclass():
    prop = Property(name="X", raw_value="v")
    value = _Other.from_property(prop)
    assert isinstance(value, _Other)
    assert value == _Other("v")


def test_equality_depends_on_type_and_params():
    assert PropertyValue("a") == PropertyValue.from_raw("a")
    assert not (PropertyValue("a") == _Other("a"))
    assert not (PropertyValue("a", {"K": "v"}) == PropertyValue("a"))


def test_parse_time_datetime():
    assert parse_time("20060910T220000Z") == datetime(2006, 9, 10, 22, 0, 0)


def test_parse_time_date():
    result = parse_time("20160325")
    assert result == date(2016, 3, 25)
    assert not isinstance(result, datetime)


@pytest.mark.parametrize("raw", ["", "not a date", "20160325T", "2016-03-25"])
def test_parse_time_invalid(raw):
    with pytest.raises(TimeParseError) as info:
        parse_time(raw)
    assert info.value.raw == raw


def test_time_parse_error_is_vobject_error():
    with pytest.raises(VObjectError):
        parse_time("garbage")