import pytest

from vobjparse.component import Component, write_component
from vobjparse.errors import MismatchedTagError, NotAVCardError
from vobjparse.vcard import Name, Tel, Title, Vcard, VcardBuilder

BASIC = (
    "BEGIN:VCARD\n"
    "VERSION:2.1\n"
    "N:Mustermann;Erika\n"
    "FN:Erika Mustermann\n"
    "ORG:Wikipedia\n"
    "TITLE:Oberleutnant\n"
    "PHOTO;JPEG:http://example.com/photo.jpg\n"
    "TEL;WORK;VOICE:work-phone\n\n\n"
    "TEL;HOME;VOICE:home-phone\n"
    "ADR;HOME:;;Heidestrasse 17;Koeln;;51147;Deutschland\n"
    "EMAIL;PREF;INTERNET:erika@example.com\n"
    "REV:20140301T221110Z\n"
    "END:VCARD\n\r\n\n"
)


def test_vcard_basic():
    item = Vcard.build(BASIC)
    assert item.adr()[0].raw == ";;Heidestrasse 17;Koeln;;51147;Deutschland"
    assert item.fullname()[0].raw == "Erika Mustermann"
    assert item.name().plain() == "Mustermann;Erika"
    assert item.name().surname() == "Mustermann"
    assert item.name().given_name() == "Erika"
    assert item.org()[0].raw == "Wikipedia"
    assert item.title()[0].raw == "Oberleutnant"


def test_vcard_basic_other_getters():
    item = Vcard.build(BASIC)
    assert [t.raw for t in item.tel()] == ["work-phone", "home-phone"]
    assert item.tel()[0] == Tel("work-phone", {"WORK": "", "VOICE": ""})
    assert item.version().raw == "2.1"
    assert item.rev().raw == "20140301T221110Z"
    assert item.email()[0].params == {"PREF": "", "INTERNET": ""}
    assert item.uid() is None
    assert item.url() == []


def test_vcard_delegates_to_component():
    item = Vcard.build(BASIC)
    assert item.name_prop if False else item.component.name == "VCARD"
    assert item.get_only("FN").raw_value == "Erika Mustermann"
    assert len(item.get_all("TEL")) == 2
    assert item.subcomponents == []


def test_vcard_builder():
    build = (
        Vcard.builder()
        .with_name({}, None, "Mustermann", None, "Erika", None)
        .with_fullname("Erika Mustermann")
        .with_org(["Wikipedia"])
        .with_title("Oberleutnant")
        .with_tel({"TYPE": "WORK"}, "work-phone")
        .with_tel({"TYPE": "HOME"}, "home-phone")
        .with_adr(
            {"TYPE": "HOME"},
            None,
            None,
            "Heidestrasse 17",
            "Koeln",
            None,
            "51147",
            "Deutschland",
        )
        .with_email("erika@example.com")
        .with_rev("20140301T221110Z")
        .build()
    )

    expected = (
        "BEGIN:VCARD\r\n"
        "ADR;TYPE=HOME:;;Heidestrasse 17;Koeln;;51147;Deutschland\r\n"
        "EMAIL:erika@example.com\r\n"
        "FN:Erika Mustermann\r\n"
        "N:;Mustermann;;Erika;\r\n"
        "ORG:Wikipedia\r\n"
        "REV:20140301T221110Z\r\n"
        "TEL;TYPE=WORK:work-phone\r\n"
        "TEL;TYPE=HOME:home-phone\r\n"
        "TITLE:Oberleutnant\r\n"
        "END:VCARD\r\n"
    )
    assert write_component(build.component) == expected


def test_builder_round_trip():
    card = (
        VcardBuilder()
        .with_categories(["work", "friends"])
        .with_role("Chief")
        .with_note("hello")
        .with_version("4.0")
        .build()
    )
    parsed = Vcard.build(write_component(card.component))
    assert parsed.categories()[0].raw == "work;friends"
    assert parsed.role() == [Title("Chief")]
    assert parsed.note()[0].raw == "hello"
    assert parsed.version().raw == "4.0"


def test_builder_proid_writes_prodid():
    card = Vcard.builder().with_proid("-//Example//EN").build()
    assert card.get_only("PRODID").raw_value == "-//Example//EN"


def test_optional_getter_needs_exactly_one():
    card = Vcard.builder().with_uid("a").with_uid("b").build()
    assert card.uid() is None
    assert [p.raw_value for p in card.get_all("UID")] == ["a", "b"]


def test_build_rejects_calendar():
    with pytest.raises(NotAVCardError):
        Vcard.build("BEGIN:VCALENDAR\nEND:VCALENDAR\n")


def test_build_propagates_parse_error():
    with pytest.raises(MismatchedTagError):
        Vcard.build("BEGIN:VCARD\nEND:VEVENT\n")


def test_name_parts():
    name = Name("Doe;John;Q;Dr.;Jr.")
    assert name.surname() == "Doe"
    assert name.family_name() == "Doe"
    assert name.given_name() == "John"
    assert name.additional_names() == "Q"
    assert name.honorific_prefixes() == "Dr."
    assert name.honorific_suffixes() == "Jr."


def test_name_missing_parts():
    name = Name("Doe")
    assert name.surname() == "Doe"
    assert name.given_name() is None
    assert name.honorific_suffixes() is None
    assert Name("").surname() == ""