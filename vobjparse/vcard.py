"""Contact cards and a builder for them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from .component import Component, parse_component
from .datatypes import PropertyValue
from .errors import NotAVCardError
from .property import Property

_V = TypeVar("_V", bound=PropertyValue)


class Adr(PropertyValue):
    """The ADR property."""


class Anniversary(PropertyValue):
    """The ANNIVERSARY property."""


class BDay(PropertyValue):
    """The BDAY property."""


class Category(PropertyValue):
    """One CATEGORIES property."""


class ClientPidMap(PropertyValue):
    """The CLIENTPIDMAP property."""


class Email(PropertyValue):
    """The EMAIL property."""


class FullName(PropertyValue):
    """The FN property."""


class Gender(PropertyValue):
    """The GENDER property."""


class Geo(PropertyValue):
    """The GEO property."""


class IMPP(PropertyValue):
    """The IMPP property."""


class Key(PropertyValue):
    """The KEY property."""


class Lang(PropertyValue):
    """The LANG property."""


class Logo(PropertyValue):
    """The LOGO property."""


class Member(PropertyValue):
    """The MEMBER property."""


class Name(PropertyValue):
    """The N property, a ``;``-separated list of name parts."""

    def _part(self, index: int) -> str | None:
        parts = self.raw.split(";")
        return parts[index] if index < len(parts) else None

    def plain(self) -> str:
        """The raw value, unsplit."""
        return self.raw

    def surname(self) -> str | None:
        """The first part."""
        return self._part(0)

    def given_name(self) -> str | None:
        """The second part."""
        return self._part(1)

    def additional_names(self) -> str | None:
        """The third part."""
        return self._part(2)

    def honorific_prefixes(self) -> str | None:
        """The fourth part."""
        return self._part(3)

    def honorific_suffixes(self) -> str | None:
        """The fifth part."""
        return self._part(4)

    def family_name(self) -> str | None:
        """Same as :meth:`surname`."""
        return self.surname()


class NickName(PropertyValue):
    """The NICKNAME property."""


class Note(PropertyValue):
    """The NOTE property."""


class Organization(PropertyValue):
    """The ORG property."""


class PhoneNumber(PropertyValue):
    """A phone number value."""


class Photo(PropertyValue):
    """The PHOTO property."""


class Proid(PropertyValue):
    """The product identifier property."""


class Related(PropertyValue):
    """The RELATED property."""


class Rev(PropertyValue):
    """The REV property."""


class Sound(PropertyValue):
    """The SOUND property."""


class Tel(PropertyValue):
    """The TEL property."""


class Title(PropertyValue):
    """The TITLE (or ROLE) property."""


class Tz(PropertyValue):
    """The TZ property."""


class Uid(PropertyValue):
    """The UID property."""


class Url(PropertyValue):
    """The URL property."""


class Version(PropertyValue):
    """The VERSION property."""


class Vcard:
    """A VCARD component with typed accessors for its properties.

    Single-valued accessors return ``None`` unless exactly one property of
    that name exists; multi-valued ones return every property in order.
    """

    def __init__(self, component: Component | None = None) -> None:
        self.component = component if component is not None else Component("VCARD")

    def __repr__(self) -> str:
        return f"Vcard({self.component!r})"

    @property
    def props(self) -> dict[str, list[Property]]:
        """The properties of the card by name."""
        return self.component.props

    @property
    def subcomponents(self) -> list[Component]:
        """The subcomponents of the card."""
        return self.component.subcomponents

    def get_only(self, name: str) -> Property | None:
        """The property by name if there is exactly one of it."""
        return self.component.get_only(name)

    def get_all(self, name: str) -> list[Property]:
        """All properties of the given name."""
        return self.component.get_all(name)

    @classmethod
    def build(cls, s: str) -> Vcard:
        """Parse text that must hold exactly one VCARD."""
        return cls.from_component(parse_component(s))

    @classmethod
    def builder(cls) -> VcardBuilder:
        """Start building a new card."""
        return VcardBuilder()

    @classmethod
    def from_component(cls, component: Component) -> Vcard:
        """Wrap a component, which must be a VCARD."""
        if component.name != "VCARD":
            raise NotAVCardError()
        return cls(component)

    def _one(self, prop_name: str, value_type: type[_V]) -> _V | None:
        prop = self.component.get_only(prop_name)
        return None if prop is None else value_type.from_property(prop)

    def _many(self, prop_name: str, value_type: type[_V]) -> list[_V]:
        return [value_type.from_property(p) for p in self.component.get_all(prop_name)]

    def adr(self) -> list[Adr]:
        """Every ADR property."""
        return self._many("ADR", Adr)

    def anniversary(self) -> Anniversary | None:
        """The ANNIVERSARY property."""
        return self._one("ANNIVERSARY", Anniversary)

    def bday(self) -> BDay | None:
        """The BDAY property."""
        return self._one("BDAY", BDay)

    def categories(self) -> list[Category]:
        """Every CATEGORIES property."""
        return self._many("CATEGORIES", Category)

    def clientpidmap(self) -> ClientPidMap | None:
        """The CLIENTPIDMAP property."""
        return self._one("CLIENTPIDMAP", ClientPidMap)

    def email(self) -> list[Email]:
        """Every EMAIL property."""
        return self._many("EMAIL", Email)

    def fullname(self) -> list[FullName]:
        """Every FN property."""
        return self._many("FN", FullName)

    def gender(self) -> Gender | None:
        """The GENDER property."""
        return self._one("GENDER", Gender)

    def geo(self) -> list[Geo]:
        """Every GEO property."""
        return self._many("GEO", Geo)

    def impp(self) -> list[IMPP]:
        """Every IMPP property."""
        return self._many("IMPP", IMPP)

    def key(self) -> list[Key]:
        """Every KEY property."""
        return self._many("KEY", Key)

    def lang(self) -> list[Lang]:
        """Every LANG property."""
        return self._many("LANG", Lang)

    def logo(self) -> list[Logo]:
        """Every LOGO property."""
        return self._many("LOGO", Logo)

    def member(self) -> list[Member]:
        """Every MEMBER property."""
        return self._many("MEMBER", Member)

    def name(self) -> Name | None:
        """The N property."""
        return self._one("N", Name)

    def nickname(self) -> list[NickName]:
        """Every NICKNAME property."""
        return self._many("NICKNAME", NickName)

    def note(self) -> list[Note]:
        """Every NOTE property."""
        return self._many("NOTE", Note)

    def org(self) -> list[Organization]:
        """Every ORG property."""
        return self._many("ORG", Organization)

    def photo(self) -> list[Photo]:
        """Every PHOTO property."""
        return self._many("PHOTO", Photo)

    def proid(self) -> Proid | None:
        """The PRIOD property."""
        return self._one("PRIOD", Proid)

    def related(self) -> list[Related]:
        """Every RELATED property."""
        return self._many("RELATED", Related)

    def rev(self) -> Rev | None:
        """The REV property."""
        return self._one("REV", Rev)

    def role(self) -> list[Title]:
        """Every ROLE property."""
        return self._many("ROLE", Title)

    def sound(self) -> list[Sound]:
        """Every SOUND property."""
        return self._many("SOUND", Sound)

    def tel(self) -> list[Tel]:
        """Every TEL property."""
        return self._many("TEL", Tel)

    def title(self) -> list[Title]:
        """Every TITLE property."""
        return self._many("TITLE", Title)

    def tz(self) -> list[Tz]:
        """Every TZ property."""
        return self._many("TZ", Tz)

    def uid(self) -> Uid | None:
        """The UID property."""
        return self._one("UID", Uid)

    def url(self) -> list[Url]:
        """Every URL property."""
        return self._many("URL", Url)

    def version(self) -> Version | None:
        """The VERSION property."""
        return self._one("VERSION", Version)


class VcardBuilder:
    """Collects the properties of a new card."""

    def __init__(self) -> None:
        self._properties: dict[str, list[Property]] = {}

    def _add(
        self,
        prop_name: str,
        parts: Iterable[str | None],
        params: dict[str, str] | None = None,
    ) -> VcardBuilder:
        raw_value = ";".join(part if part is not None else "" for part in parts)
        prop = Property(name=prop_name, params=dict(params or {}), raw_value=raw_value)
        self._properties.setdefault(prop_name, []).append(prop)
        return self

    def build(self) -> Vcard:
        """The card holding every property added so far."""
        component = Component("VCARD")
        component.props = {name: list(props) for name, props in self._properties.items()}
        return Vcard(component)

    def with_adr(self, params, pobox, ext, street, locality, region, code, country) -> VcardBuilder:
        """Add an address; missing parts are left empty."""
        return self._add("ADR", (pobox, ext, street, locality, region, code, country), params)

    def with_anniversary(self, value: str) -> VcardBuilder:
        """Add an ANNIVERSARY."""
        return self._add("ANNIVERSARY", (value,))

    def with_bday(self, params: dict[str, str], value: str) -> VcardBuilder:
        """Add a BDAY."""
        return self._add("BDAY", (value,), params)

    def with_categories(self, categories: Iterable[str]) -> VcardBuilder:
        """Add CATEGORIES, joined with ``;``."""
        return self._add("CATEGORIES", (";".join(categories),))

    def with_clientpidmap(self, raw: str) -> VcardBuilder:
        """Add a CLIENTPIDMAP."""
        return self._add("CLIENTPIDMAP", (raw,))

    def with_email(self, email: str) -> VcardBuilder:
        """Add an EMAIL."""
        return self._add("EMAIL", (email,))

    def with_fullname(self, fullname: str) -> VcardBuilder:
        """Add an FN."""
        return self._add("FN", (fullname,))

    def with_gender(self, params: dict[str, str], value: str) -> VcardBuilder:
        """Add a GENDER."""
        return self._add("GENDER", (value,), params)

    def with_geo(self, uri: str) -> VcardBuilder:
        """Add a GEO."""
        return self._add("GEO", (uri,))

    def with_impp(self, uri: str) -> VcardBuilder:
        """Add an IMPP."""
        return self._add("IMPP", (uri,))

    def with_key(self, uri: str) -> VcardBuilder:
        """Add a KEY."""
        return self._add("KEY", (uri,))

    def with_lang(self, lang: str) -> VcardBuilder:
        """Add a LANG."""
        return self._add("LANG", (lang,))

    def with_logo(self, uri: str) -> VcardBuilder:
        """Add a LOGO."""
        return self._add("LOGO", (uri,))

    def with_member(self, uri: str) -> VcardBuilder:
        """Add a MEMBER."""
        return self._add("MEMBER", (uri,))

    def with_name(
        self,
        params,
        surname,
        given_name,
        additional_name,
        honorific_prefixes,
        honorific_suffixes,
    ) -> VcardBuilder:
        """Add an N; missing parts are left empty."""
        parts = (surname, given_name, additional_name, honorific_prefixes, honorific_suffixes)
        return self._add("N", parts, params)

    def with_nickname(self, params: dict[str, str], name: str) -> VcardBuilder:
        """Add a NICKNAME."""
        return self._add("NICKNAME", (name,), params)

    def with_note(self, text: str) -> VcardBuilder:
        """Add a NOTE."""
        return self._add("NOTE", (text,))

    def with_org(self, org: Iterable[str]) -> VcardBuilder:
        """Add an ORG, its units joined with ``;``."""
        return self._add("ORG", (";".join(org),))

    def with_photo(self, params: dict[str, str], param: str) -> VcardBuilder:
        """Add a PHOTO."""
        return self._add("PHOTO", (param,), params)

    def with_proid(self, param: str) -> VcardBuilder:
        """Add a PRODID."""
        return self._add("PRODID", (param,))

    def with_related(self, uri: str) -> VcardBuilder:
        """Add a RELATED."""
        return self._add("RELATED", (uri,))

    def with_rev(self, timestamp: str) -> VcardBuilder:
        """Add a REV."""
        return self._add("REV", (timestamp,))

    def with_role(self, role: str) -> VcardBuilder:
        """Add a ROLE."""
        return self._add("ROLE", (role,))

    def with_sound(self, uri: str) -> VcardBuilder:
        """Add a SOUND."""
        return self._add("SOUND", (uri,))

    def with_tel(self, params: dict[str, str], value: str) -> VcardBuilder:
        """Add a TEL."""
        return self._add("TEL", (value,), params)

    def with_title(self, title: str) -> VcardBuilder:
        """Add a TITLE."""
        return self._add("TITLE", (title,))

    def with_tz(self, tz: str) -> VcardBuilder:
        """Add a TZ."""
        return self._add("TZ", (tz,))

    def with_uid(self, uri: str) -> VcardBuilder:
        """Add a UID."""
        return self._add("UID", (uri,))

    def with_url(self, uri: str) -> VcardBuilder:
        """Add a URL."""
        return self._add("URL", (uri,))

    def with_version(self, version: str) -> VcardBuilder:
        """Add a VERSION."""
        return self._add("VERSION", (version,))