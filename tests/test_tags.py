"""Tests for LocaleTag parsing, canonical form, and conversions.

Covers parse_tag, coerce_tag, LocaleTag normalization, BCP-47 and POSIX
rendering, and Babel interop. Includes property-based tests for round-trips
through the BCP-47 form.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from babel import Locale
from hypothesis import event, given
from hypothesis import strategies as st

from localechain.core.errors import InvalidLocaleTagError
from localechain.tags import (
    ENGLISH,
    ROOT,
    US,
    LocaleTag,
    clear_tag_cache,
    coerce_tag,
    parse_tag,
)
from tests.strategies import locale_tags


class TestParseTag:
    """Test parse_tag with BCP-47 and POSIX spellings."""

    def test_language_only(self) -> None:
        assert parse_tag("sv") == LocaleTag("sv")

    def test_language_territory(self) -> None:
        assert parse_tag("en-US") == US

    def test_posix_separator(self) -> None:
        assert parse_tag("zh_Hant_HK") == LocaleTag("zh", "Hant", "HK")

    def test_case_insensitive(self) -> None:
        """BCP-47 is case-insensitive; parsing canonicalizes casing."""
        assert parse_tag("ZH-hant-hk") == LocaleTag("zh", "Hant", "HK")

    def test_numeric_area_code(self) -> None:
        assert parse_tag("es-419").territory == "419"

    @pytest.mark.parametrize("identifier", ["", "und", "UND", "root", "Root", "  root  "])
    def test_root_spellings(self, identifier: str) -> None:
        assert parse_tag(identifier) is ROOT

    def test_variant(self) -> None:
        tag = parse_tag("ca_ES_VALENCIA")
        assert tag.variant == "valencia"
        assert tag.to_language_tag() == "ca-ES-valencia"

    def test_multiple_variants(self) -> None:
        tag = parse_tag("sl-rozaj-biske")
        assert tag.variants == ("rozaj", "biske")

    def test_digit_variant(self) -> None:
        assert parse_tag("de-DE-1996").variant == "1996"

    def test_extensions_preserved(self) -> None:
        tag = parse_tag("th-TH-u-nu-thai")
        assert tag.territory == "TH"
        assert tag.extensions == "u-nu-thai"
        assert tag.to_language_tag() == "th-TH-u-nu-thai"

    def test_private_use_extension(self) -> None:
        assert parse_tag("en-x-custom").extensions == "x-custom"

    def test_encoding_suffix_discarded(self) -> None:
        assert parse_tag("de_DE.UTF-8") == LocaleTag("de", territory="DE")

    def test_modifier_discarded(self) -> None:
        assert parse_tag("de_DE@euro") == LocaleTag("de", territory="DE")

    def test_cached_identity(self) -> None:
        assert parse_tag("fr-CA") is parse_tag("fr-CA")

    def test_clear_cache(self) -> None:
        parse_tag("fr-CA")
        assert parse_tag.cache_info().currsize > 0
        clear_tag_cache()
        assert parse_tag.cache_info().currsize == 0


class TestParseTagErrors:
    """Test rejection of malformed identifiers."""

    @pytest.mark.parametrize(
        "identifier",
        [
            "en--US",
            "e1",
            "en-US-",
            "en-US-u",
            "en-toolongsubtag",
            "123",
            "en-ABC",
            "en US",
        ],
    )
    def test_invalid_raises(self, identifier: str) -> None:
        with pytest.raises(InvalidLocaleTagError) as exc_info:
            parse_tag(identifier)
        assert exc_info.value.tag == identifier

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid locale tag"):
            parse_tag("en--US")


class TestLocaleTag:
    """Test LocaleTag value semantics."""

    def test_constructor_normalizes(self) -> None:
        assert LocaleTag("EN", territory="us") == US

    def test_und_language_is_root(self) -> None:
        assert LocaleTag("und") == ROOT

    def test_root_properties(self) -> None:
        assert ROOT.is_root
        assert ROOT.to_language_tag() == "und"
        assert str(ROOT) == "root"

    def test_territory_only_is_not_root(self) -> None:
        tag = parse_tag("und-US")
        assert not tag.is_root
        assert tag.to_language_tag() == "und-US"

    def test_str_keeps_und_placeholder(self) -> None:
        """A language-less tag never renders as a bare territory."""
        tag = parse_tag("und-US")
        assert str(tag) == "und_US"
        assert parse_tag(str(tag)) == tag

    def test_str_language_less_script(self) -> None:
        assert str(parse_tag("und-Latn")) == "und_Latn"

    def test_str_is_posix(self) -> None:
        assert str(parse_tag("sr-Latn-ME")) == "sr_Latn_ME"
        assert str(parse_tag("ca-ES-valencia")) == "ca_ES_VALENCIA"

    def test_str_omits_extensions(self) -> None:
        assert str(parse_tag("th-TH-u-nu-thai")) == "th_TH"

    def test_strip_extensions(self) -> None:
        tag = parse_tag("ja-JP-u-ca-japanese")
        assert tag.strip_extensions() == LocaleTag("ja", territory="JP")

    def test_strip_extensions_identity_without_extensions(self) -> None:
        assert ENGLISH.strip_extensions() is ENGLISH

    def test_hashable(self) -> None:
        assert len({parse_tag("en-US"), US, LocaleTag("en", territory="US")}) == 1

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            US.language = "fr"  # type: ignore[misc]

    def test_from_babel(self) -> None:
        assert LocaleTag.from_babel(Locale.parse("zh_Hant_TW")) == parse_tag("zh-Hant-TW")

    def test_from_babel_without_script(self) -> None:
        assert LocaleTag.from_babel(Locale.parse("en_US")) == US

    def test_to_babel(self) -> None:
        locale = parse_tag("zh-Hant-TW-u-nu-hanidec").to_babel()
        assert (locale.language, locale.script, locale.territory) == ("zh", "Hant", "TW")

    def test_to_babel_roundtrip(self) -> None:
        tag = parse_tag("sr-Latn-ME")
        assert LocaleTag.from_babel(tag.to_babel()) == tag


class TestCoerceTag:
    """Test coerce_tag accepting tags or strings."""

    def test_tag_passthrough(self) -> None:
        assert coerce_tag(US) is US

    def test_string_parsed(self) -> None:
        assert coerce_tag("en-US") == US


class TestTagProperties:
    """Property-based tests for tag canonicalization."""

    @given(tag=locale_tags())
    def test_language_tag_roundtrip(self, tag: LocaleTag) -> None:
        """Property: parse_tag(tag.to_language_tag()) == tag."""
        assert parse_tag(tag.to_language_tag()) == tag

    @given(tag=locale_tags())
    def test_posix_roundtrip(self, tag: LocaleTag) -> None:
        """Property: parse_tag(str(tag)) == tag for tags without extensions."""
        assert parse_tag(str(tag)) == tag

    @given(tag=locale_tags(), upper=st.booleans())
    def test_case_folding(self, tag: LocaleTag, upper: bool) -> None:
        """Property: parsing is insensitive to input casing."""
        text = tag.to_language_tag()
        event(f"case={'upper' if upper else 'lower'}")
        folded = text.upper() if upper else text.lower()
        assert parse_tag(folded) == tag
