"""Locale tags: parsing, canonical form, and BCP-47/POSIX conversion.

Centralizes locale identifier normalization used throughout the package.
Every component compares locales as LocaleTag values, so normalizing once at
the system boundary (parse_tag) guarantees consistent cache keys and lookups.

Both spellings are accepted on input:
    - BCP-47 with hyphens: "zh-Hant-HK", "ca-ES-valencia", "th-TH-u-nu-thai"
    - Babel/POSIX with underscores: "zh_Hant_HK", "ca_ES_VALENCIA"

Language, script and territory are validated by Babel's parse_locale; variant
and extension subtags are split off first because Babel accepts at most one
variant and no extensions.

Python 3.13+. Uses Babel for identifier parsing.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

from babel import Locale
from babel.core import parse_locale

from localechain.constants import (
    MAX_TAG_CACHE_SIZE,
    ROOT_IDENTIFIERS,
    ROOT_LANGUAGE_TAG,
    ROOT_POSIX_IDENTIFIER,
)
from localechain.core.errors import InvalidLocaleTagError

__all__ = [
    "ENGLISH",
    "ROOT",
    "US",
    "LocaleTag",
    "clear_tag_cache",
    "coerce_tag",
    "parse_tag",
]

_ALNUM_SUBTAG = re.compile(r"^[A-Za-z0-9]{1,8}$")
_VARIANT_SUBTAG = re.compile(r"^(?:[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3})$")


@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Immutable, canonical locale identifier.

    Fields are normalized on construction (language lower, script title,
    territory upper, variant and extensions lower), so two tags are equal
    exactly when their BCP-47 strings are equal. The root locale has an
    empty language.

    Prefer parse_tag() for strings; direct construction is for code that
    already holds separate subtags.

    Attributes:
        language: ISO 639 language code, "" for root
        script: ISO 15924 script code or ""
        territory: ISO 3166 region or UN M.49 area code, or ""
        variant: Hyphen-joined variant subtags, or ""
        extensions: Hyphen-joined extension and private-use subtags
            starting at the first singleton (e.g. "u-ca-japanese"), or ""

    Example:
        >>> tag = parse_tag("zh_hant_hk")
        >>> tag.to_language_tag()
        'zh-Hant-HK'
        >>> str(tag)
        'zh_Hant_HK'
    """

    language: str = ""
    script: str = ""
    territory: str = ""
    variant: str = ""
    extensions: str = ""

    def __post_init__(self) -> None:
        """Normalize subtag casing."""
        language = self.language.lower()
        if language == ROOT_LANGUAGE_TAG:
            language = ""
        object.__setattr__(self, "language", language)
        object.__setattr__(self, "script", self.script.title())
        object.__setattr__(self, "territory", self.territory.upper())
        object.__setattr__(self, "variant", self.variant.lower().replace("_", "-"))
        object.__setattr__(self, "extensions", self.extensions.lower())

    @classmethod
    def from_babel(cls, locale: Locale) -> LocaleTag:
        """Build a tag from a Babel Locale object.

        Example:
            >>> from babel import Locale
            >>> LocaleTag.from_babel(Locale.parse("sr_Latn_ME")).to_language_tag()
            'sr-Latn-ME'
        """
        return cls(
            language=locale.language,
            script=locale.script or "",
            territory=locale.territory or "",
            variant=locale.variant or "",
        )

    def to_babel(self) -> Locale:
        """Return the Babel Locale for this tag (extensions are dropped).

        Raises:
            babel.UnknownLocaleError: If Babel has no data for the locale
        """
        return Locale.parse(str(self))

    @property
    def is_root(self) -> bool:
        """True for the root locale (extensions are ignored)."""
        return not self.language and not self.script and not self.territory and not self.variant

    @property
    def variants(self) -> tuple[str, ...]:
        """Variant subtags in order, empty when there is no variant."""
        return tuple(self.variant.split("-")) if self.variant else ()

    def strip_extensions(self) -> LocaleTag:
        """Return this tag without extension subtags."""
        if not self.extensions:
            return self
        return LocaleTag(self.language, self.script, self.territory, self.variant)

    def to_language_tag(self) -> str:
        """Return the BCP-47 form ("und" for root).

        Example:
            >>> parse_tag("ca_ES_VALENCIA").to_language_tag()
            'ca-ES-valencia'
            >>> ROOT.to_language_tag()
            'und'
        """
        parts = [self.language or ROOT_LANGUAGE_TAG, self.script, self.territory]
        parts.append(self.variant)
        parts.append(self.extensions)
        return "-".join(part for part in parts if part)

    def __str__(self) -> str:
        """Return the Babel/POSIX identifier ("root" for root), without extensions.

        A tag without a language keeps the "und" placeholder (und_US), so the
        identifier never reads as a bare territory.
        """
        if self.is_root:
            return ROOT_POSIX_IDENTIFIER
        parts = [self.language or ROOT_LANGUAGE_TAG, self.script, self.territory]
        parts.extend(variant.upper() for variant in self.variants)
        return "_".join(part for part in parts if part)


ROOT = LocaleTag()
"""The root locale: terminal, language-agnostic fallback target."""

ENGLISH = LocaleTag("en")

US = LocaleTag("en", territory="US")


def _split_extensions(subtags: list[str]) -> tuple[list[str], list[str]]:
    """Split subtags at the first singleton (extension or private-use marker)."""
    for index, subtag in enumerate(subtags):
        if index > 0 and len(subtag) == 1:
            return subtags[:index], subtags[index:]
    return subtags, []


def _split_variants(subtags: list[str]) -> tuple[list[str], list[str]]:
    """Split trailing variant subtags off the language/script/territory prefix."""
    cut = len(subtags)
    while cut > 1 and _VARIANT_SUBTAG.match(subtags[cut - 1]):
        cut -= 1
    return subtags[:cut], subtags[cut:]


@functools.lru_cache(maxsize=MAX_TAG_CACHE_SIZE)
def parse_tag(identifier: str) -> LocaleTag:
    """Parse a BCP-47 or POSIX locale identifier into a LocaleTag.

    Parses the identifier once and caches the result. Thread-safe via
    lru_cache internal locking.

    "", "und" and "root" (any case) all yield ROOT. Encoding suffixes
    (".UTF-8") and POSIX modifiers ("@euro") are discarded.

    Args:
        identifier: Locale identifier (e.g., "en-US", "zh_Hant_HK")

    Returns:
        Canonical LocaleTag

    Raises:
        InvalidLocaleTagError: If the identifier is not a valid locale tag

    Example:
        >>> parse_tag("EN-us")
        LocaleTag(language='en', script='', territory='US', variant='', extensions='')
        >>> parse_tag("root") is ROOT
        True
    """
    text = identifier.strip().split(".", 1)[0].split("@", 1)[0].replace("_", "-")
    if text.lower() in ROOT_IDENTIFIERS:
        return ROOT

    subtags = text.split("-")
    if not all(_ALNUM_SUBTAG.match(subtag) for subtag in subtags):
        raise InvalidLocaleTagError(identifier, "empty or malformed subtag")

    base, extension_subtags = _split_extensions(subtags)
    if len(extension_subtags) == 1:
        raise InvalidLocaleTagError(identifier, "extension singleton without subtags")
    prefix, variant_subtags = _split_variants(base)

    try:
        language, territory, script, _ = parse_locale("-".join(prefix), sep="-")
    except ValueError as e:
        raise InvalidLocaleTagError(identifier, str(e)) from e

    return LocaleTag(
        language=language,
        script=script or "",
        territory=territory or "",
        variant="-".join(variant_subtags),
        extensions="-".join(extension_subtags),
    )


def coerce_tag(locale: LocaleTag | str) -> LocaleTag:
    """Return locale unchanged if it is a LocaleTag, else parse it."""
    if isinstance(locale, LocaleTag):
        return locale
    return parse_tag(locale)


def clear_tag_cache() -> None:
    """Clear the parse_tag cache.

    Use to free memory or reset state in tests.
    """
    parse_tag.cache_clear()
