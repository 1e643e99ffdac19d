"""Canonical equivalents for legacy locale identifiers.

A few identifiers in common use name the same data as a newer CLDR tag:
zh_HK is served by zh-Hant-HK, and the macrolanguage "no" by Norwegian
Bokmal "nb". Support checks consult the equivalent so these requests are
not routed away from the CLDR data that actually covers them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from types import MappingProxyType

from localechain.tags import LocaleTag

__all__ = ["EQUIVALENT_LOCALES", "canonical_equivalent"]

_NORWEGIAN_BOKMAL = LocaleTag("nb")

EQUIVALENT_LOCALES = MappingProxyType({
    LocaleTag("zh", territory="HK"): LocaleTag("zh", script="Hant", territory="HK"),
    LocaleTag("no"): _NORWEGIAN_BOKMAL,
    LocaleTag("no", territory="NO"): _NORWEGIAN_BOKMAL,
})
"""Legacy locale -> canonical CLDR equivalent."""


def canonical_equivalent(locale: LocaleTag) -> LocaleTag:
    """Return the canonical equivalent of a legacy locale, or locale itself.

    Matching is exact: a tag with a script, variant or extensions is never
    a legacy form.

    Example:
        >>> canonical_equivalent(LocaleTag("no", territory="NO")).to_language_tag()
        'nb'
        >>> canonical_equivalent(LocaleTag("sv")).to_language_tag()
        'sv'
    """
    return EQUIVALENT_LOCALES.get(locale, locale)
