"""Metadata sources describing which locales have data.

A metadata source answers two questions:
    - Which locale tags have data for a named category?
    - Which locales have an irregular fallback parent?

Components:
    MetadataSource - Protocol for metadata sources (structural typing)
    StaticMetadataSource - In-memory source built from plain mappings
    BabelMetadataSource - Source backed by the CLDR data bundled with Babel

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from babel.core import get_global
from babel.localedata import locale_identifiers

from localechain.constants import ROOT_POSIX_IDENTIFIER
from localechain.core.errors import InvalidLocaleTagError
from localechain.enums import AdapterType, LocaleCategory
from localechain.tags import LocaleTag, parse_tag

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "MetadataSource",
    # Concrete sources
    "StaticMetadataSource",
    "BabelMetadataSource",
]

logger = logging.getLogger(__name__)


class MetadataSource(Protocol):
    """Protocol for locale metadata sources.

    This is a Protocol (structural typing) rather than ABC so that extension
    packages can supply sources without importing localechain at all.

    Example:
        >>> class ExtraLocales:
        ...     adapter_type = AdapterType.CLDR
        ...     def available_language_tags(self, category: str) -> str | None:
        ...         return "haw kok" if category == "AvailableLocales" else None
        ...     def parent_locales(self) -> Mapping[LocaleTag, Sequence[str]]:
        ...         return {}
    """

    @property
    def adapter_type(self) -> AdapterType:
        """Kind of locale data this source describes."""

    def available_language_tags(self, category: str) -> str | None:
        """Return whitespace-separated language tags for a category.

        Args:
            category: Category name (e.g., "AvailableLocales")

        Returns:
            Space-separated BCP-47 tags, or None if the source has no data
            for this category
        """

    def parent_locales(self) -> Mapping[LocaleTag, Sequence[str]]:
        """Return the irregular-parent table.

        Returns:
            Mapping from an override parent to the SORTED BCP-47 tags of the
            locales that fall back to it instead of their regular parent
        """


@dataclass(frozen=True, slots=True)
class StaticMetadataSource:
    """In-memory metadata source.

    Child lists are sorted on construction so lookups can binary-search them.

    Example:
        >>> from localechain.tags import parse_tag
        >>> source = StaticMetadataSource(
        ...     tags={"AvailableLocales": "en en-GB en-001 en-150"},
        ...     parents={"en-001": ["en-GB", "en-150"]},
        ... )
        >>> source.parent_locales()[parse_tag("en-001")]
        ('en-150', 'en-GB')

    Attributes:
        tags: Category name -> space-separated tags
        parents: Override parent tag string -> child tag strings
        adapter_type: Kind of data described (default: CLDR)
    """

    tags: Mapping[str, str] = field(default_factory=dict)
    parents: Mapping[str, Sequence[str]] = field(default_factory=dict)
    adapter_type: AdapterType = AdapterType.CLDR
    _parent_table: Mapping[LocaleTag, tuple[str, ...]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Freeze inputs and parse parent keys.

        Raises:
            InvalidLocaleTagError: If a parent key is not a valid locale tag
        """
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
        table = {
            parse_tag(parent): tuple(sorted(children))
            for parent, children in self.parents.items()
        }
        object.__setattr__(self, "_parent_table", MappingProxyType(table))

    def available_language_tags(self, category: str) -> str | None:
        return self.tags.get(category)

    def parent_locales(self) -> Mapping[LocaleTag, Sequence[str]]:
        return self._parent_table


@functools.lru_cache(maxsize=1)
def _babel_available_tags() -> str:
    """Space-separated BCP-47 tags for every locale Babel has data for."""
    tags: list[str] = []
    for identifier in sorted(locale_identifiers()):
        if identifier == ROOT_POSIX_IDENTIFIER:
            continue
        try:
            tags.append(parse_tag(identifier).to_language_tag())
        except InvalidLocaleTagError:
            logger.warning("Skipping unparsable Babel locale identifier %r", identifier)
    return " ".join(tags)


@functools.lru_cache(maxsize=1)
def _babel_parent_locales() -> Mapping[LocaleTag, tuple[str, ...]]:
    """Invert Babel's child -> parent exceptions into parent -> sorted children."""
    grouped: dict[LocaleTag, list[str]] = {}
    exceptions: Mapping[str, str] = get_global("parent_exceptions")
    for child, parent in exceptions.items():
        try:
            parent_tag = parse_tag(parent)
            child_tag = parse_tag(child)
        except InvalidLocaleTagError:
            logger.warning("Skipping unparsable parent exception %r -> %r", child, parent)
            continue
        grouped.setdefault(parent_tag, []).append(child_tag.to_language_tag())
    return MappingProxyType(
        {parent: tuple(sorted(children)) for parent, children in grouped.items()}
    )


@dataclass(frozen=True, slots=True)
class BabelMetadataSource:
    """Metadata source backed by the CLDR data bundled with Babel.

    Every category in LocaleCategory is answered with the full set of Babel
    locales (Babel ships one data file per locale, covering all categories).
    Unknown categories yield None.

    Parent data comes from CLDR's parentLocales supplemental data, exposed by
    Babel as the "parent_exceptions" global. Both tables are loaded once per
    process and shared by all instances.

    Example:
        >>> from localechain.tags import parse_tag
        >>> source = BabelMetadataSource()
        >>> "es-419" in source.available_language_tags("AvailableLocales").split()
        True
        >>> "es-AR" in source.parent_locales()[parse_tag("es-419")]
        True
    """

    adapter_type: AdapterType = AdapterType.CLDR

    def available_language_tags(self, category: str) -> str | None:
        if category not in LocaleCategory:
            return None
        return _babel_available_tags()

    def parent_locales(self) -> Mapping[LocaleTag, Sequence[str]]:
        return _babel_parent_locales()
