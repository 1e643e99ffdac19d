"""Irregular parent lookup: override table, memo cache, and resolver.

CLDR declares, for a small number of locales, a fallback parent that is not
the one implied by truncating the tag. es-AR falls back to es-419 rather
than es; zh-Hant falls back to root rather than zh. This module answers
"what is the irregular parent of this locale, if any?".

Components:
    ParentOverrideTable - Immutable override parent -> sorted children table
    ParentCache - Thread-safe memo of resolved parents (insert-if-absent)
    ParentResolver - Table scan with memoization

The table is scan-based: a lookup binary-searches every parent's child list
in turn. Overrides are sparse, and the cache makes each locale pay the scan
at most once.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from bisect import bisect_left
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from localechain.constants import DEFAULT_REGULAR_ANCHORS
from localechain.tags import LocaleTag, coerce_tag

if TYPE_CHECKING:
    from localechain.metadata.sources import MetadataSource

__all__ = [
    "ParentCache",
    "ParentOverrideTable",
    "ParentResolver",
]

logger = logging.getLogger(__name__)


class ParentOverrideTable:
    """Immutable mapping from an override parent to its irregular children.

    Child lists must be sorted (they are binary-searched). The table does
    not re-sort them: an unsorted list is logged at construction, and tags
    the search cannot find simply resolve to "no irregular parent".

    Example:
        >>> from localechain.tags import parse_tag
        >>> table = ParentOverrideTable({parse_tag("es-419"): ["es-AR", "es-MX"]})
        >>> table.find_parent("es-MX").to_language_tag()
        'es-419'
        >>> table.find_parent("es-ES") is None
        True
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[LocaleTag, Sequence[str]] | None = None) -> None:
        """Initialize the table.

        Args:
            entries: Override parent -> sorted child tag strings. Insertion
                order is the scan order.
        """
        frozen: dict[LocaleTag, tuple[str, ...]] = {}
        for parent, children in (entries or {}).items():
            frozen_children = tuple(children)
            if any(a > b for a, b in zip(frozen_children, frozen_children[1:], strict=False)):
                logger.warning(
                    "Child tags for override parent %s are not sorted; "
                    "some irregular parents may not be found",
                    parent.to_language_tag(),
                )
            frozen[parent] = frozen_children
        self._entries: Mapping[LocaleTag, tuple[str, ...]] = MappingProxyType(frozen)

    @classmethod
    def from_source(cls, source: MetadataSource) -> ParentOverrideTable:
        """Build the table from a metadata source's parent_locales()."""
        return cls(source.parent_locales())

    def children_of(self, parent: LocaleTag) -> tuple[str, ...]:
        """Return the sorted child tags of an override parent (empty if none)."""
        return self._entries.get(parent, ())

    def find_parent(self, tag: str) -> LocaleTag | None:
        """Return the first override parent listing tag as a child.

        Args:
            tag: BCP-47 tag string of the child locale

        Returns:
            The override parent, or None if no entry lists the tag
        """
        for parent, children in self._entries.items():
            index = bisect_left(children, tag)
            if index < len(children) and children[index] == tag:
                return parent
        return None

    def __contains__(self, parent: object) -> bool:
        return parent in self._entries

    def __iter__(self) -> Iterator[LocaleTag]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ParentOverrideTable(parents={len(self._entries)})"


class ParentCache:
    """Memo of resolved irregular parents, safe for concurrent use.

    Maps a locale to its irregular parent, or to itself when it has none.
    Entries are never evicted: the override table cannot change during the
    cache's lifetime.

    Thread Safety:
        Reads are lock-free dict lookups. Writes go through put_if_absent,
        serialized by a lock, so the first value stored for a key is the one
        every caller sees.

    Example:
        >>> from localechain.tags import parse_tag
        >>> cache = ParentCache.with_anchors(["und", "en"])
        >>> cache.get(parse_tag("en")) == parse_tag("en")
        True
        >>> cache.put_if_absent(parse_tag("es-AR"), parse_tag("es-419")).to_language_tag()
        'es-419'
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self, entries: Mapping[LocaleTag, LocaleTag] | None = None) -> None:
        self._entries: dict[LocaleTag, LocaleTag] = dict(entries or {})
        self._lock = threading.Lock()

    @classmethod
    def with_anchors(
        cls, anchors: Iterable[LocaleTag | str] = DEFAULT_REGULAR_ANCHORS
    ) -> ParentCache:
        """Create a cache pre-seeded with locales known to have no irregular parent."""
        tags = [coerce_tag(anchor) for anchor in anchors]
        return cls({tag: tag for tag in tags})

    def get(self, locale: LocaleTag) -> LocaleTag | None:
        """Return the cached parent (possibly locale itself), or None on a miss."""
        return self._entries.get(locale)

    def put_if_absent(self, locale: LocaleTag, parent: LocaleTag) -> LocaleTag:
        """Store parent for locale unless an entry exists.

        Returns:
            The value now cached for locale: parent, or the earlier entry
        """
        with self._lock:
            return self._entries.setdefault(locale, parent)

    def snapshot(self) -> dict[LocaleTag, LocaleTag]:
        """Return a copy of the current entries."""
        with self._lock:
            return dict(self._entries)

    def __contains__(self, locale: object) -> bool:
        return locale in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ParentCache(entries={len(self._entries)})"


class ParentResolver:
    """Resolve the irregular parent of a locale, with memoization.

    The resolver owns no global state: the cache is injected (or created
    per resolver), so tests and independent adapters never share answers.

    Example:
        >>> from localechain.tags import parse_tag
        >>> table = ParentOverrideTable({parse_tag("es-419"): ["es-AR"]})
        >>> resolver = ParentResolver(table)
        >>> resolver.irregular_parent_of(parse_tag("es-AR")).to_language_tag()
        'es-419'
        >>> resolver.irregular_parent_of(parse_tag("es")) is None
        True
    """

    __slots__ = ("_cache", "_table")

    def __init__(self, table: ParentOverrideTable, cache: ParentCache | None = None) -> None:
        """Initialize the resolver.

        Args:
            table: Override table to scan on cache misses
            cache: Memo cache; defaults to one seeded with the regular anchors
        """
        self._table = table
        self._cache = cache if cache is not None else ParentCache.with_anchors()

    @property
    def table(self) -> ParentOverrideTable:
        return self._table

    @property
    def cache(self) -> ParentCache:
        return self._cache

    def irregular_parent_of(self, locale: LocaleTag) -> LocaleTag | None:
        """Return the irregular parent of locale, or None if regular fallback applies.

        Args:
            locale: Locale to look up

        Returns:
            The override parent, or None
        """
        parent = self._cache.get(locale)

        if parent is None:
            found = self._table.find_parent(locale.to_language_tag())
            if found is None:
                found = locale
            logger.debug("Irregular parent lookup for %s resolved to %s", locale, found)
            parent = self._cache.put_if_absent(locale, found)

        if parent == locale:
            return None
        return parent

    def __call__(self, locale: LocaleTag) -> LocaleTag | None:
        """Alias for irregular_parent_of, so the resolver can be passed as a callable."""
        return self.irregular_parent_of(locale)
