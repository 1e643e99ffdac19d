"""CLDR locale provider adapter.

LocaleProviderAdapter is the facade the provider-resolution layer talks to.
It combines a base metadata source, an optional extension source, and a
parent resolver to answer:

    - Which locales are available?
    - In which order should locales be searched for a resource?
    - Should this provider be consulted for a given locale at all?

Key architectural decisions:
- Metadata sources are injected (Protocol-based, dependency inversion)
- The parent cache belongs to the adapter instance, never to the module
- The regular chain producer is a passed-in callable, so callers can
  substitute their own fallback rules
- The extension source is optional and its discovery never fails

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

from localechain.config import AdapterConfig
from localechain.core.errors import InvalidLocaleTagError
from localechain.enums import AdapterType, LocaleCategory, ProviderService
from localechain.metadata.discovery import discover_extension_source
from localechain.metadata.sources import BabelMetadataSource
from localechain.metadata.tagset import build_tag_set
from localechain.resolution.candidates import regular_candidates, resolve_candidates
from localechain.resolution.parents import ParentCache, ParentOverrideTable, ParentResolver
from localechain.resolution.support import is_supported
from localechain.tags import coerce_tag, parse_tag

if TYPE_CHECKING:
    from localechain.metadata.sources import MetadataSource
    from localechain.resolution.candidates import RegularChainProducer
    from localechain.tags import LocaleTag

__all__ = ["LocaleProviderAdapter"]

logger = logging.getLogger(__name__)

_UNSUPPORTED_SERVICES = frozenset({ProviderService.BREAK_ITERATOR, ProviderService.COLLATOR})


class LocaleProviderAdapter:
    """Locale provider adapter for CLDR locale data.

    Example - Babel's CLDR data:
        >>> adapter = LocaleProviderAdapter(config=AdapterConfig(discover_extension=False))
        >>> [t.to_language_tag() for t in adapter.get_candidate_locales("msgs", "es-AR")]
        ['es-AR', 'es-419', 'es', 'und']

    Example - In-memory metadata:
        >>> from localechain.metadata import StaticMetadataSource
        >>> base = StaticMetadataSource(
        ...     tags={"AvailableLocales": "en en-US fr"},
        ...     parents={"zz": ["xx-YY"]},
        ... )
        >>> adapter = LocaleProviderAdapter(base, config=AdapterConfig(discover_extension=False))
        >>> [t.to_language_tag() for t in adapter.get_candidate_locales("msgs", "xx-YY")]
        ['xx-YY', 'zz', 'und']

    Thread Safety:
        All public methods may be called concurrently. The only mutable
        state is the parent cache, which supports concurrent use.
    """

    __slots__ = (
        "_base_source",
        "_config",
        "_extension_source",
        "_parent_resolver",
        "_regular_chain",
    )

    def __init__(
        self,
        base_source: MetadataSource | None = None,
        extension_source: MetadataSource | None = None,
        *,
        config: AdapterConfig | None = None,
        regular_chain: RegularChainProducer | None = None,
        parent_cache: ParentCache | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            base_source: Base metadata source; defaults to BabelMetadataSource
            extension_source: Extension metadata source. When None and
                config.discover_extension is set, one is looked up through
                entry points; absence is not an error.
            config: Adapter configuration (default: AdapterConfig())
            regular_chain: Regular chain producer (default: regular_candidates)
            parent_cache: Parent cache to use; defaults to a new cache seeded
                with config.regular_anchors
        """
        self._config = config if config is not None else AdapterConfig()
        self._base_source: MetadataSource = (
            base_source if base_source is not None else BabelMetadataSource()
        )

        if extension_source is None and self._config.discover_extension:
            extension_source = discover_extension_source(
                self._config.entry_point_group, self.adapter_type
            )
        self._extension_source: MetadataSource | None = extension_source

        self._regular_chain: RegularChainProducer = (
            regular_chain if regular_chain is not None else regular_candidates
        )

        # Irregular parents come from the base source only.
        cache = (
            parent_cache
            if parent_cache is not None
            else ParentCache.with_anchors(self._config.regular_anchors)
        )
        self._parent_resolver = ParentResolver(
            ParentOverrideTable.from_source(self._base_source), cache
        )

    @property
    def adapter_type(self) -> AdapterType:
        """Kind of locale data this adapter serves (always CLDR)."""
        return AdapterType.CLDR

    @property
    def config(self) -> AdapterConfig:
        return self._config

    @property
    def base_source(self) -> MetadataSource:
        return self._base_source

    @property
    def extension_source(self) -> MetadataSource | None:
        return self._extension_source

    @property
    def parent_resolver(self) -> ParentResolver:
        return self._parent_resolver

    def provides(self, service: ProviderService | str) -> bool:
        """Return whether this adapter supplies a locale-sensitive service.

        CLDR data carries no break-iterator or collation rules, so those
        services are left to other adapters.
        """
        return service not in _UNSUPPORTED_SERVICES

    def create_language_tag_set(self, category: str) -> frozenset[str]:
        """Return the tags both metadata sources declare for a category."""
        return build_tag_set(category, self._base_source, self._extension_source)

    def get_available_locales(self) -> tuple[LocaleTag, ...]:
        """Return every available locale, sorted by BCP-47 tag.

        Tags that cannot be parsed are skipped with a warning.
        """
        locales: list[LocaleTag] = []
        for tag in self.create_language_tag_set(LocaleCategory.AVAILABLE_LOCALES):
            try:
                locales.append(parse_tag(tag))
            except InvalidLocaleTagError:
                logger.warning("Skipping unparsable available locale tag %r", tag)
        return tuple(sorted(locales, key=lambda locale: locale.to_language_tag()))

    def get_candidate_locales(self, base_name: str, locale: LocaleTag | str) -> list[LocaleTag]:
        """Return the resource search order for a locale.

        Args:
            base_name: Resource family name (passed to the regular chain producer)
            locale: Requested locale

        Returns:
            Root-terminated candidate chain honoring irregular parents

        Raises:
            InvalidLocaleTagError: If locale is a string that cannot be parsed
            InconsistentChainError: If the regular chain producer returns a
                chain that is empty or not root-terminated
        """
        tag = coerce_tag(locale)
        return resolve_candidates(
            base_name,
            self._regular_chain(base_name, tag),
            parent_of=self._parent_resolver.irregular_parent_of,
            regular_chain_for=self._regular_chain,
            max_depth=self._config.max_splice_depth,
        )

    def is_supported_provider_locale(
        self, locale: LocaleTag | str, supported_tags: Collection[str]
    ) -> bool:
        """Return whether this provider should be consulted for locale.

        Args:
            locale: Requested locale
            supported_tags: Tags the provider declares (e.g. from
                create_language_tag_set)
        """
        return is_supported(coerce_tag(locale), supported_tags)

    def __repr__(self) -> str:
        extension = "yes" if self._extension_source is not None else "no"
        return (
            f"LocaleProviderAdapter(type={self.adapter_type}, "
            f"extension={extension}, parents={len(self._parent_resolver.table)})"
        )
