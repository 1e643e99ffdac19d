"""Tag-set construction from one or two metadata sources.

Merges the whitespace-separated tag lists a base source and an optional
extension source publish for a category into one deduplicated set.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localechain.metadata.sources import MetadataSource

__all__ = ["build_tag_set"]

logger = logging.getLogger(__name__)


def _read_tags(source: MetadataSource, category: str) -> str | None:
    """Read a category string from a source, treating non-strings as missing."""
    value = source.available_language_tags(category)
    if value is not None and not isinstance(value, str):
        logger.warning(
            "Ignoring non-string tag data %r for category %r from %r",
            type(value).__name__,
            category,
            source,
        )
        return None
    return value


def build_tag_set(
    category: str,
    base: MetadataSource,
    extension: MetadataSource | None = None,
) -> frozenset[str]:
    """Build the set of language tags supported for a category.

    The base string and the extension string (when an extension source is
    present and has data) are joined with a space and split on whitespace.
    Order is irrelevant and duplicates collapse.

    Args:
        category: Category name (e.g., "AvailableLocales")
        base: The always-present base metadata source
        extension: Optional extension metadata source

    Returns:
        Frozen set of tag strings; empty when neither source has data

    Example:
        >>> from localechain.metadata.sources import StaticMetadataSource
        >>> base = StaticMetadataSource(tags={"AvailableLocales": "en en-US fr"})
        >>> ext = StaticMetadataSource(tags={"AvailableLocales": "de ja"})
        >>> sorted(build_tag_set("AvailableLocales", base, ext))
        ['de', 'en', 'en-US', 'fr', 'ja']
    """
    supported = _read_tags(base, category)

    if extension is not None:
        extension_tags = _read_tags(extension, category)
        if extension_tags is not None:
            supported = extension_tags if supported is None else f"{supported} {extension_tags}"

    if supported is None:
        return frozenset()
    return frozenset(supported.split())
