"""Support checks against a set of language tags.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Collection

from localechain.resolution.equivalence import canonical_equivalent
from localechain.tags import ROOT, LocaleTag

__all__ = ["is_supported"]


def is_supported(locale: LocaleTag, supported_tags: Collection[str]) -> bool:
    """Decide whether a provider supporting supported_tags covers locale.

    True when locale is the root locale, when its extension-free BCP-47 tag
    is listed, or when the tag of its canonical equivalent is listed.

    Args:
        locale: Requested locale
        supported_tags: BCP-47 tags the provider declares

    Returns:
        True if the provider should be consulted for locale

    Example:
        >>> is_supported(LocaleTag("no"), {"nb", "nn"})
        True
        >>> is_supported(ROOT, set())
        True
    """
    return (
        locale == ROOT
        or locale.strip_extensions().to_language_tag() in supported_tags
        or canonical_equivalent(locale).to_language_tag() in supported_tags
    )
