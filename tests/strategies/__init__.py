"""Hypothesis strategies for localechain property-based testing.

Usage:
    from tests.strategies import layered_override_tables, locale_tags, override_tables
"""

from .locales import (
    REGULAR_LOCALES,
    languages,
    layered_override_tables,
    locale_tags,
    override_tables,
    territories,
)

__all__ = [
    "REGULAR_LOCALES",
    "languages",
    "layered_override_tables",
    "locale_tags",
    "override_tables",
    "territories",
]
